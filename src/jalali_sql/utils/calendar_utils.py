from typing import Tuple

'''
Day-number arithmetic shared by both conversion directions.

Both calendars are mapped onto one integer day count anchored at Gregorian
1600-01-01 (day 0). Jalali 979-01-01 sits 79 days later, and the Jalali side is
reduced with the 33-year cycle (12053 days, 8 leap years per cycle).

All divisions are floor divisions, so dates before the anchor stay consistent
(negative day numbers decompose the same way positive ones do).
'''

JALALI_EPOCH_YEAR = 979
GREGORIAN_EPOCH_YEAR = 1600
EPOCH_OFFSET_DAYS = 79

DAYS_PER_400_YEARS = 146097
DAYS_PER_100_YEARS = 36524
DAYS_PER_4_YEARS = 1461
DAYS_PER_33_YEARS = 12053

JALALI_MONTH_DAYS: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
JALALI_LEAP_REMAINDERS = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

YMD = Tuple[int, int, int]

# -----------------------------
# Leap years & month tables
# -----------------------------

def is_gregorian_leap(year: int) -> bool:
    return (year % 400 == 0) or (year % 100 != 0 and year % 4 == 0)

def gregorian_month_days(year: int) -> Tuple[int, ...]:
    feb = 29 if is_gregorian_leap(year) else 28
    return (31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def is_jalali_leap(year: int) -> bool:
    """Leap rule implied by the 33-year cycle arithmetic below."""
    return year % 33 in JALALI_LEAP_REMAINDERS

def _gregorian_month_length(month: int, leap: bool) -> int:
    if month == 2:
        return 29 if leap else 28
    if month <= 7:
        return 31 if month % 2 == 1 else 30
    return 31 if month % 2 == 0 else 30

# -----------------------------
# Jalali -> day number -> Gregorian
# -----------------------------

def jalali_to_day_number(jy: int, jm: int, jd: int) -> int:
    """
    Days since Jalali 979-01-01.

    Month and day are not range-checked: month 13 simply adds another 30 days,
    day 0 lands on the last day of the previous month.
    """
    y = jy - JALALI_EPOCH_YEAR
    day_no = 365 * y + (y // 33) * 8 + (y % 33 + 3) // 4
    for m in range(1, jm):
        day_no += 31 if m <= 6 else 30
    return day_no + jd - 1

def day_number_to_gregorian(day_no: int) -> YMD:
    """Inverse of `gregorian_to_day_number` (day 0 == 1600-01-01)."""
    gy = GREGORIAN_EPOCH_YEAR + 400 * (day_no // DAYS_PER_400_YEARS)
    day_no %= DAYS_PER_400_YEARS

    leap = True
    if day_no >= DAYS_PER_100_YEARS + 1:
        day_no -= 1
        gy += 100 * (day_no // DAYS_PER_100_YEARS)
        day_no %= DAYS_PER_100_YEARS
        if day_no >= 365:
            day_no += 1
        else:
            leap = False  # first year of a non-400 century

    gy += 4 * (day_no // DAYS_PER_4_YEARS)
    day_no %= DAYS_PER_4_YEARS
    if day_no >= 366:
        gy += (day_no - 1) // 365
        day_no = (day_no - 1) % 365
        leap = False

    gm = 1
    while day_no >= _gregorian_month_length(gm, leap):
        day_no -= _gregorian_month_length(gm, leap)
        gm += 1
    return gy, gm, day_no + 1

def jalali_to_gregorian_date(jy: int, jm: int, jd: int) -> YMD:
    return day_number_to_gregorian(jalali_to_day_number(jy, jm, jd) + EPOCH_OFFSET_DAYS)

# -----------------------------
# Gregorian -> day number -> Jalali
# -----------------------------

def gregorian_to_day_number(gy: int, gm: int, gd: int) -> int:
    """Days since Gregorian 1600-01-01."""
    gy2 = gy - GREGORIAN_EPOCH_YEAR
    day_no = 365 * gy2 + (gy2 + 3) // 4 - (gy2 + 99) // 100 + (gy2 + 399) // 400
    day_no += sum(gregorian_month_days(gy)[: max(gm - 1, 0)])
    return day_no + gd - 1

def day_number_to_jalali(day_no: int) -> YMD:
    """Inverse of `jalali_to_day_number` (day 0 == Jalali 979-01-01)."""
    j_np = day_no // DAYS_PER_33_YEARS
    day_no %= DAYS_PER_33_YEARS

    jy = JALALI_EPOCH_YEAR + 33 * j_np + 4 * (day_no // DAYS_PER_4_YEARS)
    day_no %= DAYS_PER_4_YEARS
    if day_no >= 366:
        jy += (day_no - 1) // 365
        day_no = (day_no - 1) % 365

    i = 0
    while i < 11 and day_no >= JALALI_MONTH_DAYS[i]:
        day_no -= JALALI_MONTH_DAYS[i]
        i += 1
    return jy, i + 1, day_no + 1

def gregorian_to_jalali_date(gy: int, gm: int, gd: int) -> YMD:
    return day_number_to_jalali(gregorian_to_day_number(gy, gm, gd) - EPOCH_OFFSET_DAYS)
