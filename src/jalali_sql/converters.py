import logging
from datetime import date as GDate, datetime, timedelta
from typing import Union

from jalali_sql.errors import OutOfRangeError
from jalali_sql.utils.calendar_utils import gregorian_to_jalali_date, jalali_to_gregorian_date
from jalali_sql.utils.parse_utils import (
    parse_jalali_date_fields,
    parse_time_fields,
    split_datetime_text,
)

logger = logging.getLogger(__name__)

END_OF_DAY = (23, 59, 59)


def jalali_to_gregorian(date_time_string: str, end_of_day: bool = False) -> datetime:
    """
    Convert Jalali `YYYY-MM-DD[ HH:MM[:SS]]` text to a naive Gregorian datetime.

    `end_of_day` forces the time of day to 23:59:59 whatever the input says.
    Raises FormatError / ParseError for malformed text and OutOfRangeError when
    the result falls outside the years `datetime` supports.
    """
    date_part, time_part = split_datetime_text(date_time_string)
    jy, jm, jd = parse_jalali_date_fields(date_part)
    gy, gm, gd = jalali_to_gregorian_date(jy, jm, jd)

    hour, minute, second = parse_time_fields(time_part)
    if end_of_day:
        hour, minute, second = END_OF_DAY

    try:
        # Time fields are added, not validated: 24:00 rolls into the next day.
        result = datetime(gy, gm, gd) + timedelta(hours=hour, minutes=minute, seconds=second)
    except (ValueError, OverflowError) as e:
        raise OutOfRangeError(
            f"{date_time_string!r} maps to {gy:04d}-{gm:02d}-{gd:02d}, outside the supported range"
        ) from e

    logger.debug("📅 jalali_to_gregorian: %r (end_of_day=%s) → %s", date_time_string, end_of_day, result)
    return result


def gregorian_to_jalali(value: Union[datetime, GDate]) -> str:
    """
    Convert a naive Gregorian datetime (or date) to Jalali text.

    Midnight with zero microseconds gives `YYYY-MM-DD`; anything else gives
    `YYYY-MM-DD HH:MM:SS` with sub-second precision dropped.
    """
    if isinstance(value, datetime):
        hour, minute, second, micros = value.hour, value.minute, value.second, value.microsecond
    elif isinstance(value, GDate):
        hour = minute = second = micros = 0
    else:
        raise TypeError(f"expected datetime or date, got {type(value).__name__}")

    jy, jm, jd = gregorian_to_jalali_date(value.year, value.month, value.day)

    if hour == 0 and minute == 0 and second == 0 and micros == 0:
        out = f"{jy:04d}-{jm:02d}-{jd:02d}"
    else:
        out = f"{jy:04d}-{jm:02d}-{jd:02d} {hour:02d}:{minute:02d}:{second:02d}"

    logger.debug("📅 gregorian_to_jalali: %s → %s", value, out)
    return out
