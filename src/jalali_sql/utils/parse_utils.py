import re
from typing import Optional, Tuple

from jalali_sql.errors import FormatError, ParseError

'''
Tokenizer for Jalali input text.

Accepted shapes:

  1. YYYY-MM-DD
  2. YYYY-MM-DD HH:MM
  3. YYYY-MM-DD HH:MM:SS

The year is a free-form integer and may carry a sign; every other field may be
1 or 2 digits.
Field values are not range-checked here.
'''

_INT_RE = re.compile(r"^[+-]?\d+$")

DATE_FIELDS = ("year", "month", "day")


def parse_int(token: str, field: Optional[str] = None) -> int:
    t = token.strip()
    if not _INT_RE.match(t):
        raise ParseError(token, field)
    return int(t)


def split_datetime_text(text: str) -> Tuple[str, Optional[str]]:
    """Split on the first space into (date_part, time_part or None)."""
    date_part, _, time_part = text.strip().partition(" ")
    time_part = time_part.strip()
    return date_part, (time_part or None)


def parse_jalali_date_fields(date_part: str) -> Tuple[int, int, int]:
    # A leading sign belongs to the year (Jalali years <= 0 print as "-621-10-11").
    sign, body = "", date_part
    if body[:1] in ("+", "-"):
        sign, body = body[0], body[1:]
    parts = body.split("-")
    if len(parts) != 3:
        raise FormatError(date_part)
    parts[0] = sign + parts[0]
    y, m, d = (parse_int(tok, name) for tok, name in zip(parts, DATE_FIELDS))
    return y, m, d


def parse_time_fields(time_part: Optional[str]) -> Tuple[int, int, int]:
    # Fewer than two fields (e.g. a bare hour) falls back to midnight.
    if not time_part:
        return 0, 0, 0
    parts = time_part.split(":")
    if len(parts) < 2:
        return 0, 0, 0
    hour = parse_int(parts[0], "hour")
    minute = parse_int(parts[1], "minute")
    second = parse_int(parts[2], "second") if len(parts) == 3 else 0
    return hour, minute, second
