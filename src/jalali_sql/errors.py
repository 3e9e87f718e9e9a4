from typing import Optional


class JalaliError(ValueError):
    """Base class for conversion failures."""


class FormatError(JalaliError):
    """The date part does not have exactly three `-`-separated fields."""

    def __init__(self, text: str):
        super().__init__(f"Invalid Jalali date format {text!r}. Expected format: YYYY-MM-DD")
        self.text = text


class ParseError(JalaliError):
    """A date or time field is not an integer."""

    def __init__(self, token: str, field: Optional[str] = None):
        where = f" for {field}" if field else ""
        super().__init__(f"Invalid integer {token!r}{where}")
        self.token = token
        self.field = field


class OutOfRangeError(JalaliError):
    """The computed Gregorian timestamp does not fit in `datetime`."""


class UnsupportedEngineError(JalaliError):
    """SQL functions can only be registered on SQLite-backed engines."""
