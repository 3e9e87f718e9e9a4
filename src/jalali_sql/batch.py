import logging
from typing import Iterable, Optional, Union

import pandas as pd

from jalali_sql.converters import gregorian_to_jalali, jalali_to_gregorian

logger = logging.getLogger(__name__)

TO_GREGORIAN = "to-gregorian"
TO_JALALI = "to-jalali"
DIRECTIONS = (TO_GREGORIAN, TO_JALALI)

EndOfDay = Union[bool, Iterable[Optional[bool]], pd.Series]


def _is_null(value) -> bool:
    return value is None or bool(pd.isna(value))


def _end_of_day_flags(end_of_day: EndOfDay, values: pd.Series) -> pd.Series:
    if isinstance(end_of_day, bool):
        return pd.Series([end_of_day] * len(values), index=values.index, dtype=object)
    if isinstance(end_of_day, pd.Series):
        flags = end_of_day
    else:
        flags = pd.Series(list(end_of_day), dtype=object)
    if len(flags) != len(values):
        raise ValueError(f"end_of_day has {len(flags)} items, expected {len(values)}")
    return pd.Series(flags.to_numpy(dtype=object), index=values.index, dtype=object)


def jalali_to_gregorian_series(values: pd.Series, end_of_day: EndOfDay = False) -> pd.Series:
    """
    Element-wise `jalali_to_gregorian` over a Series of Jalali strings.

    `end_of_day` is one flag for all rows or one flag per row. A null value or a
    null flag gives NaT. The first bad element raises; there is no partial result.
    """
    values = pd.Series(values)
    flags = _end_of_day_flags(end_of_day, values)

    out = []
    for text, flag in zip(values.tolist(), flags.tolist()):
        if _is_null(text) or _is_null(flag):
            out.append(pd.NaT)
        else:
            out.append(jalali_to_gregorian(str(text), bool(flag)))

    result = pd.Series(out, index=values.index, name=values.name)
    logger.info("🗓️ jalali_to_gregorian_series: converted %s row(s), %s null", len(out), int(result.isna().sum()))
    return result


def gregorian_to_jalali_series(values: pd.Series) -> pd.Series:
    """Element-wise `gregorian_to_jalali`; nulls give None."""
    values = pd.Series(values)

    out = []
    for ts in values.tolist():
        if _is_null(ts):
            out.append(None)
        else:
            if isinstance(ts, str):
                ts = pd.Timestamp(ts)
            out.append(gregorian_to_jalali(ts))

    result = pd.Series(out, index=values.index, name=values.name, dtype=object)
    logger.info("🗓️ gregorian_to_jalali_series: converted %s row(s), %s null", len(out), int(result.isna().sum()))
    return result


def convert_frame_column(
    df: pd.DataFrame,
    column: str,
    direction: str,
    end_of_day: EndOfDay = False,
    target: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a copy of `df` with `column` converted in `direction`
    ("to-gregorian" or "to-jalali"), written to `target` (default: `column`).
    """
    if column not in df.columns:
        raise KeyError(f"column {column!r} not in frame (have {list(df.columns)})")
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")

    out = df.copy()
    if direction == TO_GREGORIAN:
        out[target or column] = jalali_to_gregorian_series(df[column], end_of_day)
    else:
        out[target or column] = gregorian_to_jalali_series(df[column])
    return out
