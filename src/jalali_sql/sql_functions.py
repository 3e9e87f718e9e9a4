import logging
from datetime import datetime
from typing import Dict, Optional

import sqlalchemy as sa
from sqlalchemy import event

from jalali_sql.converters import gregorian_to_jalali, jalali_to_gregorian
from jalali_sql.errors import ParseError, UnsupportedEngineError

logger = logging.getLogger(__name__)

# name -> number of SQL arguments
JALALI_FUNCTIONS: Dict[str, int] = {
    "jalali_to_gregorian": 2,
    "gregorian_to_jalali": 1,
}

def _sqlite_timestamp_text(ts: datetime) -> str:
    # SQLite has no timestamp type; CURRENT_TIMESTAMP / datetime() use this text form.
    # strftime("%Y") does not pad years below 1000 on glibc.
    return f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d} {ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"


def _sqlite_flag(value) -> bool:
    # SQLite has no BOOLEAN; TRUE/FALSE are the integers 1/0
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ParseError(str(value), "end_of_day")


def _sqlite_jalali_to_gregorian(text: Optional[str], end_of_day) -> Optional[str]:
    if text is None or end_of_day is None:
        return None
    return _sqlite_timestamp_text(jalali_to_gregorian(str(text), _sqlite_flag(end_of_day)))


def _sqlite_gregorian_to_jalali(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return gregorian_to_jalali(datetime.fromisoformat(str(value)))


def _register_on_dbapi_connection(dbapi_conn) -> None:
    dbapi_conn.create_function(
        "jalali_to_gregorian", JALALI_FUNCTIONS["jalali_to_gregorian"],
        _sqlite_jalali_to_gregorian, deterministic=True,
    )
    dbapi_conn.create_function(
        "gregorian_to_jalali", JALALI_FUNCTIONS["gregorian_to_jalali"],
        _sqlite_gregorian_to_jalali, deterministic=True,
    )


def register_jalali_functions(engine: sa.Engine) -> None:
    """
    Make `jalali_to_gregorian(text, end_of_day)` and `gregorian_to_jalali(ts)`
    callable from SQL on every connection `engine` opens from now on.

    Only SQLite engines are supported. Register before the first connect:
    connections already sitting in the pool do not get the functions.
    """
    if engine.dialect.name != "sqlite":
        raise UnsupportedEngineError(
            f"cannot register Jalali functions on a {engine.dialect.name!r} engine (sqlite only)"
        )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn, _connection_record):
        _register_on_dbapi_connection(dbapi_conn)
        logger.debug("🔌 registered %s on new connection", ", ".join(JALALI_FUNCTIONS))

    logger.info("🔌 register_jalali_functions: %s → %s", engine.url, sorted(JALALI_FUNCTIONS))
