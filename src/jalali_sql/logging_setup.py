import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# SQLAlchemy echoes every statement and pool checkout at INFO/DEBUG
NOISY_LOGGERS: tuple[str, ...] = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "sqlalchemy.dialects",
    "sqlalchemy.orm",
)


class TruncateLongMsgs(logging.Filter):
    """Cuts a console message down to `max_len` chars (batch summaries, CSV paths)."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False  # set by the first setup_logging call


def setup_logging(
    *,
    level: int = logging.WARNING,
    console: bool = True,
    console_truncate_len: int = 300,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_level: Optional[int] = None,
    file_max_bytes: int = 5_000_000,
    file_backup_count: int = 3,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Set up the root logger for the CLI or any other program embedding jalali_sql.

    The conversion modules only log through `logging.getLogger(__name__)` and
    leave handler setup to whoever owns the process.

    - stderr handler, messages cut at `console_truncate_len`
    - optional `log_file`, rotated at `file_max_bytes`, never truncated
    - every logger in `quiet` capped at WARNING
    - a second call is a no-op unless `force=True`
    """
    global _configured
    if _configured and not force:
        return

    root = logging.getLogger()
    # replace, not add to, whatever is attached already
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        if console_truncate_len and console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count, encoding="utf-8"
        )
        fh.setLevel(file_level if file_level is not None else level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("🚀 root logging ready (level=%s, file=%s)", logging.getLevelName(level), log_file)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger under the `jalali_sql` tree; the CLI uses it for its own messages.
    """
    return logging.getLogger(name if name else __name__)
