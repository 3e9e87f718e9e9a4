import pytest
import sqlalchemy as sa

from jalali_sql.sql_functions import register_jalali_functions


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with the Jalali functions registered."""
    engine = sa.create_engine("sqlite://")
    register_jalali_functions(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_conn(db_engine):
    with db_engine.connect() as conn:
        yield conn


@pytest.fixture
def quiet_cli_logging(monkeypatch):
    """Keep the CLI from replacing pytest's root log handlers."""
    monkeypatch.setattr("jalali_sql.cli.setup_logging", lambda **kwargs: None)
