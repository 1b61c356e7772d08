"""Database engine, session factory and request-scoped session dependency."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fzscripts.core.config import Settings, settings


def _engine_kwargs(cfg: Settings) -> dict[str, Any]:
    """Every store call is bounded: connect, statement and pool checkout timeouts."""
    if cfg.DATABASE_URL.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": cfg.DB_CONNECT_TIMEOUT_SEC,
            },
        }
    return {
        "pool_pre_ping": True,
        "pool_timeout": cfg.DB_POOL_TIMEOUT_SEC,
        "connect_args": {
            "connect_timeout": cfg.DB_CONNECT_TIMEOUT_SEC,
            "options": f"-c statement_timeout={cfg.DB_STATEMENT_TIMEOUT_MS}",
        },
    }


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(cfg: Settings) -> Engine:
    """Create an engine for the configured DATABASE_URL."""
    eng = create_engine(cfg.DATABASE_URL, echo=cfg.DEBUG, **_engine_kwargs(cfg))
    if eng.dialect.name == "sqlite":
        # SQLite ignores REFERENCES unless asked per connection
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


engine = build_engine(settings)

SessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine | None = None) -> None:
    """Create any missing tables (users, scripts, sessions)."""
    from fzscripts.models import Base

    Base.metadata.create_all(bind=bind or engine)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
