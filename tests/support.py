"""Shared helpers for tests that touch the database."""

from sqlalchemy.orm import Session

from fzscripts.core.database import SessionLocal, engine
from fzscripts.models import Base, Script, User
from fzscripts.schemas.scripts import ScriptCreate
from fzscripts.services import scripts, users


def reset_db() -> None:
    """Drop and recreate every table on the test engine."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def new_session() -> Session:
    return SessionLocal()


def make_user(db: Session, username: str = "alice", password: str = "secret123") -> User:
    return users.create_user(db, username, password)


def script_draft(title: str = "Infinite Jump", **overrides: str) -> ScriptCreate:
    """Build a valid ScriptCreate for tests."""
    fields = {
        "title": title,
        "description": "Lets your character jump forever without landing.",
        "code": "print('jump jump jump')",
        "language": "lua",
        "category": "utility",
    }
    fields.update(overrides)
    return ScriptCreate(**fields)


def make_script(db: Session, user_id: int, title: str = "Infinite Jump") -> Script:
    return scripts.create_script(db, script_draft(title), user_id)
