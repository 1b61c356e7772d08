"""SQLAlchemy ORM models."""

from fzscripts.models.base import Base
from fzscripts.models.script import Script
from fzscripts.models.session import LoginSession
from fzscripts.models.user import User

__all__ = ["Base", "LoginSession", "Script", "User"]
