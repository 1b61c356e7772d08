"""Request dependencies: DB session, session cookie handling, current user."""

from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from fzscripts.core.config import settings
from fzscripts.core.database import get_db
from fzscripts.core.errors import Forbidden, ValidationError
from fzscripts.core.security import read_session_cookie, sign_session_cookie
from fzscripts.schemas.users import UserPublic
from fzscripts.services import auth

# Ids are 32-bit INTEGER columns.
MAX_ID = 2**31 - 1

DbSession = Annotated[Session, Depends(get_db)]


def get_session_id(request: Request) -> str | None:
    """Session id from the signed cookie, or None when absent or invalid."""
    return read_session_cookie(request.cookies.get(settings.SESSION_COOKIE_NAME))


SessionId = Annotated[str | None, Depends(get_session_id)]


def get_current_user(db: DbSession, sid: SessionId) -> UserPublic:
    """Dependency: require a live session. Raises Unauthenticated (401) otherwise."""
    return auth.current_user(db, sid)


CurrentUser = Annotated[UserPublic, Depends(get_current_user)]


def set_session_cookie(response: Response, sid: str) -> None:
    max_age = settings.SESSION_TTL_HOURS * 3600
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_cookie(sid),
        max_age=max_age,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
        path="/",
    )


def parse_id(raw: str, label: str) -> int:
    """Parse a path id; non-integers are a 400 with 'Invalid <label> ID'."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID")
    if abs(value) > MAX_ID:
        raise ValidationError(f"Invalid {label} ID")
    return value


def require_admin(current_user: CurrentUser) -> UserPublic:
    """Dependency: require an admin session. Raises 403 before the path or body is looked at."""
    if not current_user.is_admin:
        raise Forbidden("Only admins can verify users")
    return current_user


AdminUser = Annotated[UserPublic, Depends(require_admin)]


def get_verification_target(user_id: str, _admin: AdminUser) -> int:
    """Target id for admin verification; admin check runs first, then the id is parsed."""
    return parse_id(user_id, "user")


def get_own_profile_id(user_id: str, current_user: CurrentUser) -> int:
    """Path id that must be the caller's own: bad id is 400, someone else's is 403."""
    target_id = parse_id(user_id, "user")
    if target_id != current_user.id:
        raise Forbidden("Not authorized to update this user's profile")
    return target_id
