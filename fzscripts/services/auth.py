"""
Auth service: registration, login, logout, current user and admin-gated verification.

Every user leaving this module is a UserPublic, which has no password field.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fzscripts.core.errors import (
    Conflict,
    Forbidden,
    InvalidCredentials,
    NotFound,
    Unauthenticated,
    ValidationError,
)
from fzscripts.core.security import verify_password
from fzscripts.models import User
from fzscripts.schemas.users import UserPublic
from fzscripts.services import sessions, users

if TYPE_CHECKING:
    from fzscripts.core.config import Settings

logger = logging.getLogger(__name__)


def to_public(user: User) -> UserPublic:
    """Strip credentials from an ORM user."""
    return UserPublic.model_validate(user)


def register(
    db: Session,
    username: str,
    password: str,
    settings: "Settings",
    profile_picture: str = "",
) -> tuple[UserPublic, str]:
    """
    Create an account and log it in. Returns (user, session id).

    Raises Conflict if the username is taken, including when a concurrent
    registration wins the unique constraint after the pre-check.
    """
    if users.username_exists(db, username):
        raise Conflict("Username already taken")
    privileged = username == settings.BOOTSTRAP_ADMIN_USERNAME
    try:
        user = users.create_user(
            db,
            username,
            password,
            profile_picture=profile_picture,
            privileged=privileged,
        )
    except IntegrityError as e:
        raise Conflict("Username already taken") from e
    sid = sessions.establish_session(db, user.id)
    logger.info("User registered", extra={"user_id": user.id, "username": user.username})
    return to_public(user), sid


def login(db: Session, username: str, password: str) -> tuple[UserPublic, str]:
    """Verify credentials and open a session. Unknown user and bad password look the same."""
    user = users.get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"username": username})
        raise InvalidCredentials()
    sid = sessions.establish_session(db, user.id)
    return to_public(user), sid


def logout(db: Session, sid: str | None) -> None:
    sessions.destroy_session(db, sid)


def current_user(db: Session, sid: str | None) -> UserPublic:
    """Resolve the session to its user. Raises Unauthenticated when there is none."""
    return to_public(_current_user_row(db, sid))


def _current_user_row(db: Session, sid: str | None) -> User:
    user_id = sessions.resolve_session(db, sid)
    if user_id is None:
        raise Unauthenticated()
    user = users.get_user(db, user_id)
    if user is None:
        raise Unauthenticated()
    return user


def check_username_available(db: Session, username: str) -> bool:
    return not users.username_exists(db, username)


def get_public_user(db: Session, user_id: int) -> UserPublic:
    user = users.get_user(db, user_id)
    if user is None:
        raise NotFound("User not found")
    return to_public(user)


def set_verification(
    db: Session, acting_user: UserPublic, target_id: int, verified: bool
) -> UserPublic:
    """Admin only: set another user's verified flag."""
    if not acting_user.is_admin:
        raise Forbidden("Only admins can verify users")
    user = users.set_verified(db, target_id, verified)
    if user is None:
        raise NotFound("User not found")
    logger.info(
        "User verification updated",
        extra={"admin_id": acting_user.id, "user_id": target_id, "verified": verified},
    )
    return to_public(user)


def update_profile_picture(
    db: Session, acting_user: UserPublic, target_id: int, profile_picture: str
) -> UserPublic:
    """Owner only: replace the profile picture URL."""
    if acting_user.id != target_id:
        raise Forbidden("Not authorized to update this user's profile")
    if not profile_picture or not profile_picture.strip():
        raise ValidationError("Profile picture URL is required")
    user = users.set_profile_picture(db, target_id, profile_picture.strip())
    if user is None:
        raise NotFound("User not found")
    return to_public(user)
