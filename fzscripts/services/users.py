"""Credential store queries: user lookup, creation and the two mutable profile fields."""

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from fzscripts.core.security import hash_password
from fzscripts.models import User


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def username_exists(db: Session, username: str) -> bool:
    return (
        db.execute(select(User.id).where(User.username == username)).first()
        is not None
    )


def build_user(
    username: str,
    password: str,
    *,
    profile_picture: str = "",
    privileged: bool = False,
) -> User:
    """Unsaved user with a hashed password. privileged=True sets both is_admin and verified."""
    return User(
        username=username,
        password_hash=hash_password(password),
        profile_picture=profile_picture or "",
        verified=privileged,
        is_admin=privileged,
    )


def create_user(
    db: Session,
    username: str,
    password: str,
    *,
    profile_picture: str = "",
    privileged: bool = False,
) -> User:
    """
    Hash the password and insert the user.

    privileged=True is for the bootstrap account only.
    Raises sqlalchemy.exc.IntegrityError if the username is taken; the session is rolled back.
    """
    user = build_user(
        username, password, profile_picture=profile_picture, privileged=privileged
    )
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def _update_user(db: Session, user_id: int, **values: object) -> User | None:
    result = db.execute(update(User).where(User.id == user_id).values(**values))
    if not result.rowcount:
        db.rollback()
        return None
    db.commit()
    user = db.get(User, user_id)
    if user is not None:
        db.refresh(user)
    return user


def set_verified(db: Session, user_id: int, verified: bool) -> User | None:
    """Set the verified flag. None if the user does not exist."""
    return _update_user(db, user_id, verified=verified)


def set_profile_picture(db: Session, user_id: int, profile_picture: str) -> User | None:
    """Set the profile picture URL. None if the user does not exist."""
    return _update_user(db, user_id, profile_picture=profile_picture)
