"""Server-side session store: establish, resolve, destroy and purge login sessions."""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from fzscripts.core.config import settings
from fzscripts.core.security import new_session_id
from fzscripts.models import LoginSession

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def establish_session(db: Session, user_id: int, ttl: timedelta | None = None) -> str:
    """Create a session row for user_id and return its opaque id."""
    sid = new_session_id()
    db.add(
        LoginSession(
            sid=sid,
            user_id=user_id,
            expires_at=_now() + (ttl or timedelta(hours=settings.SESSION_TTL_HOURS)),
        )
    )
    db.commit()
    return sid


def resolve_session(db: Session, sid: str | None) -> int | None:
    """Return the user id for a live session, or None when absent or expired."""
    if not sid:
        return None
    row = db.execute(
        select(LoginSession.user_id, LoginSession.expires_at > _now()).where(
            LoginSession.sid == sid
        )
    ).first()
    if row is None:
        return None
    user_id, live = row
    if not live:
        # Expired rows are dropped on sight.
        destroy_session(db, sid)
        return None
    return user_id


def destroy_session(db: Session, sid: str | None) -> None:
    """Delete the session. Unknown or missing ids are a no-op."""
    if not sid:
        return
    db.execute(delete(LoginSession).where(LoginSession.sid == sid))
    db.commit()


def purge_expired_sessions(db: Session, now: datetime | None = None) -> int:
    """
    Delete every session whose expiry has passed. Returns the number removed.
    Idempotent: safe to run repeatedly.
    """
    cutoff = now or _now()
    result = db.execute(delete(LoginSession).where(LoginSession.expires_at <= cutoff))
    db.commit()
    deleted = result.rowcount or 0
    if deleted > 0:
        logger.info(
            "Session purge: cutoff=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            deleted,
        )
    return deleted
