"""ORM model for server-side login sessions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from fzscripts.models.base import Base


class LoginSession(Base):
    """Maps an opaque session id (held in the client cookie) to a user id until expires_at."""

    __tablename__ = "sessions"

    sid = Column(String(128), primary_key=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
