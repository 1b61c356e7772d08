"""ORM model for user accounts (credentials, verification and admin flags)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false, func

from fzscripts.models.base import Base


class User(Base):
    """
    Registered user.

    password_hash is "<hex(scrypt key)>.<salt>" and never leaves the service layer.
    is_admin is set only for the bootstrap account at creation.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    verified = Column(Boolean, nullable=False, default=False, server_default=false())
    profile_picture = Column(Text, nullable=False, default="", server_default="")
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
