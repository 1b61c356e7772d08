"""ORM model for published scripts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from fzscripts.models.base import Base


class Script(Base):
    """
    A shared script owned by one user.

    downloads only moves through an atomic UPDATE (see services.scripts.record_download).
    rating is reserved: stored and returned, never written after creation.
    """

    __tablename__ = "scripts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    code = Column(Text, nullable=False)
    language = Column(String(64), nullable=False)
    category = Column(String(64), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    downloads = Column(Integer, nullable=False, default=0, server_default="0")
    rating = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
