"""Request/response schemas for scripts."""

from datetime import datetime

from pydantic import Field

from fzscripts.schemas.users import CamelModel


class ScriptCreate(CamelModel):
    """
    Fields a client may supply when publishing a script.

    The owner is always the authenticated caller; a userId in the body is ignored.
    """

    title: str = Field(..., min_length=5, max_length=100)
    description: str = Field(..., min_length=20, max_length=1000)
    code: str = Field(..., min_length=10, max_length=50000)
    language: str = Field(..., min_length=1, max_length=64)
    category: str = Field(..., min_length=1, max_length=64)


class ScriptPublic(CamelModel):
    """Script as returned by the API."""

    id: int
    title: str
    description: str
    code: str
    language: str
    category: str
    user_id: int
    downloads: int = 0
    rating: int = 0
    created_at: datetime | None = None
