"""Pydantic request/response schemas."""

from fzscripts.schemas.common import ErrorResponse, HealthResponse
from fzscripts.schemas.scripts import ScriptCreate, ScriptPublic
from fzscripts.schemas.users import (
    LoginRequest,
    ProfilePictureUpdate,
    RegisterRequest,
    UserPublic,
    UsernameAvailability,
    UsernameCheckRequest,
    VerificationUpdate,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "ProfilePictureUpdate",
    "RegisterRequest",
    "ScriptCreate",
    "ScriptPublic",
    "UserPublic",
    "UsernameAvailability",
    "UsernameCheckRequest",
    "VerificationUpdate",
]
