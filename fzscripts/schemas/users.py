"""Request/response schemas for users and auth endpoints. Wire format is camelCase."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Registration rules mirror the sign-up form: 3-20 chars of letters, digits, underscore.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 20
USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class CamelModel(BaseModel):
    """Base for schemas exchanged as camelCase JSON; accepts snake_case names too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserPublic(CamelModel):
    """User as returned by the API. Has no password field by construction."""

    id: int
    username: str
    verified: bool = False
    profile_picture: str = ""
    is_admin: bool = False
    created_at: datetime | None = None


class RegisterRequest(CamelModel):
    """Sign-up payload."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        pattern=USERNAME_PATTERN,
        description="Letters, numbers and underscores",
    )
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    profile_picture: str = Field(default="", max_length=2048)


class LoginRequest(CamelModel):
    """Credentials for login. No length rules beyond non-empty."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class UsernameCheckRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=255)


class UsernameAvailability(BaseModel):
    available: bool


class ProfilePictureUpdate(CamelModel):
    profile_picture: str = Field(..., min_length=1, max_length=2048)


class VerificationUpdate(CamelModel):
    verified: bool
