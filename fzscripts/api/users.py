"""User endpoints: public profile, username check, profile picture and admin verification."""

from typing import Annotated

from fastapi import APIRouter, Depends

from fzscripts.api.deps import (
    AdminUser,
    CurrentUser,
    DbSession,
    get_own_profile_id,
    get_verification_target,
    parse_id,
)
from fzscripts.schemas.common import ErrorResponse
from fzscripts.schemas.users import (
    ProfilePictureUpdate,
    UserPublic,
    UsernameAvailability,
    VerificationUpdate,
)
from fzscripts.services import auth

router = APIRouter()


@router.get("/check-username/{username}", response_model=UsernameAvailability)
def check_username(username: str, db: DbSession) -> UsernameAvailability:
    return UsernameAvailability(available=auth.check_username_available(db, username))


@router.get(
    "/{user_id}",
    response_model=UserPublic,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_user(user_id: str, db: DbSession) -> UserPublic:
    return auth.get_public_user(db, parse_id(user_id, "user"))


@router.post(
    "/{user_id}/profile-picture",
    response_model=UserPublic,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
def update_profile_picture(
    target_id: Annotated[int, Depends(get_own_profile_id)],
    current_user: CurrentUser,
    body: ProfilePictureUpdate,
    db: DbSession,
) -> UserPublic:
    """Replace the caller's own profile picture URL."""
    return auth.update_profile_picture(db, current_user, target_id, body.profile_picture)


@router.post(
    "/{user_id}/verify",
    response_model=UserPublic,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
def verify_user(
    target_id: Annotated[int, Depends(get_verification_target)],
    admin: AdminUser,
    body: VerificationUpdate,
    db: DbSession,
) -> UserPublic:
    """Admin only: set a user's verified badge."""
    return auth.set_verification(db, admin, target_id, body.verified)
