"""Session auth endpoints: register, login, logout, current user, username check."""

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from fzscripts.api.deps import (
    CurrentUser,
    DbSession,
    SessionId,
    clear_session_cookie,
    set_session_cookie,
)
from fzscripts.core.config import get_settings
from fzscripts.schemas.common import ErrorResponse
from fzscripts.schemas.users import (
    LoginRequest,
    RegisterRequest,
    UserPublic,
    UsernameAvailability,
    UsernameCheckRequest,
)
from fzscripts.services import auth

router = APIRouter()


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(body: RegisterRequest, db: DbSession, response: Response) -> UserPublic:
    """Create an account and log it in. The session cookie is set on the response."""
    user, sid = auth.register(
        db,
        body.username,
        body.password,
        get_settings(),
        profile_picture=body.profile_picture,
    )
    set_session_cookie(response, sid)
    return user


@router.post(
    "/login",
    response_model=UserPublic,
    responses={401: {"model": ErrorResponse}},
)
def login(body: LoginRequest, db: DbSession, response: Response) -> UserPublic:
    """Authenticate with username and password; sets the session cookie."""
    user, sid = auth.login(db, body.username, body.password)
    set_session_cookie(response, sid)
    return user


@router.post("/logout")
def logout(db: DbSession, sid: SessionId) -> Response:
    """End the current session. Always succeeds."""
    auth.logout(db, sid)
    response = PlainTextResponse("OK")
    clear_session_cookie(response)
    return response


@router.get(
    "/user",
    response_model=UserPublic,
    responses={401: {"model": ErrorResponse}},
)
def get_me(current_user: CurrentUser) -> UserPublic:
    return current_user


@router.post(
    "/check-username",
    response_model=UsernameAvailability,
    responses={400: {"model": ErrorResponse}},
)
def check_username(body: UsernameCheckRequest, db: DbSession) -> UsernameAvailability:
    return UsernameAvailability(available=auth.check_username_available(db, body.username))
