"""Script endpoints: list, detail, per-user list, publish and download counting."""

from fastapi import APIRouter, status

from fzscripts.api.deps import CurrentUser, DbSession, parse_id
from fzscripts.core.errors import NotFound
from fzscripts.schemas.common import ErrorResponse
from fzscripts.schemas.scripts import ScriptCreate, ScriptPublic
from fzscripts.services import scripts

router = APIRouter()


@router.get("", response_model=list[ScriptPublic])
def list_scripts(db: DbSession) -> list[ScriptPublic]:
    return [ScriptPublic.model_validate(s) for s in scripts.list_scripts(db)]


@router.get(
    "/user/{user_id}",
    response_model=list[ScriptPublic],
    responses={400: {"model": ErrorResponse}},
)
def list_user_scripts(user_id: str, db: DbSession) -> list[ScriptPublic]:
    uid = parse_id(user_id, "user")
    return [ScriptPublic.model_validate(s) for s in scripts.list_scripts_by_user(db, uid)]


@router.get(
    "/{script_id}",
    response_model=ScriptPublic,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_script(script_id: str, db: DbSession) -> ScriptPublic:
    script = scripts.get_script(db, parse_id(script_id, "script"))
    if script is None:
        raise NotFound("Script not found")
    return ScriptPublic.model_validate(script)


@router.post(
    "",
    response_model=ScriptPublic,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def create_script(
    body: ScriptCreate, db: DbSession, current_user: CurrentUser
) -> ScriptPublic:
    """Publish a script owned by the logged-in user."""
    script = scripts.create_script(db, body, current_user.id)
    return ScriptPublic.model_validate(script)


@router.post(
    "/{script_id}/download",
    response_model=ScriptPublic,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def download_script(script_id: str, db: DbSession) -> ScriptPublic:
    """Count one download and return the updated script."""
    script = scripts.record_download(db, parse_id(script_id, "script"))
    if script is None:
        raise NotFound("Script not found")
    return ScriptPublic.model_validate(script)
