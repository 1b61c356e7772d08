"""Script repository: listing, lookup, creation and the download counter."""

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from fzscripts.models import Script
from fzscripts.schemas.scripts import ScriptCreate


def list_scripts(db: Session) -> list[Script]:
    """All scripts, id ascending."""
    return list(db.execute(select(Script).order_by(Script.id)).scalars().all())


def get_script(db: Session, script_id: int) -> Script | None:
    return db.get(Script, script_id)


def list_scripts_by_user(db: Session, user_id: int) -> list[Script]:
    """Scripts owned by user_id, id ascending. Empty list when there are none."""
    return list(
        db.execute(
            select(Script).where(Script.user_id == user_id).order_by(Script.id)
        )
        .scalars()
        .all()
    )


def create_script(db: Session, draft: ScriptCreate, user_id: int) -> Script:
    """Insert a script owned by user_id with zeroed downloads and rating."""
    script = Script(
        title=draft.title,
        description=draft.description,
        code=draft.code,
        language=draft.language,
        category=draft.category,
        user_id=user_id,
        downloads=0,
        rating=0,
    )
    db.add(script)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(script)
    return script


def record_download(db: Session, script_id: int) -> Script | None:
    """
    Increment downloads by one in a single UPDATE and return the fresh row.

    The increment is evaluated by the store, so concurrent calls never lose counts.
    Returns None when the script does not exist.
    """
    result = db.execute(
        update(Script)
        .where(Script.id == script_id)
        .values(downloads=Script.downloads + 1)
        .execution_options(synchronize_session=False)
    )
    if not result.rowcount:
        db.rollback()
        return None
    db.commit()
    script = db.get(Script, script_id)
    if script is not None:
        db.refresh(script)
    return script
