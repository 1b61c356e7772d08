"""
CLI entrypoint for pruning expired login sessions. Run from cron, e.g.:

  python -m fzscripts.session_cleanup

Or hourly: 0 * * * * cd /path/to/fzscripts && .venv/bin/python -m fzscripts.session_cleanup
"""

import logging
import sys

from fzscripts.core.database import SessionLocal
from fzscripts.services.sessions import purge_expired_sessions

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete sessions whose expiry has passed."""
    db = SessionLocal()
    try:
        deleted = purge_expired_sessions(db)
        logger.info("Session cleanup completed: sessions_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Session cleanup failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
