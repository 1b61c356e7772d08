"""
Create tables (if missing) and the bootstrap admin. Run from project root:
  python -m fzscripts.scripts.seed
Safe to run repeatedly and alongside a starting server.
"""
import argparse
import logging
import sys

from fzscripts.core.config import get_settings
from fzscripts.core.database import SessionLocal, create_tables
from fzscripts.services.seed import seed_bootstrap_admin

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the FZ Scripts database.")
    parser.add_argument(
        "--skip-create-tables",
        action="store_true",
        help="Assume the schema exists (e.g. managed by alembic)",
    )
    args = parser.parse_args()

    settings = get_settings()
    if not args.skip_create_tables:
        create_tables()

    db = SessionLocal()
    try:
        admin = seed_bootstrap_admin(db, settings)
        print(f"Bootstrap admin '{admin.username}' ready (id={admin.id}).")
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
