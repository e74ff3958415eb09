"""
Migration runner for Resume Builder database migrations

Brings a database holding the base users/resumes/resume_submissions tables
up to the current schema. Fresh databases are created complete by init_db()
on startup.

Usage:
    python migrations/run_migrations.py              # Run all migrations
    python migrations/run_migrations.py --downgrade  # Rollback all migrations
    python migrations/run_migrations.py --list       # Show migrations in order
"""

import importlib.util
import sys
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent


def get_migration_files():
    """Numbered migration files in apply order"""
    return sorted(f for f in MIGRATIONS_DIR.glob("[0-9][0-9][0-9]_*.py"))


def load_migration(path: Path):
    """Import a migration module from its file path"""
    spec = importlib.util.spec_from_file_location(f"migrations.{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_migrations(engine, downgrade=False):
    """Apply every migration, or roll them back newest first"""
    migration_files = get_migration_files()

    if not migration_files:
        logger.warning("No migration files found")
        return

    if downgrade:
        migration_files = list(reversed(migration_files))

    logger.info(f"Found {len(migration_files)} migration(s)")

    for migration_file in migration_files:
        logger.info(f"Processing: {migration_file.name}")
        module = load_migration(migration_file)
        step = getattr(module, "downgrade" if downgrade else "upgrade", None)

        if step is None:
            logger.warning(f"{migration_file.name} has no {'downgrade' if downgrade else 'upgrade'} step")
            continue

        try:
            step(engine)
        except Exception as e:
            logger.error(f"Failed to run migration {migration_file.name}: {e}")
            raise

    logger.info("✅ All migrations completed!")


if __name__ == "__main__":
    if "--list" in sys.argv:
        for path in get_migration_files():
            print(path.name)
        sys.exit(0)

    from resume_builder.database import engine

    downgrade = "--downgrade" in sys.argv or "-d" in sys.argv

    if downgrade:
        logger.warning("⚠️  Running in DOWNGRADE mode - this will rollback changes!")
        confirm = input("Are you sure you want to continue? (yes/no): ")
        if confirm.lower() != "yes":
            logger.info("Cancelled")
            sys.exit(0)

    try:
        run_migrations(engine, downgrade=downgrade)
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)
