"""
Migration: Add completion tracking and paid review columns
Date: 2025-07-14

Upgrades a database holding the base users/resumes/resume_submissions
tables (UUID string ids) to the current schema.

Changes:
1. Add completion_percentage and is_admin
2. Add payment, contact and expert assignment columns to resume_submissions
3. Create the experts table
4. Allow each paid transaction id only once

Databases from the Express service use SERIAL ids and cannot be upgraded in
place; the migration stops before changing them.
"""

import logging
from sqlalchemy import Integer, inspect, text

logger = logging.getLogger(__name__)

# (table, column, DDL type)
NEW_COLUMNS = [
    ("resumes", "completion_percentage", "INTEGER NOT NULL DEFAULT 0"),
    ("users", "is_admin", "BOOLEAN NOT NULL DEFAULT FALSE"),
    ("resume_submissions", "review_score", "INTEGER"),
    ("resume_submissions", "payment_status", "VARCHAR(50) DEFAULT 'pending'"),
    ("resume_submissions", "payment_amount", "NUMERIC(10, 2)"),
    ("resume_submissions", "payment_method", "VARCHAR(50)"),
    ("resume_submissions", "transaction_id", "VARCHAR(255)"),
    ("resume_submissions", "contact_email", "VARCHAR(255)"),
    ("resume_submissions", "contact_phone", "VARCHAR(50)"),
    ("resume_submissions", "special_requests", "TEXT"),
    ("resume_submissions", "expert_id", "VARCHAR(36)"),
    ("resume_submissions", "assigned_at", "TIMESTAMP WITH TIME ZONE"),
]

INDEXES = [
    ("idx_submissions_payment_status",
     "CREATE INDEX IF NOT EXISTS idx_submissions_payment_status ON resume_submissions(payment_status)"),
    ("idx_submissions_expert_id",
     "CREATE INDEX IF NOT EXISTS idx_submissions_expert_id ON resume_submissions(expert_id)"),
    ("uq_submissions_paid_transaction",
     "CREATE UNIQUE INDEX IF NOT EXISTS uq_submissions_paid_transaction "
     "ON resume_submissions(transaction_id) WHERE payment_status = 'paid'"),
]


def column_exists(conn, table_name: str, column_name: str) -> bool:
    """Check if a column exists in a table"""
    return any(c["name"] == column_name for c in inspect(conn).get_columns(table_name))


def table_exists(conn, table_name: str) -> bool:
    """Check if a table exists"""
    return inspect(conn).has_table(table_name)


def uses_integer_ids(conn) -> bool:
    """True for the Express schema, whose primary keys are SERIAL integers"""
    for table in ("users", "resumes", "resume_submissions"):
        for column in inspect(conn).get_columns(table):
            if column["name"] == "id" and isinstance(column["type"], Integer):
                return True
    return False


def upgrade(engine):
    """Apply migration"""
    from resume_builder.models import Expert

    logger.info("Running migration: 001_add_completion_and_payment")

    try:
        with engine.connect() as conn:
            if uses_integer_ids(conn):
                raise RuntimeError(
                    "Database uses integer ids; export the data and load it into a fresh "
                    "schema created by init_db() instead of migrating in place"
                )

            if not table_exists(conn, 'experts'):
                Expert.__table__.create(conn)
                conn.commit()
                logger.info("✓ Created experts table")
            else:
                logger.info("✓ Table experts already exists")

            for table, column, ddl in NEW_COLUMNS:
                if column_exists(conn, table, column):
                    logger.info(f"✓ Column {table}.{column} already exists")
                    continue
                conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {ddl}"))
                conn.commit()
                logger.info(f"✓ Added {table}.{column}")

            for _, ddl in INDEXES:
                conn.execute(text(ddl))
            conn.commit()

            logger.info("✅ Migration completed successfully!")
            return True

    except Exception as e:
        logger.error(f"❌ Migration failed: {e}")
        raise


def downgrade(engine):
    """Rollback migration"""
    from resume_builder.models import Expert

    logger.info("Rolling back migration: 001_add_completion_and_payment")

    try:
        with engine.connect() as conn:
            for name, _ in reversed(INDEXES):
                conn.execute(text(f"DROP INDEX IF EXISTS {name}"))
            conn.commit()

            for table, column, _ in reversed(NEW_COLUMNS):
                if column_exists(conn, table, column):
                    conn.execute(text(f"ALTER TABLE {table} DROP COLUMN {column}"))
                    conn.commit()
                    logger.info(f"✓ Removed {table}.{column}")

            if table_exists(conn, 'experts'):
                Expert.__table__.drop(conn)
                conn.commit()
                logger.info("✓ Dropped experts table")

            logger.info("✅ Rollback completed successfully!")
            return True

    except Exception as e:
        logger.error(f"❌ Rollback failed: {e}")
        raise


if __name__ == "__main__":
    """Run migration directly"""
    import sys
    from resume_builder.database import engine

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1 and sys.argv[1] == "downgrade":
        downgrade(engine)
    else:
        upgrade(engine)
