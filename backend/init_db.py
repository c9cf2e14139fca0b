from database import engine, Base, DATABASE_URL
from sqlalchemy import inspect
import logging

import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)

REQUIRED_TABLES = (
    'users',
    'email_categories',
    'email_contents',
    'forms',
    'form_sections',
    'form_fields',
    'form_submissions',
)


def missing_tables(bind=engine) -> list[str]:
    """Tables the application needs that do not exist yet"""
    existing = set(inspect(bind).get_table_names())
    return [table for table in REQUIRED_TABLES if table not in existing]


def init_database(bind=engine):
    """Create all tables that do not exist yet"""
    missing = missing_tables(bind)
    Base.metadata.create_all(bind=bind)

    if missing:
        logger.info(f"Created table(s): {', '.join(missing)}")
    else:
        logger.debug("Database schema is up to date")
    logger.info(f"✅ Database initialized ({bind.url.render_as_string(hide_password=True)})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
    print(f"✅ Database initialized: {DATABASE_URL.split('@')[-1]}")
