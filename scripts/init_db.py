"""
Database initialization script.

Creates every table directly from the models.  Use ``alembic upgrade head``
for databases that are managed by migrations.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger, setup_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logging()
    logger = get_logger("init_db")

    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error("Database initialization failed", extra={ "error": str(e) })
        sys.exit(1)

    logger.info("Database initialized")
    sys.exit(0)
