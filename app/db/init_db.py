"""
Database initialization.

Creates all tables.  Production deployments use Alembic migrations.
"""

from sqlmodel import SQLModel

from app.core.logging import get_logger
from app.db.session import engine

logger = get_logger(__name__)


def init_db() -> None:
    """Create every SQLModel table that does not exist yet."""
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
