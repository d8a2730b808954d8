"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.school import School  # noqa: F401
from app.models.group import Group, GroupMember  # noqa: F401
from app.models.training_session import TrainingSession  # noqa: F401
