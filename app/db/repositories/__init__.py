"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.school import SchoolRepository
from app.db.repositories.group import GroupRepository
from app.db.repositories.group_member import GroupMemberRepository
from app.db.repositories.training_session import TrainingSessionRepository

__all__ = [
    "UserRepository",
    "SchoolRepository",
    "GroupRepository",
    "GroupMemberRepository",
    "TrainingSessionRepository",
]
