"""Business logic services."""

from app.services.user_service import UserService
from app.services.school_service import SchoolService
from app.services.training_session_service import TrainingSessionService
from app.services.group_service import GroupService
from app.services.stats_service import StatsService

__all__ = [
    "UserService",
    "SchoolService",
    "TrainingSessionService",
    "GroupService",
    "StatsService",
]
