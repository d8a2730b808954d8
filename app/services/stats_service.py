"""
Statistics service.

Fetches the rows a statistics view needs, then hands them to the pure
functions of :mod:`app.stats`.  Group views load the whole group
session table in one select.
"""

from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

import app.activities  # noqa: F401
from app.activities.registry import ActivityRegistry
from app.core.config import settings
from app.db.repositories.group_member import GroupMemberRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.repositories.user import UserRepository
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.stats import ActivityResponse, GroupTotalsResponse, StudentRewardsResponse, StudentSummary
from app.services.group_service import GroupService
from app.stats.aggregation import compute_session_totals, compute_stats_by_student, compute_top_activities
from app.stats.rewards import RewardsConfig, evaluate_student_rewards


class StatsService:
    """Service for statistics views."""

    def __init__(self, session: Session, config: Optional[RewardsConfig] = None):
        self.groups = GroupService(session)
        self.member_repo = GroupMemberRepository(session)
        self.user_repo = UserRepository(session)
        self.session_repo = TrainingSessionRepository(session)
        self.config = config or RewardsConfig.from_settings(settings)

    def group_totals(self, teacher: User, group_id: int) -> GroupTotalsResponse:
        """Per-student stats, top activities and headline totals of a group."""
        group = self.groups.get_school_group(teacher, group_id)

        member_ids = self.member_repo.get_student_ids(group.id)
        students = self.user_repo.get_by_ids(member_ids)
        sessions = self.session_repo.get_by_group(group.id)

        return GroupTotalsResponse(group_id=group.id, group_name=group.name,
                                   students=[StudentSummary.model_validate(s) for s in students],
                                   stats_by_student=compute_stats_by_student(sessions),
                                   top_activities=compute_top_activities(sessions),
                                   totals=compute_session_totals(sessions, member_count=len(member_ids)), )

    def student_rewards(self, viewer: User, student_id: Optional[int] = None) -> StudentRewardsResponse:
        """Rewards of *student_id* (the viewer when ``None``).

        Students only see their own rewards; teachers see students of their school.
        """
        target_id = student_id if student_id is not None else viewer.id
        if target_id != viewer.id:
            self._check_can_view(viewer, target_id)

        rewards = evaluate_student_rewards(self.session_repo.get_all_by_student(target_id), self.config)
        return StudentRewardsResponse(student_id=target_id, **rewards.model_dump())

    @staticmethod
    def activities() -> list[ActivityResponse]:
        return [ActivityResponse(activity_id=a.activity_id, display_name=a.display_name)
                for a in ActivityRegistry.all()]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_can_view(self, viewer: User, student_id: int) -> None:
        if not viewer.is_teacher:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                detail="Students can only view their own rewards")
        student = self.user_repo.get_by_id(student_id)
        if not student or student.role != UserRole.STUDENT or viewer.school_id is None \
                or student.school_id != viewer.school_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
