"""
Group service.

Teachers create groups in their school and move students between them.
A student belongs to at most one group of a school: assigning removes
every other membership in that school and re-files the student's
sessions under the new group (or under no group).
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.db.repositories.group import GroupRepository
from app.db.repositories.group_member import GroupMemberRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.repositories.user import UserRepository
from app.models.enums import UserRole
from app.models.group import Group, GroupMember
from app.models.user import User
from app.schemas.group import GroupCreate, GroupSessionsResponse, SchoolStudentResponse
from app.schemas.stats import StudentSummary
from app.schemas.training_session import TrainingSessionResponse
from app.services.training_session_service import TrainingSessionService

logger = get_logger(__name__)


def require_teacher(user: User) -> int:
    """Return the teacher's school id; 403 for students, 400 without a school."""
    if not user.is_teacher:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only teachers can manage groups")
    if user.school_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Join or create a school first")
    return user.school_id


class GroupService:
    """Service for group business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = GroupRepository(session)
        self.member_repo = GroupMemberRepository(session)
        self.user_repo = UserRepository(session)
        self.session_repo = TrainingSessionRepository(session)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def create_group(self, teacher: User, data: GroupCreate) -> Group:
        school_id = require_teacher(teacher)
        group = self.repository.create(Group(name=data.name, teacher_id=teacher.id, school_id=school_id))
        logger.info("Group created", extra={ "group_id": group.id, "teacher_id": teacher.id })
        return group

    def list_my_groups(self, teacher: User) -> list[Group]:
        require_teacher(teacher)
        return self.repository.get_by_teacher(teacher.id)

    def list_school_groups(self, user: User) -> list[Group]:
        if user.school_id is None:
            return []
        return self.repository.get_by_school(user.school_id)

    def get_school_group(self, teacher: User, group_id: int) -> Group:
        """Group of the teacher's school; 404 otherwise."""
        school_id = require_teacher(teacher)
        group = self.repository.get_by_id(group_id)
        if not group or group.school_id != school_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
        return group

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def get_members(self, teacher: User, group_id: int) -> list[User]:
        group = self.get_school_group(teacher, group_id)
        return self.user_repo.get_by_ids(self.member_repo.get_student_ids(group.id))

    def list_school_students(self, teacher: User, group_id: Optional[int] = None) -> list[SchoolStudentResponse]:
        """Students of the teacher's school with their group, optionally filtered by group."""
        school_id = require_teacher(teacher)
        students = self.user_repo.get_by_school_and_role(school_id, UserRole.STUDENT)
        group_ids = self.repository.get_ids_by_school(school_id)

        membership: dict[int, int] = {}
        for m in self.member_repo.get_by_groups_and_students(group_ids, [s.id for s in students]):
            membership.setdefault(m.student_id, m.group_id)

        rows = [SchoolStudentResponse(id=s.id, name=s.name, email=s.email, group_id=membership.get(s.id))
                for s in students]
        if group_id is not None:
            rows = [r for r in rows if r.group_id == group_id]
        return rows

    def assign_student(self, teacher: User, student_id: int, group_id: Optional[int]) -> SchoolStudentResponse:
        """Move a student to *group_id*, or out of every school group when ``None``."""
        school_id = require_teacher(teacher)

        student = self.user_repo.get_by_id(student_id)
        if not student or student.role != UserRole.STUDENT or student.school_id != school_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")

        if group_id is not None:
            self.get_school_group(teacher, group_id)

        school_group_ids = self.repository.get_ids_by_school(school_id)

        # Single transaction: memberships and sessions move together.
        try:
            self.member_repo.delete_student_from_groups(student.id, school_group_ids, commit=False)
            if group_id is not None:
                self.session.add(GroupMember(group_id=group_id, student_id=student.id,
                                             joined_at=datetime.datetime.utcnow()))
            self.session_repo.move_student_sessions(student.id, school_group_ids, group_id, commit=False)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("Student assignment failed", extra={ "student_id": student.id, "group_id": group_id })
            raise

        logger.info("Student assigned", extra={ "student_id": student.id, "group_id": group_id,
                                                "teacher_id": teacher.id })
        return SchoolStudentResponse(id=student.id, name=student.name, email=student.email, group_id=group_id)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def recent_sessions(self, teacher: User, group_id: int, days: Optional[int] = None) -> GroupSessionsResponse:
        """Group sessions of the last *days* days, newest first, and the latest per student."""
        group = self.get_school_group(teacher, group_id)
        window = days if days is not None else settings.RECENT_SESSIONS_DAYS
        since = datetime.date.today() - datetime.timedelta(days=window)

        students = self.user_repo.get_by_ids(self.member_repo.get_student_ids(group.id))
        entries = self.session_repo.get_by_group(group.id, since=since)
        sessions = [TrainingSessionService.to_response(e) for e in entries]

        latest: dict[int, TrainingSessionResponse] = {}
        for s in sessions:
            latest.setdefault(s.student_id, s)

        return GroupSessionsResponse(group_id=group.id, since=since,
                                     students=[StudentSummary.model_validate(s) for s in students],
                                     sessions=sessions, latest_by_student=latest, )
