"""
Training session service.

One session per student per day: logging a day that already has a
session replaces it.  The session is filed under the student's first
group (if any) so that group statistics pick it up.
"""

import calendar
import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

import app.activities  # noqa: F401
from app.activities.registry import ActivityRegistry
from app.core.logging import get_logger
from app.db.repositories.group_member import GroupMemberRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.models.training_session import TrainingSession
from app.schemas.training_session import TrainingSessionCreate, TrainingSessionResponse

logger = get_logger(__name__)


def month_bounds(day: datetime.date) -> tuple[datetime.date, datetime.date]:
    """First and last day of the month containing *day*."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


class TrainingSessionService:
    """Service for training session business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingSessionRepository(session)
        self.member_repo = GroupMemberRepository(session)

    def upsert(self, student_id: int, date: datetime.date,
               data: TrainingSessionCreate, ) -> tuple[TrainingSessionResponse, bool]:
        """Create or replace the session of *date*.

        Returns:
            Tuple of (response, created) where created is True for a new entry.
        """
        if ActivityRegistry.get(data.activity_type) is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=(f"Unknown activity: '{data.activity_type}'. "
                                        f"Available: {ActivityRegistry.available_activity_ids()}"), )

        group_id = self.member_repo.get_first_group_id(student_id)
        existing = self.repository.get_by_student_and_date(student_id, date)

        if existing:
            existing.group_id = group_id
            existing.activity_type = data.activity_type
            existing.duration = data.duration
            existing.intensity = data.intensity
            existing.notes = data.notes
            existing.updated_at = datetime.datetime.utcnow()
            entry = self.repository.update(existing)
            logger.info("Training session updated", extra={ "student_id": student_id, "date": str(date) })
            return self.to_response(entry), False

        entry = TrainingSession(student_id=student_id, group_id=group_id, date=date,
                                activity_type=data.activity_type, duration=data.duration,
                                intensity=data.intensity, notes=data.notes, )
        entry = self.repository.create(entry)
        logger.info("Training session logged", extra={ "student_id": student_id, "date": str(date) })
        return self.to_response(entry), True

    def get_by_date(self, student_id: int, date: datetime.date) -> TrainingSessionResponse:
        return self.to_response(self._get_day_entry(student_id, date))

    def get_range(self, student_id: int, start: Optional[datetime.date] = None,
                  end: Optional[datetime.date] = None, ) -> list[TrainingSessionResponse]:
        """Sessions in ``[start, end]``; the current month when either bound is missing."""
        if start is None or end is None:
            start, end = month_bounds(datetime.date.today())
        if start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        entries = self.repository.get_by_student_date_range(student_id, start, end)
        return [self.to_response(e) for e in entries]

    def delete_by_date(self, student_id: int, date: datetime.date) -> None:
        entry = self._get_day_entry(student_id, date)
        self.repository.delete(entry.id)
        logger.info("Training session deleted", extra={ "student_id": student_id, "date": str(date) })

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_day_entry(self, student_id: int, date: datetime.date) -> TrainingSession:
        entry = self.repository.get_by_student_and_date(student_id, date)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No training session for {date}", )
        return entry

    @staticmethod
    def to_response(entry: TrainingSession) -> TrainingSessionResponse:
        return TrainingSessionResponse(id=entry.id, student_id=entry.student_id, group_id=entry.group_id,
                                       date=entry.date, activity_type=entry.activity_type,
                                       activity_display_name=ActivityRegistry.display_name(entry.activity_type),
                                       duration=entry.duration, intensity=entry.intensity, notes=entry.notes,
                                       created_at=entry.created_at, updated_at=entry.updated_at, )
