"""
Training session repository.

Handles database operations for :class:`TrainingSession`.  The
statistics endpoints load whole result sets through these selects and
aggregate them in memory.
"""

import datetime
from typing import Optional

from sqlalchemy import update
from sqlmodel import Session, col, select

from app.models.training_session import TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_by_student_and_date(self, student_id: int, date: datetime.date, ) -> Optional[TrainingSession]:
        statement = select(TrainingSession).where(TrainingSession.student_id == student_id,
                                                  TrainingSession.date == date, ).limit(1)
        return self.session.exec(statement).first()

    def get_by_student_date_range(self, student_id: int, start: datetime.date,
                                  end: datetime.date, ) -> list[TrainingSession]:
        statement = (select(TrainingSession).where(TrainingSession.student_id == student_id,
                                                   TrainingSession.date >= start,
                                                   TrainingSession.date <= end, ).order_by(TrainingSession.date))
        return list(self.session.exec(statement).all())

    def get_all_by_student(self, student_id: int) -> list[TrainingSession]:
        """Every session of a student, newest first."""
        statement = (select(TrainingSession).where(TrainingSession.student_id == student_id)
                     .order_by(TrainingSession.date.desc()))
        return list(self.session.exec(statement).all())

    def get_by_group(self, group_id: int, since: Optional[datetime.date] = None, ) -> list[TrainingSession]:
        """Every session logged under a group, newest first, optionally from *since* on."""
        statement = select(TrainingSession).where(TrainingSession.group_id == group_id)
        if since is not None:
            statement = statement.where(TrainingSession.date >= since)
        statement = statement.order_by(TrainingSession.date.desc(), TrainingSession.id.desc())
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def move_student_sessions(self, student_id: int, from_group_ids: list[int], to_group_id: Optional[int],
                              commit: bool = True, ) -> None:
        """Re-home the student's sessions logged under any of *from_group_ids*."""
        if not from_group_ids:
            return
        statement = (update(TrainingSession).where(col(TrainingSession.student_id) == student_id,
                                                   col(TrainingSession.group_id).in_(from_group_ids), )
                     .values(group_id=to_group_id))
        self.session.execute(statement)
        if commit:
            self.session.commit()
