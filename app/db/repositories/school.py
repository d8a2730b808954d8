"""
School repository.
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, col, select

from app.models.school import School


class SchoolRepository:
    """Repository for School database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, school: School) -> School:
        self.session.add(school)
        self.session.commit()
        self.session.refresh(school)
        return school

    def get_by_id(self, school_id: int) -> Optional[School]:
        return self.session.get(School, school_id)

    def get_by_invite_code(self, invite_code: str) -> Optional[School]:
        statement = select(School).where(School.invite_code == invite_code.upper())
        return self.session.exec(statement).first()

    def search(self, term: str, limit: int = 10) -> list[School]:
        """Case-insensitive substring match on name or invite code."""
        pattern = f"%{term}%"
        statement = (select(School).where(or_(col(School.name).ilike(pattern),
                                              col(School.invite_code).ilike(pattern), ))
                     .order_by(School.name).limit(limit))
        return list(self.session.exec(statement).all())

    def invite_code_exists(self, invite_code: str) -> bool:
        return self.get_by_invite_code(invite_code) is not None
