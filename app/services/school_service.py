"""
School service.

Searching, creating and joining schools.  Creating a school links the
creator to it and makes them its admin.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.logging import get_logger
from app.core.security import generate_invite_code
from app.db.repositories.school import SchoolRepository
from app.db.repositories.user import UserRepository
from app.models.school import School
from app.models.user import User
from app.schemas.school import SchoolCreate

logger = get_logger(__name__)

# Shorter search terms return nothing
MIN_SEARCH_LENGTH = 3
SEARCH_LIMIT = 10
_INVITE_CODE_ATTEMPTS = 10


class SchoolService:
    """Service for school business logic."""

    def __init__(self, session: Session):
        self.repository = SchoolRepository(session)
        self.user_repo = UserRepository(session)

    def search(self, term: str) -> list[School]:
        term = term.strip()
        if len(term) < MIN_SEARCH_LENGTH:
            return []
        return self.repository.search(term, limit=SEARCH_LIMIT)

    def create(self, user: User, data: SchoolCreate) -> School:
        school = School(name=data.name, location=data.location, invite_code=self._new_invite_code())
        school = self.repository.create(school)

        user.school_id = school.id
        user.is_admin = True
        user.updated_at = datetime.datetime.utcnow()
        self.user_repo.update(user)

        logger.info("School created", extra={ "school_id": school.id, "user_id": user.id })
        return school

    def join(self, user: User, school_id: int) -> User:
        school = self.repository.get_by_id(school_id)
        if not school:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School not found")
        return self._link(user, school)

    def join_by_code(self, user: User, invite_code: str) -> User:
        school = self.repository.get_by_invite_code(invite_code.strip())
        if not school:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No school with this invite code")
        return self._link(user, school)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _link(self, user: User, school: School) -> User:
        user.school_id = school.id
        user.updated_at = datetime.datetime.utcnow()
        user = self.user_repo.update(user)
        logger.info("User joined school", extra={ "school_id": school.id, "user_id": user.id })
        return user

    def _new_invite_code(self) -> str:
        for _ in range(_INVITE_CODE_ATTEMPTS):
            code = generate_invite_code()
            if not self.repository.invite_code_exists(code):
                return code
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Could not allocate an invite code, retry")
