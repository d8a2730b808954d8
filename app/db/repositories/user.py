"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.enums import UserRole
from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_ids(self, user_ids: list[int]) -> list[User]:
        """
        Get every user whose id is in *user_ids*.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Matching users ordered by name; empty list for empty input
        """
        if not user_ids:
            return []
        statement = select(User).where(User.id.in_(set(user_ids))).order_by(User.name, User.id)
        return list(self.session.exec(statement).all())

    def get_by_school_and_role(self, school_id: int, role: UserRole) -> list[User]:
        """
        Get users of a school with the given role, ordered by name.

        Args:
            school_id: School ID
            role: Role filter

        Returns:
            List of users
        """
        statement = (select(User).where(User.school_id == school_id, User.role == role)
                     .order_by(User.name, User.id))
        return list(self.session.exec(statement).all())

    def update(self, user: User) -> User:
        """
        Update an existing user.

        Args:
            user: User instance with updated data

        Returns:
            Updated user
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None
