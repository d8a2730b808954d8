"""
Group repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.group import Group


class GroupRepository:
    """Repository for Group database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, group: Group) -> Group:
        self.session.add(group)
        self.session.commit()
        self.session.refresh(group)
        return group

    def get_by_id(self, group_id: int) -> Optional[Group]:
        return self.session.get(Group, group_id)

    def get_by_teacher(self, teacher_id: int) -> list[Group]:
        """Teacher's groups, newest first."""
        statement = (select(Group).where(Group.teacher_id == teacher_id)
                     .order_by(Group.created_at.desc(), Group.id.desc()))
        return list(self.session.exec(statement).all())

    def get_by_school(self, school_id: int) -> list[Group]:
        """School's groups ordered by name."""
        statement = select(Group).where(Group.school_id == school_id).order_by(Group.name, Group.id)
        return list(self.session.exec(statement).all())

    def get_ids_by_school(self, school_id: int) -> list[int]:
        statement = select(Group.id).where(Group.school_id == school_id)
        return list(self.session.exec(statement).all())
