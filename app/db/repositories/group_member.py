"""
Group membership repository.
"""

from typing import Optional

from sqlalchemy import delete
from sqlmodel import Session, col, select

from app.models.group import GroupMember


class GroupMemberRepository:
    """Repository for GroupMember database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, member: GroupMember) -> GroupMember:
        self.session.add(member)
        self.session.commit()
        self.session.refresh(member)
        return member

    def get_student_ids(self, group_id: int) -> list[int]:
        """Distinct student ids of a group, in join order."""
        statement = (select(GroupMember.student_id).where(GroupMember.group_id == group_id)
                     .order_by(GroupMember.joined_at, GroupMember.id))
        return list(dict.fromkeys(self.session.exec(statement).all()))

    def get_first_group_id(self, student_id: int) -> Optional[int]:
        """Group the student joined first, or ``None``."""
        statement = (select(GroupMember.group_id).where(GroupMember.student_id == student_id)
                     .order_by(GroupMember.joined_at, GroupMember.id).limit(1))
        return self.session.exec(statement).first()

    def get_by_groups_and_students(self, group_ids: list[int], student_ids: list[int], ) -> list[GroupMember]:
        if not group_ids or not student_ids:
            return []
        statement = select(GroupMember).where(col(GroupMember.group_id).in_(group_ids),
                                              col(GroupMember.student_id).in_(student_ids), )
        return list(self.session.exec(statement).all())

    def delete_student_from_groups(self, student_id: int, group_ids: list[int], commit: bool = True) -> None:
        """Remove the student's memberships in any of *group_ids*."""
        if not group_ids:
            return
        statement = delete(GroupMember).where(GroupMember.student_id == student_id,
                                              col(GroupMember.group_id).in_(group_ids), )
        self.session.execute(statement)
        if commit:
            self.session.commit()
