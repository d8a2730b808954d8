"""
Group and group membership database models.

A group is a teacher-defined roster of students inside one school.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Group(SQLModel, table=True):
    """A teacher's group of students."""

    __tablename__ = "groups"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    teacher_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    school_id: int = Field(foreign_key="schools.id", nullable=False, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class GroupMember(SQLModel, table=True):
    """Membership of a student in a group.  One row per (group, student)."""

    __tablename__ = "group_members"
    __table_args__ = (UniqueConstraint("group_id", "student_id", name="uq_group_member"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    group_id: int = Field(foreign_key="groups.id", nullable=False, index=True)
    student_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    joined_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
