"""Tests for group management and student reassignment."""

import datetime

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from app.models.enums import UserRole
from app.models.school import School
from app.schemas.group import GroupCreate
from app.schemas.training_session import TrainingSessionCreate
from app.services.group_service import GroupService
from app.services.training_session_service import TrainingSessionService


@pytest.fixture
def groups(session, teacher):
    service = GroupService(session)
    return (service.create_group(teacher, GroupCreate(name="1A")),
            service.create_group(teacher, GroupCreate(name="1B")))


class TestGroups:
    def test_student_cannot_create(self, session, student):
        with pytest.raises(HTTPException) as exc:
            GroupService(session).create_group(student, GroupCreate(name="x"))
        assert exc.value.status_code == 403

    def test_teacher_without_school(self, session, make_user):
        lonely = make_user("solo@schoolfit.es", role=UserRole.TEACHER)
        with pytest.raises(HTTPException) as exc:
            GroupService(session).create_group(lonely, GroupCreate(name="x"))
        assert exc.value.status_code == 400

    def test_roles(self, teacher, student):
        assert teacher.is_teacher
        assert not student.is_teacher

    def test_lists(self, session, teacher, student, groups):
        service = GroupService(session)
        assert {g.name for g in service.list_my_groups(teacher)} == { "1A", "1B" }
        assert [g.name for g in service.list_school_groups(student)] == ["1A", "1B"]

    def test_group_of_other_school_not_found(self, session, make_user, groups):
        other_school = School(name="Otro", invite_code="XYZ789")
        session.add(other_school)
        session.commit()
        other_teacher = make_user("other@schoolfit.es", role=UserRole.TEACHER, school=other_school)
        with pytest.raises(HTTPException) as exc:
            GroupService(session).get_school_group(other_teacher, groups[0].id)
        assert exc.value.status_code == 404


class TestAssignStudent:
    def test_assign_and_move(self, session, teacher, student, groups):
        group_a, group_b = groups
        service = GroupService(session)

        service.assign_student(teacher, student.id, group_a.id)
        entry, _ = TrainingSessionService(session).upsert(student.id, datetime.date.today(),
                                                           TrainingSessionCreate(activity_type="gym"))
        assert entry.group_id == group_a.id

        moved = service.assign_student(teacher, student.id, group_b.id)
        assert moved.group_id == group_b.id
        assert [s.id for s in service.get_members(teacher, group_a.id)] == []
        assert [s.id for s in service.get_members(teacher, group_b.id)] == [student.id]

        recent = service.recent_sessions(teacher, group_b.id)
        assert [s.id for s in recent.sessions] == [entry.id]
        assert recent.latest_by_student[student.id].id == entry.id

    def test_failed_commit_rolls_back(self, session, teacher, student, groups, monkeypatch):
        group_a, group_b = groups
        service = GroupService(session)
        service.assign_student(teacher, student.id, group_a.id)

        def _fail():
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(session, "commit", _fail)
        with pytest.raises(OperationalError):
            service.assign_student(teacher, student.id, group_b.id)
        monkeypatch.undo()

        assert [s.id for s in service.get_members(teacher, group_a.id)] == [student.id]
        assert service.get_members(teacher, group_b.id) == []

    def test_unassign(self, session, teacher, student, groups):
        service = GroupService(session)
        service.assign_student(teacher, student.id, groups[0].id)
        service.assign_student(teacher, student.id, None)

        rows = service.list_school_students(teacher)
        assert [(r.id, r.group_id) for r in rows] == [(student.id, None)]

    def test_filter_by_group(self, session, teacher, student, make_user, school, groups):
        other = make_user("luis@schoolfit.es", school=school)
        service = GroupService(session)
        service.assign_student(teacher, student.id, groups[0].id)
        service.assign_student(teacher, other.id, groups[1].id)

        assert [r.id for r in service.list_school_students(teacher, groups[1].id)] == [other.id]

    def test_student_of_other_school(self, session, teacher, make_user, groups):
        outsider = make_user("out@schoolfit.es")
        with pytest.raises(HTTPException) as exc:
            GroupService(session).assign_student(teacher, outsider.id, groups[0].id)
        assert exc.value.status_code == 404

    def test_recent_sessions_window(self, session, teacher, student, groups):
        service = GroupService(session)
        service.assign_student(teacher, student.id, groups[0].id)
        sessions = TrainingSessionService(session)
        today = datetime.date.today()
        sessions.upsert(student.id, today, TrainingSessionCreate(activity_type="gym"))
        sessions.upsert(student.id, today - datetime.timedelta(days=90), TrainingSessionCreate(activity_type="yoga"))

        recent = service.recent_sessions(teacher, groups[0].id)
        assert [s.date for s in recent.sessions] == [today]
        assert len(service.recent_sessions(teacher, groups[0].id, days=120).sessions) == 2
