"""Tests for school search, creation and joining."""

import pytest
from fastapi import HTTPException

from app.schemas.school import SchoolCreate
from app.services.school_service import SEARCH_LIMIT, SchoolService


class TestSearch:
    def test_short_term_returns_nothing(self, session, school):
        assert SchoolService(session).search("In") == []

    def test_by_name_case_insensitive(self, session, school):
        assert [s.id for s in SchoolService(session).search("central")] == [school.id]

    def test_by_invite_code(self, session, school):
        assert [s.id for s in SchoolService(session).search("abc123")] == [school.id]

    def test_limit(self, session, make_user):
        service = SchoolService(session)
        owner = make_user("owner@schoolfit.es")
        for i in range(SEARCH_LIMIT + 2):
            service.create(owner, SchoolCreate(name=f"Colegio {i}"))
        assert len(service.search("Colegio")) == SEARCH_LIMIT


class TestCreateAndJoin:
    def test_create_makes_admin(self, session, make_user):
        user = make_user("founder@schoolfit.es")
        school = SchoolService(session).create(user, SchoolCreate(name="  Nuevo  ", location=" "))

        assert school.name == "Nuevo"
        assert school.location is None
        assert len(school.invite_code) == 6
        assert user.school_id == school.id
        assert user.is_admin is True

    def test_join_by_id(self, session, make_user, school):
        user = SchoolService(session).join(make_user("new@schoolfit.es"), school.id)
        assert user.school_id == school.id
        assert user.is_admin is False

    def test_join_unknown(self, session, make_user):
        with pytest.raises(HTTPException) as exc:
            SchoolService(session).join(make_user("new@schoolfit.es"), 999)
        assert exc.value.status_code == 404

    def test_join_by_code_case_insensitive(self, session, make_user, school):
        user = SchoolService(session).join_by_code(make_user("new@schoolfit.es"), "abc123")
        assert user.school_id == school.id

    def test_join_by_wrong_code(self, session, make_user, school):
        with pytest.raises(HTTPException) as exc:
            SchoolService(session).join_by_code(make_user("new@schoolfit.es"), "ZZZZZZ")
        assert exc.value.status_code == 404
