"""End-to-end API flows through the FastAPI test client."""

import datetime

from app.models.enums import UserRole

API = "/api/v1"


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert "X-Request-ID" in resp.headers


class TestAuth:
    def test_register_login_me(self, client):
        resp = client.post(f"{API}/auth/register",
                           json={ "email": "new@schoolfit.es", "password": "password123", "name": "New",
                                  "role": "teacher" })
        assert resp.status_code == 201, resp.text
        assert resp.json()["role"] == "teacher"
        assert resp.json()["school_id"] is None

        resp = client.post(f"{API}/auth/token", json={ "email": "new@schoolfit.es", "password": "password123" })
        assert resp.status_code == 200
        token = resp.json()["access_token"]

        resp = client.get(f"{API}/auth/me", headers={ "Authorization": f"Bearer {token}" })
        assert resp.json()["email"] == "new@schoolfit.es"

    def test_form_login(self, client, student):
        resp = client.post(f"{API}/auth/login", data={ "username": student.email, "password": "password123" })
        assert resp.status_code == 200
        assert resp.json()["token_type"] == "bearer"

    def test_duplicate_email(self, client, student):
        resp = client.post(f"{API}/auth/register", json={ "email": student.email, "password": "password123" })
        assert resp.status_code == 400

    def test_wrong_password(self, client, student):
        resp = client.post(f"{API}/auth/token", json={ "email": student.email, "password": "nope-nope" })
        assert resp.status_code == 401

    def test_missing_token(self, client):
        assert client.get(f"{API}/auth/me").status_code == 401

    def test_invalid_token(self, client):
        assert client.get(f"{API}/auth/me", headers={ "Authorization": "Bearer garbage" }).status_code == 401


class TestSchools:
    def test_create_and_join_by_code(self, client, auth_headers, make_user):
        founder = make_user("founder@schoolfit.es", role=UserRole.TEACHER)
        resp = client.post(f"{API}/schools", json={ "name": "IES Norte" }, headers=auth_headers(founder))
        assert resp.status_code == 201
        school_id, code = resp.json()["id"], resp.json()["invite_code"]

        joiner = make_user("joiner@schoolfit.es")
        resp = client.post(f"{API}/schools/join", json={ "invite_code": code }, headers=auth_headers(joiner))
        assert resp.status_code == 200
        assert resp.json()["school_id"] == school_id

    def test_search(self, client, auth_headers, student, school):
        resp = client.get(f"{API}/schools", params={ "q": "Central" }, headers=auth_headers(student))
        assert [s["id"] for s in resp.json()] == [school.id]


class TestTrainingSessions:
    def test_put_get_delete(self, client, auth_headers, student):
        headers = auth_headers(student)
        day = "2026-03-14"
        body = { "activity_type": "swimming", "duration": 40, "intensity": 5, "notes": "  " }

        resp = client.put(f"{API}/training/sessions/{day}", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        assert resp.json()["notes"] is None

        resp = client.put(f"{API}/training/sessions/{day}", json={ **body, "duration": 45 }, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["duration"] == 45

        resp = client.get(f"{API}/training/sessions", params={ "start": "2026-03-01", "end": "2026-03-31" },
                          headers=headers)
        assert len(resp.json()) == 1

        assert client.delete(f"{API}/training/sessions/{day}", headers=headers).status_code == 204
        assert client.get(f"{API}/training/sessions/{day}", headers=headers).status_code == 404

    def test_validation(self, client, auth_headers, student):
        resp = client.put(f"{API}/training/sessions/2026-03-14",
                          json={ "activity_type": "running", "intensity": 9 }, headers=auth_headers(student))
        assert resp.status_code == 422

    def test_unknown_activity(self, client, auth_headers, student):
        resp = client.put(f"{API}/training/sessions/2026-03-14", json={ "activity_type": "parkour" },
                          headers=auth_headers(student))
        assert resp.status_code == 400


class TestGroupStats:
    def test_teacher_group_view(self, client, auth_headers, teacher, student, make_user, school):
        other = make_user("luis@schoolfit.es", school=school, name="Luis")
        teacher_headers = auth_headers(teacher)

        resp = client.post(f"{API}/groups", json={ "name": "1A" }, headers=teacher_headers)
        assert resp.status_code == 201
        group_id = resp.json()["id"]

        for member in (student, other):
            resp = client.put(f"{API}/groups/students/{member.id}", json={ "group_id": group_id },
                              headers=teacher_headers)
            assert resp.status_code == 200

        today = datetime.date.today()
        logs = [
            (student, 0, "football", 60, 4),
            (student, 1, "running", 30, 5),
            (other, 0, "football", 30, 3),
        ]
        for user, back, activity, minutes, intensity in logs:
            day = (today - datetime.timedelta(days=back)).isoformat()
            resp = client.put(f"{API}/training/sessions/{day}",
                              json={ "activity_type": activity, "duration": minutes, "intensity": intensity },
                              headers=auth_headers(user))
            assert resp.status_code == 201

        resp = client.get(f"{API}/stats/groups/{group_id}", headers=teacher_headers)
        assert resp.status_code == 200
        data = resp.json()
        assert data["stats_by_student"][str(student.id)] == { "total_minutes": 90, "sessions": 2,
                                                               "avg_enjoyment": 4.5 }
        assert data["top_activities"][0]["activity"] == "football"
        assert data["totals"]["sessions"] == 3
        assert [s["name"] for s in data["students"]] == ["Ana", "Luis"]

        resp = client.get(f"{API}/groups/{group_id}/sessions", headers=teacher_headers)
        assert len(resp.json()["sessions"]) == 3

    def test_student_cannot_view_group(self, client, auth_headers, student):
        assert client.get(f"{API}/stats/groups/1", headers=auth_headers(student)).status_code == 403


class TestRewards:
    def test_own_rewards(self, client, auth_headers, student):
        headers = auth_headers(student)
        client.put(f"{API}/training/sessions/2026-03-14", json={ "activity_type": "football", "duration": 260 },
                   headers=headers)

        data = client.get(f"{API}/stats/rewards", headers=headers).json()
        assert data["student_id"] == student.id
        assert data["rewards"]["achieved_thresholds"] == [100, 250]
        assert data["rewards"]["next_threshold"] == 500
        team = next(b for b in data["badges"] if b["category"] == "team")
        assert team["completed_types"] == ["football"]

    def test_teacher_views_student(self, client, auth_headers, teacher, student):
        resp = client.get(f"{API}/stats/rewards/{student.id}", headers=auth_headers(teacher))
        assert resp.status_code == 200

    def test_student_cannot_view_other(self, client, auth_headers, student, teacher):
        resp = client.get(f"{API}/stats/rewards/{teacher.id}", headers=auth_headers(student))
        assert resp.status_code == 403

    def test_activities(self, client, auth_headers, student):
        resp = client.get(f"{API}/stats/activities", headers=auth_headers(student))
        assert { "activity_id": "bikeSports", "display_name": "Bike Sports" } in resp.json()
