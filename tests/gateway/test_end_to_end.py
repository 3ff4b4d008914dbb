"""
End-to-end tests: gateway in front of in-process identity, student and
course services
"""

import httpx

from course_service.config import CourseSettings
from course_service.main import create_app as create_course_app
from gateway_service.main import create_app as create_gateway_app


async def register_and_login(stack, name: str, password: str = "pw") -> tuple:
    created = await stack.post("/auth/create", json={"name": name, "password": password})
    assert created.status_code == 201

    login = await stack.post("/auth/login", json={"name": name, "password": password})
    assert login.status_code == 200
    data = login.json()["data"]
    return data["user"]["id"], {"Authorization": f"Bearer {data['accessToken']}"}


class TestUserLifecycle:
    async def test_create_login_create_course_and_foreign_delete(self, stack):
        created = await stack.post("/auth/create", json={"name": "alice", "password": "pw"})
        assert created.status_code == 201
        assert created.json()["message"] == "User created successfully (via gateway)"
        alice_id = created.json()["data"]["user"]["id"]

        login = await stack.post("/auth/login", json={"name": "alice", "password": "pw"})
        assert login.status_code == 200
        token = login.json()["data"]["accessToken"]
        assert token

        course = await stack.post(
            "/courses", json={"name": "Algebra"}, headers={"Authorization": f"Bearer {token}"}
        )
        assert course.status_code == 201
        assert course.json()["data"]["course"]["createdBy"] == alice_id
        course_id = course.json()["data"]["course"]["id"]

        _, bob_headers = await register_and_login(stack, "bob")
        deleted = await stack.delete(f"/courses/{course_id}", headers=bob_headers)
        assert deleted.status_code == 404
        assert deleted.json()["error"] == "Error deleting course"

        still_there = await stack.get("/courses", headers=bob_headers)
        assert [c["id"] for c in still_there.json()["data"]] == [course_id]

    async def test_create_user_alias_route(self, stack):
        response = await stack.post("/create/user", json={"name": "carol", "password": "pw"})
        assert response.status_code == 201
        assert response.json()["data"]["user"]["name"] == "carol"

    async def test_duplicate_user(self, stack):
        await stack.post("/create/user", json={"name": "alice", "password": "pw"})
        response = await stack.post("/create/user", json={"name": "alice", "password": "pw"})

        assert response.status_code == 400
        assert response.json()["error"] == "Error creating user"
        assert response.json()["message"]["message"] == "User already exists"

    async def test_wrong_password(self, stack):
        await stack.post("/auth/create", json={"name": "alice", "password": "pw"})
        response = await stack.post("/auth/login", json={"name": "alice", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"] == "Login failed"

    async def test_missing_fields(self, stack):
        response = await stack.post("/auth/create", json={"name": "alice"})
        assert response.status_code == 400
        assert response.json()["message"]["required"] == ["name", "password"]

    async def test_overlong_password_is_a_client_error(self, stack):
        response = await stack.post("/auth/create", json={"name": "zed", "password": "p" * 100})

        assert response.status_code == 400
        assert response.json()["error"] == "Error creating user"
        assert response.json()["message"]["message"] == "Password cannot be longer than 72 bytes"

    async def test_user_route_reports_claims(self, stack):
        alice_id, headers = await register_and_login(stack, "alice")
        response = await stack.get("/user", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"]["userId"] == alice_id
        assert response.json()["data"]["users"] == 1


class TestStudents:
    async def test_listing_is_scoped_and_repeatable(self, stack):
        _, alice = await register_and_login(stack, "alice")
        _, bob = await register_and_login(stack, "bob")

        await stack.post("/students", json={"name": "Ann"}, headers=alice)
        await stack.post("/students", json={"name": "Ben"}, headers=bob)

        first = await stack.get("/students", headers=alice)
        second = await stack.get("/students", headers=alice)

        assert first.status_code == 200
        assert first.json() == second.json()
        assert [s["name"] for s in first.json()["data"]] == ["Ann"]

    async def test_update_patch_and_delete_own_student(self, stack):
        _, alice = await register_and_login(stack, "alice")
        created = await stack.post("/students", json={"name": "Ann"}, headers=alice)
        assert created.status_code == 201
        student_id = created.json()["data"]["student"]["id"]

        put = await stack.put(f"/students/{student_id}", json={"name": "Anna"}, headers=alice)
        assert put.status_code == 200
        assert put.json()["data"]["student"]["name"] == "Anna"

        patch = await stack.patch(f"/students/{student_id}", json={}, headers=alice)
        assert patch.status_code == 200
        assert patch.json()["data"]["student"]["name"] == "Anna"

        deleted = await stack.delete(f"/students/{student_id}", headers=alice)
        assert deleted.status_code == 200
        assert (await stack.get("/students", headers=alice)).json()["data"] == []

    async def test_cannot_touch_other_users_student(self, stack):
        _, alice = await register_and_login(stack, "alice")
        _, bob = await register_and_login(stack, "bob")
        created = await stack.post("/students", json={"name": "Ann"}, headers=alice)
        student_id = created.json()["data"]["student"]["id"]

        response = await stack.delete(f"/students/{student_id}", headers=bob)

        assert response.status_code == 404
        assert response.json()["error"] == "Error deleting student"

    async def test_non_numeric_id_fails_at_backend(self, stack):
        _, alice = await register_and_login(stack, "alice")
        response = await stack.put("/students/abc", json={"name": "x"}, headers=alice)

        assert response.status_code == 404
        assert response.json()["error"] == "Error updating student"


class TestEnrollment:
    async def test_duplicate_enrollment(self, stack):
        _, alice = await register_and_login(stack, "alice")
        course = await stack.post("/courses", json={"name": "Algebra"}, headers=alice)
        course_id = course.json()["data"]["course"]["id"]

        first = await stack.post(f"/courses/enroll/{course_id}", json={"studentId": 7}, headers=alice)
        second = await stack.post(f"/courses/enroll/{course_id}", json={"studentId": 7}, headers=alice)

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json()["error"] == "Error enrolling student in course"

        roster = await stack.get(f"/courses/students/{course_id}", headers=alice)
        assert roster.status_code == 200
        assert roster.json()["data"]["studentsEnrolled"] == [7]

    async def test_enroll_in_unknown_course(self, stack):
        _, alice = await register_and_login(stack, "alice")
        response = await stack.post("/courses/enroll/99", json={"studentId": 1}, headers=alice)
        assert response.status_code == 404


class TestSharedSecret:
    async def test_backend_rejects_token_the_gateway_accepts(self, gateway_settings, token_factory):
        """Backends re-verify: a mismatched secret fails there, not at the gateway"""
        mismatched = create_course_app(CourseSettings(jwt_secret_key="different", log_level="WARNING"))
        mounts = {gateway_settings.course_service_url: httpx.ASGITransport(app=mismatched)}

        async with httpx.AsyncClient(mounts=mounts) as backends:
            app = create_gateway_app(gateway_settings, client=backends)
            async with httpx.AsyncClient(
                transport=httpx.ASGITransport(app=app), base_url="http://gateway.test"
            ) as client:
                response = await client.get(
                    "/courses", headers={"Authorization": f"Bearer {token_factory(1, 'alice')}"}
                )

        assert response.status_code == 403
        assert response.json()["error"] == "Error fetching courses"
