from conftest import bearer


def test_create_teacher(client, school, director):
    response = client.post(
        "/api/teachers",
        json={"email": "teacher@example.com", "password": "Teacher123!", "name": "Test Teacher"},
        headers=bearer(director["token"]),
    )
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "teacher@example.com"
    assert body["name"] == "Test Teacher"
    assert body["role"] == "TEACHER"
    assert body["schoolId"] == school["id"]
    assert "password" not in body


def test_create_teacher_duplicate_email(client, director, teacher):
    response = client.post(
        "/api/teachers",
        json={"email": teacher["email"], "password": "Teacher123!", "name": "Again"},
        headers=bearer(director["token"]),
    )
    assert response.status_code == 409


def test_create_teacher_invalid_email(client, director):
    response = client.post(
        "/api/teachers",
        json={"email": "invalid", "password": "Teacher123!", "name": "Test Teacher"},
        headers=bearer(director["token"]),
    )
    assert response.status_code == 400


def test_create_teacher_requires_director(client, admin_token, teacher):
    body = {"email": "x@example.com", "password": "Teacher123!", "name": "Someone"}
    assert client.post("/api/teachers", json=body).status_code == 401
    assert client.post("/api/teachers", json=body, headers=bearer(admin_token)).status_code == 403
    assert client.post("/api/teachers", json=body, headers=bearer(teacher["token"])).status_code == 403


def test_list_teachers_only_own_school(client, api, admin_token, director, teacher):
    other = api.create_school(admin_token, "Other School")
    api.create_director(admin_token, other["id"], "other-director@example.com", "Director123!")
    other_token = api.login("other-director@example.com", "Director123!")
    api.create_teacher(other_token, "other-teacher@example.com")

    mine = client.get("/api/teachers", headers=bearer(director["token"])).json()
    assert [t["id"] for t in mine] == [teacher["id"]]
    assert "password" not in mine[0]

    theirs = client.get("/api/teachers", headers=bearer(other_token)).json()
    assert [t["email"] for t in theirs] == ["other-teacher@example.com"]


def test_get_teacher(client, director, teacher):
    response = client.get(f"/api/teachers/{teacher['id']}", headers=bearer(director["token"]))
    assert response.status_code == 200
    assert response.json()["email"] == "teacher@example.com"


def test_get_missing_teacher(client, director):
    response = client.get("/api/teachers/00000000-0000-0000-0000-000000000000", headers=bearer(director["token"]))
    assert response.status_code == 404


def test_teacher_from_other_school_is_forbidden(client, api, admin_token, teacher):
    other = api.create_school(admin_token, "Other School")
    api.create_director(admin_token, other["id"], "other-director@example.com", "Director123!")
    other_token = api.login("other-director@example.com", "Director123!")

    url = f"/api/teachers/{teacher['id']}"
    assert client.get(url, headers=bearer(other_token)).status_code == 403
    assert client.patch(url, json={"name": "Hijacked"}, headers=bearer(other_token)).status_code == 403
    assert client.delete(url, headers=bearer(other_token)).status_code == 403


def test_update_teacher(client, director, teacher):
    url = f"/api/teachers/{teacher['id']}"
    response = client.patch(url, json={"name": "Updated Teacher Name"}, headers=bearer(director["token"]))
    assert response.status_code == 200
    assert response.json()["name"] == "Updated Teacher Name"
    assert response.json()["email"] == "teacher@example.com"

    response = client.patch(url, json={"email": "updated-teacher@example.com"}, headers=bearer(director["token"]))
    assert response.status_code == 200
    assert response.json()["email"] == "updated-teacher@example.com"


def test_update_teacher_invalid_email(client, director, teacher):
    response = client.patch(
        f"/api/teachers/{teacher['id']}", json={"email": "invalid"}, headers=bearer(director["token"])
    )
    assert response.status_code == 400


def test_delete_teacher(client, director, teacher):
    url = f"/api/teachers/{teacher['id']}"
    assert client.delete(url, headers=bearer(director["token"])).status_code == 204
    assert client.get(url, headers=bearer(director["token"])).status_code == 404


def test_create_teacher_blank_name(client, director):
    for name in ("   ", "  x"):
        response = client.post(
            "/api/teachers",
            json={"email": "blank@example.com", "password": "Teacher123!", "name": name},
            headers=bearer(director["token"]),
        )
        assert response.status_code == 400


def test_update_teacher_blank_name(client, director, teacher):
    response = client.patch(
        f"/api/teachers/{teacher['id']}", json={"name": "   "}, headers=bearer(director["token"])
    )
    assert response.status_code == 400


def test_create_teacher_email_race_is_conflict(client, api, director, monkeypatch):
    from school_assessment.services import accounts

    api.create_teacher(director["token"], "dup@example.com")
    # second request passed the lookup before the first one committed
    monkeypatch.setattr(accounts, "ensure_email_free", lambda *args, **kwargs: None)

    response = client.post(
        "/api/teachers",
        json={"email": "dup@example.com", "password": "Teacher123!", "name": "Late Teacher"},
        headers=bearer(director["token"]),
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "User with this email already exists"
    assert len(client.get("/api/teachers", headers=bearer(director["token"])).json()) == 1
