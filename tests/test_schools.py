from conftest import bearer, full_answers


def test_create_school(client, admin_token):
    response = client.post(
        "/api/schools", json={"name": "Test School 1", "address": "123 Main St"}, headers=bearer(admin_token)
    )
    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["name"] == "Test School 1"
    assert body["address"] == "123 Main St"
    assert body["adminId"]


def test_create_school_without_address(client, admin_token):
    response = client.post("/api/schools", json={"name": "Test School 2"}, headers=bearer(admin_token))
    assert response.status_code == 201
    assert response.json()["address"] is None


def test_create_school_missing_name(client, admin_token):
    response = client.post("/api/schools", json={"address": "Nowhere"}, headers=bearer(admin_token))
    assert response.status_code == 400


def test_create_school_requires_auth(client):
    assert client.post("/api/schools", json={"name": "Test School"}).status_code == 401


def test_create_school_forbidden_for_director(client, director):
    response = client.post("/api/schools", json={"name": "Other"}, headers=bearer(director["token"]))
    assert response.status_code == 403


def test_list_schools_newest_first(client, api, admin_token):
    api.create_school(admin_token, "First School")
    api.create_school(admin_token, "Second School")
    response = client.get("/api/schools", headers=bearer(admin_token))
    assert response.status_code == 200
    names = [s["name"] for s in response.json()]
    assert names == ["Second School", "First School"]


def test_get_school(client, admin_token, school):
    response = client.get(f"/api/schools/{school['id']}", headers=bearer(admin_token))
    assert response.status_code == 200
    assert response.json()["name"] == "Test School"


def test_get_missing_school(client, admin_token):
    response = client.get("/api/schools/00000000-0000-0000-0000-000000000000", headers=bearer(admin_token))
    assert response.status_code == 404


def test_update_school_partially(client, admin_token, school):
    response = client.patch(
        f"/api/schools/{school['id']}",
        json={"name": "Updated School Name", "address": "Updated Address"},
        headers=bearer(admin_token),
    )
    assert response.status_code == 200

    response = client.patch(
        f"/api/schools/{school['id']}", json={"name": "Partially Updated"}, headers=bearer(admin_token)
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Partially Updated"
    assert response.json()["address"] == "Updated Address"


def test_update_missing_school(client, admin_token):
    response = client.patch(
        "/api/schools/00000000-0000-0000-0000-000000000000", json={"name": "Whatever"}, headers=bearer(admin_token)
    )
    assert response.status_code == 404


def test_delete_school(client, admin_token, school):
    response = client.delete(f"/api/schools/{school['id']}", headers=bearer(admin_token))
    assert response.status_code == 204
    assert client.get(f"/api/schools/{school['id']}", headers=bearer(admin_token)).status_code == 404


def test_delete_missing_school(client, admin_token):
    response = client.delete("/api/schools/00000000-0000-0000-0000-000000000000", headers=bearer(admin_token))
    assert response.status_code == 404


def test_delete_school_removes_linked_directors_and_teachers(client, api, admin_token, school, director, teacher, event):
    assert api.submit(teacher["token"], event["id"], full_answers(event)).status_code == 201

    response = client.delete(f"/api/schools/{school['id']}", headers=bearer(admin_token))
    assert response.status_code == 204

    assert client.get(f"/api/directors/{director['id']}", headers=bearer(admin_token)).status_code == 404
    assert client.get("/api/directors", headers=bearer(admin_token)).json() == []
    response = client.post("/api/auth/login", json={"email": "teacher@example.com", "password": "Teacher123!"})
    assert response.status_code == 401


def test_delete_school_keeps_other_schools(client, api, admin_token, school, director):
    other = api.create_school(admin_token, "Other School")
    other_director = api.create_director(admin_token, other["id"], "other-director@example.com")

    client.delete(f"/api/schools/{school['id']}", headers=bearer(admin_token))

    response = client.get("/api/directors", headers=bearer(admin_token))
    assert [d["id"] for d in response.json()] == [other_director["id"]]


def test_school_name_is_trimmed_before_length_check(client, admin_token, school):
    for name in ("   ", "  x  "):
        response = client.post("/api/schools", json={"name": name}, headers=bearer(admin_token))
        assert response.status_code == 400

    response = client.patch(f"/api/schools/{school['id']}", json={"name": "  "}, headers=bearer(admin_token))
    assert response.status_code == 400

    response = client.post("/api/schools", json={"name": "  North High  "}, headers=bearer(admin_token))
    assert response.status_code == 201
    assert response.json()["name"] == "North High"
