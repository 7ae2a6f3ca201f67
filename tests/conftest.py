import os

# must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENABLE_TEST_ROUTES"] = "true"
os.environ["SEED_ADMIN_EMAIL"] = ""
os.environ["SEED_ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

from school_assessment.database import Base, SessionLocal, engine
from school_assessment.main import app

ADMIN = {"email": "admin@example.com", "password": "Admin123!", "name": "Test Admin"}
DIRECTOR = {"email": "director@example.com", "password": "Director123!", "name": "Test Director"}
TEACHER = {"email": "teacher@example.com", "password": "Teacher123!", "name": "Test Teacher"}


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


class Api:
    """Thin wrapper over TestClient for building the admin → school → director → teacher chain."""

    def __init__(self, client):
        self.client = client

    def login(self, email, password):
        response = self.client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["access_token"]

    def create_school(self, admin_token, name="Test School", address=None):
        body = {"name": name}
        if address is not None:
            body["address"] = address
        response = self.client.post("/api/schools", json=body, headers=bearer(admin_token))
        assert response.status_code == 201, response.text
        return response.json()

    def create_director(self, admin_token, school_id, email, password="Director123!", name="Some Director"):
        response = self.client.post(
            "/api/directors",
            json={"email": email, "password": password, "name": name, "schoolId": school_id},
            headers=bearer(admin_token),
        )
        assert response.status_code == 201, response.text
        return response.json()

    def create_teacher(self, director_token, email, password="Teacher123!", name="Some Teacher"):
        response = self.client.post(
            "/api/teachers",
            json={"email": email, "password": password, "name": name},
            headers=bearer(director_token),
        )
        assert response.status_code == 201, response.text
        return response.json()

    def create_event(self, admin_token, name="Test Event", questions=None, **extra):
        if questions is None:
            questions = [
                {"text": "What is your name?", "type": "FREE_TEXT", "order": 1},
                {"text": "Do you agree?", "type": "MULTIPLE_CHOICE", "order": 2},
            ]
        body = {"name": name, "questions": questions, **extra}
        response = self.client.post("/api/events", json=body, headers=bearer(admin_token))
        assert response.status_code == 201, response.text
        return response.json()

    def submit(self, teacher_token, event_id, answers):
        return self.client.post(
            "/api/answers/submit",
            json={"eventId": event_id, "answers": answers},
            headers=bearer(teacher_token),
        )


def full_answers(event):
    """A valid answer set covering every question of the event once."""
    answers = []
    for q in event["questions"]:
        if q["type"] == "MULTIPLE_CHOICE":
            answers.append({"questionId": q["id"], "selectedOption": "YES"})
        else:
            answers.append({"questionId": q["id"], "answerText": "Some text"})
    return answers


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(client):
    return Api(client)


@pytest.fixture
def admin_token(client, api):
    response = client.post("/api/test/create-admin", json=ADMIN)
    assert response.status_code == 201, response.text
    return api.login(ADMIN["email"], ADMIN["password"])


@pytest.fixture
def school(api, admin_token):
    return api.create_school(admin_token, "Test School", "123 Main St")


@pytest.fixture
def director(api, admin_token, school):
    created = api.create_director(admin_token, school["id"], DIRECTOR["email"], DIRECTOR["password"], DIRECTOR["name"])
    created["token"] = api.login(DIRECTOR["email"], DIRECTOR["password"])
    return created


@pytest.fixture
def teacher(api, director):
    created = api.create_teacher(director["token"], TEACHER["email"], TEACHER["password"], TEACHER["name"])
    created["token"] = api.login(TEACHER["email"], TEACHER["password"])
    return created


@pytest.fixture
def event(api, admin_token):
    return api.create_event(admin_token, description="Test event for answers", isActive=True)
