import pytest
from argon2 import PasswordHasher
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobboard.config import settings
from jobboard.database import get_db, init_db
from jobboard.main import app
from jobboard.utils import security


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Cheap argon2 parameters so registering many users stays quick."""
    monkeypatch.setattr(security, "ph", PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture(autouse=True)
def admin_self_registration(monkeypatch):
    """Let tests create admins through /api/register."""
    monkeypatch.setattr(settings, "allow_admin_registration", True)


@pytest.fixture
def test_db(tmp_path):
    db_path = tmp_path / "jobboard.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def client(test_db):
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user and leave the client logged in as them."""

    def _register(username, role="job_seeker", password="secret-pass"):
        r = client.post("/api/register", json={
            "username": username,
            "password": password,
            "email": f"{username}@example.com",
            "role": role,
        })
        assert r.status_code == 201, r.text
        return r.json()

    return _register


@pytest.fixture
def login(client):
    def _login(username, password="secret-pass"):
        r = client.post("/api/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return r.json()

    return _login


@pytest.fixture
def job_payload():
    def _payload(**overrides):
        payload = {
            "title": "Backend Engineer",
            "description": "Build and operate the services behind our job board.",
            "qualifications": "Three years of Python experience",
            "responsibilities": "Design APIs and review pull requests",
            "location": "Berlin, Germany",
            "jobType": "full-time",
            "salaryMin": 60000,
            "salaryMax": 80000,
            "skills": ["Python", "SQL"],
        }
        payload.update(overrides)
        return payload

    return _payload
