"""
Shared test fixtures
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from resume_builder.database import Base, get_db, init_db
from resume_builder.main import app
from resume_builder.models import User
from resume_builder.utils import create_access_token


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the test database"""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email, is_admin=False, first_name="Test", last_name="User"):
    user = User(
        email=email,
        password_hash="not-a-real-hash",
        first_name=first_name,
        last_name=last_name,
        phone="9999999999",
        is_admin=is_admin
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user):
    token = create_access_token({"sub": user.id, "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def student(db):
    return make_user(db, "student@example.com", first_name="Asha", last_name="Rao")


@pytest.fixture
def other_student(db):
    return make_user(db, "other@example.com", first_name="Ravi", last_name="Mehta")


@pytest.fixture
def admin_user(db):
    return make_user(db, "admin@example.com", is_admin=True, first_name="Site", last_name="Admin")


@pytest.fixture
def student_headers(student):
    return auth_headers(student)


@pytest.fixture
def other_headers(other_student):
    return auth_headers(other_student)


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def submission_payload():
    return {
        "paymentDetails": {"amount": 249, "method": "card", "transactionId": "TXN_1"},
        "contactInfo": {"email": "a@b.com", "phone": "999"},
        "specialRequests": "Focus on the projects section"
    }
