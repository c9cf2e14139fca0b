import os
import sys
import tempfile
from pathlib import Path

# Configure the app for tests before anything reads the environment
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "cms-api-test-logs"))

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from database import Base, get_db, set_sqlite_pragma
import models  # noqa: F401


@pytest.fixture
def engine():
    """In-memory database shared by every session of one test"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """API client whose requests use the test database"""
    from main import app

    TestingSessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register and log in an editor, return the Authorization header"""
    credentials = {"email": "editor@example.com", "password": "secret123"}
    response = client.post("/api/v1/cms/auth/register", json=credentials)
    assert response.status_code == 201
    response = client.post("/api/v1/cms/auth/login", json=credentials)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def make_form_payload(name="Contact Us", sections=None, **extra):
    """Form request body with two sections by default"""
    if sections is None:
        sections = [
            {
                "title": "About you",
                "order_index": 5,
                "fields": [
                    {"label": "Full name", "field_key": "full_name", "field_type": "text", "is_required": True},
                    {"label": "Email", "field_key": "email", "field_type": "email", "is_required": True},
                ],
            },
            {
                "title": "Message",
                "fields": [
                    {"label": "Topic", "field_key": "topic", "field_type": "dropdown",
                     "properties": {"options": ["Sales", "Support"]}},
                    {"label": "Body", "field_key": "body", "field_type": "textarea"},
                ],
            },
        ]
    payload = {"name": name, "sections": sections}
    payload.update(extra)
    return payload


@pytest.fixture
def form_payload():
    return make_form_payload
