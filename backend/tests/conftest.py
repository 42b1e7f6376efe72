import os

# The app engine must never touch a real database file during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from app.auth import ensure_user  # noqa: E402
from app.database import get_session  # noqa: E402
from app.main import app  # noqa: E402
from tests.factories import TEST_PASSWORD, TEST_USERNAME  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. All models MUST be imported before create_all() (see session_fixture)
# 4. App dependency overridden to use test_engine (see client_fixture)
# 5. Tables are created and dropped per test
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on a freshly created schema"""
    # Import all models to ensure they're registered BEFORE create_all
    from app.models.group import Group  # noqa: F401
    from app.models.match import Match  # noqa: F401
    from app.models.placement import Placement  # noqa: F401
    from app.models.player import Player  # noqa: F401
    from app.models.player_group_link import PlayerGroupLink  # noqa: F401
    from app.models.qualifying import QualifyingTime  # noqa: F401
    from app.models.round import Round  # noqa: F401
    from app.models.tournament import Tournament  # noqa: F401
    from app.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="anonymous_client")
def anonymous_client_fixture(session: Session):
    """Test client with the test database but without credentials"""
    ensure_user(session, TEST_USERNAME, TEST_PASSWORD)

    # Override dependency BEFORE creating TestClient (prevents production engine use)
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    # Clear overrides only AFTER TestClient context exits
    app.dependency_overrides.clear()


@pytest.fixture(name="client")
def client_fixture(anonymous_client: TestClient):
    """Test client authenticated as the seeded organiser"""
    anonymous_client.auth = (TEST_USERNAME, TEST_PASSWORD)
    return anonymous_client
