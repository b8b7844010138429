import os
import tempfile

# Settings are cached on first use, so configure the environment before any app import
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="unfold-media-"))
os.environ.setdefault("PUBLIC_BASE_URL", "http://testserver")
os.environ.setdefault("CHAT_REPLY_DELAY_SECONDS", "0")
os.environ.setdefault("ROUTE_SEARCH_DELAY_SECONDS", "0")
os.environ.setdefault("TRANSLATION_DELAY_SECONDS", "0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from unfold_india.core.session_context import SessionContext
from unfold_india.db.base import Base
from unfold_india.db.session import build_engine, get_db
from unfold_india.main import create_app
from unfold_india.models import ChatRecord, Profile, User  # noqa: F401
from unfold_india.services.identity import AuthSession, IdentityProvider
from unfold_india.storage.factory import get_object_store
from unfold_india.storage.local import LocalObjectStore


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine):
    with Session(engine) as session:
        yield session
        session.rollback()


@pytest.fixture()
def identity(db_session: Session) -> IdentityProvider:
    return IdentityProvider(db_session)


@pytest.fixture()
def auth_session(identity: IdentityProvider) -> AuthSession:
    return identity.sign_up("traveler@example.com", "namaste123")


@pytest.fixture()
def context(auth_session: AuthSession) -> SessionContext:
    context = SessionContext()
    context.resolve(auth_session.principal)
    return context


@pytest.fixture()
def signed_out_context() -> SessionContext:
    context = SessionContext()
    context.resolve(None)
    return context


@pytest.fixture()
def object_store(tmp_path) -> LocalObjectStore:
    return LocalObjectStore(tmp_path / "media", "http://testserver")


@pytest.fixture()
def client(engine, object_store):
    app = create_app()
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_object_store] = lambda: object_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client: TestClient, email: str = "traveler@example.com", password: str = "namaste123") -> dict[str, str]:
    response = client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    return register(client)


@pytest.fixture()
def register_user(client: TestClient):
    return lambda email, password="namaste123": register(client, email, password)
