import os

os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("IDENTITY_SERVICE_API_URL", "https://identity.test")

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from app.main import app
from app.core.config import config
from app.core.db.base import Base
from app.core.db.engine import build_engine, build_session_factory, get_db_util
from app.core.exceptions import AuthError
from app.modules.users.auth import get_identity_service
from app.modules.users.identity import IdentityUser

USER_A = IdentityUser(id="user-a", email="a@example.com", profile={"id": "user-a", "email": "a@example.com"})
USER_B = IdentityUser(id="user-b", email="b@example.com", profile={"id": "user-b", "email": "b@example.com"})


class FakeIdentityService:
    """In-memory stand-in for the hosted identity service."""

    def __init__(self) -> None:
        self.sessions: Dict[str, IdentityUser] = {"token-a": USER_A, "token-b": USER_B}
        self.codes: Dict[str, str] = {"code-a": "token-a"}
        self.revoked: List[str] = []

    async def get_redirect_url(self, provider: str) -> str:
        return f"https://identity.test/oauth/{provider}/start"

    async def exchange_code_for_session_token(self, code: str) -> str:
        if code not in self.codes:
            raise AuthError("Invalid or expired authorization code")
        return self.codes[code]

    async def resolve_session_to_user(self, token: str) -> Optional[IdentityUser]:
        return self.sessions.get(token)

    async def revoke_session(self, token: str) -> None:
        self.revoked.append(token)
        self.sessions.pop(token, None)


def _create_schema(path) -> None:
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()


@pytest.fixture
def session_factory(tmp_path):
    db_path = tmp_path / "containers.db"
    _create_schema(db_path)
    return build_session_factory(build_engine(f"sqlite+aiosqlite:///{db_path}"))


@pytest.fixture
def broken_session_factory(tmp_path):
    """Sessions on a database without the containers table."""
    db_path = tmp_path / "empty.db"
    return build_session_factory(build_engine(f"sqlite+aiosqlite:///{db_path}"))


@pytest.fixture
def identity():
    return FakeIdentityService()


def _make_client(factory, identity):
    async def override_get_db():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_util] = override_get_db
    app.dependency_overrides[get_identity_service] = lambda: identity
    return TestClient(app, base_url="https://testserver")


@pytest.fixture
def client(session_factory, identity):
    with _make_client(session_factory, identity) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_session_factory, identity):
    with _make_client(broken_session_factory, identity) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def login(client: TestClient, token: str) -> TestClient:
    client.cookies.set(config.session_cookie_name, token)
    return client
