import inspect
from collections.abc import Callable
from unittest.mock import MagicMock

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

import kudos.models  # noqa: F401
from kudos.auth.passwords import hash_password
from kudos.auth.repository import SessionRepository
from kudos.auth.service import AuthService
from kudos.core.email import EmailNotifier, get_email_notifier
from kudos.core.settings import Settings, get_app_settings
from kudos.db.engine import get_session
from kudos.main import app
from kudos.user.models import ActivationStatus, User, UserRole, initial_activation

DEFAULT_PASSWORD = "Secret1!"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio."""
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_settings")
def test_settings_fixture():
    return Settings(
        env_name="test",
        database_url="sqlite://",
        session_secret_key="test-secret-key",
        session_expires_days=7,
        resend_api_key=None,
    )


@pytest.fixture(name="notifier")
def notifier_fixture():
    return MagicMock(spec=EmailNotifier)


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session) -> Callable[..., User]:
    """Factory inserting a user with the state its role gets at signup."""

    def _make_user(
        email: str,
        role: UserRole = UserRole.team_member,
        *,
        name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
        activation_status: ActivationStatus | None = None,
    ) -> User:
        is_active, status = initial_activation(role)
        if activation_status is not None:
            status = activation_status
            is_active = status == ActivationStatus.approved
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role,
            is_active=is_active,
            activation_status=status,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="admin_user")
def admin_user_fixture(make_user) -> User:
    return make_user("admin@example.com", UserRole.admin, name="Admin")


@pytest.fixture(name="member_user")
def member_user_fixture(make_user) -> User:
    return make_user("member@example.com", UserRole.team_member, name="Member")


@pytest.fixture(name="pending_lead")
def pending_lead_fixture(make_user) -> User:
    return make_user("lead@example.com", UserRole.team_lead, name="Lead")


@pytest.fixture(name="auth_service")
def auth_service_fixture(session: Session) -> AuthService:
    return AuthService(SessionRepository(session))


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(auth_service: AuthService) -> Callable[[User], dict[str, str]]:
    """Issue a real session for a user and return a bearer header for it."""

    def _auth_headers(user: User) -> dict[str, str]:
        user_session = auth_service.create_session(user.id)
        return {"Authorization": f"Bearer {user_session.session_token}"}

    return _auth_headers


@pytest.fixture(name="client")
def client_fixture(
    session: Session,
    test_settings: Settings,
    notifier: MagicMock,
):
    """Test client wired to the in-memory database and a mock notifier."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    app.dependency_overrides[get_email_notifier] = lambda: notifier

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
