import inspect
import os

# Settings are read at import time by the engine module.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-with-enough-length-for-hs256")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from aipromote.auth.service import principal_for  # noqa: E402
from aipromote.auth.tokens import create_access_token  # noqa: E402
from aipromote.billing.models import SubscriptionPlan  # noqa: E402
from aipromote.core.rate_limit import default_store  # noqa: E402
from aipromote.core.security import get_password_hash  # noqa: E402
from aipromote.core.settings import Settings, get_settings  # noqa: E402
from aipromote.db.engine import get_session  # noqa: E402
from aipromote.main import app  # noqa: E402
from aipromote.user.models import User, UserRole  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
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


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with empty rate-limit windows."""
    default_store.clear()
    yield
    default_store.clear()


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_settings")
def test_settings_fixture():
    """Settings used by request-scoped dependencies."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        session_secret_key="test-session-secret",
        admin_username="admin",
        admin_password="admin-password",
        jwt_secret="test-jwt-secret-with-enough-length-for-hs256",
        client_url="http://localhost:3000",
        app_url="http://testserver",
    )


def _make_user(
    session: Session,
    *,
    email: str = "user@example.com",
    password: str | None = TEST_PASSWORD,
    name: str | None = "Test User",
    role: UserRole = UserRole.USER,
    verified: bool = True,
    **extra,
) -> User:
    user = User(
        email=email,
        hashed_password=get_password_hash(password) if password else None,
        name=name,
        role=role,
        verified=verified,
        **extra,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def _make_plan(session: Session, name: str, **extra) -> SubscriptionPlan:
    data = {
        "display_name": f"{name} Plan",
        "price_monthly": 1000,
        "limits": {"posts_per_month": 10},
        "features": [f"{name} feature"],
    }
    data.update(extra)
    plan = SubscriptionPlan(name=name, **data)
    session.add(plan)
    session.commit()
    session.refresh(plan)
    return plan


def _auth_headers(user: User, settings: Settings) -> dict[str, str]:
    token = create_access_token(
        principal_for(user),
        settings.jwt_secret,
        settings.jwt_expires_in,
        settings.jwt_algorithm,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session):
    """Create a verified regular user."""
    return _make_user(session)


@pytest.fixture(name="admin_user")
def admin_user_fixture(session: Session):
    """Create a verified admin user."""
    return _make_user(
        session, email="admin@example.com", name="Admin", role=UserRole.ADMIN
    )


@pytest.fixture(name="client")
def client_fixture(session: Session, test_settings: Settings):
    """Create a test client with overridden dependencies."""

    def get_session_override():
        return session

    def get_settings_override():
        return test_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    """Factory for users stored in the test database."""

    def _factory(**kwargs) -> User:
        return _make_user(session, **kwargs)

    return _factory


@pytest.fixture(name="make_plan")
def make_plan_fixture(session: Session):
    """Factory for subscription plans stored in the test database."""

    def _factory(name: str, **kwargs) -> SubscriptionPlan:
        return _make_plan(session, name, **kwargs)

    return _factory


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(test_settings: Settings):
    """Build a bearer Authorization header for a user."""

    def _headers(user: User) -> dict[str, str]:
        return _auth_headers(user, test_settings)

    return _headers
