import inspect
import os

os.environ.setdefault("ENV_NAME", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret-key")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import winning.storage.models  # noqa: E402,F401
from winning.account.store import AccountStore  # noqa: E402
from winning.core.deps import get_slot  # noqa: E402
from winning.core.settings import Settings, get_settings  # noqa: E402
from winning.main import app  # noqa: E402
from winning.storage.slot import MemorySlot  # noqa: E402

STORAGE_KEY = "test_accounts"
ADMIN_EMAIL = "admin@winning.dz"


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


@pytest.fixture(name="slot")
def slot_fixture() -> MemorySlot:
    return MemorySlot()


@pytest.fixture(name="store")
def store_fixture(slot: MemorySlot) -> AccountStore:
    """A freshly seeded store."""
    return AccountStore.open(slot, key=STORAGE_KEY, admin_email=ADMIN_EMAIL)


@pytest.fixture(name="mock_settings")
def mock_settings_fixture():
    """Create mock settings."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        storage_key=STORAGE_KEY,
        session_secret_key="test-secret-key",
        admin_email=ADMIN_EMAIL,
        strict_transitions=True,
        scan_webhook_url="https://workflow.test/webhook/scan-products",
        public_url="https://winning.test",
        gemini_api_key="test-gemini-key",
        gemini_model="gemini-test",
    )


@pytest.fixture(name="client")
def client_fixture(slot: MemorySlot, mock_settings: Settings):
    """Anonymous test client backed by an in-memory slot."""

    def get_slot_override():
        return slot

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_slot] = get_slot_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="user_client")
def user_client_fixture(client: TestClient) -> TestClient:
    """Client logged in as a freshly signed-up user."""
    response = client.post("/auth/signup", json={"email": "user@example.com"})
    assert response.status_code == 201
    return client


@pytest.fixture(name="admin_client")
def admin_client_fixture(slot: MemorySlot, mock_settings: Settings):
    """Client logged in as the seeded admin, sharing the slot with `client`."""

    def get_slot_override():
        return slot

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_slot] = get_slot_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL})
    assert response.status_code == 200
    yield client

    app.dependency_overrides.clear()
