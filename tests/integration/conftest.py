import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.depends import create_storage, init_storage


@pytest.fixture
def app_config(tmp_path):
    """Application config pointing every directory at a temp location"""
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "offer.html").write_text("<html><body>Offer</body></html>")
    data_dir = tmp_path / "data"

    return type(
        "TestConfig",
        (ApplicationConfig,),
        {
            "PUBLIC_DIR": str(public_dir),
            "GENERATED_DIR": str(public_dir / "generated"),
            "DATA_DIR": str(data_dir),
            "DB_URI": f"sqlite+aiosqlite:///{data_dir / 'invoices.db'}",
            "ENABLE_SENTRY": 0,
        },
    )


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a throwaway SQLite invoice store"""
    engine, _ = create_storage(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await init_storage(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    async with AsyncSession(engine, expire_on_commit=False, autoflush=False) as session:
        yield session


@pytest_asyncio.fixture
async def app(app_config):
    """Create the application with its own temp store"""
    from src.api.app import create_app

    app = create_app(app_config)
    await init_storage(app.state.engine)

    yield app

    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    """Create test client bound to the application"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def server_error_client(app):
    """Test client that returns 500 responses instead of re-raising app exceptions"""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
