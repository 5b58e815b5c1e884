"""
Test infrastructure for the Hacker News GraphQL API.

Strategy
--------
- SQLite in-memory via aiosqlite eliminates the need for a running Postgres
  instance in CI, keeping the suite fast and self-contained.
- StaticPool forces all async tasks to share the same in-memory database
  connection, which is required because SQLite in-memory databases are
  connection-scoped; a new connection would see an empty database.
- Foreign keys are switched on for the test engine so that commenting on a
  missing link fails the reference constraint exactly as on PostgreSQL.
- The app's get_session_factory dependency is overridden so every
  resolver opens its sessions on the test engine.
- Tables are created fresh for every test that touches the database
  (through db_session or async_client) and dropped after, giving each
  test a clean isolated state; pure parser tests skip the database.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_session_factory
from app.main import app
from app.middleware import install_query_counter

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

enable_sqlite_foreign_keys(engine_test)
install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override — resolvers get the test session factory
# ---------------------------------------------------------------------------

def override_get_session_factory():
    return async_session_test


app.dependency_overrides[get_session_factory] = override_get_session_factory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session(setup_db) -> AsyncSession:
    """
    Yield a live AsyncSession for tests that call the service layer
    directly or seed rows without going through GraphQL.
    """
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(setup_db) -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def gql(async_client: AsyncClient):
    """
    Return a coroutine function that POSTs a GraphQL document to /graphql
    and returns the decoded JSON body (``data`` and, on failure, ``errors``).
    """

    async def _execute(query: str, variables: dict | None = None) -> dict:
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        resp = await async_client.post("/graphql", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _execute
