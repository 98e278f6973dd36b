"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# keep the import-time app from writing log files during the test run
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tenantnotes.config import Settings, get_settings
from tenantnotes.core.models import BaseModel, Note, Tenant, TenantPlan, User, UserRole
from tenantnotes.database import get_db_session
from tenantnotes.main import create_app
from tenantnotes.security.jwt import create_access_token
from tenantnotes.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "password"


@pytest.fixture(scope="session")
def test_settings():
    """Settings for testing: SQLite in-memory DB, no startup side effects."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        environment="test",
        log_to_file=False,
        create_tables_on_startup=False,
        seed_demo_data=False,
    )


@pytest.fixture(scope="session")
def password_hash():
    """bcrypt is slow, hash the shared test password once."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
async def test_engine(test_settings):
    """Fresh SQLite in-memory engine with the schema created, per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session shared by fixtures and the app under test."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session, test_settings):
    """Create test FastAPI app with overridden dependencies."""
    app = create_app(test_settings)

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_tenant(session, name: str, slug: str, plan: TenantPlan = TenantPlan.FREE) -> Tenant:
    tenant = Tenant(name=name, slug=slug, plan=plan)
    session.add(tenant)
    await session.commit()
    return tenant


async def _create_user(session, tenant: Tenant, email: str, role: UserRole, password_hash: str) -> User:
    user = User(email=email, password_hash=password_hash, role=role, tenant_id=tenant.id)
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def acme(test_session):
    return await _create_tenant(test_session, "Acme Corporation", "acme")


@pytest.fixture
async def globex(test_session):
    return await _create_tenant(test_session, "Globex Corporation", "globex")


@pytest.fixture
async def acme_admin(test_session, acme, password_hash):
    return await _create_user(test_session, acme, "admin@acme.test", UserRole.ADMIN, password_hash)


@pytest.fixture
async def acme_member(test_session, acme, password_hash):
    return await _create_user(test_session, acme, "user@acme.test", UserRole.MEMBER, password_hash)


@pytest.fixture
async def globex_admin(test_session, globex, password_hash):
    return await _create_user(test_session, globex, "admin@globex.test", UserRole.ADMIN, password_hash)


@pytest.fixture
async def globex_member(test_session, globex, password_hash):
    return await _create_user(test_session, globex, "user@globex.test", UserRole.MEMBER, password_hash)


@pytest.fixture
def auth_headers(test_settings):
    """Build bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id, test_settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_note(test_session):
    """Insert a note directly, bypassing the quota."""

    async def _make_note(user: User, title: str = "Test Note", content: str = "Test content") -> Note:
        note = Note(title=title, content=content, user=user, tenant_id=user.tenant_id)
        test_session.add(note)
        await test_session.commit()
        return note

    return _make_note
