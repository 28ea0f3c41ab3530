"""Service test fixtures — async in-memory DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - The app under test is built by create_app with the test db manager wired in
    - get_db is NOT overridden: routes run through the real session dependency

Design Decisions:
    - SQLite in-memory with StaticPool: fast, no external dependency, one shared connection
      so rows committed by one session are visible to the next
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.usuario_repository import UsuarioRepository
from app.main import create_app
from app.services.usuario_service import UsuarioService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def service(test_db):
    return UsuarioService(test_db, UsuarioRepository(test_db))


@pytest.fixture
def test_app(db_manager):
    return create_app(
        Settings(database_url=TEST_DATABASE_URL, database_create_schema=False),
        db_manager=db_manager,
    )


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def usuario_payload():
    return {
        "nombre": "Juan Pérez",
        "email": "juan@example.com",
        "password": "pass123456",
    }
