"""Service test fixtures — async in-memory DB and freshly registered handlers.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Handlers registered against a new DispatchContext per test
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from userapi.core.dispatch_context import DispatchContext
from userapi.db.base import Base
from userapi.services.auth_handlers import build_auth_handlers
from userapi.services.user_handlers import build_user_handlers
import userapi.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
def dispatch():
    return DispatchContext()


@pytest.fixture
def user_handlers(dispatch):
    return build_user_handlers(dispatch)


@pytest.fixture
def auth_handlers(dispatch):
    return build_auth_handlers(dispatch)
