"""Global test fixtures."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from pagebundle.config import Config, DatabaseConfig
from pagebundle.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host PAGEBUNDLE_* variables out of tests."""
    for var in (
        "PAGEBUNDLE_CONFIG_FILE",
        "PAGEBUNDLE_LOG_FILE",
        "PAGEBUNDLE_DATABASE__URL",
        "PAGEBUNDLE_DATABASE__ECHO",
        "PAGEBUNDLE_LOGGING__LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))


@pytest_asyncio.fixture
async def engine(config: Config):
    """Per-test in-memory SQLite engine with tables created."""
    engine = create_db_engine(config)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
