from typing import AsyncIterable

from dishka import Provider, from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pagebundle.config import Config
from pagebundle.domain.page.port.repository import PageRepository
from pagebundle.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from pagebundle.infrastructure.persistence.repository.page import SQLAlchemyPageRepository
from pagebundle.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    page_repo = provide(SQLAlchemyPageRepository, scope=Scope.UOW, provides=PageRepository)
