from dishka import AsyncContainer, make_async_container

from pagebundle.config import Config
from pagebundle.infrastructure.persistence import PersistenceProvider
from pagebundle.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        PersistenceProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
