"""SQLAlchemy adapter implementing PageRepository."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from pagebundle.domain.page.model.aggregate import Page
from pagebundle.domain.page.port.repository import PageRepository
from pagebundle.domain.shared.error import NotFoundError, StorageUnavailableError
from pagebundle.domain.shared.model.entity import Identifier
from pagebundle.infrastructure.persistence.mappers.page import (
    identifier_to_key,
    page_to_dict,
    row_to_page,
)
from pagebundle.infrastructure.persistence.tables import pages_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _storage_errors() -> AsyncIterator[None]:
    try:
        yield
    except OperationalError as e:
        raise StorageUnavailableError(f"Page storage unavailable: {e.orig}") from e


class SQLAlchemyPageRepository(PageRepository):
    """SQLAlchemy-backed page repository.

    Identifiers come from the autoincrement primary key of the pages table.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, page: Page) -> Page:
        """Insert a new page, assigning its id, or update an existing one."""
        page_dict = page_to_dict(page)

        async with _storage_errors():
            if page.id is None:
                result = await self._session.execute(insert(pages_table).values(**page_dict))
                page.id = result.inserted_primary_key[0]
                logger.debug("Inserted page id=%s", page.id)
            else:
                stmt = (
                    update(pages_table)
                    .where(pages_table.c.id == page_dict["id"])
                    .values(**page_dict)
                )
                result = await self._session.execute(stmt)
                if result.rowcount == 0:
                    raise NotFoundError(f"Page not found: {page.id}")
                logger.debug("Updated page id=%s", page.id)
            await self._session.flush()

        return page

    async def get(self, id: Identifier) -> Page | None:
        """Get a page by id."""
        stmt = select(pages_table).where(pages_table.c.id == identifier_to_key(id))
        async with _storage_errors():
            result = await self._session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def delete(self, id: Identifier) -> None:
        """Delete a page by id. In-memory instances keep their id."""
        stmt = delete(pages_table).where(pages_table.c.id == identifier_to_key(id))
        async with _storage_errors():
            result = await self._session.execute(stmt)
            await self._session.flush()
        if result.rowcount == 0:
            raise NotFoundError(f"Page not found: {id}")
        logger.debug("Deleted page id=%s", id)

    async def count(self) -> int:
        async with _storage_errors():
            result = await self._session.execute(select(func.count()).select_from(pages_table))
        return result.scalar_one()
