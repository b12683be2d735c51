"""PageRepository port - persistence interface for pages."""

from abc import abstractmethod
from typing import Protocol

from pagebundle.domain.page.model.aggregate import Page
from pagebundle.domain.shared.model.entity import Identifier


class PageRepository(Protocol):
    """Stores pages and assigns their identifiers.

    ``save`` is the only place an unset ``Page.id`` becomes set. Nothing here
    ever resets an id back to ``None``.
    """

    @abstractmethod
    async def save(self, page: Page) -> Page:
        """Insert a new page (assigning its id) or update an existing one.

        Raises:
            NotFoundError: The page has an id but no stored row matches it.
        """
        ...

    @abstractmethod
    async def get(self, id: Identifier) -> Page | None: ...

    @abstractmethod
    async def delete(self, id: Identifier) -> None:
        """Remove a stored page.

        Raises:
            NotFoundError: No page is stored under ``id``.
        """
        ...

    @abstractmethod
    async def count(self) -> int: ...
