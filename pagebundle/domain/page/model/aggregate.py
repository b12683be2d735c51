from pagebundle.domain.shared.model.entity import BaseEntity, Identifier


class BasePage(BaseEntity):
    """Base page entity. Storage for ``id`` lives on BaseEntity."""


class Page(BasePage):
    """Concrete page for use where a BasePage instance is needed."""

    def get_id(self) -> Identifier | None:
        return self.id
