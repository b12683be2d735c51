"""Custom Dishka scopes for pagebundle."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (singletons)
    - UOW: Unit of Work (one database session)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
