"""Persistence infrastructure - SQLAlchemy tables, repositories and DI provider."""

from .di import PersistenceProvider

__all__ = ["PersistenceProvider"]
