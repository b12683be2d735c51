"""Base entity - the identity every persisted entity carries."""

from typing import Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict

# Opaque identifier. Integers come from the database; strings are accepted for
# entities identified elsewhere.
Identifier = Union[int, str]


class BaseEntity(BaseModel):
    """Mutable entity with an identifier assigned by the persistence layer.

    ``id`` is ``None`` until something (usually a repository ``save``) assigns it.
    Values are stored as given; strict mode keeps ``"42"`` and ``42`` distinct.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True)

    id: Identifier | None = None


@runtime_checkable
class IdentifiedEntity(Protocol):
    """An entity exposing read access to its identifier."""

    id: Identifier | None

    def get_id(self) -> Identifier | None: ...
