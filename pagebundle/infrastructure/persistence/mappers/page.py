import re
from typing import Any, Dict

from pagebundle.domain.page.model.aggregate import Page
from pagebundle.domain.shared.error import ValidationError
from pagebundle.domain.shared.model.entity import Identifier

# Bounds of a signed 64-bit INTEGER column (SQLite, PostgreSQL BIGINT)
KEY_MIN = -(2**63)
KEY_MAX = 2**63 - 1

_KEY_RE = re.compile(r"^[+-]?[0-9]+$")


def identifier_to_key(id: Identifier) -> int:
    """Convert an identifier to the integer primary key of the pages table.

    Ints and ASCII decimal strings (optionally signed) are accepted alike, as
    long as they fit the column.
    """
    if isinstance(id, bool):
        key = None
    elif isinstance(id, int):
        key = id
    elif isinstance(id, str) and _KEY_RE.match(id.strip()):
        key = int(id.strip())
    else:
        key = None

    if key is None:
        raise ValidationError(f"Page identifier {id!r} is not an integer key", field="id")
    if not KEY_MIN <= key <= KEY_MAX:
        raise ValidationError(f"Page identifier {id!r} is out of key range", field="id")
    return key


def row_to_page(row: Dict[str, Any]) -> Page:
    """Convert database row to Page."""
    return Page(id=row["id"])


def page_to_dict(page: Page) -> Dict[str, Any]:
    """Convert Page to database dict.

    An unset id is left out so the database generates one.
    """
    if page.id is None:
        return {}
    return {"id": identifier_to_key(page.id)}
