"""
utils/validation_utils.py

Purpose: Identifier validation

- ObjectId format checks
- Lenient parsing for lookups (malformed id means "no match")
- Strict parsing for writes (malformed id is an error)
"""

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from app.core.exceptions import InvalidIdentifierError


def is_valid_object_id(value: Any) -> bool:
    """
    Checks whether a value can be used as a MongoDB ObjectId.

    Args:
        value: Candidate id (usually the GraphQL ID string)

    Returns:
        True if valid, False otherwise
    """
    if isinstance(value, ObjectId):
        return True
    if not isinstance(value, str):
        return False
    return ObjectId.is_valid(value.strip())


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """
    Converts an id into an ObjectId for lookups.

    A malformed id cannot match any stored document, so callers treat
    None the same way as "not found".
    """
    if isinstance(value, ObjectId):
        return value
    if not is_valid_object_id(value):
        return None
    return ObjectId(value.strip())


def require_object_id(value: Any, field: str = "id") -> ObjectId:
    """
    Converts an id into an ObjectId for writes.

    Raises:
        InvalidIdentifierError: If the value is not a valid ObjectId
    """
    try:
        return value if isinstance(value, ObjectId) else ObjectId(str(value).strip())
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(value, field=field) from e
