"""
Document identifier helpers.

Native document ids are UUIDs. Some collections also carry a legacy string
identifier (e.g. "comp-1") that clients may use in URLs.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

# Keys that identify a document and must never be written into its body.
IDENTIFIER_KEYS = ("id", "_id", "externalId")


def parse_document_id(value: Any) -> Optional[UUID]:
    """Return the native id for a string, or None if it is malformed."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


def is_valid_document_id(value: Any) -> bool:
    return parse_document_id(value) is not None


def strip_identifiers(payload: Dict[str, Any], extra_keys: Iterable[str] = ()) -> Dict[str, Any]:
    """Return a copy of the payload without identifier fields."""
    excluded = set(IDENTIFIER_KEYS) | set(extra_keys)
    return {key: value for key, value in payload.items() if key not in excluded}
