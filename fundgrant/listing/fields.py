"""
Field access on fetched entities.
"""

from typing import Any, Mapping


def resolve_field(entity: Mapping[str, Any], path: str) -> Any:
    """
    Read a dotted field path such as ``company.name``.

    Returns None when any segment is missing or is not an object.
    """
    current: Any = entity
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current


def text_value(value: Any) -> str:
    """Text form of a scalar used for searching; absent and structured values are ''."""
    if value is None or isinstance(value, (Mapping, list, tuple, bool)):
        return ""
    return str(value)
