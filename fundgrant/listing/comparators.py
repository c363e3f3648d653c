"""
Ordering for list views.

Each sortable column declares how its values compare:

- TEXT: accent- and case-insensitive first, then case-insensitive, then raw;
  missing values are ''.
- DATE: absolute instant; missing or unparsable dates sort as the earliest
  instant.
- NUMBER: numeric; missing values are 0.
- COUNT: a count or a list of items, compared by the effective count.

Sorting is stable in both directions, and an unknown column leaves the input
order untouched.
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Mapping, Optional

from fundgrant.listing.fields import resolve_field, text_value
from fundgrant.listing.questions import effective_count, questions_field
from fundgrant.utils.time import instant_or_earliest

Entity = Mapping[str, Any]
Comparator = Callable[[Entity, Entity], int]


class SortPolicy(str, Enum):
    TEXT = "text"
    DATE = "date"
    NUMBER = "number"
    COUNT = "count"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @classmethod
    def parse(cls, value: Optional[str], default: "SortDirection") -> "SortDirection":
        try:
            return cls((value or "").lower())
        except ValueError:
            return default


@dataclass(frozen=True)
class SortColumn:
    """A sortable column: the entity field it reads and how values compare."""

    path: str
    policy: SortPolicy = SortPolicy.TEXT
    label: str = ""


def collation_key(value: Any) -> tuple:
    text = text_value(value)
    folded = text.casefold()
    stripped = "".join(
        char for char in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(char)
    )
    return (stripped, folded, text)


def number_value(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return 0


def sort_key(column: SortColumn, entity: Entity) -> Any:
    value = resolve_field(entity, column.path)
    if column.policy is SortPolicy.DATE:
        return instant_or_earliest(value)
    if column.policy is SortPolicy.NUMBER:
        return number_value(value)
    if column.policy is SortPolicy.COUNT:
        return effective_count(questions_field(value))
    return collation_key(value)


def _compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def build_comparator(
    columns: Mapping[str, SortColumn],
    column_name: Optional[str],
    direction: SortDirection = SortDirection.ASC,
) -> Comparator:
    """Comparator for the named column, negated for descending order."""
    column = columns.get(column_name) if column_name else None
    if column is None:
        return lambda left, right: 0

    sign = -1 if direction is SortDirection.DESC else 1

    def comparator(left: Entity, right: Entity) -> int:
        return sign * _compare(sort_key(column, left), sort_key(column, right))

    return comparator


def sort_entities(entities: Iterable[Entity], comparator: Comparator) -> List[Entity]:
    # sorted() is stable, so ties keep their input order
    return sorted(entities, key=cmp_to_key(comparator))
