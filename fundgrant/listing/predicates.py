"""
Inclusion predicates for list views.

An entity is shown when it passes the free-text search AND every active facet
filter. A facet filter set to None places no constraint.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from fundgrant.listing.fields import resolve_field, text_value

Entity = Mapping[str, Any]
Predicate = Callable[[Entity], bool]


def matches_search(entity: Entity, query: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match against any of the searchable fields."""
    if not query:
        return True
    needle = query.casefold()
    return any(needle in text_value(resolve_field(entity, path)).casefold() for path in fields)


def matches_facets(entity: Entity, facets: Mapping[str, Optional[Any]]) -> bool:
    """Exact, case-sensitive equality for every non-null facet filter."""
    for path, wanted in facets.items():
        if wanted is None:
            continue
        if resolve_field(entity, path) != wanted:
            return False
    return True


def build_predicate(
    search_fields: Sequence[str],
    query: str = "",
    facets: Optional[Mapping[str, Optional[Any]]] = None,
) -> Predicate:
    active = dict(facets or {})

    def predicate(entity: Entity) -> bool:
        return matches_search(entity, query, search_fields) and matches_facets(entity, active)

    return predicate
