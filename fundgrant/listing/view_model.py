"""
View model assembly for list views.

``assemble`` is a pure function of the entity list and a ListQuery: the same
inputs always produce the same ViewModel.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from fundgrant.core.config import settings
from fundgrant.listing.comparators import (
    SortColumn,
    SortDirection,
    build_comparator,
    collation_key,
    sort_entities,
)
from fundgrant.listing.fields import resolve_field
from fundgrant.listing.pagination import Page, paginate
from fundgrant.listing.predicates import build_predicate

Entity = Mapping[str, Any]


@dataclass(frozen=True)
class FacetField:
    """A categorical filter: query parameter name, entity field and label."""

    param: str
    path: str
    label: str


@dataclass(frozen=True)
class ListViewConfig:
    """Static description of one list view."""

    name: str
    title: str
    endpoint: str
    search_fields: Tuple[str, ...]
    facets: Tuple[FacetField, ...] = ()
    sort_columns: Mapping[str, SortColumn] = field(default_factory=dict)
    default_sort: Optional[str] = None
    default_direction: SortDirection = SortDirection.ASC
    page_size: int = settings.LIST_PAGE_SIZE
    search_placeholder: str = "Search..."

    @property
    def facet_paths(self) -> Tuple[str, ...]:
        return tuple(facet.path for facet in self.facets)

    def initial_query(self) -> "ListQuery":
        return ListQuery(sort_column=self.default_sort, sort_direction=self.default_direction)


@dataclass(frozen=True)
class ListQuery:
    """Caller-owned list state: search text, facet filters (by field path), sort and page."""

    search: str = ""
    facets: Mapping[str, Optional[Any]] = field(default_factory=dict)
    sort_column: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1

    @property
    def has_filters(self) -> bool:
        return bool(self.search) or any(value is not None for value in self.facets.values())

    def cleared(self) -> "ListQuery":
        """Same sort and page, with no search and every facet unconstrained."""
        return replace(self, search="", facets={path: None for path in self.facets})


@dataclass(frozen=True)
class ViewModel:
    page: Page
    facet_value_sets: Dict[str, FrozenSet[Any]]
    query: ListQuery
    total_entities: int

    @property
    def page_items(self) -> List[Entity]:
        return self.page.items

    @property
    def total_pages(self) -> int:
        return self.page.total_pages

    @property
    def current_page(self) -> int:
        return self.page.number

    @property
    def filtered_count(self) -> int:
        return self.page.total_items

    @property
    def is_empty(self) -> bool:
        return self.page.total_items == 0

    def facet_options(self, path: str) -> List[Any]:
        """Facet values in display order."""
        return sorted(self.facet_value_sets.get(path, frozenset()), key=collation_key)


def _facet_value(value: Any) -> bool:
    return bool(value) and not isinstance(value, (Mapping, list, tuple, set))


def facet_value_sets(entities: Sequence[Entity], paths: Sequence[str]) -> Dict[str, FrozenSet[Any]]:
    """Distinct non-empty values of each facet field across the given entities."""
    return {
        path: frozenset(
            value
            for value in (resolve_field(entity, path) for entity in entities)
            if _facet_value(value)
        )
        for path in paths
    }


def assemble(view: ListViewConfig, entities: Sequence[Entity], query: ListQuery) -> ViewModel:
    """Filter, sort and paginate ``entities`` for one render."""
    predicate = build_predicate(view.search_fields, query.search, query.facets)
    filtered = [entity for entity in entities if predicate(entity)]
    comparator = build_comparator(view.sort_columns, query.sort_column, query.sort_direction)
    ordered = sort_entities(filtered, comparator)
    return ViewModel(
        page=paginate(ordered, view.page_size, query.page),
        # Built from the unfiltered list so every existing value stays selectable
        facet_value_sets=facet_value_sets(entities, view.facet_paths),
        query=query,
        total_entities=len(entities),
    )
