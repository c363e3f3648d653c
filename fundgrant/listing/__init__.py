"""
List view pipeline.

filter (predicates) -> order (comparators) -> slice (pagination), composed by
``assemble`` into a render-ready view model. Everything here is pure; the
mutable view state lives in ListController.
"""

from fundgrant.listing.comparators import SortColumn, SortDirection, SortPolicy, build_comparator, sort_entities
from fundgrant.listing.pagination import Page, clamp_page, paginate, total_pages
from fundgrant.listing.predicates import build_predicate, matches_facets, matches_search
from fundgrant.listing.questions import QuestionCount, QuestionResponses, effective_count, questions_field
from fundgrant.listing.view_model import FacetField, ListQuery, ListViewConfig, ViewModel, assemble, facet_value_sets

__all__ = [
    "FacetField", "ListQuery", "ListViewConfig", "ViewModel", "assemble", "facet_value_sets",
    "Page", "clamp_page", "paginate", "total_pages",
    "QuestionCount", "QuestionResponses", "effective_count", "questions_field",
    "SortColumn", "SortDirection", "SortPolicy", "build_comparator", "sort_entities",
    "build_predicate", "matches_facets", "matches_search",
]
