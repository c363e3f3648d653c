"""
Stateful controller for one list view.

Holds what the caller interacts with (status, fetched entities, search,
facets, sort and page) and re-derives the view model through ``assemble``.

States: IDLE -> LOADING -> READY | ERROR. ``reload`` may be called from READY
or ERROR to go back to LOADING. Every reload gets a request id; a response
whose id is no longer the latest is dropped.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from fundgrant.client.api_client import FetchError
from fundgrant.listing.comparators import SortDirection
from fundgrant.listing.view_model import ListQuery, ListViewConfig, ViewModel, assemble

logger = logging.getLogger(__name__)


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Fetcher(Protocol):
    async def fetch(self) -> List[Dict[str, Any]]:
        ...


class ListController:
    def __init__(self, view: ListViewConfig, fetcher: Fetcher):
        self.view = view
        self.fetcher = fetcher
        self.status = ViewStatus.IDLE
        self.entities: List[Dict[str, Any]] = []
        self.error: Optional[str] = None
        self.query = view.initial_query()
        self._latest_request = 0

    @property
    def is_ready(self) -> bool:
        return self.status is ViewStatus.READY

    async def reload(self) -> ViewStatus:
        """Fetch the full collection; a newer reload supersedes this one."""
        self._latest_request += 1
        request_id = self._latest_request
        self.status = ViewStatus.LOADING
        self.error = None

        try:
            entities = await self.fetcher.fetch()
        except FetchError as exc:
            if request_id != self._latest_request:
                logger.debug("Dropping failed %s fetch #%d superseded by #%d", self.view.name, request_id, self._latest_request)
                return self.status
            logger.warning("Loading %s failed: %s", self.view.name, exc.message)
            return self._fail(exc.message)
        except Exception as exc:
            if request_id != self._latest_request:
                logger.debug("Dropping failed %s fetch #%d superseded by #%d", self.view.name, request_id, self._latest_request)
                return self.status
            logger.exception("Unexpected error while loading %s", self.view.name)
            return self._fail(str(exc) or exc.__class__.__name__)

        if request_id != self._latest_request:
            logger.debug("Dropping stale %s fetch #%d superseded by #%d", self.view.name, request_id, self._latest_request)
            return self.status

        self.entities = list(entities)
        self.query = replace(self.query, page=1)
        self.status = ViewStatus.READY
        logger.info("Loaded %d %s", len(self.entities), self.view.name)
        return self.status

    def _fail(self, message: str) -> ViewStatus:
        self.entities = []
        self.error = message
        self.status = ViewStatus.ERROR
        return self.status

    def _refilter(self, query: ListQuery) -> None:
        # Filter changes restart from the first page
        self.query = replace(query, page=1)

    def set_search(self, text: str) -> None:
        if not self.is_ready:
            return
        self._refilter(replace(self.query, search=text))

    def set_facet(self, path: str, value: Optional[Any]) -> None:
        if not self.is_ready:
            return
        facets = dict(self.query.facets)
        facets[path] = value
        self._refilter(replace(self.query, facets=facets))

    def clear_filters(self) -> None:
        if not self.is_ready:
            return
        self._refilter(self.query.cleared())

    def sort_by(self, column: str) -> None:
        """Same column flips the direction; a new column starts ascending."""
        if not self.is_ready:
            return
        if column == self.query.sort_column:
            direction = self.query.sort_direction.flipped
        else:
            direction = SortDirection.ASC
        self.query = replace(self.query, sort_column=column, sort_direction=direction)

    def set_page(self, page: int) -> None:
        if not self.is_ready:
            return
        requested = replace(self.query, page=page)
        # Out-of-range pages are clamped, never rejected
        self.query = replace(requested, page=assemble(self.view, self.entities, requested).current_page)

    def view_model(self) -> ViewModel:
        return assemble(self.view, self.entities, self.query)
