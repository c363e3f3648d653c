"""ListController state machine, stale fetch handling and page reset rules."""

import asyncio

import pytest

from fundgrant.client.api_client import FetchError
from fundgrant.listing.comparators import SortDirection
from fundgrant.listing.controller import ListController, ViewStatus
from fundgrant.listing.views import ANALYSES_VIEW

pytestmark = pytest.mark.unit


class StaticFetcher:
    def __init__(self, entities=None, error=None):
        self.entities = entities or []
        self.error = error
        self.calls = 0

    async def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.entities)


class GatedFetcher:
    """Each fetch waits until the test releases it with a result."""

    def __init__(self):
        self.pending = []

    async def fetch(self):
        gate = asyncio.Event()
        outcome = {}
        self.pending.append((gate, outcome))
        await gate.wait()
        if "error" in outcome:
            raise outcome["error"]
        return outcome["entities"]

    def release(self, index, entities=None, error=None):
        gate, outcome = self.pending[index]
        if error is not None:
            outcome["error"] = error
        else:
            outcome["entities"] = entities
        gate.set()


def ids(entities):
    return [entity["id"] for entity in entities]


@pytest.mark.asyncio
async def test_reload_moves_from_idle_to_ready(analyses):
    controller = ListController(ANALYSES_VIEW, StaticFetcher(analyses))
    assert controller.status is ViewStatus.IDLE

    status = await controller.reload()

    assert status is ViewStatus.READY
    model = controller.view_model()
    assert model.total_entities == 15
    assert model.query.sort_column == "date"
    assert model.query.sort_direction is SortDirection.DESC
    assert ids(model.page_items)[0] == "analysis-6"


@pytest.mark.asyncio
async def test_failed_fetch_enters_error_without_keeping_data(analyses):
    fetcher = StaticFetcher(analyses)
    controller = ListController(ANALYSES_VIEW, fetcher)
    await controller.reload()

    fetcher.error = FetchError("Failed to fetch analyses: 500 Internal Server Error", status_code=500)
    status = await controller.reload()

    assert status is ViewStatus.ERROR
    assert controller.error == "Failed to fetch analyses: 500 Internal Server Error"
    assert controller.entities == []

    fetcher.error = None
    assert await controller.reload() is ViewStatus.READY
    assert controller.error is None
    assert fetcher.calls == 3


@pytest.mark.asyncio
async def test_controls_are_ignored_while_loading(analyses):
    fetcher = GatedFetcher()
    controller = ListController(ANALYSES_VIEW, fetcher)

    task = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)
    assert controller.status is ViewStatus.LOADING

    controller.set_search("eco")
    controller.set_facet("status", "Completed")
    controller.sort_by("company")
    controller.set_page(2)
    assert controller.query == ANALYSES_VIEW.initial_query()

    fetcher.release(0, entities=analyses)
    await task
    assert controller.status is ViewStatus.READY


@pytest.mark.asyncio
async def test_stale_response_never_overwrites_newer_one(analyses):
    fetcher = GatedFetcher()
    controller = ListController(ANALYSES_VIEW, fetcher)

    first = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)
    second = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)

    fetcher.release(1, entities=analyses[:3])
    await second
    fetcher.release(0, entities=analyses)
    await first

    assert controller.status is ViewStatus.READY
    assert len(controller.entities) == 3


@pytest.mark.asyncio
async def test_stale_failure_is_dropped(analyses):
    fetcher = GatedFetcher()
    controller = ListController(ANALYSES_VIEW, fetcher)

    first = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)
    second = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)

    fetcher.release(1, entities=analyses)
    await second
    fetcher.release(0, error=FetchError("Failed to fetch analyses: timeout"))
    await first

    assert controller.status is ViewStatus.READY
    assert controller.error is None
    assert len(controller.entities) == 15


@pytest.mark.asyncio
async def test_filter_changes_reset_page_but_paging_keeps_filters(analyses):
    controller = ListController(ANALYSES_VIEW, StaticFetcher(analyses))
    await controller.reload()

    controller.set_page(2)
    assert controller.view_model().current_page == 2

    controller.set_facet("status", "In Progress")
    assert controller.query.page == 1
    assert controller.view_model().filtered_count == 5

    controller.set_page(7)
    assert controller.query.page == 1
    assert controller.query.facets == {"status": "In Progress"}

    controller.set_search("horizon")
    assert controller.view_model().filtered_count == 2


@pytest.mark.asyncio
async def test_reload_returns_to_first_page(analyses):
    controller = ListController(ANALYSES_VIEW, StaticFetcher(analyses))
    await controller.reload()
    controller.set_page(2)

    await controller.reload()

    assert controller.query.page == 1


@pytest.mark.asyncio
async def test_sort_toggle_and_clear_filters(analyses):
    controller = ListController(ANALYSES_VIEW, StaticFetcher(analyses))
    await controller.reload()

    controller.sort_by("date")
    assert controller.query.sort_direction is SortDirection.ASC
    assert ids(controller.view_model().page_items)[0] == "analysis-13"

    controller.sort_by("company")
    assert controller.query.sort_column == "company"
    assert controller.query.sort_direction is SortDirection.ASC

    controller.set_search("eco")
    controller.set_facet("status", "Completed")
    controller.set_facet("company.name", "EcoTech Solutions")
    assert controller.view_model().filtered_count == 2

    controller.clear_filters()
    model = controller.view_model()
    assert model.filtered_count == 15
    assert not controller.query.has_filters


@pytest.mark.asyncio
async def test_unexpected_fetch_error_enters_error_state(analyses):
    fetcher = StaticFetcher(error=RuntimeError("connection reset"))
    controller = ListController(ANALYSES_VIEW, fetcher)

    status = await controller.reload()

    assert status is ViewStatus.ERROR
    assert controller.error == "connection reset"
    assert controller.entities == []

    fetcher.error = None
    fetcher.entities = analyses
    assert await controller.reload() is ViewStatus.READY
    controller.set_search("eco")
    assert controller.query.search == "eco"


@pytest.mark.asyncio
async def test_stale_unexpected_error_is_dropped(analyses):
    fetcher = GatedFetcher()
    controller = ListController(ANALYSES_VIEW, fetcher)

    first = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)
    second = asyncio.create_task(controller.reload())
    await asyncio.sleep(0)

    fetcher.release(1, entities=analyses)
    await second
    fetcher.release(0, error=RuntimeError("connection reset"))
    await first

    assert controller.status is ViewStatus.READY
    assert controller.error is None
    assert len(controller.entities) == 15
