"""
Smoke tests for the list view pages.

Each page must render its rows, its empty state and its error state.
"""

import re

import pytest

from fundgrant.errors import StoreError
from fundgrant.seed_data import load_fixture
from fundgrant.services.analysis_service import AnalysisService
from fundgrant.services.company_service import CompanyService
from fundgrant.services.project_service import FundingProjectService

pytestmark = [pytest.mark.db, pytest.mark.asyncio]


def row_count(html: str) -> int:
    return len(re.findall(r"<tr data-id=", html))


async def test_analyses_page_shows_first_page(client, seed):
    await seed(AnalysisService, load_fixture("analyses"))

    response = await client.get("/ui/analyses")

    assert response.status_code == 200
    assert row_count(response.text) == 10
    assert "Showing 1-10 of 15" in response.text
    # Facet options come from the data
    assert '<option value="Needs Review"' in response.text


async def test_analyses_page_filters_and_clamps_page(client, seed):
    await seed(AnalysisService, load_fixture("analyses"))

    completed = await client.get("/ui/analyses", params={"status": "Completed", "page": 9})

    assert completed.status_code == 200
    assert row_count(completed.text) == 5
    assert "Showing 1-5 of 5" in completed.text

    second = await client.get("/ui/analyses", params={"page": 2})
    assert row_count(second.text) == 5


async def test_empty_state_is_distinct(client, seed):
    await seed(CompanyService, load_fixture("companies"))

    response = await client.get("/ui/companies", params={"q": "no such company"})

    assert response.status_code == 200
    assert "No results found. Try adjusting your filters." in response.text
    assert row_count(response.text) == 0
    assert "Try again" not in response.text


async def test_funding_projects_page_sorts_by_deadline(client, seed):
    await seed(FundingProjectService, load_fixture("funding_projects"))

    response = await client.get("/ui/funding-projects", params={"sort": "deadline", "dir": "desc"})

    text = response.text
    assert text.index("Research &amp; Development Tax Credit") < text.index("Green Innovation Fund")


async def test_store_failure_renders_error_state(client, monkeypatch):
    async def failing_list(self):
        raise StoreError("Failed to fetch analysis-data", cause=RuntimeError("connection refused"))

    monkeypatch.setattr(AnalysisService, "list_documents", failing_list)

    response = await client.get("/ui/analyses")

    assert response.status_code == 500
    assert "Failed to fetch analysis-data" in response.text
    assert "Try again" in response.text
    assert "No results found" not in response.text


async def test_root_redirects_to_analyses(client):
    response = await client.get("/")

    assert response.status_code == 303
    assert response.headers["location"] == "/ui/analyses"
