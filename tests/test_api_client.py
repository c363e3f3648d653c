"""FundgrantApiClient and EntityFetcher over mocked and in-process transports."""

import json

import httpx
import pytest

from fundgrant.client.api_client import FetchError, FundgrantApiClient
from fundgrant.listing.controller import ListController, ViewStatus
from fundgrant.listing.fetcher import EntityFetcher
from fundgrant.listing.views import ANALYSES_VIEW, COMPANIES_VIEW
from fundgrant.main import app
from fundgrant.seed_data import load_fixture
from fundgrant.services.analysis_service import AnalysisService


def mock_client(handler):
    return FundgrantApiClient(base_url="http://test", transport=httpx.MockTransport(handler))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_documents_returns_json_list():
    def handler(request):
        assert request.url.path == "/api/companies"
        return httpx.Response(200, json=[{"id": "c1", "name": "EcoTech Solutions"}])

    async with mock_client(handler) as client:
        fetcher = EntityFetcher(client, COMPANIES_VIEW)
        assert await fetcher.fetch() == [{"id": "c1", "name": "EcoTech Solutions"}]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_error_status_becomes_fetch_error_with_server_message():
    def handler(request):
        return httpx.Response(500, json={"error": "Failed to fetch analyses", "message": "db down"})

    async with mock_client(handler) as client:
        with pytest.raises(FetchError) as exc_info:
            await client.list_documents("/api/analyses")

    error = exc_info.value
    assert error.status_code == 500
    assert error.server_error == "Failed to fetch analyses"
    assert error.message.startswith("Failed to fetch analyses: 500 Internal Server Error")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_transport_failure_becomes_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        with pytest.raises(FetchError) as exc_info:
            await client.list_documents("/api/funding-projects")

    assert exc_info.value.status_code is None
    assert exc_info.value.message.startswith("Failed to fetch funding projects")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_non_list_body_is_rejected():
    def handler(request):
        return httpx.Response(200, json={"items": []})

    async with mock_client(handler) as client:
        with pytest.raises(FetchError):
            await client.list_documents("/api/analyses")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_controller_shows_fetch_error_message():
    def handler(request):
        return httpx.Response(503, text="unavailable")

    async with mock_client(handler) as client:
        controller = ListController(ANALYSES_VIEW, EntityFetcher(client, ANALYSES_VIEW))
        assert await controller.reload() is ViewStatus.ERROR

    assert controller.error == "Failed to fetch analyses: 503 Service Unavailable"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_write_helpers_send_json_bodies():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path, request.content))
        if request.method == "DELETE":
            return httpx.Response(200, json={"message": "Company deleted successfully"})
        return httpx.Response(201 if request.method == "POST" else 200, json={"id": "c1", "name": "New"})

    async with mock_client(handler) as client:
        assert (await client.create_document("/api/companies", {"name": "New"}))["id"] == "c1"
        await client.update_document("/api/companies", "c1", {"name": "New"})
        await client.get_document("/api/companies", "c1")
        deleted = await client.delete_document("/api/companies", "c1")

    assert deleted == {"message": "Company deleted successfully"}
    assert [(method, path) for method, path, _ in seen] == [
        ("POST", "/api/companies"),
        ("PUT", "/api/companies/c1"),
        ("GET", "/api/companies/c1"),
        ("DELETE", "/api/companies/c1"),
    ]
    assert json.loads(seen[0][2]) == {"name": "New"}


@pytest.mark.db
@pytest.mark.asyncio
async def test_controller_loads_analyses_from_the_api(client, seed):
    await seed(AnalysisService, load_fixture("analyses"))

    async with FundgrantApiClient(base_url="http://test", transport=httpx.ASGITransport(app=app)) as api:
        controller = ListController(ANALYSES_VIEW, EntityFetcher(api, ANALYSES_VIEW))
        assert await controller.reload() is ViewStatus.READY

    model = controller.view_model()
    assert model.total_entities == 15
    assert model.total_pages == 2
    assert model.page_items[0]["externalId"] == "analysis-6"


@pytest.mark.server
@pytest.mark.asyncio
async def test_live_server_lists_companies():
    async with FundgrantApiClient() as api:
        companies = await api.list_documents("/api/companies")
    assert isinstance(companies, list)
