"""
List view routes for UI.

Each page loads its whole collection, then filters, sorts and paginates it
with the query string as the view state.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Type
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.config import settings
from fundgrant.core.dependencies import get_db
from fundgrant.errors import StoreError
from fundgrant.listing.comparators import SortDirection
from fundgrant.listing.view_model import ListQuery, ListViewConfig, ViewModel, assemble
from fundgrant.listing.views import ANALYSES_VIEW, COMPANIES_VIEW, FUNDING_PROJECTS_VIEW
from fundgrant.services.analysis_service import AnalysisService
from fundgrant.services.collection_service import CollectionService
from fundgrant.services.company_service import CompanyService
from fundgrant.services.project_service import FundingProjectService

router = APIRouter(tags=["ui-list-views"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


def query_from_params(view: ListViewConfig, params: Dict[str, str]) -> ListQuery:
    """Read the view state from query parameters; blank facet values mean 'all'."""
    try:
        page = int(params.get("page") or 1)
    except ValueError:
        page = 1
    sort_column = params.get("sort") or view.default_sort
    # A non-default column starts ascending
    default_direction = view.default_direction if sort_column == view.default_sort else SortDirection.ASC
    return ListQuery(
        search=(params.get("q") or "").strip(),
        facets={facet.path: params.get(facet.param) or None for facet in view.facets},
        sort_column=sort_column,
        sort_direction=SortDirection.parse(params.get("dir"), default_direction),
        page=page,
    )


def query_to_params(view: ListViewConfig, query: ListQuery, **overrides: Any) -> Dict[str, Any]:
    params: Dict[str, Any] = {"q": query.search}
    for facet in view.facets:
        params[facet.param] = query.facets.get(facet.path) or ""
    params["sort"] = query.sort_column or ""
    params["dir"] = query.sort_direction.value
    params["page"] = query.page
    params.update(overrides)
    return {key: value for key, value in params.items() if value not in ("", None)}


def build_links(request: Request, view: ListViewConfig, model: ViewModel) -> Dict[str, Any]:
    base = request.url.path
    query = model.query

    def link(**overrides: Any) -> str:
        return f"{base}?{urlencode(query_to_params(view, query, **overrides))}"

    sort_links = {}
    for name in view.sort_columns:
        if name == query.sort_column:
            direction = query.sort_direction.flipped
        else:
            direction = SortDirection.ASC
        sort_links[name] = link(sort=name, dir=direction.value, page=1)

    return {
        "sort": sort_links,
        "previous": link(page=model.current_page - 1) if model.page.has_previous else None,
        "next": link(page=model.current_page + 1) if model.page.has_next else None,
        "pages": {number: link(page=number) for number in range(1, model.total_pages + 1)},
        "clear": f"{base}?{urlencode({'sort': query.sort_column or '', 'dir': query.sort_direction.value})}",
        "retry": str(request.url),
    }


async def render_list_view(
    request: Request,
    view: ListViewConfig,
    service_class: Type[CollectionService],
    session: AsyncSession,
) -> HTMLResponse:
    query = query_from_params(view, dict(request.query_params))
    model: Optional[ViewModel] = None
    error_message: Optional[str] = None

    try:
        entities = await service_class(session).list_documents()
    except StoreError as exc:
        error_message = exc.message
    else:
        model = assemble(view, entities, query)

    return templates.TemplateResponse(
        request,
        "list_view.html",
        {
            "app_name": settings.APP_NAME,
            "active_page": view.name,
            "view": view,
            "query": query,
            "model": model,
            "links": build_links(request, view, model) if model is not None else {"retry": str(request.url)},
            "error_message": error_message,
        },
        status_code=500 if error_message else 200,
    )


@router.get("/ui/analyses", response_class=HTMLResponse)
async def analyses_list(request: Request, session: AsyncSession = Depends(get_db)):
    return await render_list_view(request, ANALYSES_VIEW, AnalysisService, session)


@router.get("/ui/companies", response_class=HTMLResponse)
async def companies_list(request: Request, session: AsyncSession = Depends(get_db)):
    return await render_list_view(request, COMPANIES_VIEW, CompanyService, session)


@router.get("/ui/funding-projects", response_class=HTMLResponse)
async def funding_projects_list(request: Request, session: AsyncSession = Depends(get_db)):
    return await render_list_view(request, FUNDING_PROJECTS_VIEW, FundingProjectService, session)
