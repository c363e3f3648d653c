"""
Main FastAPI application.

This is the entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from fundgrant.core.config import settings
from fundgrant.db.session import create_tables, engine
from fundgrant.errors import (
    AppError,
    app_error_handler,
    request_validation_error_handler,
    sqlalchemy_error_handler,
)
from fundgrant.routers import (
    agents,
    analyses,
    analysis_questions,
    companies,
    documents,
    document_sections,
    funding_projects,
    health,
    migration,
    projects,
    team_members,
)

# UI routes
from fundgrant.ui.routes import list_views

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.
    
    - On startup: configure logging and, when enabled, create the schema.
    - On shutdown: release pooled connections.
    """
    configure_logging()
    logger.info("Starting %s...", settings.APP_NAME)
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
        logger.info("Database tables are ready")

    yield

    logger.info("Shutting down %s...", settings.APP_NAME)
    await engine.dispose()


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Backend API and admin list views for grant-funding workflows",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)


# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(analyses.router)
app.include_router(analysis_questions.router)
app.include_router(agents.router)
app.include_router(companies.router)
app.include_router(document_sections.router)
app.include_router(documents.router)
app.include_router(funding_projects.router)
app.include_router(projects.router)
app.include_router(team_members.router)
app.include_router(migration.router)

# UI routes
app.include_router(list_views.router)


# Root endpoint
@app.get("/", include_in_schema=False)
async def root():
    """
    Root endpoint - redirects to the analyses list.
    """
    return RedirectResponse(url="/ui/analyses", status_code=303)
