"""
Migration router - one-off data moves between collections.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MigrationResponse
from fundgrant.services.project_service import ProjectService

router = APIRouter(prefix="/api/migration", tags=["Migration"])


@router.post("/sections-to-projects", response_model=MigrationResponse)
async def migrate_sections_to_project(
    project_id: str = Query(..., alias="projectId", min_length=1),
    db: AsyncSession = Depends(get_db),
):
    """Copy every document section into the given project's sections list."""
    service = ProjectService(db)
    return await service.migrate_sections(project_id)
