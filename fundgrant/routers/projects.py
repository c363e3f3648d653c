"""
Project router - API endpoints for grant application projects.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.project_service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_projects(db: AsyncSession = Depends(get_db)):
    """List every project."""
    service = ProjectService(db)
    return await service.list_documents()


@router.post("")
async def upsert_project(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a project, or update the one named by ``projectId``."""
    service = ProjectService(db)
    document, created = await service.upsert(payload)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return document


@router.get("/{project_id}")
async def get_project(project_id: str, db: AsyncSession = Depends(get_db)):
    """Get a project by ID."""
    service = ProjectService(db)
    return await service.get_document(project_id)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Replace fields of a project."""
    service = ProjectService(db)
    return await service.update_document(project_id, payload)


@router.patch("/{project_id}")
async def patch_project(
    project_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Edit one written section (when ``sectionId`` is given) or patch fields.
    """
    service = ProjectService(db)
    return await service.patch_document(project_id, payload)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(project_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a project."""
    service = ProjectService(db)
    return await service.delete_document(project_id)
