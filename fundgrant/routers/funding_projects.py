"""
Funding project router - API endpoints for the funding programme catalogue.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.project_service import FundingProjectService

router = APIRouter(prefix="/api/funding-projects", tags=["Funding Projects"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_funding_projects(db: AsyncSession = Depends(get_db)):
    """List every funding project."""
    service = FundingProjectService(db)
    return await service.list_documents()


@router.post("")
async def upsert_funding_project(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a funding project, or update the one named by ``projectId``.
    
    Returns 200 for an update and 201 for a creation.
    """
    service = FundingProjectService(db)
    document, created = await service.upsert(payload)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return document


@router.get("/{project_id}")
async def get_funding_project(project_id: str, db: AsyncSession = Depends(get_db)):
    """Get a funding project by ID."""
    service = FundingProjectService(db)
    return await service.get_document(project_id)


@router.put("/{project_id}")
async def update_funding_project(
    project_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update a funding project."""
    service = FundingProjectService(db)
    return await service.update_document(project_id, payload)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_funding_project(project_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a funding project."""
    service = FundingProjectService(db)
    return await service.delete_document(project_id)
