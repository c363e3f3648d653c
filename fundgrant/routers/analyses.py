"""
Analysis router - API endpoints for analyses.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.analysis import AnalysisCreate
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.analysis_service import AnalysisService

router = APIRouter(prefix="/api/analyses", tags=["Analyses"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_analyses(db: AsyncSession = Depends(get_db)):
    """List every analysis."""
    service = AnalysisService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_analysis(
    data: AnalysisCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new analysis.
    
    The company and funding project are registered when they do not exist yet.
    """
    service = AnalysisService(db)
    return await service.create_analysis(data)


@router.get("/{analysis_id}")
async def get_analysis(analysis_id: str, db: AsyncSession = Depends(get_db)):
    """Get an analysis by ID."""
    service = AnalysisService(db)
    return await service.get_document(analysis_id)


@router.put("/{analysis_id}")
async def update_analysis(
    analysis_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update an analysis."""
    service = AnalysisService(db)
    return await service.update_document(analysis_id, payload)


@router.delete("/{analysis_id}", response_model=MessageResponse)
async def delete_analysis(analysis_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an analysis."""
    service = AnalysisService(db)
    return await service.delete_document(analysis_id)
