"""
Analysis question router - API endpoints for the question bank.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.analysis_question_service import AnalysisQuestionService

router = APIRouter(prefix="/api/analysis-questions", tags=["Analysis Questions"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_analysis_questions(db: AsyncSession = Depends(get_db)):
    """List every analysis question."""
    service = AnalysisQuestionService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_analysis_question(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a new analysis question."""
    service = AnalysisQuestionService(db)
    return await service.create_document(payload)


@router.get("/by-project", response_model=List[Dict[str, Any]])
async def list_analysis_questions_by_project(
    company_id: Optional[str] = Query(None, alias="companyId"),
    project_id: Optional[str] = Query(None, alias="projectId"),
    project_name: Optional[str] = Query(None, alias="projectName"),
    db: AsyncSession = Depends(get_db),
):
    """
    Questions attached to a company and/or a project.
    
    At least one of companyId, projectId or projectName is required.
    """
    service = AnalysisQuestionService(db)
    return await service.list_for_project(company_id, project_id, project_name)


@router.get("/{question_id}")
async def get_analysis_question(question_id: str, db: AsyncSession = Depends(get_db)):
    """Get an analysis question by ID."""
    service = AnalysisQuestionService(db)
    return await service.get_document(question_id)


@router.put("/{question_id}")
async def update_analysis_question(
    question_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update an analysis question."""
    service = AnalysisQuestionService(db)
    return await service.update_document(question_id, payload)


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_analysis_question(question_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an analysis question."""
    service = AnalysisQuestionService(db)
    return await service.delete_document(question_id)
