"""
Document section router - API endpoints for reusable application sections.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse, SeedResponse
from fundgrant.seed_data import load_fixture
from fundgrant.services.document_section_service import DocumentSectionService

router = APIRouter(prefix="/api/document-sections", tags=["Document Sections"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_document_sections(db: AsyncSession = Depends(get_db)):
    """List every document section."""
    service = DocumentSectionService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_document_section(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a document section placed after the current last one."""
    service = DocumentSectionService(db)
    return await service.create_document(payload)


@router.post("/seed", response_model=SeedResponse, response_model_exclude_none=True)
async def seed_document_sections(response: Response, db: AsyncSession = Depends(get_db)):
    """Load the default sections when the collection is empty."""
    service = DocumentSectionService(db)
    body, inserted = await service.seed(load_fixture("document_sections"))
    if inserted:
        response.status_code = status.HTTP_201_CREATED
    return body


@router.get("/{section_id}")
async def get_document_section(section_id: str, db: AsyncSession = Depends(get_db)):
    """Get a document section by ID."""
    service = DocumentSectionService(db)
    return await service.get_document(section_id)


@router.put("/{section_id}")
async def update_document_section(
    section_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update a document section."""
    service = DocumentSectionService(db)
    return await service.update_document(section_id, payload)


@router.delete("/{section_id}", response_model=MessageResponse)
async def delete_document_section(section_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a document section."""
    service = DocumentSectionService(db)
    return await service.delete_document(section_id)
