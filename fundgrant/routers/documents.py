"""
Reference document router - API endpoints for reference document metadata.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.reference_document_service import ReferenceDocumentService

router = APIRouter(prefix="/api/documents", tags=["Reference Documents"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_documents(db: AsyncSession = Depends(get_db)):
    service = ReferenceDocumentService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_document(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Register a reference document; title is required."""
    service = ReferenceDocumentService(db)
    return await service.create_document(payload)


@router.get("/{document_id}")
async def get_document(document_id: str, db: AsyncSession = Depends(get_db)):
    service = ReferenceDocumentService(db)
    return await service.get_document(document_id)


@router.put("/{document_id}")
async def update_document(
    document_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    service = ReferenceDocumentService(db)
    return await service.update_document(document_id, payload)


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(document_id: str, db: AsyncSession = Depends(get_db)):
    service = ReferenceDocumentService(db)
    return await service.delete_document(document_id)
