"""
Company router - API endpoints for companies.

Companies may be addressed by their native id or by their legacy string id.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.services.company_service import CompanyService

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_companies(db: AsyncSession = Depends(get_db)):
    """List every company."""
    service = CompanyService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a new company."""
    service = CompanyService(db)
    return await service.create_document(payload)


@router.get("/{company_id}")
async def get_company(company_id: str, db: AsyncSession = Depends(get_db)):
    """Get a company by ID."""
    service = CompanyService(db)
    return await service.get_document(company_id)


@router.put("/{company_id}")
async def update_company(
    company_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update a company."""
    service = CompanyService(db)
    return await service.update_document(company_id, payload)


@router.delete("/{company_id}", response_model=MessageResponse)
async def delete_company(company_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a company."""
    service = CompanyService(db)
    return await service.delete_document(company_id)
