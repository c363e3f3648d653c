"""
Team member router - API endpoints for team members.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse
from fundgrant.schemas.team_member import TeamMemberCreate
from fundgrant.services.team_member_service import TeamMemberService

router = APIRouter(prefix="/api/team-members", tags=["Team Members"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_team_members(db: AsyncSession = Depends(get_db)):
    """List every team member."""
    service = TeamMemberService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team_member(
    data: TeamMemberCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new team member."""
    service = TeamMemberService(db)
    return await service.create_document(data.model_dump())


@router.get("/{member_id}")
async def get_team_member(member_id: str, db: AsyncSession = Depends(get_db)):
    """Get a team member by ID."""
    service = TeamMemberService(db)
    return await service.get_document(member_id)


@router.put("/{member_id}")
async def update_team_member(
    member_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Update a team member."""
    service = TeamMemberService(db)
    return await service.update_document(member_id, payload)


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_team_member(member_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a team member."""
    service = TeamMemberService(db)
    return await service.delete_document(member_id)
