"""
Agent router - API endpoints for writing agent profiles.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.dependencies import get_db
from fundgrant.schemas.common import MessageResponse, SeedResponse
from fundgrant.seed_data import load_fixture
from fundgrant.services.agent_service import AgentService

router = APIRouter(prefix="/api/agents", tags=["Agents"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_agents(db: AsyncSession = Depends(get_db)):
    service = AgentService(db)
    return await service.list_documents()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_agent(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    service = AgentService(db)
    return await service.create_document(payload)


@router.post("/seed", response_model=SeedResponse, response_model_exclude_none=True)
async def seed_agents(response: Response, db: AsyncSession = Depends(get_db)):
    """Load the default agents when the collection is empty."""
    service = AgentService(db)
    body, inserted = await service.seed(load_fixture("agents"))
    if inserted:
        response.status_code = status.HTTP_201_CREATED
    return body


@router.get("/{agent_id}")
async def get_agent(agent_id: str, db: AsyncSession = Depends(get_db)):
    service = AgentService(db)
    return await service.get_document(agent_id)


@router.put("/{agent_id}")
async def update_agent(
    agent_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    service = AgentService(db)
    return await service.update_document(agent_id, payload)


@router.delete("/{agent_id}", response_model=MessageResponse)
async def delete_agent(agent_id: str, db: AsyncSession = Depends(get_db)):
    service = AgentService(db)
    return await service.delete_document(agent_id)
