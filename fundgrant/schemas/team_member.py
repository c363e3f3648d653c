"""
Team member Pydantic schemas.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AssignedCompany(BaseModel):
    id: str
    name: str


class TeamMemberCreate(BaseModel):
    """Schema for adding a team member."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    role: Literal["Company Admin", "Team Member"]
    assignedCompanies: List[AssignedCompany] = Field(default_factory=list)
    activeProjects: int = 0

    model_config = ConfigDict(extra="allow")
