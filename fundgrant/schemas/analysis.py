"""
Analysis Pydantic schemas.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

AnalysisStatus = Literal["Completed", "In Progress", "Pending", "Needs Review"]
ANALYSIS_STATUSES = ("Completed", "In Progress", "Pending", "Needs Review")


class QuestionResponse(BaseModel):
    """One answered (or unanswered) analysis question."""

    questionId: Optional[str] = None
    question: str = ""
    answer: Optional[str] = ""
    category: Optional[str] = None


class AnalysisCompanyRef(BaseModel):
    """Company the analysis is about; created on the fly when unknown."""

    name: Optional[str] = None
    sector: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class AnalysisProjectRef(BaseModel):
    """Funding project the analysis targets."""

    name: Optional[str] = None
    fundingAmount: Union[int, float] = 0
    fundingId: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class AnalysisCreate(BaseModel):
    """Schema for creating a new analysis from the add-analysis form."""

    company: AnalysisCompanyRef
    project: AnalysisProjectRef
    answers: List[QuestionResponse] = Field(default_factory=list)
    date: Optional[str] = None
    status: Optional[AnalysisStatus] = None
