"""
Schemas package.

Import all schemas here for easy access.
"""

from fundgrant.schemas.analysis import (
    ANALYSIS_STATUSES,
    AnalysisCompanyRef,
    AnalysisCreate,
    AnalysisProjectRef,
    QuestionResponse,
)
from fundgrant.schemas.common import (
    CollectionStat,
    DbStatusResponse,
    MessageResponse,
    MigrationResponse,
    SeedResponse,
)
from fundgrant.schemas.team_member import AssignedCompany, TeamMemberCreate

__all__ = [
    # Analysis
    "ANALYSIS_STATUSES", "AnalysisCompanyRef", "AnalysisCreate", "AnalysisProjectRef", "QuestionResponse",
    # Shared responses
    "CollectionStat", "DbStatusResponse", "MessageResponse", "MigrationResponse", "SeedResponse",
    # Team member
    "AssignedCompany", "TeamMemberCreate",
]
