"""
Team member business logic service.
"""

from typing import Any, Dict

from fundgrant.core.collections import Collections
from fundgrant.errors import ValidationError
from fundgrant.services.collection_service import CollectionService

TEAM_ROLES = ("Company Admin", "Team Member")


class TeamMemberService(CollectionService):
    """Service for team members and their company assignments."""

    collection = Collections.TEAM_MEMBERS
    entity_label = "Team member"
    required_fields = ("name", "email", "role")

    def validate_required(self, payload: Dict[str, Any]) -> None:
        super().validate_required(payload)
        self._check_role(payload.get("role"))

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data.setdefault("assignedCompanies", [])
        data.setdefault("activeProjects", 0)
        return super().prepare_new(data)

    def prepare_patch(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        if "role" in patch:
            self._check_role(patch["role"])
        return super().prepare_patch(patch)

    @staticmethod
    def _check_role(role: Any) -> None:
        if role not in TEAM_ROLES:
            raise ValidationError(f"Role must be one of: {', '.join(TEAM_ROLES)}")
