"""
Writing agent business logic service.
"""

from typing import Any, Dict

from fundgrant.core.collections import Collections
from fundgrant.services.collection_service import CollectionService


class AgentService(CollectionService):
    """Service for writing agent profiles."""

    collection = Collections.AGENTS
    entity_label = "Agent"
    required_fields = ("name", "tone", "specialization")

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["isRecommended"] = bool(data.get("isRecommended", False))
        return super().prepare_new(data)
