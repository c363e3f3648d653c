"""
Document section business logic service.
"""

from typing import Any, Dict

from fundgrant.core.collections import Collections
from fundgrant.services.collection_service import CollectionService
from fundgrant.utils.identifiers import strip_identifiers


class DocumentSectionService(CollectionService):
    """Service for the reusable application document sections."""

    collection = Collections.DOCUMENT_SECTIONS
    entity_label = "Document section"
    required_fields = ("title", "category")

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("isRequired") is None:
            data["isRequired"] = False
        data["associatedProjects"] = data.get("associatedProjects") or []
        return super().prepare_new(data)

    async def next_order(self) -> int:
        """Position after the current last section."""
        orders = [
            document.data.get("order")
            for document in await self.repository.list()
        ]
        numeric = [order for order in orders if isinstance(order, (int, float)) and not isinstance(order, bool)]
        return int(max(numeric)) + 1 if numeric else 1

    async def create_document(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.validate_required(payload)
        data = self.prepare_new(strip_identifiers(payload))
        if not data.get("order"):
            data["order"] = await self.next_order()
        document = await self.repository.insert(data)
        await self.repository.commit()
        return document.to_dict()
