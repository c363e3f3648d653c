"""
Reference document business logic service.

Holds the metadata of reference documents (title, type, status, dates);
the files themselves are stored elsewhere.
"""

from typing import Any, Dict

from fundgrant.core.collections import Collections
from fundgrant.services.collection_service import CollectionService
from fundgrant.utils.time import utc_now_iso


class ReferenceDocumentService(CollectionService):
    """Service for reference documents (native ids only)."""

    collection = Collections.REFERENCE_DOCUMENTS
    entity_label = "Document"
    required_fields = ("title",)
    created_field = "uploadDate"
    updated_field = "lastModified"

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = utc_now_iso()
        data[self.created_field] = data.get(self.created_field) or now
        data[self.updated_field] = data.get(self.updated_field) or now
        data["status"] = data.get("status") or "active"
        return data
