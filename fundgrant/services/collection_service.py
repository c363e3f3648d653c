"""
Shared CRUD behavior for document collections.

Each entity service subclasses CollectionService and declares its collection,
how ids in URLs are resolved, the required fields and the defaults stamped on
new documents.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.errors import NotFoundError, ValidationError
from fundgrant.models.document import StoredDocument
from fundgrant.repositories.document_repository import DocumentRepository
from fundgrant.utils.identifiers import parse_document_id, strip_identifiers
from fundgrant.utils.time import utc_now_iso

logger = logging.getLogger(__name__)


class LookupMode(str, Enum):
    """How a URL identifier is matched to a stored document."""

    # Only native ids; anything else is rejected with 400 before the store is touched.
    STRICT = "strict"
    # Native id first, then the legacy string identifier.
    EITHER_KEY = "either_key"


def missing_fields_message(fields: Sequence[str]) -> str:
    """'Title and category are required' style message."""
    labels = list(fields)
    if len(labels) == 1:
        text = labels[0]
    else:
        text = ", ".join(labels[:-1]) + f" and {labels[-1]}"
    verb = "is" if len(labels) == 1 else "are"
    return f"{text[:1].upper()}{text[1:]} {verb} required"


class CollectionService:
    """Base service for a document collection."""

    collection: str = ""
    entity_label: str = "Document"
    lookup_mode: LookupMode = LookupMode.STRICT
    required_fields: Tuple[str, ...] = ()
    created_field: str = "createdAt"
    updated_field: str = "updatedAt"

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = DocumentRepository(db, self.collection)

    def validate_required(self, payload: Dict[str, Any]) -> None:
        missing = [field for field in self.required_fields if not payload.get(field)]
        if missing:
            raise ValidationError(missing_fields_message(self.required_fields))

    async def lookup(self, reference: str) -> Optional[StoredDocument]:
        """Find the document a URL identifier refers to, if any."""
        native_id = parse_document_id(reference)
        if native_id is None and self.lookup_mode == LookupMode.STRICT:
            raise ValidationError(f"Invalid {self.entity_label.lower()} ID format")

        document = None
        if native_id is not None:
            document = await self.repository.get(native_id)
        if document is None and self.lookup_mode == LookupMode.EITHER_KEY:
            document = await self.repository.get_by_external_id(reference)
        return document

    async def resolve(self, reference: str) -> StoredDocument:
        """Like lookup, but a missing document is a 404."""
        document = await self.lookup(reference)
        if document is None:
            raise NotFoundError(f"{self.entity_label} not found")
        return document

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply defaults and creation metadata to a new document body."""
        now = utc_now_iso()
        data.setdefault(self.created_field, now)
        data[self.updated_field] = now
        return data

    def prepare_patch(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        patch[self.updated_field] = utc_now_iso()
        return patch

    async def list_documents(self) -> List[Dict[str, Any]]:
        documents = await self.repository.list()
        logger.info("Retrieved %d documents from %s", len(documents), self.collection)
        return [document.to_dict() for document in documents]

    async def get_document(self, reference: str) -> Dict[str, Any]:
        document = await self.resolve(reference)
        return document.to_dict()

    async def create_document(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.validate_required(payload)
        data = self.prepare_new(strip_identifiers(payload))
        document = await self.repository.insert(data)
        await self.repository.commit()
        return document.to_dict()

    async def update_document(self, reference: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        document = await self.resolve(reference)
        patch = self.prepare_patch(strip_identifiers(payload))
        await self.repository.update(document, patch)
        await self.repository.commit()
        return document.to_dict()

    async def delete_document(self, reference: str) -> Dict[str, str]:
        document = await self.resolve(reference)
        await self.repository.delete(document)
        await self.repository.commit()
        return {"message": f"{self.entity_label} deleted successfully"}

    async def seed(self, records: Sequence[Dict[str, Any]]) -> Tuple[Dict[str, Any], bool]:
        """
        Load fixture records into an empty collection.

        Returns the response body and whether anything was inserted.
        """
        label = self.collection.replace("-", " ")
        existing = await self.repository.count()
        if existing > 0:
            return {
                "success": True,
                "message": f"Database already contains {existing} {label}. No seeding needed.",
                "count": existing,
            }, False

        prepared = [self.prepare_new(dict(record)) for record in records]
        documents = await self.repository.insert_many(prepared, keep_external_ids=True)
        await self.repository.commit()
        return {
            "success": True,
            "message": f"Successfully seeded {len(documents)} {label}",
            "count": len(documents),
            "ids": [str(document.id) for document in documents],
        }, True
