"""
StoredDocument model.

One row per document; the collection name partitions the table the way
collections partition a document database.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fundgrant.db.base import Base
from fundgrant.utils.identifiers import IDENTIFIER_KEYS
from fundgrant.utils.time import utc_now


class StoredDocument(Base):
    """
    documents table - schemaless JSON documents grouped by collection.
    """
    
    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_collection_created_at", "collection", "created_at"),
        Index("ix_documents_collection_external_id", "collection", "external_id"),
    )
    
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    
    collection: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    
    # Legacy string identifier ("comp-1", "fp2", ...) when the document has one
    external_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    
    data: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Render the document the way the API returns it."""
        body = {key: value for key, value in (self.data or {}).items() if key not in IDENTIFIER_KEYS}
        body["id"] = str(self.id)
        if self.external_id:
            body["externalId"] = self.external_id
        return body
