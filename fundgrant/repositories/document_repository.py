"""
Document repository - database operations for one named collection.
"""

import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Dict, Iterator, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.errors import StoreError
from fundgrant.models.document import StoredDocument
from fundgrant.utils.time import utc_now

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Repository for the documents of a single collection."""

    def __init__(self, db: AsyncSession, collection: str):
        self.db = db
        self.collection = collection

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        """Convert driver failures into StoreError at the operation boundary."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception("Store failure while trying to %s %s", action, self.collection)
            raise StoreError(f"Failed to {action} {self.collection}", cause=exc) from exc

    async def list(self) -> List[StoredDocument]:
        """List every document of the collection in insertion order."""
        with self._guard("fetch"):
            result = await self.db.execute(
                select(StoredDocument)
                .where(StoredDocument.collection == self.collection)
                .order_by(StoredDocument.created_at.asc())
            )
            documents = list(result.scalars().all())
        logger.debug("Found %d documents in %s", len(documents), self.collection)
        return documents

    async def count(self) -> int:
        with self._guard("count"):
            result = await self.db.execute(
                select(func.count())
                .select_from(StoredDocument)
                .where(StoredDocument.collection == self.collection)
            )
            return int(result.scalar_one())

    async def first(self) -> Optional[StoredDocument]:
        """Get the oldest document of the collection, if any."""
        with self._guard("fetch"):
            result = await self.db.execute(
                select(StoredDocument)
                .where(StoredDocument.collection == self.collection)
                .order_by(StoredDocument.created_at.asc())
                .limit(1)
            )
            return result.scalar_one_or_none()

    async def get(self, document_id: UUID) -> Optional[StoredDocument]:
        """Get a document by its native id."""
        with self._guard("fetch"):
            result = await self.db.execute(
                select(StoredDocument).where(
                    StoredDocument.id == document_id,
                    StoredDocument.collection == self.collection,
                )
            )
            return result.scalar_one_or_none()

    async def get_by_external_id(self, external_id: str) -> Optional[StoredDocument]:
        """Get a document by its legacy string identifier."""
        with self._guard("fetch"):
            result = await self.db.execute(
                select(StoredDocument)
                .where(
                    StoredDocument.collection == self.collection,
                    StoredDocument.external_id == external_id,
                )
                .order_by(StoredDocument.created_at.asc())
                .limit(1)
            )
            return result.scalar_one_or_none()

    async def find_one(self, **fields: str) -> Optional[StoredDocument]:
        """
        Get the first document whose top-level string fields equal the given values.

        Example: ``await repo.find_one(name="EcoTech Solutions")``
        """
        query = select(StoredDocument).where(StoredDocument.collection == self.collection)
        for key, value in fields.items():
            query = query.where(StoredDocument.data[key].as_string() == value)
        query = query.order_by(StoredDocument.created_at.asc()).limit(1)

        with self._guard("fetch"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def insert(self, data: Dict[str, Any], external_id: Optional[str] = None) -> StoredDocument:
        """Insert a new document and return it with its assigned id."""
        document = StoredDocument(
            collection=self.collection,
            external_id=external_id,
            data=dict(data),
        )
        with self._guard("create"):
            self.db.add(document)
            await self.db.flush()
            await self.db.refresh(document)
        logger.info("Created %s document %s", self.collection, document.id)
        return document

    async def insert_many(self, records: Sequence[Dict[str, Any]], keep_external_ids: bool = False) -> List[StoredDocument]:
        """Insert documents in order; creation times are spaced so list order is stable."""
        base_time = utc_now()
        documents = []
        for position, record in enumerate(records):
            external_id = record.get("id") if keep_external_ids and isinstance(record.get("id"), str) else None
            documents.append(
                StoredDocument(
                    collection=self.collection,
                    external_id=external_id,
                    data={key: value for key, value in record.items() if key not in ("id", "_id")},
                    created_at=base_time + timedelta(microseconds=position),
                )
            )
        with self._guard("create"):
            self.db.add_all(documents)
            await self.db.flush()
        logger.info("Inserted %d documents into %s", len(documents), self.collection)
        return documents

    async def update(self, document: StoredDocument, patch: Dict[str, Any]) -> bool:
        """
        Apply a shallow ``$set``-style merge.

        Returns False when the patch leaves the document unchanged.
        """
        merged = {**(document.data or {}), **patch}
        if merged == document.data:
            return False
        with self._guard("update"):
            document.data = merged
            await self.db.flush()
            await self.db.refresh(document)
        logger.info("Updated %s document %s", self.collection, document.id)
        return True

    async def delete(self, document: StoredDocument) -> None:
        with self._guard("delete"):
            await self.db.delete(document)
            await self.db.flush()
        logger.info("Deleted %s document %s", self.collection, document.id)

    async def commit(self) -> None:
        with self._guard("save"):
            await self.db.commit()
