"""
Project business logic service.

Covers the submitted grant projects (with their written sections) and the
funding project catalogue, which share the upsert-or-create convention.
"""

import logging
from typing import Any, Dict, List, Tuple

from fundgrant.core.collections import Collections
from fundgrant.repositories.document_repository import DocumentRepository
from fundgrant.services.collection_service import CollectionService, LookupMode
from fundgrant.utils.identifiers import strip_identifiers
from fundgrant.utils.time import utc_now_iso

logger = logging.getLogger(__name__)


def count_words(content: str) -> int:
    return len(content.split())


class ProjectService(CollectionService):
    """Service for grant application projects."""

    collection = Collections.PROJECTS
    entity_label = "Project"
    lookup_mode = LookupMode.EITHER_KEY
    # Body field that names an existing document to update instead of creating one
    reference_field = "projectId"

    async def upsert(self, payload: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        """
        Update the referenced document, or create a new one.

        Steps, in order: look up the reference; when found apply the body as a
        partial update and report created=False; otherwise strip every
        identifier field, stamp creation metadata and insert (created=True).
        """
        content = strip_identifiers(payload, (self.reference_field,))
        reference = payload.get(self.reference_field)

        if reference:
            existing = await self.lookup(str(reference))
            if existing is not None:
                if all(existing.data.get(key) == value for key, value in content.items()):
                    logger.warning("No changes were made to %s %s", self.collection, existing.id)
                    return existing.to_dict(), False
                logger.info("Updating existing %s document %s", self.collection, existing.id)
                await self.repository.update(existing, self.prepare_patch(content))
                await self.repository.commit()
                return existing.to_dict(), False
            logger.info("Reference %s not found in %s; creating a new document", reference, self.collection)

        self.validate_required(content)
        document = await self.repository.insert(self.prepare_new(content))
        await self.repository.commit()
        return document.to_dict(), True

    async def update_section(self, reference: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or replace one entry of the project's sections list."""
        document = await self.resolve(reference)
        section_id = payload["sectionId"]
        content = payload.get("content") or ""
        now = utc_now_iso()

        sections: List[Dict[str, Any]] = [dict(section) for section in document.data.get("sections") or []]
        for index, section in enumerate(sections):
            if section.get("id") == section_id:
                sections[index] = {
                    **section,
                    "content": content,
                    "wordCount": count_words(content),
                    "status": payload.get("status") or section.get("status"),
                    "updatedAt": now,
                }
                break
        else:
            sections.append({
                "id": section_id,
                "title": payload.get("title") or "Untitled Section",
                "description": payload.get("description") or "",
                "content": content,
                "wordCount": count_words(content),
                "status": payload.get("status") or "in_progress",
                "required": payload.get("required") or False,
                "hasWarning": payload.get("hasWarning") or False,
                "createdAt": now,
                "updatedAt": now,
            })

        logger.info("Updating section %s for project %s", section_id, document.id)
        await self.repository.update(document, {"sections": sections, "updatedAt": now})
        await self.repository.commit()
        return document.to_dict()

    async def patch_document(self, reference: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if payload.get("sectionId"):
            return await self.update_section(reference, payload)
        return await self.update_document(reference, strip_identifiers(payload, ("sectionId",)))

    async def migrate_sections(self, reference: str) -> Dict[str, Any]:
        """
        Copy every document section into the project's sections list.

        Sections already present (same id) are refreshed in place; others are
        appended. A project that does not exist yet is created under the
        given reference.
        """
        project = await self.lookup(reference)
        if project is None:
            logger.info("Creating new project with ID: %s", reference)
            now = utc_now_iso()
            project = await self.repository.insert(
                {
                    "name": f"Project {reference}",
                    "description": "Auto-generated project from migration",
                    "createdAt": now,
                    "updatedAt": now,
                    "sections": [],
                },
                external_id=reference,
            )

        section_repository = DocumentRepository(self.db, Collections.DOCUMENT_SECTIONS)
        source_sections = await section_repository.list()
        logger.info("Found %d sections in %s", len(source_sections), Collections.DOCUMENT_SECTIONS)

        now = utc_now_iso()
        sections: List[Dict[str, Any]] = [dict(section) for section in project.data.get("sections") or []]
        positions = {section.get("id"): index for index, section in enumerate(sections)}
        for source in source_sections:
            data = source.data
            section_id = str(source.id)
            section = {
                "id": section_id,
                "title": data.get("title"),
                "description": data.get("description") or "",
                "content": data.get("content") or "",
                "wordCount": data.get("wordCount") or 0,
                "status": data.get("status") or "not_started",
                "required": data.get("required") or data.get("isRequired") or False,
                "hasWarning": data.get("hasWarning") or False,
                "createdAt": data.get("createdAt") or now,
                "updatedAt": data.get("updatedAt") or now,
            }
            if section_id in positions:
                index = positions[section_id]
                sections[index] = {**sections[index], **section, "updatedAt": now}
            else:
                positions[section_id] = len(sections)
                sections.append(section)

        await self.repository.update(project, {"sections": sections, "updatedAt": now})
        await self.repository.commit()
        logger.info("Migrated %d sections to project %s", len(source_sections), project.id)
        return {
            "message": f"Successfully migrated {len(source_sections)} sections to project {reference}",
            "projectId": str(project.id),
            "sectionsCount": len(source_sections),
        }


class FundingProjectService(ProjectService):
    """Service for the funding programme catalogue."""

    collection = Collections.FUNDING_PROJECTS
    entity_label = "Funding project"
    required_fields = ("title",)
