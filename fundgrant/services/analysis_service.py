"""
Analysis business logic service.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fundgrant.core.collections import Collections
from fundgrant.errors import ValidationError
from fundgrant.repositories.document_repository import DocumentRepository
from fundgrant.schemas.analysis import ANALYSIS_STATUSES, AnalysisCreate
from fundgrant.services.collection_service import CollectionService
from fundgrant.utils.time import utc_now_iso

logger = logging.getLogger(__name__)


class AnalysisService(CollectionService):
    """Service for company/funding-project fit analyses."""

    collection = Collections.ANALYSES
    entity_label = "Analysis"
    updated_field = "lastUpdated"

    def __init__(self, db):
        super().__init__(db)
        self.company_repository = DocumentRepository(db, Collections.COMPANIES)
        self.funding_project_repository = DocumentRepository(db, Collections.FUNDING_PROJECTS)

    async def _find_or_create_company(self, name: str, sector: Optional[str]) -> UUID:
        existing = await self.company_repository.find_one(name=name)
        if existing is not None:
            logger.info("Found existing company with ID: %s", existing.id)
            return existing.id

        created = await self.company_repository.insert({
            "name": name,
            "sector": sector or "Unknown",
            "createdAt": utc_now_iso(),
        })
        logger.info("Created new company with ID: %s", created.id)
        return created.id

    async def _find_or_create_project(self, data: AnalysisCreate, company_id: UUID) -> UUID:
        name = data.project.name
        existing = await self.funding_project_repository.find_one(name=name, companyId=str(company_id))
        if existing is not None:
            logger.info("Found existing project with ID: %s", existing.id)
            return existing.id

        created = await self.funding_project_repository.insert({
            "name": name,
            "title": name,
            "companyId": str(company_id),
            "fundingAmount": data.project.fundingAmount or 0,
            "fundingId": data.project.fundingId,
            "status": "Active",
            "createdAt": utc_now_iso(),
        })
        logger.info("Created new project with ID: %s", created.id)
        return created.id

    async def create_analysis(self, data: AnalysisCreate) -> Dict[str, Any]:
        """
        Create an analysis, registering its company and funding project if needed.

        Answers become the stored questions list; completedQuestions counts the
        answers with non-blank text.
        """
        company_id = None
        if data.company.name:
            company_id = await self._find_or_create_company(data.company.name, data.company.sector)

        if data.project.name and company_id is not None:
            await self._find_or_create_project(data, company_id)

        questions = []
        completed = 0
        for answer in data.answers:
            text = answer.answer or ""
            if text.strip():
                completed += 1
            questions.append({
                "questionId": answer.questionId,
                "question": answer.question,
                "answer": text,
                "category": answer.category or "General",
            })

        now = utc_now_iso()
        analysis = {
            "company": {
                "name": data.company.name,
                "sector": data.company.sector,
            },
            "project": {
                "name": data.project.name,
                "fundingId": data.project.fundingId,
                "fundingAmount": data.project.fundingAmount or 0,
            },
            "date": data.date or now,
            "status": data.status or "Pending",
            "questions": questions,
            "completedQuestions": completed,
            "createdAt": now,
            "lastUpdated": now,
        }
        document = await self.repository.insert(analysis)
        await self.repository.commit()
        return document.to_dict()

    def prepare_patch(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        status = patch.get("status")
        if status is not None and status not in ANALYSIS_STATUSES:
            raise ValidationError(f"Status must be one of: {', '.join(ANALYSIS_STATUSES)}")
        return super().prepare_patch(patch)

    async def update_document(self, reference: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        questions = payload.get("questions")
        if isinstance(questions, list):
            logger.info("Updating analysis %s with %d questions", reference, len(questions))
        return await super().update_document(reference, payload)
