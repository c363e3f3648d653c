"""
Analysis question business logic service.
"""

import logging
from typing import Any, Dict, List, Optional

from fundgrant.core.collections import Collections
from fundgrant.errors import ValidationError
from fundgrant.services.collection_service import CollectionService

logger = logging.getLogger(__name__)


def _related(document: Dict[str, Any]) -> List[str]:
    related = document.get("relatedProjects") or []
    return [item for item in related if isinstance(item, str)]


class AnalysisQuestionService(CollectionService):
    """Service for the analysis question bank."""

    collection = Collections.ANALYSIS_QUESTIONS
    entity_label = "Analysis question"
    required_fields = ("question",)

    def validate_required(self, payload: Dict[str, Any]) -> None:
        if not payload.get("question"):
            raise ValidationError("Question text is required")

    def prepare_new(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["answer"] = data.get("answer") or ""
        data["category"] = data.get("category") or "General"
        data["projectId"] = data.get("projectId") or None
        data["companyId"] = data.get("companyId") or None
        data["isRequired"] = data.get("isRequired", True)
        return super().prepare_new(data)

    async def list_for_project(
        self,
        company_id: Optional[str] = None,
        project_id: Optional[str] = None,
        project_name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Questions for a company and/or project.

        companyId must match exactly when given. The project criteria are
        alternatives: a question matches when its projectId equals project_id,
        its relatedProjects contains project_id or project_name, or its
        projectName / any relatedProjects entry contains project_name
        case-insensitively.
        """
        if not company_id and not project_id and not project_name:
            raise ValidationError(
                "Either companyId, projectId, or projectName query parameter is required"
            )

        logger.info(
            "Fetching analysis questions for company=%s project_id=%s project_name=%s",
            company_id, project_id, project_name,
        )
        needle = project_name.casefold() if project_name else None

        def project_matches(document: Dict[str, Any]) -> bool:
            if not project_id and not needle:
                return True
            related = _related(document)
            if project_id and (document.get("projectId") == project_id or project_id in related):
                return True
            if needle:
                if project_name in related:
                    return True
                name = document.get("projectName")
                if isinstance(name, str) and needle in name.casefold():
                    return True
                if any(needle in item.casefold() for item in related):
                    return True
            return False

        questions = []
        for document in await self.list_documents():
            if company_id and document.get("companyId") != company_id:
                continue
            if project_matches(document):
                questions.append(document)

        logger.info("Found %d analysis questions matching the criteria", len(questions))
        return questions
