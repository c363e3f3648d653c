"""
Seed the demo dataset into every collection for UI exploration.

Collections that already hold documents are left untouched.
Run after migrations (or with AUTO_CREATE_TABLES=true).

Usage:
    python scripts/seed_demo_data.py
"""

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fundgrant.core.config import settings
from fundgrant.db.session import AsyncSessionLocal, create_tables
from fundgrant.seed_data import load_fixture
from fundgrant.services.agent_service import AgentService
from fundgrant.services.analysis_service import AnalysisService
from fundgrant.services.company_service import CompanyService
from fundgrant.services.document_section_service import DocumentSectionService
from fundgrant.services.project_service import FundingProjectService
from fundgrant.services.team_member_service import TeamMemberService

SEED_PLAN = [
    ("analyses", AnalysisService),
    ("companies", CompanyService),
    ("funding_projects", FundingProjectService),
    ("team_members", TeamMemberService),
    ("agents", AgentService),
    ("document_sections", DocumentSectionService),
]


async def seed_demo_data() -> None:
    if settings.AUTO_CREATE_TABLES:
        await create_tables()

    async with AsyncSessionLocal() as db:
        for fixture, service_class in SEED_PLAN:
            service = service_class(db)
            body, inserted = await service.seed(load_fixture(fixture))
            marker = "[OK]" if inserted else "[SKIP]"
            print(f"{marker} {body['message']}")


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    asyncio.run(seed_demo_data())
