"""Health check router."""

import logging
from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.script import ScriptDirectory
from alembic.util.exc import CommandError
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fundgrant.core.collections import Collections
from fundgrant.core.dependencies import get_db
from fundgrant.repositories.document_repository import DocumentRepository
from fundgrant.schemas.common import CollectionStat, DbStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_alembic_head() -> Optional[str]:
    project_root = Path(__file__).resolve().parents[2]
    cfg_path = project_root / "alembic.ini"
    script_location = project_root / "alembic"
    if not cfg_path.exists() or not script_location.exists():
        return None

    config = Config(str(cfg_path))
    config.set_main_option("script_location", str(script_location))
    script = ScriptDirectory.from_config(config)
    return script.get_current_head()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Lightweight health endpoint with DB + alembic checks."""

    db_ok = False
    alembic_current: Optional[str] = None
    alembic_head: Optional[str] = None

    try:
        await db.execute(text("SELECT 1"))
        db_ok = True
    except SQLAlchemyError:
        logger.warning("Database liveness check failed", exc_info=True)

    if db_ok:
        try:
            version_result = await db.execute(text("SELECT version_num FROM alembic_version"))
            alembic_current = version_result.scalar_one_or_none()
        except SQLAlchemyError:
            # Schema created without migrations
            await db.rollback()
            alembic_current = None

    try:
        alembic_head = _load_alembic_head()
    except CommandError:
        alembic_head = None

    alembic_head_ok = bool(alembic_current and alembic_head and alembic_current == alembic_head)

    return {
        "api_ok": True,
        "db_ok": db_ok,
        "alembic_head_ok": alembic_head_ok,
        "alembic_current": alembic_current,
        "alembic_head": alembic_head,
    }


@router.get("/api/db-status", response_model=DbStatusResponse)
async def db_status(db: AsyncSession = Depends(get_db)):
    """Per-collection document counts with the fields of one sample document."""
    stats = {}
    for collection in Collections.ALL:
        repository = DocumentRepository(db, collection)
        count = await repository.count()
        sample = await repository.first() if count else None
        stats[collection] = CollectionStat(
            exists=True,
            count=count,
            hasDocuments=count > 0,
            sampleDocFields=sorted(sample.to_dict().keys()) if sample is not None else [],
        )

    bind = db.bind
    return DbStatusResponse(
        status="connected",
        database=bind.url.database or "",
        collections=list(Collections.ALL),
        collectionStats=stats,
    )
