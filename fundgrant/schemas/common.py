"""
Response schemas shared by several routers.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Body returned by deletes and migrations."""

    message: str


class SeedResponse(BaseModel):
    success: bool
    message: str
    count: int
    ids: Optional[List[str]] = None


class MigrationResponse(BaseModel):
    message: str
    projectId: str
    sectionsCount: int


class CollectionStat(BaseModel):
    exists: bool
    count: int = 0
    hasDocuments: bool = False
    sampleDocFields: List[str] = []


class DbStatusResponse(BaseModel):
    status: str
    database: str
    collections: List[str]
    collectionStats: Dict[str, CollectionStat]
