"""
Models package.

Import all models here so Alembic and create_all can discover them.
"""

from fundgrant.models.document import StoredDocument

__all__ = ["StoredDocument"]
