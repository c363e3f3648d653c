"""
Shared FastAPI dependencies.
"""

from fundgrant.db.session import get_db

__all__ = ["get_db"]
