"""
Company business logic service.
"""

from fundgrant.core.collections import Collections
from fundgrant.services.collection_service import CollectionService, LookupMode


class CompanyService(CollectionService):
    """Service for companies (addressable by native or legacy id)."""

    collection = Collections.COMPANIES
    entity_label = "Company"
    lookup_mode = LookupMode.EITHER_KEY
    required_fields = ("name",)
