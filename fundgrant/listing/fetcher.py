"""
Entity fetcher: a read-through of one view's collection endpoint.
"""

from typing import Any, Dict, List

from fundgrant.client.api_client import FundgrantApiClient
from fundgrant.listing.view_model import ListViewConfig


class EntityFetcher:
    def __init__(self, client: FundgrantApiClient, view: ListViewConfig):
        self.client = client
        self.view = view

    async def fetch(self) -> List[Dict[str, Any]]:
        """Full entity list for the view; raises FetchError."""
        return await self.client.list_documents(self.view.endpoint)
