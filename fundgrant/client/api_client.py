"""
HTTP client for the FundGrant REST API.

Used by the list views to read collections; any transport failure or non-2xx
response surfaces as FetchError.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from fundgrant.core.config import settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None, server_error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.server_error = server_error


def _server_error(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class FundgrantApiClient:
    """
    Thin async wrapper around the collection endpoints.

    Use as an async context manager, or call ``aclose`` when done. A custom
    ``transport`` (e.g. ``httpx.ASGITransport`` or ``httpx.MockTransport``)
    lets tests run without a network.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        timeout = httpx.Timeout(timeout_seconds if timeout_seconds is not None else settings.API_TIMEOUT_SECONDS)
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "FundgrantApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, action: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Request %s %s failed: %s", method, path, exc)
            raise FetchError(f"Failed to {action}: {exc}") from exc

        if response.is_error:
            server_error = _server_error(response)
            message = f"Failed to {action}: {response.status_code} {response.reason_phrase}"
            if server_error:
                message = f"{message} ({server_error})"
            logger.warning("Request %s %s returned %s", method, path, response.status_code)
            raise FetchError(message, status_code=response.status_code, server_error=server_error)

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Failed to {action}: response is not JSON", status_code=response.status_code) from exc

    @staticmethod
    def _label(path: str) -> str:
        return path.rstrip("/").rsplit("/", 1)[-1].replace("-", " ")

    async def list_documents(self, path: str) -> List[Dict[str, Any]]:
        action = f"fetch {self._label(path)}"
        body = await self._request("GET", path, action)
        if not isinstance(body, list):
            raise FetchError(f"Failed to {action}: expected a list")
        return body

    async def get_document(self, path: str, document_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"{path}/{document_id}", f"fetch {self._label(path)}")

    async def create_document(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", path, f"create {self._label(path)}", json=payload)

    async def update_document(self, path: str, document_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"{path}/{document_id}", f"update {self._label(path)}", json=payload)

    async def delete_document(self, path: str, document_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"{path}/{document_id}", f"delete {self._label(path)}")
