"""HTTP adapter for release asset uploads."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..models import UploadRequest

logger = logging.getLogger(__name__)

USER_AGENT = "asset-uploader"
ACCEPT = "application/vnd.github+json"


class UploadError(RuntimeError):
    """Raised when the upload endpoint answers with an error status."""

    def __init__(self, status_code: int, method: str, url: str, detail: str):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.detail = detail
        super().__init__(f"API error {status_code} on {method} {url}: {detail}")


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return str(payload)


class HTTPAPIClient:
    """
    Token-authenticated HTTP client.

    Implements IHTTPClient protocol. Requests are sent once; there is no
    retry and no timeout unless one is given.
    """

    def __init__(
        self,
        token: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            headers={
                "authorization": f"token {self._token}",
                "accept": ACCEPT,
                "user-agent": USER_AGENT,
            },
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()

    async def request(self, upload: UploadRequest) -> httpx.Response:
        if not self._client:
            raise RuntimeError("HTTPAPIClient not initialized. Use 'async with' context.")

        response = await self._client.request(
            upload.method,
            upload.url,
            headers=upload.headers,
            content=upload.body,
        )
        if response.status_code >= 400:
            raise UploadError(
                response.status_code, upload.method, upload.url, _error_detail(response)
            )

        logger.debug("%s %s -> %s", upload.method, upload.url, response.status_code)
        return response
