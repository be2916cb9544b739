"""HTTP client the HTML views use to talk to the Vendor Resource API.

The views never touch the database. Every read and write goes through the
JSON API, either in-process (ASGI transport against the running app) or to a
remote deployment when ``API_BASE_URL`` is set.
"""


import logging
from collections.abc import AsyncGenerator
from typing import Any

import httpx
from fastapi import Request

from app.core.config import settings

logger = logging.getLogger(__name__)

_API_PREFIX = "/api/vendors"
_IN_PROCESS_BASE_URL = "http://vendor-api"


class ApiError(Exception):
    """A vendor API call failed: network problem or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response, fallback: str) -> str:
    """Pull the server's error text out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if body.get("detail"):
            return str(body["detail"])
    return fallback


class VendorApiClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _request(self, method: str, path: str, fallback: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Vendor API %s %s failed: %s", method, path, exc)
            raise ApiError("Could not reach the vendor service. Please try again.") from exc

        if response.is_error:
            raise ApiError(_error_message(response, fallback), response.status_code)
        try:
            return response.json()
        except ValueError:
            logger.warning("Vendor API %s %s returned a non-JSON body", method, path)
            raise ApiError(fallback, response.status_code) from None

    async def list_vendors(self) -> list[dict]:
        return await self._request("GET", _API_PREFIX, "Failed to load vendors")

    async def get_vendor(self, vendor_id: str) -> dict:
        return await self._request("GET", f"{_API_PREFIX}/{vendor_id}", "Failed to load vendor")

    async def create_vendor(self, payload: dict) -> dict:
        return await self._request("POST", _API_PREFIX, "Failed to create vendor", json=payload)

    async def update_vendor(self, vendor_id: str, payload: dict) -> dict:
        return await self._request(
            "PUT", f"{_API_PREFIX}/{vendor_id}", "Failed to update vendor", json=payload
        )

    async def delete_vendor(self, vendor_id: str) -> None:
        await self._request("DELETE", f"{_API_PREFIX}/{vendor_id}", "Failed to delete vendor")


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------

async def get_api_client(request: Request) -> AsyncGenerator[VendorApiClient, None]:
    """Yield a client for the current request; closed when the request ends."""
    if settings.api_base_url:
        http = httpx.AsyncClient(base_url=settings.api_base_url, timeout=settings.api_timeout)
    else:
        http = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app, raise_app_exceptions=False),
            base_url=_IN_PROCESS_BASE_URL,
            timeout=settings.api_timeout,
        )
    async with http:
        yield VendorApiClient(http)
