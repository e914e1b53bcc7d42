"""Remote task API client."""

from __future__ import annotations

import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from .errors import (
    TaskApiAuthError,
    TaskApiError,
    TaskApiForbiddenError,
    TaskApiNotFoundError,
)

logger = logging.getLogger(__name__)


class TaskApiClient:
    """Async JSON client for the remote task API.

    Provides a thin wrapper around the REST endpoints with:
    - Optional bearer token authentication
    - Error mapping from HTTP status codes to TaskApiError subclasses
    - Request timing in the debug log
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, e.g. https://tasks.example.com/api
            token: Bearer token, or None for an unauthenticated API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> TaskApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # --- Endpoints ---

    async def list_tasks(self) -> list[dict[str, Any]]:
        data = await self.request("GET", "/tasks")
        if not isinstance(data, list):
            raise TaskApiError(f"Expected a list of tasks, got {type(data).__name__}")
        return data

    async def get_task(self, task_id: str) -> dict[str, Any]:
        data = await self.request("GET", _task_path(task_id))
        if not isinstance(data, dict):
            raise TaskApiError(f"Expected a task object, got {type(data).__name__}")
        return data

    async def put_task(self, task_id: str, payload: dict[str, Any]) -> None:
        await self.request("PUT", _task_path(task_id), json=payload)

    async def complete_task(self, task_id: str) -> None:
        await self.request("POST", f"{_task_path(task_id)}/complete")

    async def activate_task(self, task_id: str) -> None:
        await self.request("POST", f"{_task_path(task_id)}/activate")

    async def clear_completed(self) -> None:
        await self.request("POST", "/tasks/clear-completed")

    async def delete_all(self) -> None:
        await self.request("DELETE", "/tasks")

    async def delete_task(self, task_id: str) -> None:
        await self.request("DELETE", _task_path(task_id))

    # --- Transport ---

    async def request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> Any:
        """Send a request and return the decoded JSON body (None when empty).

        Raises:
            TaskApiAuthError: Authentication failed
            TaskApiNotFoundError: Resource not found
            TaskApiForbiddenError: Permission denied
            TaskApiError: Other errors
        """
        logger.debug("%s %s: body=%s", method, path, json)

        start_time = time.monotonic()
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise TaskApiError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        # Handle HTTP errors
        if response.status_code == 401:
            logger.error("%s %s: 401 Unauthorized (%.0fms)", method, path, elapsed_ms)
            raise TaskApiAuthError(
                "Authentication failed. Check the api_token setting (TASKCACHE_API_TOKEN)."
            )
        if response.status_code == 403:
            logger.error("%s %s: 403 Forbidden (%.0fms)", method, path, elapsed_ms)
            raise TaskApiForbiddenError("Permission denied")
        if response.status_code == 404:
            logger.info("%s %s: 404 Not Found (%.0fms)", method, path, elapsed_ms)
            raise TaskApiNotFoundError(f"Resource not found: {path}")
        if response.status_code >= 400:
            logger.error(
                "%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms
            )
            raise TaskApiError(f"HTTP {response.status_code}: {response.text}")

        logger.debug("%s %s: %d (%.0fms)", method, path, response.status_code, elapsed_ms)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s: Invalid JSON response (%.0fms)", method, path, elapsed_ms)
            raise TaskApiError(f"Invalid JSON response: {e}") from e


def _task_path(task_id: str) -> str:
    return f"/tasks/{quote(task_id, safe='')}"
