"""Tests for the remote task API client."""

import json

import httpx
import pytest

from taskcache.client import TaskApiClient
from taskcache.errors import (
    TaskApiAuthError,
    TaskApiError,
    TaskApiForbiddenError,
    TaskApiNotFoundError,
)


def make_client(handler, token: str | None = "test-token") -> TaskApiClient:
    """Client whose requests are answered by ``handler``."""
    return TaskApiClient(
        "https://tasks.example.com/api",
        token=token,
        transport=httpx.MockTransport(handler),
    )


class TestTaskApiClientInit:
    """Tests for TaskApiClient initialization."""

    def test_init_strips_trailing_slash(self):
        client = TaskApiClient("https://tasks.example.com/api/", token="t")
        assert client.base_url == "https://tasks.example.com/api"
        assert client.token == "t"

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self):
        async with make_client(lambda request: httpx.Response(200, json=[])) as client:
            assert await client.list_tasks() == []
        assert client._client.is_closed


class TestTaskApiClientRequests:
    """Tests for endpoint paths, headers and payloads."""

    @pytest.mark.asyncio
    async def test_list_tasks_sends_auth_header(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"id": "1", "title": "A"}])

        client = make_client(handler)
        tasks = await client.list_tasks()
        await client.aclose()

        assert tasks == [{"id": "1", "title": "A"}]
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/api/tasks"
        assert seen[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_no_auth_header_without_token(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        client = make_client(handler, token=None)
        await client.list_tasks()
        await client.aclose()

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_put_task_sends_json_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        client = make_client(handler)
        await client.put_task("abc", {"id": "abc", "title": "T"})
        await client.aclose()

        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/api/tasks/abc"
        assert json.loads(seen[0].content) == {"id": "abc", "title": "T"}

    @pytest.mark.asyncio
    async def test_task_id_is_url_quoted(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        client = make_client(handler)
        await client.delete_task("a/b")
        await client.aclose()

        assert seen[0].url.raw_path == b"/api/tasks/a%2Fb"

    @pytest.mark.asyncio
    async def test_action_endpoints(self):
        seen: list[tuple[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.path))
            return httpx.Response(204)

        client = make_client(handler)
        await client.complete_task("1")
        await client.activate_task("1")
        await client.clear_completed()
        await client.delete_all()
        await client.aclose()

        assert seen == [
            ("POST", "/api/tasks/1/complete"),
            ("POST", "/api/tasks/1/activate"),
            ("POST", "/api/tasks/clear-completed"),
            ("DELETE", "/api/tasks"),
        ]


class TestTaskApiClientErrors:
    """Tests for HTTP error mapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error_type"),
        [
            (401, TaskApiAuthError),
            (403, TaskApiForbiddenError),
            (404, TaskApiNotFoundError),
            (500, TaskApiError),
        ],
    )
    async def test_status_codes_raise(self, status, error_type):
        client = make_client(lambda request: httpx.Response(status, text="nope"))

        with pytest.raises(error_type):
            await client.get_task("1")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_auth_error_names_token_setting(self):
        client = make_client(lambda request: httpx.Response(401))

        with pytest.raises(TaskApiAuthError, match="api_token"):
            await client.list_tasks()
        await client.aclose()

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(TaskApiError, match="Request failed"):
            await client.list_tasks()
        await client.aclose()

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        client = make_client(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(TaskApiError, match="Invalid JSON"):
            await client.list_tasks()
        await client.aclose()

    @pytest.mark.asyncio
    async def test_unexpected_shape_raises(self):
        client = make_client(lambda request: httpx.Response(200, json={"tasks": []}))

        with pytest.raises(TaskApiError, match="Expected a list"):
            await client.list_tasks()
        await client.aclose()
