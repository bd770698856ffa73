"""Shared fixtures for unit tests.

``FakeNPM`` is an in-memory stand-in for the Nginx Proxy Manager REST API,
served through ``httpx.MockTransport`` so tests can assert on the exact
requests the client sends.
"""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastmcp import Context

from npm_mcp.client.npm_client import NPMClient
from npm_mcp.config import NPMConfig

COLLECTIONS = (
    "nginx/proxy-hosts",
    "nginx/certificates",
    "nginx/streams",
    "nginx/access-lists",
    "nginx/redirection-hosts",
    "nginx/dead-hosts",
    "users",
    "settings",
    "audit-log",
)


class FakeNPM:
    """Minimal in-memory Nginx Proxy Manager API."""

    def __init__(self, *, token_lifetime: timedelta = timedelta(days=1)) -> None:
        self.requests: list[httpx.Request] = []
        self.entities: dict[str, dict[int, dict[str, Any]]] = {name: {} for name in COLLECTIONS}
        self.token_lifetime = token_lifetime
        self.tokens_issued = 0
        self.overrides: dict[tuple[str, str], httpx.Response] = {}
        self._next_id = 1

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/tokens"]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/api/tokens"]

    def seed(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        stored = {"id": self._next_id, **record}
        self.entities[collection][self._next_id] = stored
        self._next_id += 1
        return stored

    def override(self, method: str, path: str, response: httpx.Response) -> None:
        self.overrides[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        override = self.overrides.get((request.method, path))
        if override is not None:
            return override

        if path == "/api/tokens":
            self.tokens_issued += 1
            expires = datetime.now(UTC) + self.token_lifetime
            return httpx.Response(
                200,
                json={"token": f"token-{self.tokens_issued}", "expires": expires.isoformat()},
            )

        if request.headers.get("Authorization", "") != f"Bearer token-{self.tokens_issued}":
            return httpx.Response(401, json={"error": {"code": 401, "message": "Unauthorized"}})

        return self._route(request, path.removeprefix("/api/"))

    def _route(self, request: httpx.Request, path: str) -> httpx.Response:
        for collection in COLLECTIONS:
            if path == collection:
                if request.method == "GET":
                    return httpx.Response(200, json=list(self.entities[collection].values()))
                if request.method == "POST":
                    return httpx.Response(201, json=self.seed(collection, json.loads(request.content)))
            if path.startswith(f"{collection}/"):
                return self._route_item(request, collection, path.removeprefix(f"{collection}/").split("/"))
        return httpx.Response(404, json={"error": {"message": "Not Found"}})

    def _route_item(self, request: httpx.Request, collection: str, parts: list[str]) -> httpx.Response:
        records = self.entities[collection]
        key = int(parts[0]) if parts[0].isdigit() else parts[0]
        record = records.get(key)  # type: ignore[arg-type]
        if record is None:
            return httpx.Response(404, json={"error": {"message": "Not Found"}})
        if len(parts) == 2 and parts[1] in {"enable", "disable"}:  # noqa: PLR2004
            record["enabled"] = parts[1] == "enable"
            return httpx.Response(200, text="true")
        if request.method == "GET":
            return httpx.Response(200, json=record)
        if request.method == "PUT":
            record.update(json.loads(request.content))
            return httpx.Response(200, json=record)
        if request.method == "DELETE":
            del records[key]  # type: ignore[arg-type]
            return httpx.Response(200, content=b"")
        return httpx.Response(405)


def make_config(**overrides: Any) -> NPMConfig:
    values: dict[str, Any] = {
        "host": "npm.example.com",
        "use_https": True,
        "email": "admin@x.com",
        "password": "secret",
    }
    values.update(overrides)
    return NPMConfig(**values)


@pytest.fixture
def config() -> NPMConfig:
    return make_config()


@pytest.fixture
def fake_npm() -> FakeNPM:
    return FakeNPM()


@pytest.fixture
def client(config: NPMConfig, fake_npm: FakeNPM) -> NPMClient:
    return NPMClient(config, transport=httpx.MockTransport(fake_npm.handler))


@pytest.fixture
def mock_ctx() -> Context:
    """Return a Context-like AsyncMock for tool logging."""
    ctx = MagicMock(spec=Context)
    ctx.info = AsyncMock()
    ctx.warning = AsyncMock()
    ctx.error = AsyncMock()
    return ctx


class FakeApp:
    """Minimal stand-in for FastMCP app to capture registered tools and resources."""

    def __init__(self) -> None:
        self.tools: dict[str, Callable[..., Any]] = {}
        self.tool_meta: dict[str, dict[str, Any]] = {}
        self.resources: dict[str, Callable[..., Any]] = {}

    def tool(
        self,
        *,
        name: str,
        description: str,
        annotations: dict[str, Any] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.tools[name] = func
            self.tool_meta[name] = {"description": description, "annotations": annotations}
            return func

        return _decorator

    def resource(self, *, uri: str, **_kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.resources[uri] = func
            return func

        return _decorator


@pytest.fixture
def fake_app() -> FakeApp:
    return FakeApp()
