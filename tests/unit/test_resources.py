"""Unit tests for the summary resources."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import ResourceError

from npm_mcp import resources
from npm_mcp.errors import AuthenticationError

if TYPE_CHECKING:
    from fastmcp import Context

    from conftest import FakeApp


def _deps(**overrides: object) -> SimpleNamespace:
    values: dict[str, object] = {
        "client": MagicMock(),
        "collect_hosts_summary": AsyncMock(return_value={"proxy_hosts": 0}),
        "collect_certificates_summary": AsyncMock(return_value={"total": 0, "certificates": []}),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_register_returns_uris(fake_app: FakeApp) -> None:
    """Both summary resources should be registered under their URIs."""
    uris = resources.register(fake_app, deps=_deps())  # type: ignore[arg-type]

    assert uris == [resources.HOSTS_SUMMARY_URI, resources.CERTIFICATES_SUMMARY_URI]
    assert set(fake_app.resources) == set(uris)


@pytest.mark.asyncio
async def test_hosts_summary_resource(fake_app: FakeApp, mock_ctx: Context) -> None:
    """Reading the hosts summary should call its collector with the shared client."""
    deps = _deps()
    resources.register(fake_app, deps=deps)  # type: ignore[arg-type]

    result = await fake_app.resources["npm://hosts/summary"](mock_ctx)

    assert result == {"proxy_hosts": 0}
    deps.collect_hosts_summary.assert_awaited_once_with(deps.client)
    deps.collect_certificates_summary.assert_not_awaited()


@pytest.mark.asyncio
async def test_certificates_summary_resource(fake_app: FakeApp, mock_ctx: Context) -> None:
    """Reading the certificates summary should call its collector."""
    deps = _deps()
    resources.register(fake_app, deps=deps)  # type: ignore[arg-type]

    result = await fake_app.resources["npm://certificates/summary"](mock_ctx)

    assert result == {"total": 0, "certificates": []}


@pytest.mark.asyncio
async def test_resource_failure_becomes_resource_error(fake_app: FakeApp, mock_ctx: Context) -> None:
    """Client errors while collecting should surface as ResourceError."""
    deps = _deps(collect_hosts_summary=AsyncMock(side_effect=AuthenticationError("Authentication failed (401): no")))
    resources.register(fake_app, deps=deps)  # type: ignore[arg-type]

    with pytest.raises(ResourceError, match="npm://hosts/summary"):
        await fake_app.resources["npm://hosts/summary"](mock_ctx)
