"""MCP resources for Nginx Proxy Manager status.

Exposes two read-only aggregate views composed from several list calls.
"""

# pyright: reportUnusedFunction=false

import logging
from collections.abc import Awaitable, Callable
from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ResourceError

from .client.npm_client import NPMClient
from .errors import NPMError

logger = logging.getLogger("npm_mcp.resources")

HOSTS_SUMMARY_URI = "npm://hosts/summary"
CERTIFICATES_SUMMARY_URI = "npm://certificates/summary"


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register resources on the provided app instance.

    Args:
        app: The FastMCP application instance to add resources to.
        deps: Dependencies namespace containing the shared ``client`` and the
              ``collect_hosts_summary``/``collect_certificates_summary`` collectors.

    Returns:
        URIs of the registered resources.

    """

    async def _read(
        ctx: Context,
        uri: str,
        collect_fn: Callable[[NPMClient], Awaitable[dict[str, Any]]],
    ) -> dict[str, Any]:
        """Run a summary collector, converting client failures into resource errors."""
        await ctx.info(f"Reading {uri}.")
        try:
            return await collect_fn(deps.client)
        except NPMError as exc:
            logger.warning("Reading %s failed: %s", uri, exc)
            msg = f"Failed to read {uri}: {exc}"
            raise ResourceError(msg) from exc

    @app.resource(
        uri=HOSTS_SUMMARY_URI,
        name="Hosts Summary",
        description="Summary of all configured hosts in NPM",
        mime_type="application/json",
        tags={"hosts", "summary"},
    )
    async def hosts_summary(ctx: Context) -> dict[str, Any]:
        return await _read(ctx, HOSTS_SUMMARY_URI, deps.collect_hosts_summary)

    @app.resource(
        uri=CERTIFICATES_SUMMARY_URI,
        name="Certificates Summary",
        description="Summary of all SSL certificates",
        mime_type="application/json",
        tags={"certificates", "summary"},
    )
    async def certificates_summary(ctx: Context) -> dict[str, Any]:
        return await _read(ctx, CERTIFICATES_SUMMARY_URI, deps.collect_certificates_summary)

    return [HOSTS_SUMMARY_URI, CERTIFICATES_SUMMARY_URI]


__all__ = ["CERTIFICATES_SUMMARY_URI", "HOSTS_SUMMARY_URI", "register"]
