"""MCP tools: 404 ("dead") hosts, which answer every request with a 404 page."""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import dead_hosts as ops
from .common import DESTRUCTIVE, READ_ONLY, deleted, run_operation, tool_registrar

SslForced = Annotated[bool | None, Field(description="Force HTTPS")]
CertificateId = Annotated[int | None, Field(description="SSL certificate ID")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the dead host tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with the shared ``client``.

    Returns:
        Names of the registered tools.

    """
    client = deps.client
    registered: list[str] = []
    tool = tool_registrar(app, registered)

    @tool(
        name="npm_list_dead_hosts",
        description="List all 404 hosts (dead hosts)",
        annotations=READ_ONLY,
    )
    async def npm_list_dead_hosts(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing 404 hosts.", ops.list_dead_hosts, client)

    @tool(
        name="npm_get_dead_host",
        description="Get details of a specific 404 host",
        annotations=READ_ONLY,
    )
    async def npm_get_dead_host(
        ctx: Context,
        id: Annotated[int, Field(description="The dead host ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching 404 host {id}.", ops.get_dead_host, client, id)

    @tool(
        name="npm_create_dead_host",
        description="Create a new 404 host to show a dead page",
    )
    async def npm_create_dead_host(
        ctx: Context,
        domain_names: Annotated[list[str], Field(description="Domain names for the 404 page")],
        ssl_forced: SslForced = None,
        certificate_id: CertificateId = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "ssl_forced": ssl_forced,
            "certificate_id": certificate_id,
        }
        message = f"Creating 404 host for {', '.join(domain_names)}."
        return await run_operation(ctx, message, ops.create_dead_host, client, data)

    @tool(
        name="npm_update_dead_host",
        description="Update an existing 404 host",
    )
    async def npm_update_dead_host(
        ctx: Context,
        id: Annotated[int, Field(description="The dead host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="Domain names for the 404 page")] = None,
        ssl_forced: SslForced = None,
        certificate_id: CertificateId = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "ssl_forced": ssl_forced,
            "certificate_id": certificate_id,
        }
        return await run_operation(ctx, f"Updating 404 host {id}.", ops.update_dead_host, client, id, data)

    @tool(
        name="npm_delete_dead_host",
        description="Delete a 404 host",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_dead_host(
        ctx: Context,
        id: Annotated[int, Field(description="The dead host ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting 404 host {id}.", ops.delete_dead_host, client, id)
        return deleted("dead host")

    @tool(
        name="npm_enable_dead_host",
        description="Enable a 404 host",
    )
    async def npm_enable_dead_host(
        ctx: Context,
        id: Annotated[int, Field(description="The dead host ID to enable")],
    ) -> Any:
        return await run_operation(ctx, f"Enabling 404 host {id}.", ops.enable_dead_host, client, id)

    @tool(
        name="npm_disable_dead_host",
        description="Disable a 404 host without deleting it",
    )
    async def npm_disable_dead_host(
        ctx: Context,
        id: Annotated[int, Field(description="The dead host ID to disable")],
    ) -> Any:
        return await run_operation(ctx, f"Disabling 404 host {id}.", ops.disable_dead_host, client, id)

    return registered


__all__ = ["register"]
