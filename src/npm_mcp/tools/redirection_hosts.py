"""MCP tools: URL redirection hosts."""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002, PLR0913

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import redirection_hosts as ops
from .common import DESTRUCTIVE, READ_ONLY, RedirectScheme, deleted, run_operation, tool_registrar

HttpCode = Annotated[int | None, Field(description="HTTP redirect code (301, 302, etc.)", ge=300, le=399)]
PreservePath = Annotated[bool | None, Field(description="Preserve the URL path in redirect")]
SslForced = Annotated[bool | None, Field(description="Force HTTPS")]
CertificateId = Annotated[int | None, Field(description="SSL certificate ID")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the redirection host tools on the provided app instance.

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
        name="npm_list_redirection_hosts",
        description="List all URL redirection hosts",
        annotations=READ_ONLY,
    )
    async def npm_list_redirection_hosts(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing redirection hosts.", ops.list_redirection_hosts, client)

    @tool(
        name="npm_get_redirection_host",
        description="Get details of a specific redirection host",
        annotations=READ_ONLY,
    )
    async def npm_get_redirection_host(
        ctx: Context,
        id: Annotated[int, Field(description="The redirection host ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching redirection host {id}.", ops.get_redirection_host, client, id)

    @tool(
        name="npm_create_redirection_host",
        description="Create a new URL redirection host",
    )
    async def npm_create_redirection_host(
        ctx: Context,
        domain_names: Annotated[list[str], Field(description="Domain names to redirect from")],
        forward_scheme: Annotated[RedirectScheme, Field(description="Scheme to use in redirect URL")],
        forward_domain_name: Annotated[str, Field(description="Domain name to redirect to")],
        forward_http_code: HttpCode = None,
        preserve_path: PreservePath = None,
        ssl_forced: SslForced = None,
        certificate_id: CertificateId = None,
        block_exploits: Annotated[bool | None, Field(description="Block common exploits")] = None,
        enabled: Annotated[bool | None, Field(description="Whether the host is enabled (default: true)")] = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "forward_scheme": forward_scheme,
            "forward_domain_name": forward_domain_name,
            "forward_http_code": forward_http_code,
            "preserve_path": preserve_path,
            "ssl_forced": ssl_forced,
            "certificate_id": certificate_id,
            "block_exploits": block_exploits,
            "enabled": enabled,
        }
        message = f"Creating redirection from {', '.join(domain_names)} to {forward_domain_name}."
        return await run_operation(ctx, message, ops.create_redirection_host, client, data)

    @tool(
        name="npm_update_redirection_host",
        description="Update an existing redirection host",
    )
    async def npm_update_redirection_host(
        ctx: Context,
        id: Annotated[int, Field(description="The redirection host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="Domain names to redirect from")] = None,
        forward_scheme: Annotated[RedirectScheme | None, Field(description="Scheme to use in redirect URL")] = None,
        forward_domain_name: Annotated[str | None, Field(description="Domain name to redirect to")] = None,
        forward_http_code: HttpCode = None,
        preserve_path: PreservePath = None,
        ssl_forced: SslForced = None,
        certificate_id: CertificateId = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "forward_scheme": forward_scheme,
            "forward_domain_name": forward_domain_name,
            "forward_http_code": forward_http_code,
            "preserve_path": preserve_path,
            "ssl_forced": ssl_forced,
            "certificate_id": certificate_id,
        }
        message = f"Updating redirection host {id}."
        return await run_operation(ctx, message, ops.update_redirection_host, client, id, data)

    @tool(
        name="npm_delete_redirection_host",
        description="Delete a redirection host",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_redirection_host(
        ctx: Context,
        id: Annotated[int, Field(description="The redirection host ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting redirection host {id}.", ops.delete_redirection_host, client, id)
        return deleted("redirection host")

    @tool(
        name="npm_enable_redirection_host",
        description="Enable a redirection host",
    )
    async def npm_enable_redirection_host(
        ctx: Context,
        id: Annotated[int, Field(description="The redirection host ID to enable")],
    ) -> Any:
        return await run_operation(ctx, f"Enabling redirection host {id}.", ops.enable_redirection_host, client, id)

    @tool(
        name="npm_disable_redirection_host",
        description="Disable a redirection host",
    )
    async def npm_disable_redirection_host(
        ctx: Context,
        id: Annotated[int, Field(description="The redirection host ID to disable")],
    ) -> Any:
        message = f"Disabling redirection host {id}."
        return await run_operation(ctx, message, ops.disable_redirection_host, client, id)

    return registered


__all__ = ["register"]
