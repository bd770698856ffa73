"""MCP tools: proxy hosts.

Registers list/get/create/update/delete/enable/disable tools for proxy hosts,
the entries that forward a set of domain names to a backend server.
"""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002, PLR0913

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import proxy_hosts as ops
from .common import DESTRUCTIVE, READ_ONLY, DomainNames, ForwardScheme, deleted, run_operation, tool_registrar

ProxyHostId = Annotated[int, Field(description="The proxy host ID")]
ForwardHost = Annotated[str, Field(description="Backend server hostname or IP address")]
ForwardPort = Annotated[int, Field(description="Backend server port", ge=1, le=65535)]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the proxy host tools on the provided app instance.

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
        name="npm_list_proxy_hosts",
        description="List all proxy hosts configured in Nginx Proxy Manager",
        annotations=READ_ONLY,
    )
    async def npm_list_proxy_hosts(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing proxy hosts.", ops.list_proxy_hosts, client)

    @tool(
        name="npm_get_proxy_host",
        description="Get details of a specific proxy host by ID",
        annotations=READ_ONLY,
    )
    async def npm_get_proxy_host(ctx: Context, id: ProxyHostId) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching proxy host {id}.", ops.get_proxy_host, client, id)

    @tool(
        name="npm_create_proxy_host",
        description="Create a new proxy host to forward traffic to a backend server",
    )
    async def npm_create_proxy_host(
        ctx: Context,
        domain_names: DomainNames,
        forward_host: ForwardHost,
        forward_port: ForwardPort,
        forward_scheme: Annotated[
            ForwardScheme | None, Field(description="Protocol to use when forwarding (default: http)")
        ] = None,
        ssl_forced: Annotated[bool | None, Field(description="Force HTTPS redirect")] = None,
        hsts_enabled: Annotated[bool | None, Field(description="Enable HSTS")] = None,
        hsts_subdomains: Annotated[bool | None, Field(description="Include subdomains in HSTS")] = None,
        http2_support: Annotated[bool | None, Field(description="Enable HTTP/2 support")] = None,
        block_exploits: Annotated[bool | None, Field(description="Block common exploits")] = None,
        caching_enabled: Annotated[bool | None, Field(description="Enable asset caching")] = None,
        allow_websocket_upgrade: Annotated[bool | None, Field(description="Allow WebSocket upgrades")] = None,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID to use (0 for none)")] = None,
        access_list_id: Annotated[
            int | None, Field(description="Access list ID for authentication (0 for none)")
        ] = None,
        advanced_config: Annotated[str | None, Field(description="Custom nginx configuration")] = None,
        enabled: Annotated[bool | None, Field(description="Whether the host is enabled (default: true)")] = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "forward_host": forward_host,
            "forward_port": forward_port,
            "forward_scheme": forward_scheme,
            "ssl_forced": ssl_forced,
            "hsts_enabled": hsts_enabled,
            "hsts_subdomains": hsts_subdomains,
            "http2_support": http2_support,
            "block_exploits": block_exploits,
            "caching_enabled": caching_enabled,
            "allow_websocket_upgrade": allow_websocket_upgrade,
            "certificate_id": certificate_id,
            "access_list_id": access_list_id,
            "advanced_config": advanced_config,
            "enabled": enabled,
        }
        message = f"Creating proxy host for {', '.join(domain_names)}."
        return await run_operation(ctx, message, ops.create_proxy_host, client, data)

    @tool(
        name="npm_update_proxy_host",
        description="Update an existing proxy host",
    )
    async def npm_update_proxy_host(
        ctx: Context,
        id: Annotated[int, Field(description="The proxy host ID to update")],
        domain_names: Annotated[list[str] | None, Field(description="Domain names to proxy")] = None,
        forward_host: Annotated[str | None, Field(description="Backend server hostname or IP address")] = None,
        forward_port: Annotated[int | None, Field(description="Backend server port", ge=1, le=65535)] = None,
        forward_scheme: Annotated[ForwardScheme | None, Field(description="Protocol to use when forwarding")] = None,
        ssl_forced: Annotated[bool | None, Field(description="Force HTTPS redirect")] = None,
        hsts_enabled: Annotated[bool | None, Field(description="Enable HSTS")] = None,
        hsts_subdomains: Annotated[bool | None, Field(description="Include subdomains in HSTS")] = None,
        http2_support: Annotated[bool | None, Field(description="Enable HTTP/2 support")] = None,
        block_exploits: Annotated[bool | None, Field(description="Block common exploits")] = None,
        caching_enabled: Annotated[bool | None, Field(description="Enable asset caching")] = None,
        allow_websocket_upgrade: Annotated[bool | None, Field(description="Allow WebSocket upgrades")] = None,
        certificate_id: Annotated[int | None, Field(description="SSL certificate ID to use")] = None,
        access_list_id: Annotated[int | None, Field(description="Access list ID for authentication")] = None,
        advanced_config: Annotated[str | None, Field(description="Custom nginx configuration")] = None,
    ) -> dict[str, Any]:
        data = {
            "domain_names": domain_names,
            "forward_host": forward_host,
            "forward_port": forward_port,
            "forward_scheme": forward_scheme,
            "ssl_forced": ssl_forced,
            "hsts_enabled": hsts_enabled,
            "hsts_subdomains": hsts_subdomains,
            "http2_support": http2_support,
            "block_exploits": block_exploits,
            "caching_enabled": caching_enabled,
            "allow_websocket_upgrade": allow_websocket_upgrade,
            "certificate_id": certificate_id,
            "access_list_id": access_list_id,
            "advanced_config": advanced_config,
        }
        return await run_operation(ctx, f"Updating proxy host {id}.", ops.update_proxy_host, client, id, data)

    @tool(
        name="npm_delete_proxy_host",
        description="Delete a proxy host",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_proxy_host(
        ctx: Context,
        id: Annotated[int, Field(description="The proxy host ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting proxy host {id}.", ops.delete_proxy_host, client, id)
        return deleted("proxy host")

    @tool(
        name="npm_enable_proxy_host",
        description="Enable a proxy host",
    )
    async def npm_enable_proxy_host(
        ctx: Context,
        id: Annotated[int, Field(description="The proxy host ID to enable")],
    ) -> Any:
        return await run_operation(ctx, f"Enabling proxy host {id}.", ops.enable_proxy_host, client, id)

    @tool(
        name="npm_disable_proxy_host",
        description="Disable a proxy host without deleting it",
    )
    async def npm_disable_proxy_host(
        ctx: Context,
        id: Annotated[int, Field(description="The proxy host ID to disable")],
    ) -> Any:
        return await run_operation(ctx, f"Disabling proxy host {id}.", ops.disable_proxy_host, client, id)

    return registered


__all__ = ["register"]
