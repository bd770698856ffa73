"""MCP tools: TCP/UDP streams."""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import streams as ops
from .common import DESTRUCTIVE, READ_ONLY, deleted, run_operation, tool_registrar

Port = Annotated[int, Field(ge=1, le=65535)]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the stream tools on the provided app instance.

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
        name="npm_list_streams",
        description="List all TCP/UDP stream configurations",
        annotations=READ_ONLY,
    )
    async def npm_list_streams(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing streams.", ops.list_streams, client)

    @tool(
        name="npm_get_stream",
        description="Get details of a specific stream",
        annotations=READ_ONLY,
    )
    async def npm_get_stream(
        ctx: Context,
        id: Annotated[int, Field(description="The stream ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching stream {id}.", ops.get_stream, client, id)

    @tool(
        name="npm_create_stream",
        description="Create a new TCP/UDP stream to forward traffic",
    )
    async def npm_create_stream(
        ctx: Context,
        incoming_port: Annotated[Port, Field(description="Port to listen on")],
        forwarding_host: Annotated[str, Field(description="Backend server hostname or IP")],
        forwarding_port: Annotated[Port, Field(description="Backend server port")],
        tcp_forwarding: Annotated[bool | None, Field(description="Enable TCP forwarding (default: true)")] = None,
        udp_forwarding: Annotated[bool | None, Field(description="Enable UDP forwarding (default: false)")] = None,
    ) -> dict[str, Any]:
        data = {
            "incoming_port": incoming_port,
            "forwarding_host": forwarding_host,
            "forwarding_port": forwarding_port,
            "tcp_forwarding": tcp_forwarding,
            "udp_forwarding": udp_forwarding,
        }
        message = f"Creating stream on port {incoming_port}."
        return await run_operation(ctx, message, ops.create_stream, client, data)

    @tool(
        name="npm_update_stream",
        description="Update an existing stream",
    )
    async def npm_update_stream(
        ctx: Context,
        id: Annotated[int, Field(description="The stream ID to update")],
        incoming_port: Annotated[Port | None, Field(description="Port to listen on")] = None,
        forwarding_host: Annotated[str | None, Field(description="Backend server hostname or IP")] = None,
        forwarding_port: Annotated[Port | None, Field(description="Backend server port")] = None,
        tcp_forwarding: Annotated[bool | None, Field(description="Enable TCP forwarding")] = None,
        udp_forwarding: Annotated[bool | None, Field(description="Enable UDP forwarding")] = None,
    ) -> dict[str, Any]:
        data = {
            "incoming_port": incoming_port,
            "forwarding_host": forwarding_host,
            "forwarding_port": forwarding_port,
            "tcp_forwarding": tcp_forwarding,
            "udp_forwarding": udp_forwarding,
        }
        return await run_operation(ctx, f"Updating stream {id}.", ops.update_stream, client, id, data)

    @tool(
        name="npm_delete_stream",
        description="Delete a stream",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_stream(
        ctx: Context,
        id: Annotated[int, Field(description="The stream ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting stream {id}.", ops.delete_stream, client, id)
        return deleted("stream")

    @tool(
        name="npm_enable_stream",
        description="Enable a stream",
    )
    async def npm_enable_stream(
        ctx: Context,
        id: Annotated[int, Field(description="The stream ID to enable")],
    ) -> Any:
        return await run_operation(ctx, f"Enabling stream {id}.", ops.enable_stream, client, id)

    @tool(
        name="npm_disable_stream",
        description="Disable a stream without deleting it",
    )
    async def npm_disable_stream(
        ctx: Context,
        id: Annotated[int, Field(description="The stream ID to disable")],
    ) -> Any:
        return await run_operation(ctx, f"Disabling stream {id}.", ops.disable_stream, client, id)

    return registered


__all__ = ["register"]
