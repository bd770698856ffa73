"""MCP tools: audit log, settings and the hosts report."""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import system as ops
from .common import READ_ONLY, run_operation, tool_registrar

SettingId = Annotated[str, Field(description="The setting ID")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the system tools on the provided app instance.

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
        name="npm_list_audit_log",
        description="List audit log entries",
        annotations=READ_ONLY,
    )
    async def npm_list_audit_log(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing audit log entries.", ops.list_audit_log, client)

    @tool(
        name="npm_list_settings",
        description="List all NPM settings",
        annotations=READ_ONLY,
    )
    async def npm_list_settings(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing settings.", ops.list_settings, client)

    @tool(
        name="npm_get_setting",
        description="Get a specific setting value",
        annotations=READ_ONLY,
    )
    async def npm_get_setting(ctx: Context, id: SettingId) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching setting {id}.", ops.get_setting, client, id)

    @tool(
        name="npm_update_setting",
        description="Update a setting value",
    )
    async def npm_update_setting(
        ctx: Context,
        id: SettingId,
        value: Annotated[str, Field(description="The new value")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Updating setting {id}.", ops.update_setting, client, id, value)

    @tool(
        name="npm_get_hosts_report",
        description="Get a summary report of all host types",
        annotations=READ_ONLY,
    )
    async def npm_get_hosts_report(ctx: Context) -> dict[str, Any]:
        return await run_operation(ctx, "Fetching hosts report.", ops.get_hosts_report, client)

    return registered


__all__ = ["register"]
