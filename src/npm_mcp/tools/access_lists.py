"""MCP tools: access lists.

Access lists combine basic-auth credentials with IP allow/deny rules and can
be attached to proxy hosts through ``access_list_id``.
"""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..models.access_lists import AccessListClient, AccessListItem
from ..operations import access_lists as ops
from .common import DESTRUCTIVE, READ_ONLY, deleted, run_operation, tool_registrar

SatisfyAny = Annotated[bool | None, Field(description="Allow access if ANY rule matches (vs ALL)")]
PassAuth = Annotated[bool | None, Field(description="Pass authentication header to backend")]
Items = Annotated[list[AccessListItem] | None, Field(description="Username/password pairs for basic auth")]
Clients = Annotated[list[AccessListClient] | None, Field(description="IP-based access rules")]


def _dump_rules(rules: list[AccessListItem] | list[AccessListClient] | None) -> list[dict[str, Any]] | None:
    if rules is None:
        return None
    return [rule.model_dump() for rule in rules]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the access list tools on the provided app instance.

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
        name="npm_list_access_lists",
        description="List all access lists for authentication",
        annotations=READ_ONLY,
    )
    async def npm_list_access_lists(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing access lists.", ops.list_access_lists, client)

    @tool(
        name="npm_get_access_list",
        description="Get details of a specific access list",
        annotations=READ_ONLY,
    )
    async def npm_get_access_list(
        ctx: Context,
        id: Annotated[int, Field(description="The access list ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching access list {id}.", ops.get_access_list, client, id)

    @tool(
        name="npm_create_access_list",
        description="Create a new access list for authentication",
    )
    async def npm_create_access_list(
        ctx: Context,
        name: Annotated[str, Field(description="Name of the access list")],
        satisfy_any: SatisfyAny = None,
        pass_auth: PassAuth = None,
        items: Items = None,
        clients: Clients = None,
    ) -> dict[str, Any]:
        data = {
            "name": name,
            "satisfy_any": satisfy_any,
            "pass_auth": pass_auth,
            "items": _dump_rules(items),
            "clients": _dump_rules(clients),
        }
        return await run_operation(ctx, f"Creating access list '{name}'.", ops.create_access_list, client, data)

    @tool(
        name="npm_update_access_list",
        description="Update an existing access list",
    )
    async def npm_update_access_list(
        ctx: Context,
        id: Annotated[int, Field(description="The access list ID to update")],
        name: Annotated[str | None, Field(description="Name of the access list")] = None,
        satisfy_any: SatisfyAny = None,
        pass_auth: PassAuth = None,
        items: Items = None,
        clients: Clients = None,
    ) -> dict[str, Any]:
        data = {
            "name": name,
            "satisfy_any": satisfy_any,
            "pass_auth": pass_auth,
            "items": _dump_rules(items),
            "clients": _dump_rules(clients),
        }
        return await run_operation(ctx, f"Updating access list {id}.", ops.update_access_list, client, id, data)

    @tool(
        name="npm_delete_access_list",
        description="Delete an access list",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_access_list(
        ctx: Context,
        id: Annotated[int, Field(description="The access list ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting access list {id}.", ops.delete_access_list, client, id)
        return deleted("access list")

    return registered


__all__ = ["register"]
