"""MCP tools: proxy manager users."""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import users as ops
from .common import DESTRUCTIVE, READ_ONLY, deleted, run_operation, tool_registrar

Roles = Annotated[list[str], Field(description="User roles (e.g., ['admin'])")]
IsDisabled = Annotated[bool | None, Field(description="Whether the user is disabled")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the user tools on the provided app instance.

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
        name="npm_list_users",
        description="List all NPM users",
        annotations=READ_ONLY,
    )
    async def npm_list_users(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing users.", ops.list_users, client)

    @tool(
        name="npm_get_user",
        description="Get details of a specific user",
        annotations=READ_ONLY,
    )
    async def npm_get_user(
        ctx: Context,
        id: Annotated[int, Field(description="The user ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching user {id}.", ops.get_user, client, id)

    @tool(
        name="npm_create_user",
        description="Create a new NPM user",
    )
    async def npm_create_user(
        ctx: Context,
        name: Annotated[str, Field(description="Full name of the user")],
        nickname: Annotated[str, Field(description="Nickname/display name")],
        email: Annotated[str, Field(description="Email address (used for login)")],
        password: Annotated[str, Field(description="Password for the user")],
        roles: Roles,
        is_disabled: IsDisabled = None,
    ) -> dict[str, Any]:
        data = {
            "name": name,
            "nickname": nickname,
            "email": email,
            "roles": roles,
            "is_disabled": is_disabled,
            "auth": ops.password_auth(password),
        }
        return await run_operation(ctx, f"Creating user {email}.", ops.create_user, client, data)

    @tool(
        name="npm_update_user",
        description="Update an existing NPM user",
    )
    async def npm_update_user(
        ctx: Context,
        id: Annotated[int, Field(description="The user ID to update")],
        name: Annotated[str | None, Field(description="Full name of the user")] = None,
        nickname: Annotated[str | None, Field(description="Nickname/display name")] = None,
        email: Annotated[str | None, Field(description="Email address (used for login)")] = None,
        roles: Annotated[list[str] | None, Field(description="User roles (e.g., ['admin'])")] = None,
        is_disabled: IsDisabled = None,
    ) -> dict[str, Any]:
        data = {
            "name": name,
            "nickname": nickname,
            "email": email,
            "roles": roles,
            "is_disabled": is_disabled,
        }
        return await run_operation(ctx, f"Updating user {id}.", ops.update_user, client, id, data)

    @tool(
        name="npm_delete_user",
        description="Delete a user",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_user(
        ctx: Context,
        id: Annotated[int, Field(description="The user ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting user {id}.", ops.delete_user, client, id)
        return deleted("user")

    return registered


__all__ = ["register"]
