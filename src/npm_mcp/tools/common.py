"""Common utilities for MCP tool registration.

Provides the invocation boundary shared by every tool: client errors are
reported through the MCP context and re-raised as ``ToolError`` so FastMCP
returns an error result instead of crashing the server.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal, TypeVar

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..errors import NPMError

logger = logging.getLogger("npm_mcp.tools")

ForwardScheme = Literal["http", "https"]
RedirectScheme = Literal["http", "https", "$scheme"]

DomainNames = Annotated[list[str], Field(description="Domain names, e.g. ['example.com', 'www.example.com']")]

READ_ONLY: dict[str, Any] = {"readOnlyHint": True}
DESTRUCTIVE: dict[str, Any] = {"destructiveHint": True}

T = TypeVar("T")


async def run_operation(
    ctx: Context,
    message: str,
    operation: Callable[..., Awaitable[T]],
    *args: Any,
) -> T:
    """Run one client operation at the tool invocation boundary.

    Args:
        ctx: FastMCP context used for client-visible logging.
        message: Progress message describing the operation.
        operation: Async operation function from ``npm_mcp.operations``.
        *args: Positional arguments forwarded to ``operation``.

    Returns:
        Whatever ``operation`` returns.

    Raises:
        ToolError: If the operation raised an ``NPMError``.

    """
    await ctx.info(message)
    try:
        return await operation(*args)
    except NPMError as exc:
        logger.warning("%s failed: %s", message, exc)
        await ctx.error(str(exc))
        raise ToolError(str(exc)) from exc


def tool_registrar(app: FastMCP, registered: list[str]) -> Callable[..., Any]:
    """Return an ``app.tool`` wrapper that records each registered tool name in ``registered``."""

    def tool(*, name: str, description: str, annotations: dict[str, Any] | None = None) -> Any:
        registered.append(name)
        return app.tool(name=name, description=description, annotations=annotations)

    return tool


def deleted(label: str) -> dict[str, Any]:
    """Return the result payload of a successful delete."""
    return {"success": True, "message": f"{label.capitalize()} deleted"}


__all__ = [
    "DESTRUCTIVE",
    "READ_ONLY",
    "DomainNames",
    "ForwardScheme",
    "RedirectScheme",
    "deleted",
    "run_operation",
    "tool_registrar",
]
