"""Nginx Proxy Manager MCP server package.

This package contains the FastMCP server, tools and resources for managing a
remote Nginx Proxy Manager instance through its administrative REST API.
"""

# Intentionally do not re-export symbols from submodules to avoid importing
# heavy dependencies and triggering environment validation at package import
# time. Individual modules (e.g., ``server``) should be imported directly by
# consumers as needed.

__all__: list[str] = []
