"""Entry point for the Nginx Proxy Manager MCP server.

This module wires together the FastMCP app, the shared ``NPMClient`` and the
tool and resource registrations. Implementation logic lives in focused
modules under ``npm_mcp/``.

Registered capabilities:
- ``npm_*`` tools: list/get/create/update/delete (and enable/disable where
  supported) for proxy hosts, certificates, streams, access lists,
  redirection hosts, 404 hosts and users, plus audit log, settings and the
  hosts report
- ``npm://hosts/summary`` and ``npm://certificates/summary`` resources
"""

import logging
import os
import signal
import sys
from types import SimpleNamespace

from fastmcp import FastMCP

from . import resources
from .client.npm_client import NPMClient
from .config import NPMConfig
from .errors import ConfigurationError
from .operations.summaries import collect_certificates_summary, collect_hosts_summary
from .tools import access_lists, certificates, dead_hosts, proxy_hosts, redirection_hosts, streams, system, users
from .tools.catalog import RESOURCE_URIS, validate_registered

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("npm_mcp.server")

SERVER_NAME = "npm-mcp"
TOOL_MODULES = (
    proxy_hosts,
    certificates,
    streams,
    access_lists,
    redirection_hosts,
    dead_hosts,
    users,
    system,
)


def create_app(client: NPMClient) -> FastMCP:
    """Build the FastMCP app with every tool and resource bound to ``client``.

    Raises:
        RuntimeError: If the registered tools or resources differ from the catalog.

    """
    app = FastMCP(
        name=SERVER_NAME,
        instructions=(
            "Manage a Nginx Proxy Manager instance: proxy hosts, redirection hosts, 404 hosts, "
            "TCP/UDP streams, SSL certificates, access lists, users and settings."
        ),
    )
    deps = SimpleNamespace(
        client=client,
        collect_hosts_summary=collect_hosts_summary,
        collect_certificates_summary=collect_certificates_summary,
    )

    registered: list[str] = []
    for module in TOOL_MODULES:
        registered.extend(module.register(app, deps=deps))
    validate_registered(registered)

    uris = resources.register(app, deps=deps)
    validate_registered(uris, expected=RESOURCE_URIS, label="Resource")

    logger.debug("Registered %d tools and %d resources.", len(registered), len(uris))
    return app


def build_client(config: NPMConfig | None = None) -> NPMClient:
    """Return a client for ``config``, loading it from the environment when omitted.

    Raises:
        ConfigurationError: If required settings are missing or invalid.

    """
    return NPMClient(config or NPMConfig.from_env())


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the npm-mcp console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    try:
        client = build_client()
    except ConfigurationError as exc:
        logger.error("Failed to initialize API client: %s", exc)  # noqa: TRY400
        sys.exit(1)

    app = create_app(client)
    logger.info("NPM MCP server started for %s", client.base_url)
    with client.token_manager:
        app.run()


__all__ = [
    "SERVER_NAME",
    "TOOL_MODULES",
    "build_client",
    "create_app",
    "handle_interrupt",
    "main",
]


if __name__ == "__main__":
    main()
