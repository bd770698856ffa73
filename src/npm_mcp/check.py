"""Connectivity check for a configured Nginx Proxy Manager instance.

Loads the configuration from the environment, authenticates once and fetches
the hosts report, so a new installation can be verified before an assistant
is pointed at the MCP server.
"""

import asyncio
import json
import logging
import sys

from .client.npm_client import NPMClient
from .config import NPMConfig
from .errors import AuthenticationError, NPMError
from .operations.system import get_hosts_report

logger = logging.getLogger("npm_mcp.check")


async def run_check(client: NPMClient) -> dict[str, object]:
    """Authenticate and fetch the hosts report.

    Returns:
        A result dict with ``base_url``, ``authenticated`` and ``hosts_report``.

    Raises:
        NPMError: If authentication or the report request fails.

    """
    await client.token_manager.ensure_valid_credential()
    report = await get_hosts_report(client)
    return {
        "base_url": client.base_url,
        "authenticated": True,
        "hosts_report": report,
    }


def main() -> None:
    """Entry point for the npm-mcp-check console script."""
    logging.basicConfig(level=logging.WARNING, format="%(name)s [%(levelname)s] %(message)s")
    try:
        client = NPMClient(NPMConfig.from_env())
        result = asyncio.run(run_check(client))
    except AuthenticationError as exc:
        print(f"Authentication failed; check NPM_EMAIL and NPM_PASSWORD: {exc}", file=sys.stderr)
        sys.exit(2)
    except NPMError as exc:
        print(f"Connection check failed: {exc}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2))


__all__ = ["main", "run_check"]


if __name__ == "__main__":
    main()
