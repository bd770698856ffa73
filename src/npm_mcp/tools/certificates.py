"""MCP tools: SSL certificates.

Certificates are requested from Let's Encrypt through the proxy manager;
there is no update tool because the remote API re-issues instead.
"""

# pyright: reportUnusedFunction=false
# ruff: noqa: A002

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..operations import certificates as ops
from ..operations.defaults import drop_unset
from .common import DESTRUCTIVE, READ_ONLY, deleted, run_operation, tool_registrar


def register(app: FastMCP, *, deps: SimpleNamespace) -> list[str]:
    """Register the certificate tools on the provided app instance.

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
        name="npm_list_certificates",
        description="List all SSL certificates",
        annotations=READ_ONLY,
    )
    async def npm_list_certificates(ctx: Context) -> list[dict[str, Any]]:
        return await run_operation(ctx, "Listing certificates.", ops.list_certificates, client)

    @tool(
        name="npm_get_certificate",
        description="Get details of a specific certificate",
        annotations=READ_ONLY,
    )
    async def npm_get_certificate(
        ctx: Context,
        id: Annotated[int, Field(description="The certificate ID")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Fetching certificate {id}.", ops.get_certificate, client, id)

    @tool(
        name="npm_create_certificate",
        description="Create a new Let's Encrypt SSL certificate",
    )
    async def npm_create_certificate(
        ctx: Context,
        domain_names: Annotated[list[str], Field(description="Domain names for the certificate")],
        nice_name: Annotated[str | None, Field(description="Friendly name for the certificate")] = None,
        dns_challenge: Annotated[bool | None, Field(description="Use DNS challenge instead of HTTP")] = None,
        dns_provider: Annotated[
            str | None, Field(description="DNS provider for DNS challenge (e.g., cloudflare)")
        ] = None,
        dns_provider_credentials: Annotated[str | None, Field(description="DNS provider API credentials")] = None,
        letsencrypt_email: Annotated[str | None, Field(description="Email for Let's Encrypt notifications")] = None,
    ) -> dict[str, Any]:
        data = {
            "provider": "letsencrypt",
            "domain_names": domain_names,
            "nice_name": nice_name,
            "meta": drop_unset(
                {
                    "letsencrypt_agree": True,
                    "dns_challenge": dns_challenge,
                    "dns_provider": dns_provider,
                    "dns_provider_credentials": dns_provider_credentials,
                    "letsencrypt_email": letsencrypt_email,
                },
            ),
        }
        message = f"Requesting certificate for {', '.join(domain_names)}."
        return await run_operation(ctx, message, ops.create_certificate, client, data)

    @tool(
        name="npm_delete_certificate",
        description="Delete a certificate",
        annotations=DESTRUCTIVE,
    )
    async def npm_delete_certificate(
        ctx: Context,
        id: Annotated[int, Field(description="The certificate ID to delete")],
    ) -> dict[str, Any]:
        await run_operation(ctx, f"Deleting certificate {id}.", ops.delete_certificate, client, id)
        return deleted("certificate")

    @tool(
        name="npm_renew_certificate",
        description="Renew a Let's Encrypt certificate",
    )
    async def npm_renew_certificate(
        ctx: Context,
        id: Annotated[int, Field(description="The certificate ID to renew")],
    ) -> dict[str, Any]:
        return await run_operation(ctx, f"Renewing certificate {id}.", ops.renew_certificate, client, id)

    return registered


__all__ = ["register"]
