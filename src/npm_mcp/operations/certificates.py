"""Operations on SSL certificates (``/nginx/certificates``)."""

import logging
from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import CERTIFICATES, Record, create_entity, delete_entity, get_entity, list_entities

logger = logging.getLogger("npm_mcp.operations.certificates")


async def list_certificates(client: NPMClient) -> list[Record]:
    """Return all certificates."""
    return await list_entities(client, CERTIFICATES)


async def get_certificate(client: NPMClient, certificate_id: int) -> Record:
    """Return one certificate."""
    return await get_entity(client, CERTIFICATES, certificate_id)


async def create_certificate(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Request a new certificate.

    ``nice_name`` falls back to the first domain name and ``meta`` is merged
    over ``{"letsencrypt_agree": True, "dns_challenge": False}``.
    """
    return await create_entity(client, CERTIFICATES, data)


async def delete_certificate(client: NPMClient, certificate_id: int) -> Record:
    return await delete_entity(client, CERTIFICATES, certificate_id)


async def renew_certificate(client: NPMClient, certificate_id: int) -> Record:
    """Ask the proxy manager to renew a Let's Encrypt certificate now."""
    logger.info("Renewing certificate %s", certificate_id)
    return await client.execute("POST", f"{CERTIFICATES.item(certificate_id)}/renew")


__all__ = [
    "create_certificate",
    "delete_certificate",
    "get_certificate",
    "list_certificates",
    "renew_certificate",
]
