"""Aggregate views composed from several list operations."""

import asyncio
import logging
from typing import Any

from ..client.npm_client import NPMClient
from ..models.summaries import CertificateDigest, CertificatesSummary, HostsSummary, ProxyHostDigest
from .certificates import list_certificates
from .dead_hosts import list_dead_hosts
from .proxy_hosts import list_proxy_hosts
from .redirection_hosts import list_redirection_hosts
from .streams import list_streams

logger = logging.getLogger("npm_mcp.operations.summaries")


async def collect_hosts_summary(client: NPMClient) -> dict[str, Any]:
    """Return host counts per kind and a digest of every proxy host.

    The four listings run concurrently; if any of them fails the whole
    summary fails with that error.
    """
    proxy_hosts, redirection_hosts, streams, dead_hosts = await asyncio.gather(
        list_proxy_hosts(client),
        list_redirection_hosts(client),
        list_streams(client),
        list_dead_hosts(client),
    )
    summary = HostsSummary(
        proxy_hosts=len(proxy_hosts),
        redirection_hosts=len(redirection_hosts),
        streams=len(streams),
        dead_hosts=len(dead_hosts),
        proxy_host_details=[ProxyHostDigest.from_record(host) for host in proxy_hosts],
    )
    logger.debug("Hosts summary: %d proxy hosts", summary.proxy_hosts)
    return summary.model_dump(mode="json")


async def collect_certificates_summary(client: NPMClient) -> dict[str, Any]:
    """Return the certificate count and a digest of every certificate."""
    certificates = await list_certificates(client)
    summary = CertificatesSummary(
        total=len(certificates),
        certificates=[CertificateDigest.from_record(cert) for cert in certificates],
    )
    return summary.model_dump(mode="json")


__all__ = ["collect_certificates_summary", "collect_hosts_summary"]
