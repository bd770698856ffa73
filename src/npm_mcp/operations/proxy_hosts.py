"""Operations on proxy hosts (``/nginx/proxy-hosts``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import (
    PROXY_HOSTS,
    Record,
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    set_entity_enabled,
    update_entity,
)


async def list_proxy_hosts(client: NPMClient) -> list[Record]:
    """Return all proxy hosts."""
    return await list_entities(client, PROXY_HOSTS)


async def get_proxy_host(client: NPMClient, host_id: int) -> Record:
    """Return one proxy host."""
    return await get_entity(client, PROXY_HOSTS, host_id)


async def create_proxy_host(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Create a proxy host forwarding ``domain_names`` to ``forward_host:forward_port``.

    Omitted options take the proxy-host defaults (``forward_scheme="http"``,
    every TLS and hardening flag off, ``enabled=True``, no certificate and no
    access list).
    """
    return await create_entity(client, PROXY_HOSTS, data)


async def update_proxy_host(client: NPMClient, host_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, PROXY_HOSTS, host_id, data)


async def delete_proxy_host(client: NPMClient, host_id: int) -> Record:
    return await delete_entity(client, PROXY_HOSTS, host_id)


async def enable_proxy_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, PROXY_HOSTS, host_id, enabled=True)


async def disable_proxy_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, PROXY_HOSTS, host_id, enabled=False)


__all__ = [
    "create_proxy_host",
    "delete_proxy_host",
    "disable_proxy_host",
    "enable_proxy_host",
    "get_proxy_host",
    "list_proxy_hosts",
    "update_proxy_host",
]
