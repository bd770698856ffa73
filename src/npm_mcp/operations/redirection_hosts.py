"""Operations on redirection hosts (``/nginx/redirection-hosts``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import (
    REDIRECTION_HOSTS,
    Record,
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    set_entity_enabled,
    update_entity,
)


async def list_redirection_hosts(client: NPMClient) -> list[Record]:
    """Return all redirection hosts."""
    return await list_entities(client, REDIRECTION_HOSTS)


async def get_redirection_host(client: NPMClient, host_id: int) -> Record:
    return await get_entity(client, REDIRECTION_HOSTS, host_id)


async def create_redirection_host(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Create a redirection host; defaults to a path-preserving HTTP 301."""
    return await create_entity(client, REDIRECTION_HOSTS, data)


async def update_redirection_host(client: NPMClient, host_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, REDIRECTION_HOSTS, host_id, data)


async def delete_redirection_host(client: NPMClient, host_id: int) -> Record:
    return await delete_entity(client, REDIRECTION_HOSTS, host_id)


async def enable_redirection_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, REDIRECTION_HOSTS, host_id, enabled=True)


async def disable_redirection_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, REDIRECTION_HOSTS, host_id, enabled=False)


__all__ = [
    "create_redirection_host",
    "delete_redirection_host",
    "disable_redirection_host",
    "enable_redirection_host",
    "get_redirection_host",
    "list_redirection_hosts",
    "update_redirection_host",
]
