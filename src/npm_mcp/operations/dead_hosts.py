"""Operations on 404 ("dead") hosts (``/nginx/dead-hosts``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import (
    DEAD_HOSTS,
    Record,
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    set_entity_enabled,
    update_entity,
)


async def list_dead_hosts(client: NPMClient) -> list[Record]:
    return await list_entities(client, DEAD_HOSTS)


async def get_dead_host(client: NPMClient, host_id: int) -> Record:
    return await get_entity(client, DEAD_HOSTS, host_id)


async def create_dead_host(client: NPMClient, data: Mapping[str, Any]) -> Record:
    return await create_entity(client, DEAD_HOSTS, data)


async def update_dead_host(client: NPMClient, host_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, DEAD_HOSTS, host_id, data)


async def delete_dead_host(client: NPMClient, host_id: int) -> Record:
    return await delete_entity(client, DEAD_HOSTS, host_id)


async def enable_dead_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, DEAD_HOSTS, host_id, enabled=True)


async def disable_dead_host(client: NPMClient, host_id: int) -> Record:
    return await set_entity_enabled(client, DEAD_HOSTS, host_id, enabled=False)


__all__ = [
    "create_dead_host",
    "delete_dead_host",
    "disable_dead_host",
    "enable_dead_host",
    "get_dead_host",
    "list_dead_hosts",
    "update_dead_host",
]
