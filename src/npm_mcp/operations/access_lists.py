"""Operations on access lists (``/nginx/access-lists``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import ACCESS_LISTS, Record, create_entity, delete_entity, get_entity, list_entities, update_entity


async def list_access_lists(client: NPMClient) -> list[Record]:
    return await list_entities(client, ACCESS_LISTS)


async def get_access_list(client: NPMClient, access_list_id: int) -> Record:
    return await get_entity(client, ACCESS_LISTS, access_list_id)


async def create_access_list(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Create an access list with no basic-auth items or client rules by default."""
    return await create_entity(client, ACCESS_LISTS, data)


async def update_access_list(client: NPMClient, access_list_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, ACCESS_LISTS, access_list_id, data)


async def delete_access_list(client: NPMClient, access_list_id: int) -> Record:
    return await delete_entity(client, ACCESS_LISTS, access_list_id)


__all__ = [
    "create_access_list",
    "delete_access_list",
    "get_access_list",
    "list_access_lists",
    "update_access_list",
]
