"""Operations on TCP/UDP streams (``/nginx/streams``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import (
    STREAMS,
    Record,
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    set_entity_enabled,
    update_entity,
)


async def list_streams(client: NPMClient) -> list[Record]:
    """Return all streams."""
    return await list_entities(client, STREAMS)


async def get_stream(client: NPMClient, stream_id: int) -> Record:
    return await get_entity(client, STREAMS, stream_id)


async def create_stream(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Create a stream; TCP forwarding is on and UDP off unless stated otherwise."""
    return await create_entity(client, STREAMS, data)


async def update_stream(client: NPMClient, stream_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, STREAMS, stream_id, data)


async def delete_stream(client: NPMClient, stream_id: int) -> Record:
    return await delete_entity(client, STREAMS, stream_id)


async def enable_stream(client: NPMClient, stream_id: int) -> Record:
    return await set_entity_enabled(client, STREAMS, stream_id, enabled=True)


async def disable_stream(client: NPMClient, stream_id: int) -> Record:
    return await set_entity_enabled(client, STREAMS, stream_id, enabled=False)


__all__ = [
    "create_stream",
    "delete_stream",
    "disable_stream",
    "enable_stream",
    "get_stream",
    "list_streams",
    "update_stream",
]
