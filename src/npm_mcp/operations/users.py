"""Operations on proxy manager users (``/users``)."""

from collections.abc import Mapping
from typing import Any

from ..client.npm_client import NPMClient
from .common import USERS, Record, create_entity, delete_entity, get_entity, list_entities, update_entity


def password_auth(secret: str) -> dict[str, str]:
    """Return the ``auth`` block the proxy manager expects for password logins."""
    return {"type": "password", "secret": secret}


async def list_users(client: NPMClient) -> list[Record]:
    return await list_entities(client, USERS)


async def get_user(client: NPMClient, user_id: int) -> Record:
    return await get_entity(client, USERS, user_id)


async def create_user(client: NPMClient, data: Mapping[str, Any]) -> Record:
    """Create a user; ``is_disabled`` defaults to ``False``."""
    return await create_entity(client, USERS, data)


async def update_user(client: NPMClient, user_id: int, data: Mapping[str, Any]) -> Record:
    return await update_entity(client, USERS, user_id, data)


async def delete_user(client: NPMClient, user_id: int) -> Record:
    return await delete_entity(client, USERS, user_id)


__all__ = [
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
    "password_auth",
    "update_user",
]
