"""Common utilities for Nginx Proxy Manager operations modules.

Every entity kind follows the same REST shape under its own path:

- ``GET    {path}``               list
- ``GET    {path}/{id}``          get
- ``POST   {path}``               create
- ``PUT    {path}/{id}``          update
- ``DELETE {path}/{id}``          delete
- ``POST   {path}/{id}/enable``   enable (soft-disable capable kinds only)
- ``POST   {path}/{id}/disable``  disable

The per-kind modules are thin typed wrappers over the helpers here.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from ..client.npm_client import NPMClient
from .defaults import EntityKind, Payload, apply_defaults, drop_unset

logger = logging.getLogger("npm_mcp.operations.common")

EntityId: TypeAlias = int | str
Record: TypeAlias = dict[str, Any]


@dataclass(frozen=True, slots=True)
class Endpoint:
    """REST location of one entity kind."""

    path: str
    label: str
    kind: EntityKind | None = None

    def item(self, entity_id: EntityId) -> str:
        """Return the path of a single entity."""
        return f"{self.path}/{entity_id}"


PROXY_HOSTS = Endpoint("/nginx/proxy-hosts", "proxy host", EntityKind.PROXY_HOST)
CERTIFICATES = Endpoint("/nginx/certificates", "certificate", EntityKind.CERTIFICATE)
STREAMS = Endpoint("/nginx/streams", "stream", EntityKind.STREAM)
ACCESS_LISTS = Endpoint("/nginx/access-lists", "access list", EntityKind.ACCESS_LIST)
REDIRECTION_HOSTS = Endpoint("/nginx/redirection-hosts", "redirection host", EntityKind.REDIRECTION_HOST)
DEAD_HOSTS = Endpoint("/nginx/dead-hosts", "dead host", EntityKind.DEAD_HOST)
USERS = Endpoint("/users", "user", EntityKind.USER)
SETTINGS = Endpoint("/settings", "setting")
AUDIT_LOG = Endpoint("/audit-log", "audit log entry")
HOSTS_REPORT = Endpoint("/reports/hosts", "hosts report")


async def list_entities(client: NPMClient, endpoint: Endpoint) -> list[Record]:
    """Return every entity of a kind."""
    return await client.execute("GET", endpoint.path, empty=list)


async def get_entity(client: NPMClient, endpoint: Endpoint, entity_id: EntityId) -> Record:
    """Return a single entity by identifier."""
    return await client.execute("GET", endpoint.item(entity_id))


async def create_entity(client: NPMClient, endpoint: Endpoint, data: Mapping[str, Any]) -> Record:
    """Create an entity after completing ``data`` with the kind's defaults."""
    if endpoint.kind is None:
        msg = f"{endpoint.label} does not support creation"
        raise ValueError(msg)
    payload: Payload = apply_defaults(endpoint.kind, data)
    logger.info("Creating %s", endpoint.label)
    return await client.execute("POST", endpoint.path, payload)


async def update_entity(
    client: NPMClient,
    endpoint: Endpoint,
    entity_id: EntityId,
    data: Mapping[str, Any],
) -> Record:
    """Send a partial update containing only the supplied fields."""
    logger.info("Updating %s %s", endpoint.label, entity_id)
    return await client.execute("PUT", endpoint.item(entity_id), drop_unset(data))


async def delete_entity(client: NPMClient, endpoint: Endpoint, entity_id: EntityId) -> Record:
    """Delete an entity; the proxy manager usually answers with an empty body."""
    logger.info("Deleting %s %s", endpoint.label, entity_id)
    return await client.execute("DELETE", endpoint.item(entity_id))


async def set_entity_enabled(
    client: NPMClient,
    endpoint: Endpoint,
    entity_id: EntityId,
    *,
    enabled: bool,
) -> Record:
    """Enable or disable an entity without deleting it."""
    action = "enable" if enabled else "disable"
    logger.info("Requesting %s of %s %s", action, endpoint.label, entity_id)
    return await client.execute("POST", f"{endpoint.item(entity_id)}/{action}")


__all__ = [
    "ACCESS_LISTS",
    "AUDIT_LOG",
    "CERTIFICATES",
    "DEAD_HOSTS",
    "HOSTS_REPORT",
    "PROXY_HOSTS",
    "REDIRECTION_HOSTS",
    "SETTINGS",
    "STREAMS",
    "USERS",
    "Endpoint",
    "EntityId",
    "Record",
    "create_entity",
    "delete_entity",
    "get_entity",
    "list_entities",
    "set_entity_enabled",
    "update_entity",
]
