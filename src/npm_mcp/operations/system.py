"""Operations on system-level endpoints: audit log, settings and reports."""

import logging

from ..client.npm_client import NPMClient
from .common import AUDIT_LOG, HOSTS_REPORT, SETTINGS, Record, get_entity, list_entities

logger = logging.getLogger("npm_mcp.operations.system")


async def list_audit_log(client: NPMClient) -> list[Record]:
    """Return the audit log entries recorded by the proxy manager."""
    return await list_entities(client, AUDIT_LOG)


async def list_settings(client: NPMClient) -> list[Record]:
    return await list_entities(client, SETTINGS)


async def get_setting(client: NPMClient, setting_id: str) -> Record:
    return await get_entity(client, SETTINGS, setting_id)


async def update_setting(client: NPMClient, setting_id: str, value: str) -> Record:
    """Set the value of one setting, e.g. ``default-site``."""
    logger.info("Updating setting %s", setting_id)
    return await client.execute("PUT", SETTINGS.item(setting_id), {"value": value})


async def get_hosts_report(client: NPMClient) -> Record:
    """Return the host counts per kind as computed by the proxy manager."""
    return await client.execute("GET", HOSTS_REPORT.path)


__all__ = [
    "get_hosts_report",
    "get_setting",
    "list_audit_log",
    "list_settings",
    "update_setting",
]
