"""Creation defaults for every Nginx Proxy Manager entity kind.

The proxy manager rejects or misconfigures entities whose optional fields are
missing, so every creation payload is completed from the table below before a
request is built. Caller-supplied values always win; ``None`` counts as "not
supplied".
"""

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

Payload: TypeAlias = dict[str, Any]


class EntityKind(StrEnum):
    """Entity kinds that accept creation requests."""

    PROXY_HOST = "proxy_host"
    CERTIFICATE = "certificate"
    STREAM = "stream"
    ACCESS_LIST = "access_list"
    REDIRECTION_HOST = "redirection_host"
    DEAD_HOST = "dead_host"
    USER = "user"


@dataclass(frozen=True, slots=True)
class EntityDefaults:
    """Default policy for one entity kind.

    Attributes:
        fields: Values used when the caller omits the field entirely.
        merged: Dict-valued fields whose defaults are merged key by key under
            the caller's value instead of being replaced by it.
        derived: Fields computed from the rest of the payload when omitted.

    """

    fields: Mapping[str, Any] = field(default_factory=dict)
    merged: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    derived: Mapping[str, Callable[[Payload], Any]] = field(default_factory=dict)


def _first_domain(payload: Payload) -> Any:
    domains = payload.get("domain_names") or []
    return domains[0] if domains else None


_TLS_FLAGS: Mapping[str, Any] = {
    "ssl_forced": False,
    "hsts_enabled": False,
    "hsts_subdomains": False,
    "http2_support": False,
}

ENTITY_DEFAULTS: Mapping[EntityKind, EntityDefaults] = {
    EntityKind.PROXY_HOST: EntityDefaults(
        fields={
            "forward_scheme": "http",
            **_TLS_FLAGS,
            "block_exploits": False,
            "caching_enabled": False,
            "allow_websocket_upgrade": False,
            "access_list_id": 0,
            "certificate_id": 0,
            "advanced_config": "",
            "enabled": True,
            "meta": {"letsencrypt_agree": False, "dns_challenge": False},
            "locations": [],
        },
    ),
    EntityKind.CERTIFICATE: EntityDefaults(
        fields={"provider": "letsencrypt"},
        merged={"meta": {"letsencrypt_agree": True, "dns_challenge": False}},
        derived={"nice_name": _first_domain},
    ),
    EntityKind.STREAM: EntityDefaults(
        fields={
            "tcp_forwarding": True,
            "udp_forwarding": False,
            "meta": {},
        },
    ),
    EntityKind.ACCESS_LIST: EntityDefaults(
        fields={
            "satisfy_any": False,
            "pass_auth": False,
            "items": [],
            "clients": [],
            "meta": {},
        },
    ),
    EntityKind.REDIRECTION_HOST: EntityDefaults(
        fields={
            "forward_http_code": 301,
            "preserve_path": True,
            "block_exploits": False,
            "certificate_id": 0,
            **_TLS_FLAGS,
            "enabled": True,
            "meta": {},
        },
    ),
    EntityKind.DEAD_HOST: EntityDefaults(
        fields={
            "certificate_id": 0,
            **_TLS_FLAGS,
            "enabled": True,
            "meta": {},
        },
    ),
    EntityKind.USER: EntityDefaults(
        fields={"is_disabled": False},
    ),
}


def drop_unset(data: Mapping[str, Any]) -> Payload:
    """Return a copy of ``data`` without ``None`` values."""
    return {key: value for key, value in data.items() if value is not None}


def apply_defaults(kind: EntityKind, data: Mapping[str, Any]) -> Payload:
    """Complete a creation payload with the defaults of ``kind``.

    Args:
        kind: The entity kind being created.
        data: Caller-supplied fields. ``None`` values are treated as omitted.

    Returns:
        A new payload dict; ``data`` and the default table are not modified.

    """
    policy = ENTITY_DEFAULTS[kind]
    payload = copy.deepcopy(drop_unset(data))

    for name, default in policy.fields.items():
        if name not in payload:
            payload[name] = copy.deepcopy(default)

    for name, defaults in policy.merged.items():
        supplied = payload.get(name) or {}
        payload[name] = {**defaults, **drop_unset(supplied)}

    for name, compute in policy.derived.items():
        if name not in payload:
            value = compute(payload)
            if value is not None:
                payload[name] = value

    return payload


__all__ = [
    "ENTITY_DEFAULTS",
    "EntityDefaults",
    "EntityKind",
    "Payload",
    "apply_defaults",
    "drop_unset",
]
