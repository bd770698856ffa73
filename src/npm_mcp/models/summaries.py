"""Digest models for the read-only summary resources.

Remote records are opaque JSON; these models pick out the few fields the
summaries need and tolerate anything else the proxy manager returns.
"""

from typing import Any, Self

from pydantic import BaseModel, Field


class ProxyHostDigest(BaseModel):
    """Short description of one proxy host."""

    id: int | None = None
    domains: list[str] = Field(default_factory=list)
    forward: str
    enabled: bool | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build a digest from a raw proxy host record."""
        forward = f"{record.get('forward_scheme')}://{record.get('forward_host')}:{record.get('forward_port')}"
        return cls(
            id=record.get("id"),
            domains=record.get("domain_names") or [],
            forward=forward,
            enabled=record.get("enabled"),
        )


class HostsSummary(BaseModel):
    """Counts of every host kind plus a digest of each proxy host."""

    proxy_hosts: int
    redirection_hosts: int
    streams: int
    dead_hosts: int
    proxy_host_details: list[ProxyHostDigest]


class CertificateDigest(BaseModel):
    """Short description of one certificate."""

    id: int | None = None
    name: str | None = None
    domains: list[str] = Field(default_factory=list)
    provider: str | None = None
    expires: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build a digest from a raw certificate record."""
        return cls(
            id=record.get("id"),
            name=record.get("nice_name"),
            domains=record.get("domain_names") or [],
            provider=record.get("provider"),
            expires=record.get("expires_on"),
        )


class CertificatesSummary(BaseModel):
    """Certificate count plus a digest of each certificate."""

    total: int
    certificates: list[CertificateDigest]


__all__ = ["CertificateDigest", "CertificatesSummary", "HostsSummary", "ProxyHostDigest"]
