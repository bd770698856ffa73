"""Pydantic models for Nginx Proxy Manager payloads.

Exports:
    - AccessListItem, AccessListClient: Access list rule arguments
    - ProxyHostDigest, HostsSummary: Hosts summary resource shape
    - CertificateDigest, CertificatesSummary: Certificates summary resource shape
"""

from .access_lists import AccessListClient, AccessListItem
from .summaries import CertificateDigest, CertificatesSummary, HostsSummary, ProxyHostDigest

__all__ = [
    "AccessListClient",
    "AccessListItem",
    "CertificateDigest",
    "CertificatesSummary",
    "HostsSummary",
    "ProxyHostDigest",
]
