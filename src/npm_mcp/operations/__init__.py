"""Operational helpers for MCP tools.

Contains the typed operations on the Nginx Proxy Manager API:
- ``common``: Endpoint table and generic list/get/create/update/delete helpers
- ``defaults``: Per-entity-kind creation defaults
- ``proxy_hosts``, ``certificates``, ``streams``, ``access_lists``,
  ``redirection_hosts``, ``dead_hosts``, ``users``: Entity operations
- ``system``: Audit log, settings and reports
- ``summaries``: Aggregated hosts and certificates views
"""
