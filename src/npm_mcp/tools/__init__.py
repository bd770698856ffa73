"""Tools package for MCP server.

Contains MCP tool registration modules, one per entity kind:
- ``proxy_hosts``, ``certificates``, ``streams``, ``access_lists``,
  ``redirection_hosts``, ``dead_hosts``, ``users``: CRUD and enable/disable tools
- ``system``: Audit log, settings and hosts report tools
- ``catalog``: Static list of tool names validated at startup
- ``common``: Shared invocation boundary and registration helpers
"""
