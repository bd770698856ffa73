"""Client package for the Nginx Proxy Manager MCP server.

Provides authentication and request handling for the Nginx Proxy Manager API:
- ``npm_client``: ``NPMClient`` with the ``execute`` request primitive
- ``token_manager``: Bearer token lifecycle management with automatic renewal
"""
