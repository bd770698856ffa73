"""Nginx Proxy Manager API client.

``NPMClient`` composes a ``TokenManager`` with a single request primitive,
``execute``, that every entity operation goes through.
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from ..config import NPMConfig
from ..errors import DecodeError, RequestError
from .token_manager import TokenManager

logger = logging.getLogger("npm_mcp.client")


class NPMClient:
    """Authenticated access to one Nginx Proxy Manager instance.

    One client is built per configuration and handed to every tool and
    resource; it owns the bearer credential for the process lifetime.
    """

    def __init__(
        self,
        config: NPMConfig,
        *,
        token_manager: TokenManager | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: The connection configuration.
            token_manager: Optional pre-built token manager; one is created from
                ``config`` when omitted.
            transport: Optional httpx transport shared by the token exchange and
                entity requests. Tests pass an ``httpx.MockTransport`` here.

        """
        self.config = config
        self._transport = transport
        self.token_manager = token_manager or TokenManager(config, transport=transport)

    @property
    def base_url(self) -> str:
        """Return the API base URL."""
        return self.config.base_url

    def _http_client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(self.config.timeout_ms / 1000)
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            verify=self.config.verify_ssl,
            timeout=timeout,
            transport=self._transport,
        )

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        empty: Callable[[], Any] = dict,
    ) -> Any:
        """Perform one authenticated API call and decode its response.

        Args:
            method: HTTP verb, e.g. ``"GET"`` or ``"POST"``.
            path: Path relative to the API base, e.g. ``"/nginx/proxy-hosts"``.
            body: Optional JSON-serializable request body.
            empty: Factory for the result of an empty response body; list
                endpoints pass ``list``.

        Returns:
            The decoded JSON response, or ``empty()`` when the body is empty.

        Raises:
            AuthenticationError: If a fresh token was needed and could not be obtained.
            RequestError: On a non-2xx response or a transport failure.
            DecodeError: If a non-empty response body is not valid JSON.

        """
        await self.token_manager.ensure_valid_credential()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token_manager.token}",
        }
        request_kwargs: dict[str, Any] = {"headers": headers}
        if body is not None:
            request_kwargs["json"] = body

        logger.debug("%s %s", method, path)
        try:
            async with self._http_client() as http_client:
                response = await http_client.request(method, path, **request_kwargs)
        except httpx.HTTPError as exc:
            msg = f"Network error during {method} {path}: {exc}"
            raise RequestError(msg) from exc

        text = response.text
        if not response.is_success:
            msg = f"API request failed ({response.status_code}): {text}"
            raise RequestError(msg, status_code=response.status_code, body=text)

        if not text.strip():
            return empty()

        try:
            return response.json()
        except ValueError as exc:
            msg = f"Invalid JSON response from {method} {path}: {exc}"
            raise DecodeError(msg, body=text) from exc


__all__ = ["NPMClient"]
