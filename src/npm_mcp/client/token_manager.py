"""Bearer token management for the Nginx Proxy Manager API."""

import asyncio
import logging
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Self

import httpx

from ..config import NPMConfig
from ..errors import AuthenticationError

logger = logging.getLogger("npm_mcp.token_manager")

TOKEN_PATH = "/tokens"


class TokenManager:
    """Hold a single bearer token and renew it before it expires."""

    def __init__(
        self,
        config: NPMConfig,
        *,
        renewal_buffer: timedelta | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the token manager.

        Args:
            config: The resolved connection configuration used for authentication.
            renewal_buffer: Lead time before expiry at which the token is renewed.
                Defaults to ``config.token_renewal_buffer_seconds``.
            transport: Optional httpx transport, used by tests to stub the network.

        """
        self._config = config
        self._transport = transport
        self.renewal_buffer = (
            renewal_buffer if renewal_buffer is not None else timedelta(seconds=config.token_renewal_buffer_seconds)
        )
        self._cached_token: str | None = None
        self._token_expires_at: datetime | None = None
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def __enter__(self) -> Self:
        """Return the token manager for context manager usage."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Discard the held credential when leaving a context manager block."""
        self.close()

    def close(self) -> None:
        """Forget the held credential. Tokens are not revoked remotely."""
        self._cached_token = None
        self._token_expires_at = None

    @property
    def token(self) -> str | None:
        """The currently held bearer token, if any."""
        return self._cached_token

    @property
    def expires_at(self) -> datetime | None:
        """Expiry of the currently held bearer token, if known."""
        return self._token_expires_at

    def _ensure_lock(self) -> asyncio.Lock:
        """Return an asyncio lock bound to the current event loop.

        Creates a new lock if one does not exist or if the event loop has changed.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def has_valid_credential(self, now: datetime | None = None) -> bool:
        """Return True when a token is held and expires after ``now + renewal_buffer``."""
        if not self._cached_token or self._token_expires_at is None:
            return False
        now = now or datetime.now(UTC)
        return self._token_expires_at - self.renewal_buffer > now

    async def ensure_valid_credential(self) -> None:
        """Make sure a usable bearer token is held, authenticating if needed.

        Concurrent callers share a single authentication exchange: the lock
        serializes refreshes and waiters re-check validity once they get it.

        Raises:
            AuthenticationError: If the token exchange fails. The previously
                held token, if any, is left in place.

        """
        if self.has_valid_credential():
            return
        async with self._ensure_lock():
            if self.has_valid_credential():
                return
            await self._fetch_and_cache_token()

    async def _fetch_and_cache_token(self) -> None:
        """Authenticate with the proxy manager and store the returned token."""
        try:
            data = await self._request_token()
        except AuthenticationError:
            logger.exception("Failed to authenticate with Nginx Proxy Manager")
            raise

        token = data.get("token") if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            msg = "Nginx Proxy Manager authentication succeeded but returned no token."
            raise AuthenticationError(msg, body=str(data))

        expires_at = _parse_expiry(data.get("expires"))
        if expires_at is None:
            logger.warning("Could not parse token expiration; the token will be renewed on the next call.")

        self._cached_token = token
        self._token_expires_at = expires_at
        logger.debug("Fetched new bearer token from Nginx Proxy Manager.")

    async def _request_token(self) -> dict[str, object]:
        """POST the account credentials to the token endpoint.

        Returns:
            The decoded JSON body of the token response.

        """
        timeout = httpx.Timeout(self._config.timeout_ms / 1000)
        payload = {
            "identity": self._config.email,
            "secret": self._config.password.get_secret_value(),
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                verify=self._config.verify_ssl,
                timeout=timeout,
                transport=self._transport,
            ) as http_client:
                response = await http_client.post(
                    TOKEN_PATH,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            msg = f"Authentication failed: could not reach {self._config.base_url}: {exc}"
            raise AuthenticationError(msg) from exc

        if not response.is_success:
            msg = f"Authentication failed ({response.status_code}): {response.text}"
            raise AuthenticationError(msg, body=response.text)

        try:
            return response.json()
        except ValueError as exc:
            msg = "Authentication failed: token response is not valid JSON"
            raise AuthenticationError(msg, body=response.text) from exc


def _parse_expiry(value: object) -> datetime | None:
    """Parse the ``expires`` field of a token response into an aware datetime."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


__all__ = ["TOKEN_PATH", "TokenManager"]
