"""Configuration management for the Nginx Proxy Manager MCP server.

This module defines the ``NPMConfig`` model and helpers to load configuration
from environment variables. The account password is held as a ``SecretStr``
so it never appears in logs or reprs.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from .errors import ConfigurationError

# Load variables from a local .env file for development convenience
load_dotenv()

DEFAULT_RENEWAL_BUFFER_SECONDS = 300
REQUIRED_ENV_VARS = ("NPM_HOST", "NPM_EMAIL", "NPM_PASSWORD")


class NPMConfig(BaseModel):
    """Connection settings required to talk to a Nginx Proxy Manager instance."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int | None = Field(default=None, ge=1, le=65535)
    email: str = Field(min_length=1)
    password: SecretStr
    use_https: bool = False
    verify_ssl: bool = True
    timeout_ms: int = Field(default=10000, ge=1000, le=600000)
    token_renewal_buffer_seconds: int = Field(default=DEFAULT_RENEWAL_BUFFER_SECONDS, ge=0)

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        host = value.strip().rstrip("/")
        if not host:
            msg = "host must not be blank"
            raise ValueError(msg)
        if "://" in host:
            msg = "host must not include a scheme; set NPM_HTTPS=true to use https"
            raise ValueError(msg)
        return host

    @field_validator("password")
    @classmethod
    def _require_password(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            msg = "password must not be empty"
            raise ValueError(msg)
        return value

    @property
    def base_url(self) -> str:
        """Return the API base URL, e.g. ``https://npm.example.com/api``."""
        scheme = "https" if self.use_https else "http"
        authority = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{scheme}://{authority}/api"

    @classmethod
    def from_env(cls) -> NPMConfig:
        """Build a configuration object from environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or a value is invalid.

        """
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ConfigurationError(msg)

        raw_config: dict[str, Any] = {
            "host": os.getenv("NPM_HOST"),
            "email": os.getenv("NPM_EMAIL"),
            "password": os.getenv("NPM_PASSWORD"),
            "use_https": (os.getenv("NPM_HTTPS") or "").strip().lower() == "true",
        }
        optional = {
            "port": "NPM_PORT",
            "verify_ssl": "NPM_VERIFY_SSL",
            "timeout_ms": "NPM_TIMEOUT_MS",
            "token_renewal_buffer_seconds": "NPM_TOKEN_RENEWAL_BUFFER_SECONDS",
        }
        for field_name, env_name in optional.items():
            value = os.getenv(env_name)
            if value:
                raw_config[field_name] = value

        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
            msg = f"Invalid Nginx Proxy Manager configuration: {messages}"
            raise ConfigurationError(msg) from exc


__all__ = ["DEFAULT_RENEWAL_BUFFER_SECONDS", "NPMConfig"]
