"""Argument models for access list rules."""

from typing import Literal

from pydantic import BaseModel, Field


class AccessListItem(BaseModel):
    """A basic-auth username/password pair."""

    username: str = Field(description="Basic auth username")
    password: str = Field(description="Basic auth password")


class AccessListClient(BaseModel):
    """An IP-based allow/deny rule."""

    address: str = Field(description="IP address or CIDR range")
    directive: Literal["allow", "deny"] = Field(description="Whether matching clients are allowed or denied")


__all__ = ["AccessListClient", "AccessListItem"]
