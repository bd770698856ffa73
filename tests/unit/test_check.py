"""Unit tests for the connectivity check command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from npm_mcp.check import main, run_check
from npm_mcp.client.npm_client import NPMClient
from npm_mcp.errors import AuthenticationError, RequestError

if TYPE_CHECKING:
    from conftest import FakeNPM


@pytest.fixture
def npm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NPM_HOST", "npm.example.com")
    monkeypatch.setenv("NPM_EMAIL", "admin@x.com")
    monkeypatch.setenv("NPM_PASSWORD", "secret")
    monkeypatch.setenv("NPM_HTTPS", "true")


@pytest.mark.asyncio
async def test_run_check(client: NPMClient, fake_npm: FakeNPM) -> None:
    """It should authenticate once and return the hosts report."""
    fake_npm.override("GET", "/api/reports/hosts", httpx.Response(200, json={"proxy": 3}))

    result = await run_check(client)

    assert result == {
        "base_url": "https://npm.example.com/api",
        "authenticated": True,
        "hosts_report": {"proxy": 3},
    }
    assert len(fake_npm.token_requests) == 1


@pytest.mark.usefixtures("npm_env")
def test_main_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    """A successful check should print the result as JSON."""
    result = {"base_url": "https://npm.example.com/api", "authenticated": True, "hosts_report": {}}
    with patch("npm_mcp.check.run_check", new=AsyncMock(return_value=result)):
        main()

    assert json.loads(capsys.readouterr().out) == result


@pytest.mark.usefixtures("npm_env")
@pytest.mark.parametrize(
    ("error", "code", "message"),
    [
        (AuthenticationError("Authentication failed (401): bad"), 2, "check NPM_EMAIL and NPM_PASSWORD"),
        (RequestError("API request failed (502): gateway", status_code=502), 1, "Connection check failed"),
    ],
)
def test_main_exit_codes(
    capsys: pytest.CaptureFixture[str],
    error: Exception,
    code: int,
    message: str,
) -> None:
    """Authentication failures and other client errors should map to distinct exit codes."""
    with (
        patch("npm_mcp.check.run_check", new=AsyncMock(side_effect=error)),
        pytest.raises(SystemExit) as excinfo,
    ):
        main()

    assert excinfo.value.code == code
    assert message in capsys.readouterr().err


def test_main_missing_configuration(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Missing environment variables should exit with status 1."""
    for name in ("NPM_HOST", "NPM_EMAIL", "NPM_PASSWORD"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 1
    assert "NPM_HOST" in capsys.readouterr().err
