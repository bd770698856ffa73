"""Unit tests for server wiring and the console entry point."""

import signal
from unittest.mock import MagicMock, patch

import pytest
from fastmcp import FastMCP

from npm_mcp.client.npm_client import NPMClient
from npm_mcp.config import NPMConfig
from npm_mcp.errors import ConfigurationError
from npm_mcp.server import SERVER_NAME, build_client, create_app, handle_interrupt, main
from npm_mcp.tools.catalog import RESOURCE_URIS, TOOL_NAMES


class TestCreateApp:
    """Tests for building the FastMCP application."""

    @pytest.mark.asyncio
    async def test_registers_catalog(self, client: NPMClient) -> None:
        """The app should expose exactly the catalog tools and both summary resources."""
        app = create_app(client)

        assert isinstance(app, FastMCP)
        assert app.name == SERVER_NAME
        tools = await app.get_tools()
        assert set(tools) == set(TOOL_NAMES)
        resources = await app.get_resources()
        assert set(resources) == set(RESOURCE_URIS)

    def test_catalog_mismatch_fails_fast(self, client: NPMClient) -> None:
        """A tool missing from the registrations should abort app creation."""
        with (
            patch("npm_mcp.server.TOOL_MODULES", ()),
            pytest.raises(RuntimeError, match="Tool catalog mismatch"),
        ):
            create_app(client)


class TestBuildClient:
    """Tests for client construction."""

    def test_uses_given_config(self, config: NPMConfig) -> None:
        """An explicit configuration should be used as is."""
        client = build_client(config)
        assert client.config is config
        assert client.base_url == "https://npm.example.com/api"

    def test_loads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a configuration the environment should be read."""
        monkeypatch.setenv("NPM_HOST", "proxy.lan")
        monkeypatch.setenv("NPM_PORT", "81")
        monkeypatch.setenv("NPM_EMAIL", "admin@x.com")
        monkeypatch.setenv("NPM_PASSWORD", "secret")
        monkeypatch.delenv("NPM_HTTPS", raising=False)

        assert build_client().base_url == "http://proxy.lan:81/api"


class TestMain:
    """Tests for the console entry point."""

    def test_handle_interrupt_calls_sys_exit(self) -> None:
        """The interrupt handler should exit cleanly."""
        with pytest.raises(SystemExit) as excinfo:
            handle_interrupt(signal.SIGINT, None)
        assert excinfo.value.code == 0

    def test_main_registers_signal_handlers_and_runs_app(self, client: NPMClient) -> None:
        """main() should register signal handlers, build the app and run it."""
        app = MagicMock()
        with (
            patch("npm_mcp.server.signal.signal") as mock_signal,
            patch("npm_mcp.server.build_client", return_value=client),
            patch("npm_mcp.server.create_app", return_value=app) as mock_create,
        ):
            main()

        assert mock_signal.call_count == 2
        mock_signal.assert_any_call(signal.SIGINT, handle_interrupt)
        mock_signal.assert_any_call(signal.SIGTERM, handle_interrupt)
        mock_create.assert_called_once_with(client)
        app.run.assert_called_once()

    def test_main_discards_token_on_shutdown(self, client: NPMClient) -> None:
        """The held credential should be forgotten when the server stops, even on interrupt."""
        client.token_manager._cached_token = "tok"  # type: ignore[reportPrivateUsage]
        app = MagicMock()
        app.run.side_effect = lambda: handle_interrupt(signal.SIGTERM, None)
        with (
            patch("npm_mcp.server.signal.signal"),
            patch("npm_mcp.server.build_client", return_value=client),
            patch("npm_mcp.server.create_app", return_value=app),
            pytest.raises(SystemExit),
        ):
            main()

        assert client.token_manager.token is None

    def test_main_exits_on_configuration_error(self) -> None:
        """Missing configuration should exit with status 1 before the app is built."""
        with (
            patch("npm_mcp.server.signal.signal"),
            patch("npm_mcp.server.build_client", side_effect=ConfigurationError("Missing NPM_HOST")),
            patch("npm_mcp.server.create_app") as mock_create,
            pytest.raises(SystemExit) as excinfo,
        ):
            main()

        assert excinfo.value.code == 1
        mock_create.assert_not_called()
