"""Unit tests for the tool catalog validation."""

import pytest

from npm_mcp.tools.catalog import RESOURCE_URIS, TOOL_NAMES, validate_registered


def test_catalog_names_are_unique_and_prefixed() -> None:
    """Catalog entries should be unique and share the npm_ prefix."""
    assert len(TOOL_NAMES) == len(set(TOOL_NAMES))
    assert all(name.startswith("npm_") for name in TOOL_NAMES)


def test_validate_accepts_exact_match() -> None:
    """A registration matching the catalog in any order should pass."""
    validate_registered(reversed(TOOL_NAMES))
    validate_registered(RESOURCE_URIS, expected=RESOURCE_URIS, label="Resource")


def test_validate_reports_missing() -> None:
    """A catalog entry that was never registered should be reported."""
    with pytest.raises(RuntimeError, match="never registered: npm_get_hosts_report"):
        validate_registered([name for name in TOOL_NAMES if name != "npm_get_hosts_report"])


def test_validate_reports_unknown() -> None:
    """A registered name outside the catalog should be reported."""
    with pytest.raises(RuntimeError, match="not in catalog: npm_reboot"):
        validate_registered([*TOOL_NAMES, "npm_reboot"])


def test_validate_reports_duplicates() -> None:
    """Registering the same name twice should be reported."""
    with pytest.raises(RuntimeError, match="registered more than once: npm_list_users"):
        validate_registered([*TOOL_NAMES, "npm_list_users"])


def test_validate_uses_label() -> None:
    """The label should prefix the error message."""
    with pytest.raises(RuntimeError, match="^Resource catalog mismatch"):
        validate_registered([], expected=RESOURCE_URIS, label="Resource")
