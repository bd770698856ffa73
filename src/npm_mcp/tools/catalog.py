"""Static catalog of the tools this server exposes.

``server`` checks the names actually registered against ``TOOL_NAMES`` at
startup, so a tool added without a catalog entry (or the reverse) fails fast.
"""

from collections.abc import Iterable

TOOL_NAMES: tuple[str, ...] = (
    # Proxy hosts
    "npm_list_proxy_hosts",
    "npm_get_proxy_host",
    "npm_create_proxy_host",
    "npm_update_proxy_host",
    "npm_delete_proxy_host",
    "npm_enable_proxy_host",
    "npm_disable_proxy_host",
    # Certificates
    "npm_list_certificates",
    "npm_get_certificate",
    "npm_create_certificate",
    "npm_delete_certificate",
    "npm_renew_certificate",
    # Streams
    "npm_list_streams",
    "npm_get_stream",
    "npm_create_stream",
    "npm_update_stream",
    "npm_delete_stream",
    "npm_enable_stream",
    "npm_disable_stream",
    # Access lists
    "npm_list_access_lists",
    "npm_get_access_list",
    "npm_create_access_list",
    "npm_update_access_list",
    "npm_delete_access_list",
    # Redirection hosts
    "npm_list_redirection_hosts",
    "npm_get_redirection_host",
    "npm_create_redirection_host",
    "npm_update_redirection_host",
    "npm_delete_redirection_host",
    "npm_enable_redirection_host",
    "npm_disable_redirection_host",
    # Dead hosts
    "npm_list_dead_hosts",
    "npm_get_dead_host",
    "npm_create_dead_host",
    "npm_update_dead_host",
    "npm_delete_dead_host",
    "npm_enable_dead_host",
    "npm_disable_dead_host",
    # Users
    "npm_list_users",
    "npm_get_user",
    "npm_create_user",
    "npm_update_user",
    "npm_delete_user",
    # System
    "npm_list_audit_log",
    "npm_list_settings",
    "npm_get_setting",
    "npm_update_setting",
    "npm_get_hosts_report",
)

RESOURCE_URIS: tuple[str, ...] = (
    "npm://hosts/summary",
    "npm://certificates/summary",
)


def validate_registered(
    registered: Iterable[str],
    *,
    expected: Iterable[str] = TOOL_NAMES,
    label: str = "Tool",
) -> None:
    """Compare registered names with the catalog (tool names by default).

    Raises:
        RuntimeError: If a name is registered twice, is not in the catalog, or
            a catalog entry was never registered.

    """
    names = list(registered)
    duplicates = sorted({name for name in names if names.count(name) > 1})
    catalog = set(expected)
    unknown = sorted(set(names) - catalog)
    missing = sorted(catalog - set(names))
    problems: list[str] = []
    if duplicates:
        problems.append(f"registered more than once: {', '.join(duplicates)}")
    if unknown:
        problems.append(f"not in catalog: {', '.join(unknown)}")
    if missing:
        problems.append(f"never registered: {', '.join(missing)}")
    if problems:
        msg = f"{label} catalog mismatch; " + "; ".join(problems)
        raise RuntimeError(msg)


__all__ = ["RESOURCE_URIS", "TOOL_NAMES", "validate_registered"]
