"""Server configuration constants and tool category management."""

from __future__ import annotations

import os

ENV_TOOLS = "PKGSCOPE_TOOLS"

# ---------------------------------------------------------------------------
# Tool Categories - controls which tools are exposed via PKGSCOPE_TOOLS env
# ---------------------------------------------------------------------------
# Default: all categories
# Set PKGSCOPE_TOOLS to a comma-separated list to narrow the surface,
# e.g., PKGSCOPE_TOOLS=packages,scoring

TOOL_CATEGORIES: dict[str, set[str]] = {
    # Point lookup, listing and search over the index
    "packages": {
        "get_package",
        "list_packages",
        "search_packages",
        "dependency_graph",
    },
    # Live scans of model source files
    "models": {
        "find_trait_usages",
        "get_relationships",
    },
    # Standards scoring and comparison
    "scoring": {
        "audit_package",
        "package_health",
        "compare_packages",
    },
    # Index lifecycle
    "index": {
        "reload_index",
    },
}

DEFAULT_TOOL_CATEGORIES: set[str] = set(TOOL_CATEGORIES)


def get_enabled_categories() -> set[str]:
    """Get enabled tool categories from PKGSCOPE_TOOLS env var.

    Returns:
        Set of enabled category names. Defaults to every category.
    """
    env = os.environ.get(ENV_TOOLS, "").strip()
    if not env or env.lower() == "all":
        return DEFAULT_TOOL_CATEGORIES.copy()
    return {c.strip().lower() for c in env.split(",") if c.strip()}


def get_enabled_tools() -> set[str]:
    """Get set of enabled tool names based on enabled categories."""
    categories = get_enabled_categories()
    tools: set[str] = set()
    for cat in categories:
        if cat in TOOL_CATEGORIES:
            tools.update(TOOL_CATEGORIES[cat])
    return tools
