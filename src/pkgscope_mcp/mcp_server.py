from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from mcp.server.fastmcp import FastMCP

from pkgscope.config import PkgscopeConfig
from pkgscope.index import RESOURCE_SCHEME
from pkgscope.logging_config import configure_logging, get_logger
from pkgscope_mcp.server import (
    IndexStatsInfo,
    PackageInfo,
    ServerState,
    get_enabled_categories,
    get_enabled_tools,
    not_found,
)
from pkgscope_mcp.tools import register_analysis_tools, register_package_tools

logger = get_logger("mcp_server")


def create_server(
    root: Path | None = None,
    config: PkgscopeConfig | None = None,
) -> FastMCP:
    """Create and configure the pkgscope MCP server.

    Args:
        root: Monorepo root (default: PKGSCOPE_ROOT env var, then cwd)
        config: Full static config; overrides ``root`` when given

    Returns:
        Configured FastMCP server instance
    """
    configure_logging()

    if config is None:
        config = PkgscopeConfig.from_env(root=root)
    state = ServerState(config=config)

    mcp = FastMCP(
        "pkgscope",
        instructions="""\
pkgscope answers questions about the packages of a PHP monorepo.

<tool_selection>
- get_package(name) for everything known about one package
- list_packages(category, kind) to enumerate packages
- search_packages(query) to find packages, models, traits or UI
  components by name
- dependency_graph(name) for what a package needs and what needs it
- find_trait_usages(trait) / get_relationships(model) read model
  sources live
- audit_package, package_health and compare_packages for standards
  scoring
</tool_selection>

<indexing>
The index is built on first use and never refreshed automatically.
Call reload_index() after packages change on disk.
</indexing>
""",
    )

    _enabled_categories = get_enabled_categories()
    _enabled_tools = get_enabled_tools()
    logger.info(
        "tool categories enabled: %s (%d tools)",
        ", ".join(sorted(_enabled_categories)),
        len(_enabled_tools),
    )

    def tool_if_enabled(func):
        """Decorator that only registers tool if its category is enabled.

        Uses the function name to look up whether it should be registered.
        If the tool is not in any enabled category, returns the function
        as-is without registering it as an MCP tool.
        """
        if func.__name__ in _enabled_tools:
            return mcp.tool()(func)
        return func

    register_package_tools(mcp, state, tool_if_enabled)
    register_analysis_tools(mcp, state, tool_if_enabled)

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------

    @mcp.resource(f"{RESOURCE_SCHEME}://packages")
    def get_packages_resource() -> dict[str, Any]:
        """All indexed packages as addressable resources.

        Each entry carries the URI of the package resource
        (pkgscope://packages/{category}/{name}).
        """
        index = state.engine.index
        return {
            "count": len(index),
            "packages": [
                {
                    "uri": uri,
                    "name": pkg.name,
                    "category": pkg.category,
                    "kind": pkg.kind.value,
                }
                for uri, pkg in index.resources()
            ],
        }

    @mcp.resource(f"{RESOURCE_SCHEME}://packages/{{category}}/{{name}}")
    def get_package_resource(category: str, name: str) -> dict[str, Any]:
        """Full description of one package."""
        pkg = state.engine.index.find_resource(category, name)
        if pkg is None:
            return not_found("Package", f"{category}/{name}")
        return PackageInfo.model_validate(pkg.to_dict()).model_dump()

    @mcp.resource(f"{RESOURCE_SCHEME}://stats")
    def get_stats_resource() -> dict[str, Any]:
        """Index statistics - package counts by category and kind."""
        return IndexStatsInfo.model_validate(
            state.engine.stats()
        ).model_dump()

    return mcp


def run_server(
    root: Path | None = None,
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
) -> None:
    """Run the pkgscope MCP server.

    Args:
        root: Monorepo root (default: PKGSCOPE_ROOT env var, then cwd)
        transport: Transport type ("stdio", "sse" or "streamable-http")
    """
    mcp = create_server(root=root)
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
