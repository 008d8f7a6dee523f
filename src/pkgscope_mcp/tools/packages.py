"""Package lookup, listing, search and index tools."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from pkgscope_mcp.server.state import ServerState

from pkgscope.errors import PackageNotFoundError
from pkgscope.models import to_jsonable
from pkgscope_mcp.server import (
    DependencyGraphInfo,
    PackageInfo,
    PackageListResult,
    ReloadResult,
    SearchResult,
    not_found,
)

KindFilter = Literal["crud", "utility", "blade", "api", "template", "meta"]


def register_package_tools(
    mcp: FastMCP | None,
    state: ServerState,
    tool_if_enabled: Callable,
) -> None:
    """Register lookup, listing, search and index lifecycle tools.

    Args:
        mcp: FastMCP server instance
        state: Server state holding the package index
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    def get_package(name: str) -> dict[str, Any]:
        """Get everything indexed about a package.

        Args:
            name: Package name (without vendor prefix, e.g. "invoices")

        Returns:
            Package description: category, kind, namespace, API/exports/
            imports presence, contract count, UI components, models,
            traits and intra-monorepo dependencies
        """
        pkg = state.engine.lookup(name)
        if pkg is None:
            return not_found("Package", name)
        return PackageInfo.model_validate(pkg.to_dict()).model_dump()

    @tool_if_enabled
    def list_packages(
        category: str | None = None,
        kind: KindFilter | None = None,
    ) -> dict[str, Any]:
        """List packages, optionally filtered by category and kind.

        Args:
            category: Category directory name (e.g. "crud", "blade")
            kind: Package kind (crud, utility, blade, api, template, meta)

        Returns:
            Package summaries in discovery order
        """
        summaries = state.engine.list_packages(category=category, kind=kind)
        return PackageListResult.model_validate(
            {"count": len(summaries), "packages": to_jsonable(summaries)}
        ).model_dump()

    @tool_if_enabled
    def search_packages(query: str) -> dict[str, Any]:
        """Search package, model, trait and UI component names.

        Case-insensitive substring match. One package can produce several
        matches (e.g. its name and one of its models).

        Args:
            query: Text to look for

        Returns:
            Matches tagged with their kind (package/model/trait/component)
        """
        matches = state.engine.search(query)
        return SearchResult.model_validate(
            {
                "query": query,
                "count": len(matches),
                "matches": to_jsonable(matches),
            }
        ).model_dump()

    @tool_if_enabled
    def dependency_graph(name: str) -> dict[str, Any]:
        """Show which packages a package depends on and which depend on it.

        Args:
            name: Package name

        Returns:
            Forward dependencies, reverse dependents and declared
            dependencies that are not part of the index
        """
        try:
            graph = state.engine.dependency_graph(name)
        except PackageNotFoundError:
            return not_found("Package", name)
        return DependencyGraphInfo.model_validate(
            to_jsonable(graph)
        ).model_dump()

    @tool_if_enabled
    def reload_index() -> dict[str, Any]:
        """Rebuild the package index from disk.

        The index is built once on first use and never refreshed on its
        own. Call this after packages were added, removed or changed.

        Returns:
            Number of packages indexed and rebuild time
        """
        elapsed_ms = state.reload()
        return ReloadResult(
            status="ok",
            packages=len(state.index),
            elapsed_ms=round(elapsed_ms, 1),
            discovery_passes=state.index.reload_count,
        ).model_dump()
