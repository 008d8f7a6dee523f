"""Model scanning, scoring and comparison tools."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from pkgscope_mcp.server.state import ServerState

from pkgscope.errors import PackageNotFoundError
from pkgscope.models import to_jsonable
from pkgscope_mcp.server import (
    AuditInfo,
    ComparisonInfo,
    HealthInfo,
    RelationshipResult,
    TraitUsageResult,
    not_found,
)


def register_analysis_tools(
    mcp: FastMCP | None,
    state: ServerState,
    tool_if_enabled: Callable,
) -> None:
    """Register model scanning, audit, health and comparison tools.

    Args:
        mcp: FastMCP server instance
        state: Server state holding the package index
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    def find_trait_usages(trait: str) -> dict[str, Any]:
        """Find model files that use a trait.

        Scans model sources live for ``use <trait>`` or ``use Has<trait>``.
        Packages that declare a matching trait themselves are skipped.

        Args:
            trait: Trait name, with or without the "Has" prefix
                (e.g. "Translations" also finds HasTranslations)

        Returns:
            Package, model and file path of every usage
        """
        usages = state.engine.find_trait_usages(trait)
        return TraitUsageResult.model_validate(
            {
                "trait": trait,
                "count": len(usages),
                "usages": to_jsonable(usages),
            }
        ).model_dump()

    @tool_if_enabled
    def get_relationships(model: str) -> dict[str, Any]:
        """Extract relationship declarations of a model.

        Reads the model source and reports the arguments of belongsTo,
        hasMany and morphMany calls, and whether morphTo is used. If
        several packages define a model with this name, only the first
        one found is inspected.

        Args:
            model: Model class name (e.g. "Customer")

        Returns:
            Package the model was found in and its relationships
        """
        result = state.engine.relationships(model)
        if result is None:
            return not_found("Model", model)
        return RelationshipResult.model_validate(
            to_jsonable(result)
        ).model_dump()

    @tool_if_enabled
    def audit_package(name: str) -> dict[str, Any]:
        """Audit a CRUD package against the package standards.

        Checks API routes, exports, imports and at least 8 contracts.
        Packages of any other kind always score 100.

        Args:
            name: Package name

        Returns:
            Passed checks, issues and score (0-100)
        """
        try:
            report = state.engine.audit(name)
        except PackageNotFoundError:
            return not_found("Package", name)
        return AuditInfo.model_validate(to_jsonable(report)).model_dump()

    @tool_if_enabled
    def package_health(name: str) -> dict[str, Any]:
        """Run health checks on a package.

        Checks contracts directory naming, tests, config file and README,
        plus the audit checks for CRUD packages.

        Args:
            name: Package name

        Returns:
            Passed checks, issues, score, band (excellent/good/fair/poor/
            critical) and recommendations
        """
        try:
            report = state.engine.health(name)
        except PackageNotFoundError:
            return not_found("Package", name)
        return HealthInfo.model_validate(to_jsonable(report)).model_dump()

    @tool_if_enabled
    def compare_packages(package_a: str, package_b: str) -> dict[str, Any]:
        """Compare two packages.

        Args:
            package_a: First package name
            package_b: Second package name

        Returns:
            Similarities and differences (kind, API routes, exports,
            contract count), shared and exclusive dependencies, and
            model/trait/component/contract counts side by side
        """
        try:
            comparison = state.engine.compare(package_a, package_b)
        except PackageNotFoundError as e:
            return not_found("Package", e.name)
        return ComparisonInfo.model_validate(
            to_jsonable(comparison)
        ).model_dump()
