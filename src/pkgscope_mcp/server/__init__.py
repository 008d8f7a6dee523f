"""Server infrastructure: configuration, response models and state."""

from pkgscope_mcp.server.config import (
    DEFAULT_TOOL_CATEGORIES,
    ENV_TOOLS,
    TOOL_CATEGORIES,
    get_enabled_categories,
    get_enabled_tools,
)
from pkgscope_mcp.server.models import (
    AuditInfo,
    ComparisonInfo,
    DependencyGraphInfo,
    HealthInfo,
    IndexStatsInfo,
    PackageInfo,
    PackageListResult,
    PackageSummaryInfo,
    RelationshipResult,
    RelationshipSetInfo,
    ReloadResult,
    SearchMatchInfo,
    SearchResult,
    TraitUsageInfo,
    TraitUsageResult,
)
from pkgscope_mcp.server.state import ServerState
from pkgscope_mcp.server.utils import not_found

__all__ = [
    "DEFAULT_TOOL_CATEGORIES",
    "ENV_TOOLS",
    "TOOL_CATEGORIES",
    "AuditInfo",
    "ComparisonInfo",
    "DependencyGraphInfo",
    "HealthInfo",
    "IndexStatsInfo",
    "PackageInfo",
    "PackageListResult",
    "PackageSummaryInfo",
    "RelationshipResult",
    "RelationshipSetInfo",
    "ReloadResult",
    "SearchMatchInfo",
    "SearchResult",
    "ServerState",
    "TraitUsageInfo",
    "TraitUsageResult",
    "get_enabled_categories",
    "get_enabled_tools",
    "not_found",
]
