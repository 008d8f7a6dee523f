from pkgscope.config import PkgscopeConfig
from pkgscope.discovery import discover_packages
from pkgscope.errors import (
    DiscoveryError,
    ManifestError,
    PackageNotFoundError,
    PkgscopeError,
)
from pkgscope.extractor import classify_kind, extract_package
from pkgscope.index import IndexState, PackageIndex
from pkgscope.manifest import Manifest, read_manifest
from pkgscope.models import (
    AuditReport,
    Comparison,
    DependencyGraph,
    HealthBand,
    HealthReport,
    ModelRelationships,
    PackageDescription,
    PackageKind,
    PackageSummary,
    RelationshipSet,
    SearchMatch,
    TraitUsage,
)
from pkgscope.queries import QueryEngine

__all__ = [
    "AuditReport",
    "Comparison",
    "DependencyGraph",
    "DiscoveryError",
    "HealthBand",
    "HealthReport",
    "IndexState",
    "Manifest",
    "ManifestError",
    "ModelRelationships",
    "PackageDescription",
    "PackageIndex",
    "PackageKind",
    "PackageNotFoundError",
    "PackageSummary",
    "PkgscopeConfig",
    "PkgscopeError",
    "QueryEngine",
    "RelationshipSet",
    "SearchMatch",
    "TraitUsage",
    "classify_kind",
    "discover_packages",
    "extract_package",
    "read_manifest",
]
