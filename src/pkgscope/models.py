"""Data structures for indexed packages and query results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any


def to_jsonable(value: Any) -> Any:
    """Convert result dataclasses into plain JSON-friendly structures."""
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    return value


class PackageKind(str, Enum):
    """Package classification, assigned once at extraction time."""

    CRUD = "crud"
    UTILITY = "utility"
    BLADE = "blade"
    API = "api"
    TEMPLATE = "template"
    META = "meta"


@dataclass(frozen=True)
class PackageDescription:
    """Everything the index knows about one package."""

    name: str
    category: str
    root_path: Path
    namespace: str
    kind: PackageKind
    has_api: bool = False
    has_exports: bool = False
    has_imports: bool = False
    contract_count: int = 0
    ui_components: tuple[str, ...] = ()
    models: tuple[str, ...] = ()
    traits: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class PackageSummary:
    """Condensed listing entry."""

    name: str
    category: str
    kind: PackageKind
    has_api: bool
    contract_count: int

    @classmethod
    def from_package(cls, pkg: PackageDescription) -> PackageSummary:
        return cls(
            name=pkg.name,
            category=pkg.category,
            kind=pkg.kind,
            has_api=pkg.has_api,
            contract_count=pkg.contract_count,
        )


@dataclass(frozen=True)
class SearchMatch:
    """One hit from a search across names, models, traits and components."""

    kind: str  # package, model, trait, component
    package: str
    name: str


@dataclass(frozen=True)
class TraitUsage:
    """A model file that pulls in a trait."""

    package: str
    model: str
    path: Path


@dataclass
class RelationshipSet:
    """Raw relationship targets declared in one model file."""

    belongs_to: list[str] = field(default_factory=list)
    has_many: list[str] = field(default_factory=list)
    morph_to: list[str] = field(default_factory=list)
    morph_many: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.belongs_to or self.has_many or self.morph_to or self.morph_many
        )


@dataclass
class ModelRelationships:
    """Relationships of a model, tagged with where it was found."""

    package: str
    model: str
    path: Path
    relations: RelationshipSet


@dataclass
class AuditReport:
    """Standards audit for a single package."""

    package: str
    kind: PackageKind
    passed: list[str] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    score: int = 100


@dataclass
class Comparison:
    """Side-by-side comparison of two packages."""

    package_a: str
    package_b: str
    similarities: list[str] = field(default_factory=list)
    differences: list[str] = field(default_factory=list)
    shared_dependencies: list[str] = field(default_factory=list)
    only_a_dependencies: list[str] = field(default_factory=list)
    only_b_dependencies: list[str] = field(default_factory=list)
    # metric -> (count in a, count in b)
    counts: dict[str, tuple[int, int]] = field(default_factory=dict)


class HealthBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"

    @classmethod
    def for_score(cls, score: float) -> HealthBand:
        if score >= 90:
            return cls.EXCELLENT
        if score >= 75:
            return cls.GOOD
        if score >= 50:
            return cls.FAIR
        if score >= 25:
            return cls.POOR
        return cls.CRITICAL


@dataclass
class HealthReport:
    """Health check results for a single package."""

    package: str
    kind: PackageKind
    passed: list[str] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    score: int = 0
    band: HealthBand = HealthBand.CRITICAL
    recommendations: list[str] = field(default_factory=list)


@dataclass
class DependencyGraph:
    """Forward and reverse dependencies of one package."""

    package: str
    dependencies: list[str] = field(default_factory=list)
    dependents: list[str] = field(default_factory=list)
    # declared dependencies that are not in the index
    unresolved: list[str] = field(default_factory=list)
