"""Pydantic models for MCP tool responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PackageInfo(BaseModel):
    """Full indexed description of a package."""

    name: str
    category: str = Field(description="Category directory the package is in")
    root_path: str
    namespace: str
    kind: str = Field(
        description="crud, utility, blade, api, template or meta"
    )
    has_api: bool = Field(description="routes/api.php exists")
    has_exports: bool
    has_imports: bool
    contract_count: int
    ui_components: list[str]
    models: list[str]
    traits: list[str]
    dependencies: list[str] = Field(
        description="Dependencies on other packages of the monorepo"
    )


class PackageSummaryInfo(BaseModel):
    """Condensed listing entry."""

    name: str
    category: str
    kind: str
    has_api: bool
    contract_count: int


class PackageListResult(BaseModel):
    count: int
    packages: list[PackageSummaryInfo]


class SearchMatchInfo(BaseModel):
    kind: str = Field(description="package, model, trait or component")
    package: str
    name: str


class SearchResult(BaseModel):
    query: str
    count: int
    matches: list[SearchMatchInfo]


class TraitUsageInfo(BaseModel):
    package: str
    model: str
    path: str


class TraitUsageResult(BaseModel):
    trait: str
    count: int
    usages: list[TraitUsageInfo]


class RelationshipSetInfo(BaseModel):
    """Raw argument text of relationship declarations."""

    belongs_to: list[str]
    has_many: list[str]
    morph_to: list[str]
    morph_many: list[str]


class RelationshipResult(BaseModel):
    package: str = Field(description="First package defining the model")
    model: str
    path: str
    relations: RelationshipSetInfo


class AuditInfo(BaseModel):
    package: str
    kind: str
    passed: list[str]
    issues: list[str]
    score: int = Field(description="Percentage of checks passed")


class ComparisonInfo(BaseModel):
    package_a: str
    package_b: str
    similarities: list[str]
    differences: list[str]
    shared_dependencies: list[str]
    only_a_dependencies: list[str]
    only_b_dependencies: list[str]
    counts: dict[str, tuple[int, int]] = Field(
        description="metric -> (count in a, count in b)"
    )


class HealthInfo(BaseModel):
    package: str
    kind: str
    passed: list[str]
    issues: list[str]
    score: int
    band: str = Field(description="excellent, good, fair, poor or critical")
    recommendations: list[str]


class DependencyGraphInfo(BaseModel):
    package: str
    dependencies: list[str]
    dependents: list[str] = Field(description="Packages depending on this")
    unresolved: list[str] = Field(
        description="Declared dependencies missing from the index"
    )


class IndexStatsInfo(BaseModel):
    state: str
    root: str
    total: int
    by_category: dict[str, int]
    by_kind: dict[str, int]


class ReloadResult(BaseModel):
    status: str
    packages: int
    elapsed_ms: float
    discovery_passes: int
