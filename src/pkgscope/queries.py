"""Read-only queries over the package index.

Most queries use the cached package descriptions. Trait usage and model
relationships are not captured at extraction time, so those two re-read
model source files on every call.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

from pkgscope.config import MIN_CRUD_CONTRACTS
from pkgscope.errors import PackageNotFoundError
from pkgscope.index import PackageIndex
from pkgscope.layout import (
    PackageLayout,
    is_dir,
    is_file,
    list_files,
    read_text,
)
from pkgscope.logging_config import get_logger
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
    SearchMatch,
    TraitUsage,
)
from pkgscope.text_patterns import extract_relationships, mentions_trait

logger = get_logger(__name__)

# contract counts within this distance are considered similar
CONTRACT_SIMILARITY_TOLERANCE = 2


def _percent(passed: int, failed: int) -> int:
    total = passed + failed
    if total == 0:
        return 100
    return round(passed / total * 100)


def _crud_checks(pkg: PackageDescription) -> tuple[list[str], list[str]]:
    """The four CRUD standards checks as (passed, issues)."""
    passed: list[str] = []
    issues: list[str] = []

    if pkg.has_api:
        passed.append("Has API routes")
    else:
        issues.append("Missing API routes")

    if pkg.has_exports:
        passed.append("Has exports")
    else:
        issues.append("Missing exports")

    if pkg.has_imports:
        passed.append("Has imports")
    else:
        issues.append("Missing imports")

    if pkg.contract_count >= MIN_CRUD_CONTRACTS:
        passed.append(f"Has {pkg.contract_count} contracts")
    else:
        issues.append(
            f"Only {pkg.contract_count} contracts "
            f"(need {MIN_CRUD_CONTRACTS}-13+)"
        )

    return passed, issues


class QueryEngine:
    """Query operations over a populated PackageIndex."""

    def __init__(self, index: PackageIndex) -> None:
        self._index = index

    @property
    def index(self) -> PackageIndex:
        return self._index

    def _require(self, name: str) -> PackageDescription:
        pkg = self._index.get(name)
        if pkg is None:
            raise PackageNotFoundError(name)
        return pkg

    # -------------------------------------------------------------------------
    # Lookup and listing
    # -------------------------------------------------------------------------

    def lookup(self, name: str) -> PackageDescription | None:
        return self._index.get(name)

    def list_packages(
        self,
        category: str | None = None,
        kind: PackageKind | str | None = None,
    ) -> list[PackageSummary]:
        """Summaries of all packages, optionally filtered.

        Args:
            category: Keep only packages from this category directory
            kind: Keep only packages of this kind

        Returns:
            Summaries in discovery order
        """
        if kind is not None:
            kind = PackageKind(kind)
        return [
            PackageSummary.from_package(pkg)
            for pkg in self._index
            if (category is None or pkg.category == category)
            and (kind is None or pkg.kind is kind)
        ]

    def search(self, query: str) -> list[SearchMatch]:
        """Case-insensitive substring search.

        Matches package names, model names, trait names and UI component
        names. A package can produce several matches; there is no ranking.
        """
        needle = query.lower()
        matches: list[SearchMatch] = []
        for pkg in self._index:
            if needle in pkg.name.lower():
                matches.append(SearchMatch("package", pkg.name, pkg.name))
            for model in pkg.models:
                if needle in model.lower():
                    matches.append(SearchMatch("model", pkg.name, model))
            for trait in pkg.traits:
                if needle in trait.lower():
                    matches.append(SearchMatch("trait", pkg.name, trait))
            for component in pkg.ui_components:
                if needle in component.lower():
                    matches.append(
                        SearchMatch("component", pkg.name, component)
                    )
        return matches

    # -------------------------------------------------------------------------
    # Live source scans
    # -------------------------------------------------------------------------

    def find_trait_usages(self, trait: str) -> list[TraitUsage]:
        """Model files that ``use`` a trait.

        Packages declaring a trait whose name contains ``trait`` are
        skipped so the declaration site does not match itself.
        """
        if not trait.strip():
            return []
        needle = trait.lower()
        usages: list[TraitUsage] = []
        for pkg in self._index:
            if any(needle in t.lower() for t in pkg.traits):
                continue
            layout = PackageLayout(pkg.root_path)
            for path in list_files(layout.models_dir):
                text = read_text(path)
                if text is not None and mentions_trait(text, trait):
                    usages.append(TraitUsage(pkg.name, path.stem, path))
        return usages

    def relationships(self, model: str) -> ModelRelationships | None:
        """Relationship declarations of a model.

        Only the first package (in discovery order) that has a model file
        with this name is inspected. Same-named models in later packages
        are never looked at.
        """
        if not model or Path(model).name != model:
            return None
        for pkg in self._index:
            path = PackageLayout(pkg.root_path).model_file(model)
            if not is_file(path):
                continue
            text = read_text(path)
            if text is None:
                continue
            return ModelRelationships(
                package=pkg.name,
                model=model,
                path=path,
                relations=extract_relationships(text),
            )
        return None

    # -------------------------------------------------------------------------
    # Scoring and comparison
    # -------------------------------------------------------------------------

    def audit(self, name: str) -> AuditReport:
        """Score a package against the CRUD package standards.

        Only CRUD packages are audited; every other kind scores 100.
        """
        pkg = self._require(name)
        if pkg.kind is not PackageKind.CRUD:
            return AuditReport(package=pkg.name, kind=pkg.kind, score=100)

        passed, issues = _crud_checks(pkg)
        return AuditReport(
            package=pkg.name,
            kind=pkg.kind,
            passed=passed,
            issues=issues,
            score=_percent(len(passed), len(issues)),
        )

    def compare(self, name_a: str, name_b: str) -> Comparison:
        a = self._require(name_a)
        b = self._require(name_b)
        result = Comparison(package_a=a.name, package_b=b.name)

        if a.kind is b.kind:
            result.similarities.append(f"Same kind ({a.kind.value})")
        else:
            result.differences.append(
                f"Different kind ({a.kind.value} vs {b.kind.value})"
            )

        for label, value_a, value_b in (
            ("API routes", a.has_api, b.has_api),
            ("exports", a.has_exports, b.has_exports),
        ):
            if value_a and value_b:
                result.similarities.append(f"Both have {label}")
            elif not value_a and not value_b:
                result.similarities.append(f"Neither has {label}")
            else:
                owner = a.name if value_a else b.name
                result.differences.append(f"Only {owner} has {label}")

        gap = abs(a.contract_count - b.contract_count)
        counts = f"{a.contract_count} vs {b.contract_count}"
        if gap <= CONTRACT_SIMILARITY_TOLERANCE:
            result.similarities.append(f"Similar contract count ({counts})")
        else:
            result.differences.append(f"Contract count differs ({counts})")

        deps_a = set(a.dependencies)
        deps_b = set(b.dependencies)
        result.shared_dependencies = sorted(deps_a & deps_b)
        result.only_a_dependencies = sorted(deps_a - deps_b)
        result.only_b_dependencies = sorted(deps_b - deps_a)

        result.counts = {
            "models": (len(a.models), len(b.models)),
            "traits": (len(a.traits), len(b.traits)),
            "components": (len(a.ui_components), len(b.ui_components)),
            "contracts": (a.contract_count, b.contract_count),
        }
        return result

    def health(self, name: str) -> HealthReport:
        """Filesystem health checks plus, for CRUD packages, the audit."""
        pkg = self._require(name)
        layout = PackageLayout(pkg.root_path)
        passed: list[str] = []
        issues: list[str] = []
        recommendations: list[str] = []

        if is_dir(layout.contracts_dir):
            passed.append("Has Contracts directory")
        elif is_dir(layout.interfaces_dir):
            issues.append(
                "Uses legacy Interfaces directory instead of Contracts"
            )
            recommendations.append("Rename src/Interfaces to src/Contracts")
        else:
            issues.append("Missing Contracts directory")

        if layout.has_test_infrastructure():
            passed.append("Has test infrastructure")
        else:
            issues.append("Missing tests")

        if is_file(layout.config_file(pkg.name)):
            passed.append("Has config file")
        else:
            issues.append(f"Missing config/{pkg.name}.php")

        if is_file(layout.readme):
            passed.append("Has README")
        else:
            issues.append("Missing README.md")

        if pkg.kind is PackageKind.CRUD:
            crud_passed, crud_issues = _crud_checks(pkg)
            passed.extend(crud_passed)
            issues.extend(crud_issues)

            base = self._index.config.base_dependency
            if base and pkg.name != base and base not in pkg.dependencies:
                recommendations.append(f"Add a dependency on '{base}'")

        score = _percent(len(passed), len(issues))
        return HealthReport(
            package=pkg.name,
            kind=pkg.kind,
            passed=passed,
            issues=issues,
            score=score,
            band=HealthBand.for_score(score),
            recommendations=recommendations,
        )

    # -------------------------------------------------------------------------
    # Dependency graph
    # -------------------------------------------------------------------------

    def dependency_graph(self, name: str) -> DependencyGraph:
        pkg = self._require(name)
        return DependencyGraph(
            package=pkg.name,
            dependencies=list(pkg.dependencies),
            dependents=[
                other.name
                for other in self._index
                if pkg.name in other.dependencies
            ],
            unresolved=[d for d in pkg.dependencies if d not in self._index],
        )

    def stats(self) -> dict[str, Any]:
        packages = list(self._index)
        return {
            "state": self._index.state.value,
            "root": str(self._index.config.root),
            "total": len(packages),
            "by_category": dict(Counter(p.category for p in packages)),
            "by_kind": dict(Counter(p.kind.value for p in packages)),
        }
