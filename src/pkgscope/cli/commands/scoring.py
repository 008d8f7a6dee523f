"""Audit, health and comparison commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgscope import console
from pkgscope.cli._common import load_engine
from pkgscope.errors import PackageNotFoundError
from pkgscope.models import to_jsonable


@dataclass
class Audit:
    """Score a CRUD package against the package standards."""

    name: str = field(metadata={"help": "Package name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        try:
            report = engine.audit(self.name)
        except PackageNotFoundError as e:
            console.error(str(e))
            return 1
        console.emit(to_jsonable(report))
        return 0


@dataclass
class Health:
    """Run filesystem health checks on a package."""

    name: str = field(metadata={"help": "Package name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        try:
            report = engine.health(self.name)
        except PackageNotFoundError as e:
            console.error(str(e))
            return 1
        console.emit(to_jsonable(report))
        return 0


@dataclass
class Compare:
    """Compare two packages side by side."""

    package_a: str = field(metadata={"help": "First package name"})
    package_b: str = field(metadata={"help": "Second package name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        try:
            comparison = engine.compare(self.package_a, self.package_b)
        except PackageNotFoundError as e:
            console.error(str(e))
            return 1
        console.emit(to_jsonable(comparison))
        return 0
