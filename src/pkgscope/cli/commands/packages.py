"""Package lookup, listing and search commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pkgscope import console
from pkgscope.cli._common import load_engine
from pkgscope.errors import PackageNotFoundError
from pkgscope.models import to_jsonable

KindFilter = Literal["crud", "utility", "blade", "api", "template", "meta"]


@dataclass
class ListPackages:
    """List indexed packages."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )
    category: str | None = field(
        default=None,
        metadata={"help": "Only packages in this category directory"},
    )
    kind: KindFilter | None = field(
        default=None,
        metadata={"help": "Only packages of this kind"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        summaries = engine.list_packages(category=self.category, kind=self.kind)
        console.emit(to_jsonable(summaries))
        return 0


@dataclass
class Show:
    """Show everything indexed about one package."""

    name: str = field(metadata={"help": "Package name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        pkg = engine.lookup(self.name)
        if pkg is None:
            console.error(f"Package '{self.name}' not found")
            return 1
        console.emit(pkg.to_dict())
        return 0


@dataclass
class Search:
    """Search package, model, trait and component names."""

    query: str = field(metadata={"help": "Case-insensitive substring"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        matches = engine.search(self.query)
        if not matches:
            console.info(f"no matches for '{self.query}'")
        console.emit(to_jsonable(matches))
        return 0


@dataclass
class Deps:
    """Show a package's dependencies and dependents."""

    name: str = field(metadata={"help": "Package name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        try:
            graph = engine.dependency_graph(self.name)
        except PackageNotFoundError as e:
            console.error(str(e))
            return 1
        console.emit(to_jsonable(graph))
        return 0
