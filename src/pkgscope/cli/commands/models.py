"""Commands that re-scan model source files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgscope import console
from pkgscope.cli._common import load_engine
from pkgscope.models import to_jsonable


@dataclass
class Traits:
    """Find model files using a trait."""

    trait: str = field(metadata={"help": "Trait name (e.g. Translations)"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        usages = engine.find_trait_usages(self.trait)
        if not usages:
            console.info(f"no models use '{self.trait}'")
        console.emit(to_jsonable(usages))
        return 0


@dataclass
class Relationships:
    """Show relationship declarations of a model."""

    model: str = field(metadata={"help": "Model class name"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )

    def run(self) -> int:
        engine = load_engine(self.directory)
        result = engine.relationships(self.model)
        if result is None:
            console.error(f"Model '{self.model}' not found")
            return 1
        console.emit(to_jsonable(result))
        return 0
