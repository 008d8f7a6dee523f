"""Fixtures that lay out small monorepos on disk."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from pkgscope.config import PkgscopeConfig
from pkgscope.index import PackageIndex
from pkgscope.queries import QueryEngine

VENDOR = "acme"


def write_package(
    root: Path,
    category: str,
    dirname: str,
    *,
    name: str | None = None,
    autoload: dict[str, str] | None = None,
    requires: list[str] | None = None,
    api: bool = False,
    exports: bool = False,
    imports: bool = False,
    contracts: int = 0,
    models: dict[str, str] | None = None,
    traits: list[str] | None = None,
    config: str | None = None,
    tests: bool = False,
    readme: bool = False,
    interfaces: bool = False,
) -> Path:
    """Create one package directory and return its root."""
    pkg = root / category / dirname
    pkg.mkdir(parents=True)

    manifest: dict = {"name": f"{VENDOR}/{name or dirname}"}
    if autoload is None:
        autoload = {f"Acme\\{dirname.title()}\\": "src/"}
    if autoload:
        manifest["autoload"] = {"psr-4": autoload}
    if requires:
        manifest["require"] = {dep: "*" for dep in requires}
    (pkg / "composer.json").write_text(json.dumps(manifest))

    src = pkg / "src"
    src.mkdir()
    if api:
        (pkg / "routes").mkdir()
        (pkg / "routes" / "api.php").write_text("<?php\n")
    if exports:
        (src / "Exports").mkdir()
    if imports:
        (src / "Imports").mkdir()
    if contracts:
        (src / "Contracts").mkdir()
        for i in range(contracts):
            (src / "Contracts" / f"Contract{i}.php").write_text("<?php\n")
    if interfaces:
        (src / "Interfaces").mkdir()
    if models:
        (src / "Models").mkdir()
        for model, body in models.items():
            (src / "Models" / f"{model}.php").write_text(body)
    if traits:
        (src / "Traits").mkdir()
        for trait in traits:
            (src / "Traits" / f"{trait}.php").write_text("<?php\n")
    if config is not None:
        (pkg / "config").mkdir()
        (pkg / "config" / f"{name or dirname}.php").write_text(config)
    if tests:
        (pkg / "tests").mkdir()
    if readme:
        (pkg / "README.md").write_text(f"# {dirname}\n")
    return pkg


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def make_package(repo: Path) -> Callable[..., Path]:
    def _make(category: str, dirname: str, **kwargs) -> Path:
        return write_package(repo, category, dirname, **kwargs)

    return _make


@pytest.fixture
def config(repo: Path) -> PkgscopeConfig:
    return PkgscopeConfig(root=repo)


@pytest.fixture
def engine(config: PkgscopeConfig) -> Callable[[], QueryEngine]:
    """Factory: build a loaded engine after packages were written."""

    def _engine() -> QueryEngine:
        index = PackageIndex(config)
        index.ensure_loaded()
        return QueryEngine(index)

    return _engine
