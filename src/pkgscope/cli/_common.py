"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

from pkgscope.config import PkgscopeConfig
from pkgscope.index import PackageIndex
from pkgscope.queries import QueryEngine


def load_engine(directory: Path | None) -> QueryEngine:
    """Build the config, run discovery and return a ready query engine."""
    config = PkgscopeConfig.from_env(root=directory)
    index = PackageIndex(config)
    index.ensure_loaded()
    return QueryEngine(index)
