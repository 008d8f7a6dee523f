"""Static configuration for monorepo discovery and scoring.

Everything here is fixed for the lifetime of a process. The config value
is built once at startup (usually via ``PkgscopeConfig.from_env()``) and
handed to the discoverer and the query engine; nothing mutates it later.

Environment variables:
    PKGSCOPE_ROOT: Repository root to index (default: cwd)
    PKGSCOPE_CATEGORIES: Comma-separated category directory names,
        scanned in the given order
    PKGSCOPE_UTILITY_PACKAGES: Comma-separated package names that are
        always classified as utility packages
    PKGSCOPE_NAMESPACE_PREFIX: Namespace prefix used when a manifest
        has no autoload table
    PKGSCOPE_BASE_DEPENDENCY: Package every CRUD package should depend on
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Environment variable names
ENV_ROOT = "PKGSCOPE_ROOT"
ENV_CATEGORIES = "PKGSCOPE_CATEGORIES"
ENV_UTILITY_PACKAGES = "PKGSCOPE_UTILITY_PACKAGES"
ENV_NAMESPACE_PREFIX = "PKGSCOPE_NAMESPACE_PREFIX"
ENV_BASE_DEPENDENCY = "PKGSCOPE_BASE_DEPENDENCY"
ENV_DEBUG = "PKGSCOPE_DEBUG"

# category directories, in scan order
DEFAULT_CATEGORIES: tuple[str, ...] = (
    "crud",
    "utility",
    "blade",
    "api",
    "template",
    "meta",
)

# packages that are utilities regardless of manifest shape
DEFAULT_UTILITY_PACKAGES: frozenset[str] = frozenset(
    {
        "core",
        "support",
        "helpers",
        "settings",
        "logging",
    }
)

DEFAULT_NAMESPACE_PREFIX = "Packages"
DEFAULT_BASE_DEPENDENCY = "core"

# a CRUD package is expected to ship at least this many contracts
MIN_CRUD_CONTRACTS = 8


def _split_list(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


@dataclass(frozen=True)
class PkgscopeConfig:
    """Immutable discovery and scoring configuration."""

    root: Path
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    utility_packages: frozenset[str] = DEFAULT_UTILITY_PACKAGES
    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX
    base_dependency: str = DEFAULT_BASE_DEPENDENCY

    @classmethod
    def from_env(cls, root: Path | None = None) -> PkgscopeConfig:
        """Build config from PKGSCOPE_* environment variables.

        Args:
            root: Explicit repository root; overrides PKGSCOPE_ROOT

        Returns:
            Config with defaults for every unset variable
        """
        if root is None:
            env_root = os.environ.get(ENV_ROOT, "").strip()
            root = Path(env_root) if env_root else Path.cwd()

        categories = DEFAULT_CATEGORIES
        env_categories = os.environ.get(ENV_CATEGORIES, "")
        if _split_list(env_categories):
            categories = tuple(_split_list(env_categories))

        utility_packages = DEFAULT_UTILITY_PACKAGES
        env_utility = os.environ.get(ENV_UTILITY_PACKAGES, "")
        if _split_list(env_utility):
            utility_packages = frozenset(_split_list(env_utility))

        return cls(
            root=root.expanduser().resolve(),
            categories=categories,
            utility_packages=utility_packages,
            namespace_prefix=os.environ.get(
                ENV_NAMESPACE_PREFIX, DEFAULT_NAMESPACE_PREFIX
            ).strip("\\ "),
            base_dependency=os.environ.get(
                ENV_BASE_DEPENDENCY, DEFAULT_BASE_DEPENDENCY
            ).strip(),
        )
