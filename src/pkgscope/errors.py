"""Exception types raised by the indexing pipeline and query engine."""

from __future__ import annotations

from pathlib import Path


class PkgscopeError(Exception):
    """Base class for all pkgscope errors."""


class ManifestError(PkgscopeError):
    """A package manifest exists but cannot be used.

    Scoped to a single package: the discoverer logs it and moves on.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"invalid manifest {path}: {reason}")
        self.path = path
        self.reason = reason


class DiscoveryError(PkgscopeError):
    """The repository root itself cannot be read. Aborts discovery."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"cannot index {root}: {reason}")
        self.root = root
        self.reason = reason


class PackageNotFoundError(PkgscopeError, LookupError):
    """A query named a package that is not in the index."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Package '{name}' not found")
        self.name = name
