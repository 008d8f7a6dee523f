"""Process-wide package index with an explicit empty/populated lifecycle."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum

from pkgscope.config import PkgscopeConfig
from pkgscope.discovery import discover_packages
from pkgscope.logging_config import get_logger
from pkgscope.models import PackageDescription

logger = get_logger(__name__)

RESOURCE_SCHEME = "pkgscope"

Loader = Callable[[PkgscopeConfig], dict[str, PackageDescription]]


class IndexState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class PackageIndex:
    """Name -> package mapping, rebuilt only as a whole.

    The index starts EMPTY. ``ensure_loaded()`` populates it once;
    afterwards it is never refreshed until ``reload()`` is called
    explicitly. There are no incremental updates, so any staleness
    persists until the next reload.
    """

    def __init__(
        self,
        config: PkgscopeConfig,
        loader: Loader = discover_packages,
    ) -> None:
        self._config = config
        self._loader = loader
        self._packages: dict[str, PackageDescription] = {}
        self._state = IndexState.EMPTY
        self._reload_count = 0

    @property
    def config(self) -> PkgscopeConfig:
        return self._config

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def reload_count(self) -> int:
        """Number of completed discovery passes."""
        return self._reload_count

    def ensure_loaded(self) -> None:
        if self._state is IndexState.EMPTY:
            self.reload()

    def reload(self) -> None:
        """Rebuild from disk and swap in the result.

        The new mapping is built completely before it replaces the old
        one, so readers never see a half-built index. If discovery
        raises, the previous contents and state are kept.
        """
        packages = self._loader(self._config)
        self._packages = packages
        self._state = IndexState.POPULATED
        self._reload_count += 1
        logger.debug(
            "index populated",
            packages=len(packages),
            discovery_pass=self._reload_count,
        )

    def get(self, name: str) -> PackageDescription | None:
        return self._packages.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __iter__(self) -> Iterator[PackageDescription]:
        return iter(list(self._packages.values()))

    def __len__(self) -> int:
        return len(self._packages)

    def names(self) -> list[str]:
        return list(self._packages)

    def resource_uri(self, pkg: PackageDescription) -> str:
        return f"{RESOURCE_SCHEME}://packages/{pkg.category}/{pkg.name}"

    def resources(self) -> list[tuple[str, PackageDescription]]:
        """One addressable (uri, package) entry per indexed package."""
        return [(self.resource_uri(pkg), pkg) for pkg in self]

    def find_resource(
        self, category: str, name: str
    ) -> PackageDescription | None:
        pkg = self._packages.get(name)
        if pkg is None or pkg.category != category:
            return None
        return pkg
