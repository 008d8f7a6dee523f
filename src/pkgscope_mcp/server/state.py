"""Server state management."""

from __future__ import annotations

import time
from pathlib import Path

from pkgscope.config import PkgscopeConfig
from pkgscope.index import IndexState, PackageIndex
from pkgscope.logging_config import get_logger
from pkgscope.queries import QueryEngine

logger = get_logger("mcp_server")


class ServerState:
    """Holds the package index and populates it on first use."""

    def __init__(
        self,
        config: PkgscopeConfig | None = None,
        root: Path | None = None,
        index: PackageIndex | None = None,
    ) -> None:
        if index is not None:
            config = index.config
        elif config is None:
            config = PkgscopeConfig.from_env(root=root)
        self._config = config
        self._index = index or PackageIndex(config)
        self._engine = QueryEngine(self._index)

    @property
    def config(self) -> PkgscopeConfig:
        return self._config

    @property
    def index(self) -> PackageIndex:
        return self._index

    @property
    def engine(self) -> QueryEngine:
        """Query engine over an index that is guaranteed populated."""
        if self._index.state is IndexState.EMPTY:
            logger.info("building package index for %s", self._config.root)
            self._index.ensure_loaded()
        return self._engine

    def reload(self) -> float:
        """Force a full rebuild. Returns elapsed milliseconds."""
        start = time.perf_counter()
        self._index.reload()
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "reloaded %d packages in %.1fms", len(self._index), elapsed_ms
        )
        return elapsed_ms
