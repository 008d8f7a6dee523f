"""Walk category directories and extract every package found."""

from __future__ import annotations

import time
from pathlib import Path

from pkgscope.config import PkgscopeConfig
from pkgscope.errors import DiscoveryError, ManifestError
from pkgscope.extractor import extract_package
from pkgscope.logging_config import get_logger
from pkgscope.manifest import read_manifest
from pkgscope.models import PackageDescription

logger = get_logger(__name__)


def _candidate_dirs(category_dir: Path) -> list[Path]:
    return sorted(
        p
        for p in category_dir.iterdir()
        if p.is_dir() and not p.name.startswith(("_", "."))
    )


def discover_packages(config: PkgscopeConfig) -> dict[str, PackageDescription]:
    """Run one full discovery pass over the repository.

    Categories are scanned in config order, package directories in name
    order. A package whose name was already seen replaces the earlier
    entry but keeps its position.

    Raises:
        DiscoveryError: If the repository root cannot be read
    """
    root = config.root
    if not root.exists():
        raise DiscoveryError(root, "directory does not exist")
    if not root.is_dir():
        raise DiscoveryError(root, "not a directory")
    try:
        next(root.iterdir(), None)
    except OSError as e:
        raise DiscoveryError(root, str(e)) from e

    start = time.perf_counter()
    packages: dict[str, PackageDescription] = {}
    skipped = 0

    for category in config.categories:
        category_dir = root / category
        if not category_dir.is_dir():
            logger.debug("category not present", category=category)
            continue

        try:
            candidates = _candidate_dirs(category_dir)
        except OSError as e:
            logger.warning(
                "failed to list category", path=str(category_dir), error=str(e)
            )
            continue

        for pkg_dir in candidates:
            try:
                manifest = read_manifest(pkg_dir)
                if manifest is None:
                    continue
                pkg = extract_package(pkg_dir, category, manifest, config)
            except (ManifestError, OSError) as e:
                skipped += 1
                logger.warning(
                    "skipping package", path=str(pkg_dir), error=str(e)
                )
                continue

            if pkg.name in packages:
                logger.debug(
                    "duplicate package name, replacing earlier entry",
                    name=pkg.name,
                    previous=str(packages[pkg.name].root_path),
                    current=str(pkg_dir),
                )
            packages[pkg.name] = pkg

    logger.info(
        "discovered %d packages in %.1fms (%d skipped)",
        len(packages),
        (time.perf_counter() - start) * 1000,
        skipped,
    )
    return packages
