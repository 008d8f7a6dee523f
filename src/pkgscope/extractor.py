"""Heuristic metadata extraction for a single package root."""

from __future__ import annotations

import re
from pathlib import Path

from pkgscope.config import PkgscopeConfig
from pkgscope.layout import (
    PackageLayout,
    is_dir,
    is_file,
    list_files,
    list_stems,
    read_text,
)
from pkgscope.manifest import Manifest
from pkgscope.models import PackageDescription, PackageKind
from pkgscope.text_patterns import extract_config_array_keys

# config entry holding UI component registrations
COMPONENTS_ARRAY = "components"

# categories whose name alone decides the kind
_CATEGORY_KINDS = {
    "blade": PackageKind.BLADE,
    "api": PackageKind.API,
    "template": PackageKind.TEMPLATE,
}


def classify_kind(
    category: str,
    name: str,
    has_autoload: bool,
    utility_packages: frozenset[str],
) -> PackageKind:
    """Assign a package kind.

    Precedence: category, then the utility allowlist, then manifest
    shape (no autoload table means a meta package), then crud.
    """
    if category in _CATEGORY_KINDS:
        return _CATEGORY_KINDS[category]
    if name in utility_packages:
        return PackageKind.UTILITY
    if not has_autoload:
        return PackageKind.META
    return PackageKind.CRUD


def pascal_case(name: str) -> str:
    """``order-items`` -> ``OrderItems``."""
    parts = re.split(r"[-_.\s]+", name)
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


def derive_namespace(manifest: Manifest, name: str, prefix: str) -> str:
    if manifest.autoload:
        first = next(iter(manifest.autoload))
        return first.rstrip("\\")
    return f"{prefix}\\{pascal_case(name)}" if prefix else pascal_case(name)


def package_name(manifest: Manifest, root: Path) -> str:
    return manifest.short_name or root.name


def extract_package(
    root: Path,
    category: str,
    manifest: Manifest,
    config: PkgscopeConfig,
) -> PackageDescription:
    """Build the description of the package rooted at ``root``.

    Args:
        root: Package root directory (contains the manifest)
        category: Name of the category directory the package lives in
        manifest: Parsed manifest of the package
        config: Static discovery configuration

    Returns:
        Fully populated, immutable package description
    """
    layout = PackageLayout(root)
    name = package_name(manifest, root)

    ui_components: list[str] = []
    config_text = read_text(layout.config_file(name))
    if config_text is not None:
        ui_components = extract_config_array_keys(
            config_text, COMPONENTS_ARRAY
        )

    return PackageDescription(
        name=name,
        category=category,
        root_path=root,
        namespace=derive_namespace(manifest, name, config.namespace_prefix),
        kind=classify_kind(
            category, name, bool(manifest.autoload), config.utility_packages
        ),
        has_api=is_file(layout.api_routes),
        has_exports=is_dir(layout.exports_dir),
        has_imports=is_dir(layout.imports_dir),
        contract_count=len(list_files(layout.contracts_dir, "*.php")),
        ui_components=tuple(ui_components),
        models=tuple(list_stems(layout.models_dir)),
        traits=tuple(list_stems(layout.traits_dir)),
        dependencies=tuple(manifest.dependencies),
    )
