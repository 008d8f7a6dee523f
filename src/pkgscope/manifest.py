"""composer.json reading: package identity, PSR-4 autoload table and
intra-monorepo dependencies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from pkgscope.errors import ManifestError
from pkgscope.logging_config import get_logger

logger = get_logger(__name__)

MANIFEST_FILE = "composer.json"


@dataclass
class Manifest:
    identity: str | None
    # namespace prefix -> path prefix, in declaration order
    autoload: dict[str, str] = field(default_factory=dict)
    # intra-monorepo dependencies, vendor prefix stripped
    dependencies: list[str] = field(default_factory=list)
    path: Path | None = None

    @property
    def vendor(self) -> str | None:
        if self.identity and "/" in self.identity:
            return self.identity.split("/", 1)[0]
        return None

    @property
    def short_name(self) -> str | None:
        if not self.identity:
            return None
        return self.identity.rsplit("/", 1)[-1]


def read_manifest(root: Path) -> Manifest | None:
    """Load the manifest of a package root.

    Returns None when the directory has no manifest (not a package).
    Raises ManifestError when one exists but is not usable.
    """
    path = root / MANIFEST_FILE
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(path, f"unreadable: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")

    identity = data.get("name")
    if not isinstance(identity, str) or not identity.strip():
        identity = None
    else:
        identity = identity.strip()

    manifest = Manifest(
        identity=identity,
        autoload=_parse_autoload(data),
        path=path,
    )
    manifest.dependencies = _parse_dependencies(data, manifest)
    return manifest


def _parse_autoload(data: dict) -> dict[str, str]:
    autoload = data.get("autoload")
    if not isinstance(autoload, dict):
        return {}
    psr4 = autoload.get("psr-4")
    if not isinstance(psr4, dict):
        return {}

    table: dict[str, str] = {}
    for namespace, target in psr4.items():
        # composer allows a list of directories per prefix
        if isinstance(target, list):
            target = target[0] if target else ""
        table[str(namespace)] = str(target)
    return table


def _parse_dependencies(data: dict, manifest: Manifest) -> list[str]:
    vendor = manifest.vendor
    if vendor is None:
        return []

    prefix = f"{vendor}/"
    deps: set[str] = set()
    for section in ("require", "require-dev"):
        requires = data.get(section, {})
        if not isinstance(requires, dict):
            logger.debug(
                "ignoring non-mapping dependency section",
                path=str(manifest.path),
                section=section,
            )
            continue
        for dep_name in requires:
            if dep_name.startswith(prefix) and dep_name != manifest.identity:
                deps.add(dep_name[len(prefix) :])
    return sorted(deps)
