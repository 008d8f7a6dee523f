"""Conventional file layout of a package and safe filesystem probes.

Every probe here treats an I/O failure as "absent": a file that vanishes
between discovery and a query is a negative signal, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pkgscope.logging_config import get_logger

logger = get_logger(__name__)

SOURCE_DIR = "src"
API_ROUTES = Path("routes") / "api.php"
TESTS_DIR = "tests"
PHPUNIT_FILES = ("phpunit.xml", "phpunit.xml.dist")
README_FILE = "README.md"


@dataclass(frozen=True)
class PackageLayout:
    """Resolves the conventional artifact paths under a package root."""

    root: Path

    @property
    def source(self) -> Path:
        return self.root / SOURCE_DIR

    @property
    def api_routes(self) -> Path:
        return self.root / API_ROUTES

    @property
    def exports_dir(self) -> Path:
        return self.source / "Exports"

    @property
    def imports_dir(self) -> Path:
        return self.source / "Imports"

    @property
    def contracts_dir(self) -> Path:
        return self.source / "Contracts"

    @property
    def interfaces_dir(self) -> Path:
        """Legacy name for the contracts directory."""
        return self.source / "Interfaces"

    @property
    def models_dir(self) -> Path:
        return self.source / "Models"

    @property
    def traits_dir(self) -> Path:
        return self.source / "Traits"

    @property
    def tests_dir(self) -> Path:
        return self.root / TESTS_DIR

    @property
    def readme(self) -> Path:
        return self.root / README_FILE

    def config_file(self, name: str) -> Path:
        return self.root / "config" / f"{name}.php"

    def model_file(self, model: str) -> Path:
        return self.models_dir / f"{model}.php"

    def has_test_infrastructure(self) -> bool:
        if is_dir(self.tests_dir):
            return True
        return any(is_file(self.root / name) for name in PHPUNIT_FILES)


def is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def read_text(path: Path) -> str | None:
    """Read a source file, or None if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.debug(
            "unreadable file treated as absent", path=str(path), error=str(e)
        )
        return None


def list_files(directory: Path, pattern: str = "*") -> list[Path]:
    """Direct (non-recursive) files in a directory, sorted by name.

    Hidden files are skipped. A missing directory yields an empty list.
    """
    try:
        entries = sorted(directory.glob(pattern))
    except OSError:
        return []
    return [p for p in entries if not p.name.startswith(".") and is_file(p)]


def list_stems(directory: Path) -> list[str]:
    """Base names without extension of the direct files in a directory."""
    return [p.stem for p in list_files(directory)]
