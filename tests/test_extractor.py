"""Tests for per-package metadata extraction."""

from pathlib import Path

import pytest

from pkgscope.config import PkgscopeConfig
from pkgscope.extractor import (
    classify_kind,
    derive_namespace,
    extract_package,
    pascal_case,
)
from pkgscope.manifest import Manifest, read_manifest
from pkgscope.models import PackageKind

UTILITIES = frozenset({"core", "support"})


class TestClassifyKind:
    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("blade", PackageKind.BLADE),
            ("api", PackageKind.API),
            ("template", PackageKind.TEMPLATE),
        ],
    )
    def test_category_wins(self, category, expected):
        # even an allowlisted utility name in these categories
        assert classify_kind(category, "core", True, UTILITIES) is expected
        assert classify_kind(category, "x", False, UTILITIES) is expected

    def test_utility_allowlist_beats_manifest_shape(self):
        assert (
            classify_kind("crud", "core", False, UTILITIES)
            is PackageKind.UTILITY
        )

    def test_no_autoload_is_meta(self):
        assert (
            classify_kind("crud", "bundle", False, UTILITIES)
            is PackageKind.META
        )

    def test_default_is_crud(self):
        assert (
            classify_kind("crud", "invoices", True, UTILITIES)
            is PackageKind.CRUD
        )

    def test_pure(self):
        args = ("utility", "settings", True, UTILITIES)
        assert classify_kind(*args) is classify_kind(*args)


class TestNamespace:
    def test_pascal_case(self):
        assert pascal_case("order-items") == "OrderItems"
        assert pascal_case("user_profile") == "UserProfile"
        assert pascal_case("crm") == "Crm"

    def test_first_autoload_entry(self):
        manifest = Manifest(
            identity="acme/invoices",
            autoload={"Acme\\Invoices\\": "src/", "Other\\": "lib/"},
        )
        ns = derive_namespace(manifest, "invoices", "Packages")
        assert ns == "Acme\\Invoices"

    def test_fallback_without_autoload(self):
        manifest = Manifest(identity="acme/order-items")
        ns = derive_namespace(manifest, "order-items", "Packages")
        assert ns == "Packages\\OrderItems"


class TestExtractPackage:
    def test_full_package(self, make_package, config: PkgscopeConfig):
        root = make_package(
            "crud",
            "invoices",
            requires=["acme/core", "vendor/other"],
            api=True,
            exports=True,
            contracts=3,
            models={"Invoice": "<?php", "InvoiceLine": "<?php"},
            traits=["HasTotals"],
            config=(
                "<?php return ['components' => "
                "['invoice-table' => X::class]];"
            ),
        )
        pkg = extract_package(root, "crud", read_manifest(root), config)

        assert pkg.name == "invoices"
        assert pkg.category == "crud"
        assert pkg.root_path == root
        assert pkg.kind is PackageKind.CRUD
        assert pkg.namespace == "Acme\\Invoices"
        assert pkg.has_api is True
        assert pkg.has_exports is True
        assert pkg.has_imports is False
        assert pkg.contract_count == 3
        assert pkg.ui_components == ("invoice-table",)
        assert pkg.models == ("Invoice", "InvoiceLine")
        assert pkg.traits == ("HasTotals",)
        assert pkg.dependencies == ("core",)

    def test_name_falls_back_to_directory(
        self, repo: Path, config: PkgscopeConfig
    ):
        root = repo / "crud" / "nameless"
        root.mkdir(parents=True)
        (root / "composer.json").write_text("{}")
        pkg = extract_package(root, "crud", read_manifest(root), config)
        assert pkg.name == "nameless"
        assert pkg.kind is PackageKind.META
        assert pkg.namespace == "Packages\\Nameless"

    def test_missing_artifacts(self, make_package, config: PkgscopeConfig):
        root = make_package("crud", "bare")
        pkg = extract_package(root, "crud", read_manifest(root), config)
        assert pkg.has_api is False
        assert pkg.contract_count == 0
        assert pkg.ui_components == ()
        assert pkg.models == ()
        assert pkg.traits == ()

    def test_models_are_not_recursive(
        self, make_package, config: PkgscopeConfig
    ):
        root = make_package("crud", "shop", models={"Order": "<?php"})
        nested = root / "src" / "Models" / "Concerns"
        nested.mkdir()
        (nested / "Nested.php").write_text("<?php")
        pkg = extract_package(root, "crud", read_manifest(root), config)
        assert pkg.models == ("Order",)

    def test_only_php_files_count_as_contracts(
        self, make_package, config: PkgscopeConfig
    ):
        root = make_package("crud", "shop", contracts=2)
        (root / "src" / "Contracts" / "notes.txt").write_text("x")
        pkg = extract_package(root, "crud", read_manifest(root), config)
        assert pkg.contract_count == 2
