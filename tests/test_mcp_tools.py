"""Tests for MCP tools, resources and tool category selection."""

import asyncio
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from pkgscope.config import PkgscopeConfig
from pkgscope.index import IndexState
from pkgscope_mcp.mcp_server import create_server
from pkgscope_mcp.server import (
    TOOL_CATEGORIES,
    ServerState,
    get_enabled_categories,
    get_enabled_tools,
)
from pkgscope_mcp.tools import register_analysis_tools, register_package_tools

CUSTOMER_MODEL = """<?php
class Customer extends Model
{
    use HasTranslations;

    public function company() { return $this->belongsTo(Company::class); }
}
"""


@pytest.fixture
def tools(repo: Path, make_package) -> dict[str, Callable]:
    make_package("utility", "core", contracts=1, tests=True, readme=True)
    make_package(
        "crud",
        "crm",
        requires=["acme/core"],
        api=True,
        contracts=3,
        models={"Customer": CUSTOMER_MODEL},
    )
    make_package("blade", "buttons")

    state = ServerState(config=PkgscopeConfig(root=repo))
    registered: dict[str, Callable] = {}

    def collect(func):
        registered[func.__name__] = func
        return func

    register_package_tools(None, state, collect)
    register_analysis_tools(None, state, collect)
    registered["_state"] = state
    return registered


class TestPackageTools:
    def test_index_built_on_first_call(self, tools):
        state = tools["_state"]
        assert state.index.state is IndexState.EMPTY
        tools["get_package"]("crm")
        assert state.index.state is IndexState.POPULATED

    def test_get_package(self, tools):
        result = tools["get_package"]("crm")
        assert result["name"] == "crm"
        assert result["kind"] == "crud"
        assert result["models"] == ["Customer"]
        assert result["dependencies"] == ["core"]
        assert isinstance(result["root_path"], str)

    def test_get_package_not_found(self, tools):
        result = tools["get_package"]("ghost")
        assert result == {
            "status": "error",
            "message": "Package 'ghost' not found",
        }

    def test_list_packages(self, tools):
        result = tools["list_packages"](category="blade")
        assert result["count"] == 1
        assert result["packages"][0]["name"] == "buttons"
        assert result["packages"][0]["kind"] == "blade"

    def test_search_packages(self, tools):
        result = tools["search_packages"]("cust")
        assert result["matches"] == [
            {"kind": "model", "package": "crm", "name": "Customer"}
        ]

    def test_dependency_graph(self, tools):
        result = tools["dependency_graph"]("core")
        assert result["dependents"] == ["crm"]
        assert tools["dependency_graph"]("ghost")["status"] == "error"

    def test_reload_index(self, tools, repo: Path, make_package):
        tools["get_package"]("crm")
        make_package("crud", "orders")
        assert tools["get_package"]("orders")["status"] == "error"

        result = tools["reload_index"]()
        assert result["status"] == "ok"
        assert result["packages"] == 4
        assert tools["get_package"]("orders")["name"] == "orders"


class TestAnalysisTools:
    def test_find_trait_usages(self, tools):
        result = tools["find_trait_usages"]("Translations")
        assert result["count"] == 1
        assert result["usages"][0]["model"] == "Customer"

    def test_get_relationships(self, tools):
        result = tools["get_relationships"]("Customer")
        assert result["package"] == "crm"
        assert result["relations"]["belongs_to"] == ["Company::class"]

    def test_get_relationships_not_found(self, tools):
        result = tools["get_relationships"]("Invoice")
        assert result["message"] == "Model 'Invoice' not found"

    def test_audit_package(self, tools):
        result = tools["audit_package"]("crm")
        assert result["score"] == 25
        assert result["passed"] == ["Has API routes"]

    def test_package_health(self, tools):
        result = tools["package_health"]("core")
        assert result["band"] == "good"
        assert result["issues"] == ["Missing config/core.php"]

    def test_compare_packages(self, tools):
        result = tools["compare_packages"]("crm", "core")
        assert "Different kind (crud vs utility)" in result["differences"]
        assert result["only_b_dependencies"] == []
        assert list(result["counts"]["models"]) == [1, 0]

    def test_not_found_everywhere(self, tools):
        for name in ("audit_package", "package_health"):
            assert tools[name]("ghost")["status"] == "error"
        result = tools["compare_packages"]("crm", "ghost")
        assert result["message"] == "Package 'ghost' not found"


class TestToolCategories:
    def test_default_enables_everything(self, monkeypatch):
        monkeypatch.delenv("PKGSCOPE_TOOLS", raising=False)
        assert get_enabled_categories() == set(TOOL_CATEGORIES)
        assert "reload_index" in get_enabled_tools()

    def test_subset(self, monkeypatch):
        monkeypatch.setenv("PKGSCOPE_TOOLS", "packages, scoring")
        tools = get_enabled_tools()
        assert "get_package" in tools
        assert "audit_package" in tools
        assert "find_trait_usages" not in tools
        assert "reload_index" not in tools


class TestServer:
    @pytest.fixture
    def server(self, repo: Path, make_package, monkeypatch):
        monkeypatch.delenv("PKGSCOPE_TOOLS", raising=False)
        make_package("crud", "crm", models={"Customer": CUSTOMER_MODEL})
        make_package("blade", "buttons")
        return create_server(config=PkgscopeConfig(root=repo))

    def test_registers_all_tools(self, server):
        names = {t.name for t in asyncio.run(server.list_tools())}
        assert names == set().union(*TOOL_CATEGORIES.values())
        assert len(names) == 10

    def test_packages_resource(self, server):
        contents = list(
            asyncio.run(server.read_resource("pkgscope://packages"))
        )
        data = json.loads(contents[0].content)
        assert [p["uri"] for p in data["packages"]] == [
            "pkgscope://packages/crud/crm",
            "pkgscope://packages/blade/buttons",
        ]

    def test_package_resource(self, server):
        contents = list(
            asyncio.run(server.read_resource("pkgscope://packages/crud/crm"))
        )
        data = json.loads(contents[0].content)
        assert data["name"] == "crm"
        assert data["models"] == ["Customer"]
