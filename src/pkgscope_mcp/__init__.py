"""MCP front end for pkgscope."""

from pkgscope_mcp.mcp_server import create_server, run_server

__all__ = ["create_server", "run_server"]
