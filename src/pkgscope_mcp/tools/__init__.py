"""MCP tool modules.

Each module exports a register_*_tools function that registers
tools with the MCP server using the provided state and decorator.
"""

from pkgscope_mcp.tools.analysis import register_analysis_tools
from pkgscope_mcp.tools.packages import register_package_tools

__all__ = [
    "register_analysis_tools",
    "register_package_tools",
]
