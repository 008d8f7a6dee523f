"""MCP command - run the MCP server."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal


@dataclass
class Mcp:
    """Run the MCP server (stdio by default)."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Monorepo root (default: PKGSCOPE_ROOT or cwd)"},
    )
    transport: Literal["stdio", "sse", "streamable-http"] = field(
        default="stdio",
        metadata={"help": "MCP transport"},
    )

    def run(self) -> int:
        # deferred: pulls in the mcp SDK
        from pkgscope_mcp.mcp_server import run_server

        run_server(root=self.directory, transport=self.transport)
        return 0
