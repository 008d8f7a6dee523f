"""Server utility functions."""

from __future__ import annotations

from typing import Any


def not_found(kind: str, name: str) -> dict[str, Any]:
    """Tool response for an unknown package or model name."""
    return {
        "status": "error",
        "message": f"{kind} '{name}' not found",
    }
