"""Terminal output helpers for the CLI.

Status messages go to stderr through rich; command results (JSON) go to
stdout so they can be piped.
"""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape

stderr_console = Console(stderr=True, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    stderr_console.print(f"[bold red]error:[/bold red] {escape(message)}")


def info(message: str) -> None:
    stderr_console.print(escape(message))


def emit(data: Any) -> None:
    """Write a command result to stdout as indented JSON."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
