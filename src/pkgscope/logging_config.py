"""structlog setup shared by the CLI and the MCP server.

All output goes to stderr: under the stdio transport, stdout carries MCP
protocol frames and must stay clean.

Set PKGSCOPE_DEBUG=1 for debug-level output. Set PKGSCOPE_DEBUG to a file
path to additionally write plain-text logs to that file.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import structlog

from pkgscope.config import ENV_DEBUG

_configured = False


def _debug_setting() -> tuple[bool, Path | None]:
    value = os.environ.get(ENV_DEBUG, "").strip()
    if not value or value.lower() in ("0", "false", "no"):
        return False, None
    if value.lower() in ("1", "true", "yes"):
        return True, None
    return True, Path(value).expanduser()


def configure_logging(
    level: int | None = None,
    log_file: Path | None = None,
    force: bool = False,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Explicit log level (default: INFO, DEBUG with PKGSCOPE_DEBUG)
        log_file: Extra file to mirror log output into
        force: Reconfigure even if already configured
    """
    global _configured
    if _configured and not force:
        return

    debug, env_log_file = _debug_setting()
    if level is None:
        level = logging.DEBUG if debug else logging.INFO
    log_file = log_file or env_log_file

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        ],
    )
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
