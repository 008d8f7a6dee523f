"""pkgscope CLI - introspect packages of a monorepo.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from pkgscope.cli.commands.mcp import Mcp
from pkgscope.cli.commands.models import Relationships, Traits
from pkgscope.cli.commands.packages import Deps, ListPackages, Search, Show
from pkgscope.cli.commands.scoring import Audit, Compare, Health

# Type aliases for subcommand annotations
_Mcp = Annotated[Mcp, tyro.conf.subcommand("mcp")]
_List = Annotated[ListPackages, tyro.conf.subcommand("list")]
_Show = Annotated[Show, tyro.conf.subcommand("show")]
_Search = Annotated[Search, tyro.conf.subcommand("search")]
_Deps = Annotated[Deps, tyro.conf.subcommand("deps")]
_Audit = Annotated[Audit, tyro.conf.subcommand("audit")]
_Health = Annotated[Health, tyro.conf.subcommand("health")]
_Compare = Annotated[Compare, tyro.conf.subcommand("compare")]
_Traits = Annotated[Traits, tyro.conf.subcommand("traits")]
_Relationships = Annotated[
    Relationships, tyro.conf.subcommand("relationships")
]

Command = (
    _Mcp
    | _List
    | _Show
    | _Search
    | _Deps
    | _Audit
    | _Health
    | _Compare
    | _Traits
    | _Relationships
)


def main() -> int:
    """Entry point for the CLI."""
    # configure structlog (respects PKGSCOPE_DEBUG env var)
    from pkgscope.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="pkgscope",
            description="Index and introspect packages of a monorepo.",
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from pkgscope import console

        console.error(str(e))
        return 1
