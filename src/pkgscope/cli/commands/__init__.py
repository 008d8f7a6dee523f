"""CLI subcommands, one dataclass per command."""
