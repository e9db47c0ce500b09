"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.library_commands import (
    dry_run,
    scan,
)
from src.adapters.cli.commands.poster_commands import (
    preview,
    process,
    single,
    trial,
)
from src.adapters.cli.commands.watch_command import (
    watch,
)

__all__ = [
    # bibliotheques
    "dry_run",
    "scan",
    # posters
    "preview",
    "process",
    "single",
    "trial",
    # surveillance
    "watch",
]
