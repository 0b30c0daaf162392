"""Sous-package CLI commands - re-exporte les commandes publiques."""

from mediakit.adapters.cli.commands.parse_command import parse
from mediakit.adapters.cli.commands.scan_command import (
    MediaKind,
    filter_by_kind,
    scan,
)

__all__ = [
    "parse",
    "scan",
    "MediaKind",
    "filter_by_kind",
]
