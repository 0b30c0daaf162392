"""
Utilitaires partages pour les commandes CLI de MediaKit.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- media_kind : libelle du type d'un media
- build_media_table : tableau Rich d'une liste de medias
"""

from contextlib import contextmanager
from typing import Iterable

from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediakit.core.entities import Media

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mediakit")
    try:
        yield
    finally:
        loguru_logger.enable("mediakit")


def media_kind(media: Media) -> str:
    """Libelle du type de media, deduit des capacites."""
    if media.type_movie() is not None:
        return "film"
    if media.type_episode() is not None:
        return "episode"
    if media.type_subtitle() is not None:
        return "sous-titre"
    return "inconnu"


def build_media_table(title: str, rows: Iterable[tuple[str, Media]]) -> Table:
    """
    Construit le tableau d'affichage des medias.

    Args:
        title: Titre du tableau
        rows: Couples (nom de fichier, media)
    """
    table = Table(title=title, show_header=True)
    table.add_column("Fichier", style="dim")
    table.add_column("Type")
    table.add_column("Media", style="bold")
    table.add_column("Identite", style="cyan")
    table.add_column("Tags")

    for filename, media in rows:
        table.add_row(
            escape(filename),
            media_kind(media),
            escape(str(media)),
            escape(media.identity()),
            escape(str(media.meta)),
        )
    return table
