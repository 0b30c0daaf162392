"""
Commande CLI scan : parcourt des repertoires et identifie les medias trouves.
"""

from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from mediakit.adapters.cli.helpers import build_media_table, console, suppress_loguru
from mediakit.container import Container
from mediakit.core.entities import MediaList


class MediaKind(str, Enum):
    """Filtre par type de media."""

    ALL = "all"
    VIDEO = "video"
    MOVIES = "movies"
    EPISODES = "episodes"
    SUBTITLES = "subtitles"


def filter_by_kind(media_list: MediaList, kind: MediaKind) -> MediaList:
    """Applique le filtre de type demande a une liste de medias."""
    if kind == MediaKind.VIDEO:
        return media_list.filter_video()
    if kind == MediaKind.MOVIES:
        return media_list.filter_movies()
    if kind == MediaKind.EPISODES:
        return media_list.filter_episodes()
    if kind == MediaKind.SUBTITLES:
        return media_list.filter_subtitles()
    return media_list


def scan(
    roots: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Repertoires a scanner (defaut: media_dir de la configuration)"),
    ] = None,
    kind: Annotated[
        MediaKind,
        typer.Option("--kind", "-k", help="Type de medias a afficher"),
    ] = MediaKind.ALL,
    modified_within: Annotated[
        Optional[float],
        typer.Option(
            "--modified-within",
            "-m",
            help="Ne garder que les fichiers modifies dans les N dernieres heures",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON au lieu d'un tableau"),
    ] = False,
) -> None:
    """Scanne des repertoires et affiche les medias identifies."""
    container = Container()
    if not roots:
        roots = [container.config().media_dir]

    scanner = container.scanner_service()
    try:
        media_list = scanner.find_media(*roots)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    media_list = filter_by_kind(media_list, kind)
    if modified_within is not None:
        media_list = media_list.filter_modified(timedelta(hours=modified_within))

    if as_json:
        # Sortie brute : pas de balisage Rich dans le JSON
        typer.echo(media_list.to_json(indent=2))
        return

    if not media_list:
        console.print("[yellow]Aucun media trouve.[/yellow]")
        return

    with suppress_loguru():
        console.print(
            build_media_table(
                f"{len(media_list)} media(s)",
                ((local.filename, local) for local in media_list),
            )
        )
