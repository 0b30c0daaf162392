"""
Commande CLI parse : identifie des noms de fichiers sans acceder au disque.
"""

from typing import Annotated

import typer
from rich.markup import escape

from mediakit.adapters.cli.helpers import build_media_table, console
from mediakit.container import Container
from mediakit.core.errors import ParseError


def parse(
    names: Annotated[
        list[str],
        typer.Argument(help="Noms de fichiers a identifier (sans extension)"),
    ],
    subtitle: Annotated[
        bool,
        typer.Option("--subtitle", "-s", help="Traiter les noms comme des sous-titres"),
    ] = False,
) -> None:
    """
    Identifie des noms de fichiers et affiche leur identite et leurs tags.

    Code de sortie 1 si au moins un nom n'est pas reconnu.
    """
    parser = Container().filename_parser()

    recognized = []
    failures = []
    for name in names:
        try:
            recognized.append((name, parser.parse(name, is_video=not subtitle)))
        except ParseError as e:
            failures.append((name, e))

    if recognized:
        console.print(build_media_table("Medias reconnus", recognized))

    for name, error in failures:
        console.print(f"[red]Non reconnu:[/red] {escape(name)} ({escape(str(error))})")

    if failures:
        raise typer.Exit(code=1)
