"""
Point d'entrée CLI de MediaKit.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import parse, scan
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level

app = typer.Typer(
    name="mediakit",
    help="Identification de fichiers video et sous-titres",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MediaKit - Identification de medias a partir des noms de fichiers."""
    settings = get_config()
    configure_logging(
        log_level=resolve_log_level(settings.log_level, verbose=verbose, quiet=quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes
app.command()(parse)
app.command()(scan)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MediaKit")
    typer.echo(f"Médias : {config.media_dir}")
    typer.echo(f"Parser : {config.parser_backend}")
    typer.echo(f"Extraits ignorés : {'oui' if config.skip_samples else 'non'}")
    typer.echo(f"Seuil de matching : {config.match_score_threshold}")
    typer.echo(f"Cache scrapers : {config.scrape_cache_dir}")
    typer.echo(f"Taille max du cache : {config.scrape_cache_size_limit} octets")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaKit v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.debug("Démarrage de MediaKit", version=__version__)
    app()


if __name__ == "__main__":
    main()
