"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, niveau ajustable par -v / -q
- Sortie fichier (optionnelle) : sérialisée en JSON, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# -v, -vv : niveaux de plus en plus bavards a partir du niveau configure
_LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG", "TRACE")


def resolve_log_level(base_level: str = "INFO", verbose: int = 0, quiet: bool = False) -> str:
    """Calcule le niveau console effectif depuis les options de verbosité.

    Args :
        base_level : Niveau configuré (Settings.log_level)
        verbose : Nombre de -v sur la ligne de commande
        quiet : Mode silencieux (erreurs uniquement), prioritaire sur verbose
    """
    if quiet:
        return "ERROR"
    base = base_level.upper()
    if base not in _LEVELS:
        return base
    index = min(_LEVELS.index(base) + verbose, len(_LEVELS) - 1)
    return _LEVELS[index]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/mediakit.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log, None pour désactiver la sortie fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Capture les fichiers ignores par le scanner
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug(f"Logging configuré : {log_file} (rotation {rotation_size})")
