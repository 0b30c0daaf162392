"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIAKIT_,
et peut optionnellement être fournie via un fichier .env.
"""

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de mediakit/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIAKIT_.
    Exemple : MEDIAKIT_PARSER_BACKEND=guessit

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIAKIT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Répertoire scanné par défaut
    media_dir: Path = Field(default=Path("~/Videos"))

    # Parsing : motifs heuristiques ou guessit
    parser_backend: Literal["heuristic", "guessit"] = Field(default="heuristic")
    skip_samples: bool = Field(default=True)

    # Matching et cache des scrapers (taille en octets, LRU sur disque)
    scrape_cache_dir: Path = Field(
        default=Path(tempfile.gettempdir()) / "mediakit" / "scrape_cache"
    )
    scrape_cache_size_limit: int = Field(default=64 * 1024 * 1024, ge=1)
    match_score_threshold: int = Field(default=85, ge=0, le=100)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediakit.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("media_dir", "scrape_cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
