"""
Fixtures pytest partagees pour les tests MediaKit.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, IFilenameParser)
- Settings de test avec chemins temporaires
- Medias types (film, episode, sous-titre)
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from babelfish import Language

from mediakit.config import Settings
from mediakit.core.entities import Episode, Movie, Subtitle
from mediakit.core.ports.file_system import IFileSystem
from mediakit.core.ports.parser import IFilenameParser
from mediakit.core.value_objects import Codec, Metadata, Quality, Source


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Le mock implemente toutes les methodes de IFileSystem.
    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = True
    mock.get_size.return_value = 500 * 1024 * 1024  # 500 MB par defaut
    mock.get_mod_time.return_value = datetime(2024, 1, 15, 12, 0, 0)
    mock.list_media_files.return_value = iter([])
    return mock


@pytest.fixture
def mock_filename_parser() -> MagicMock:
    """
    Mock de IFilenameParser pour les tests.

    parse() retourne un Movie dont le nom est le nom de fichier.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFilenameParser)

    def default_parse(filename: str, is_video: bool = True) -> Movie:
        return Movie(name=filename, year=2000)

    mock.parse.side_effect = default_parse
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    _env_file=None pour ignorer un eventuel fichier .env local.
    """
    media_dir = tmp_path / "media"
    media_dir.mkdir(parents=True)

    return Settings(
        _env_file=None,
        media_dir=media_dir,
        match_score_threshold=85,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def movie() -> Movie:
    """Film type."""
    return Movie(
        name="Inception",
        year=2010,
        metadata=Metadata(
            source=Source.BLURAY,
            quality=Quality.HD1080,
            codec=Codec.H264,
            group="SPARKS",
        ),
    )


@pytest.fixture
def episode() -> Episode:
    """Episode de serie type."""
    return Episode(
        name="Breaking Bad",
        season=1,
        episode=1,
        title="Pilot",
        metadata=Metadata(source=Source.HDTV, quality=Quality.HD720, group="CTU"),
    )


@pytest.fixture
def subtitle(movie: Movie) -> Subtitle:
    """Sous-titre anglais du film type."""
    return Subtitle(media=movie, language=Language("eng"))
