"""
Tests unitaires pour ScannerService.

Tests couvrant:
- Construction de LocalMedia (taille, date de modification)
- Choix parse_media / parse_subtitle selon l'extension
- Fichiers non reconnus et extraits ignores
- Racine inexistante
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mediakit.core.entities import LocalMedia, Movie
from mediakit.core.errors import ParseError
from mediakit.services.scanner import ScannerService, is_sample


class TestScannerService:
    """Tests pour ScannerService avec des ports mockes."""

    @pytest.fixture
    def scanner(
        self, mock_file_system: MagicMock, mock_filename_parser: MagicMock
    ) -> ScannerService:
        return ScannerService(
            file_system=mock_file_system,
            filename_parser=mock_filename_parser,
        )

    def test_find_media_wraps_files(
        self, scanner: ScannerService, mock_file_system: MagicMock
    ) -> None:
        """Chaque fichier reconnu devient un LocalMedia."""
        path = Path("/media/Inception.2010.mkv")
        mock_file_system.list_media_files.return_value = iter([path])

        media_list = scanner.find_media(Path("/media"))

        assert len(media_list) == 1
        local = media_list[0]
        assert isinstance(local, LocalMedia)
        assert local.path == path
        assert local.size == 500 * 1024 * 1024
        assert local.mod_time == datetime(2024, 1, 15, 12, 0, 0)

    def test_video_and_subtitle_dispatch(
        self,
        scanner: ScannerService,
        mock_file_system: MagicMock,
        mock_filename_parser: MagicMock,
    ) -> None:
        """Le stem est parse, is_video depend de l'extension."""
        mock_file_system.list_media_files.return_value = iter(
            [Path("/media/Movie.2000.MKV"), Path("/media/Movie.2000.en.srt")]
        )

        scanner.find_media(Path("/media"))

        calls = [
            (call.args[0], call.kwargs["is_video"])
            for call in mock_filename_parser.parse.call_args_list
        ]
        assert calls == [("Movie.2000", True), ("Movie.2000.en", False)]

    def test_unrecognized_files_are_skipped(
        self,
        scanner: ScannerService,
        mock_file_system: MagicMock,
        mock_filename_parser: MagicMock,
    ) -> None:
        mock_file_system.list_media_files.return_value = iter(
            [Path("/media/random.mkv"), Path("/media/Heat.1995.mkv")]
        )

        def parse(filename: str, is_video: bool = True) -> Movie:
            if filename == "random":
                raise ParseError("media non reconnu")
            return Movie(name="Heat", year=1995)

        mock_filename_parser.parse.side_effect = parse

        media_list = scanner.find_media(Path("/media"))

        assert [media.identity() for media in media_list] == ["heat:1995"]

    def test_vanished_files_are_skipped(
        self, scanner: ScannerService, mock_file_system: MagicMock
    ) -> None:
        """Un fichier supprime pendant le scan n'interrompt pas le parcours."""
        vanished = Path("/media/Casino.1995.mkv")
        mock_file_system.list_media_files.return_value = iter(
            [vanished, Path("/media/Heat.1995.mkv")]
        )

        def get_mod_time(path: Path) -> datetime:
            if path == vanished:
                raise FileNotFoundError(path)
            return datetime(2024, 1, 15, 12, 0, 0)

        mock_file_system.get_mod_time.side_effect = get_mod_time

        media_list = scanner.find_media(Path("/media"))

        assert [local.path for local in media_list] == [Path("/media/Heat.1995.mkv")]

    def test_samples_are_skipped(
        self, scanner: ScannerService, mock_file_system: MagicMock
    ) -> None:
        mock_file_system.list_media_files.return_value = iter(
            [Path("/media/Heat.1995.mkv"), Path("/media/Heat.1995.Sample.mkv")]
        )

        assert len(scanner.find_media(Path("/media"))) == 1

    def test_samples_kept_when_disabled(
        self, mock_file_system: MagicMock, mock_filename_parser: MagicMock
    ) -> None:
        scanner = ScannerService(mock_file_system, mock_filename_parser, skip_samples=False)
        mock_file_system.list_media_files.return_value = iter(
            [Path("/media/Heat.1995.Sample.mkv")]
        )

        assert len(scanner.find_media(Path("/media"))) == 1

    def test_multiple_roots_in_order(
        self, scanner: ScannerService, mock_file_system: MagicMock
    ) -> None:
        mock_file_system.list_media_files.side_effect = lambda root: iter(
            [root / "Movie.2000.mkv"]
        )

        media_list = scanner.find_media(Path("/b"), Path("/a"))

        assert [local.path.parent for local in media_list] == [Path("/b"), Path("/a")]

    def test_missing_root_raises(
        self, scanner: ScannerService, mock_file_system: MagicMock
    ) -> None:
        mock_file_system.exists.return_value = False

        with pytest.raises(FileNotFoundError):
            scanner.find_media(Path("/nowhere"))


class TestIsSample:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("Heat.1995.sample.mkv", True),
            ("Heat.1995.TRAILER.mkv", True),
            ("Heat.1995.1080p.mkv", False),
        ],
    )
    def test_is_sample(self, filename: str, expected: bool) -> None:
        local = LocalMedia(media=Movie(name="Heat", year=1995), path=Path(filename))
        assert is_sample(local) is expected
