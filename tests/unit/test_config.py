"""Tests unitaires pour Settings et la configuration du logging."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mediakit.config import Settings
from mediakit.logging_config import configure_logging, resolve_log_level


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.parser_backend == "heuristic"
        assert settings.skip_samples is True
        assert settings.match_score_threshold == 85
        assert settings.scrape_cache_size_limit == 64 * 1024 * 1024
        assert settings.scrape_cache_dir.name == "scrape_cache"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDIAKIT_PARSER_BACKEND", "guessit")
        monkeypatch.setenv("MEDIAKIT_SCRAPE_CACHE_SIZE_LIMIT", "4096")

        settings = Settings(_env_file=None)

        assert settings.parser_backend == "guessit"
        assert settings.scrape_cache_size_limit == 4096

    def test_paths_are_expanded(self) -> None:
        settings = Settings(
            _env_file=None, media_dir="~/films", scrape_cache_dir="~/.cache/mediakit"
        )
        assert settings.media_dir == Path.home() / "films"
        assert settings.scrape_cache_dir == Path.home() / ".cache" / "mediakit"

    def test_invalid_backend(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, parser_backend="regex")

    def test_invalid_threshold(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, match_score_threshold=120)


class TestLogging:
    """Tests pour la configuration loguru."""

    @pytest.mark.parametrize(
        "base, verbose, quiet, expected",
        [
            ("INFO", 0, False, "INFO"),
            ("INFO", 1, False, "DEBUG"),
            ("INFO", 5, False, "TRACE"),
            ("WARNING", 1, False, "INFO"),
            ("DEBUG", 2, True, "ERROR"),
        ],
    )
    def test_resolve_log_level(self, base: str, verbose: int, quiet: bool, expected: str) -> None:
        assert resolve_log_level(base, verbose=verbose, quiet=quiet) == expected

    def test_configure_logging_creates_log_dir(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "mediakit.log"

        configure_logging(log_level="INFO", log_file=log_file)

        assert log_file.parent.is_dir()

    def test_configure_logging_without_file(self) -> None:
        configure_logging(log_level="WARNING", log_file=None)
