"""
Tests unitaires pour le parser heuristique.

Tests couvrant episodes, films, sous-titres, entrees degenerees
et la resolution des codes langue.
"""

import pytest
from babelfish import Language

from mediakit.adapters.parsing.heuristic_parser import (
    HeuristicFilenameParser,
    parse_episode,
    parse_media,
    parse_movie,
    parse_subtitle,
    resolve_language,
    split_language,
)
from mediakit.core.errors import MalformedInputError, ParseError
from mediakit.core.value_objects import Codec, Quality, Source


class TestParseEpisode:
    """Tests pour le parsing des episodes."""

    @pytest.mark.parametrize(
        "filename",
        ["The.Office.S01E02", "The_Office_S1E2", "the office s01e02", "The.Office.1x02"],
    )
    def test_separator_variants_share_identity(self, filename: str) -> None:
        """Les variantes de separateurs et de casse donnent la meme identite."""
        assert parse_episode(filename).identity() == "theoffice:1:2"

    def test_title_and_tags(self) -> None:
        episode = parse_episode("The.Office.S02E03.The.Dundies.720p.HDTV.x264-LOL")

        assert episode.name == "The Office"
        assert episode.season == 2
        assert episode.episode == 3
        assert episode.title == "The Dundies"
        assert episode.metadata.quality is Quality.HD720
        assert episode.metadata.source is Source.HDTV
        assert episode.metadata.codec is Codec.H264
        assert episode.metadata.group == "LOL"

    def test_no_title(self) -> None:
        episode = parse_episode("Breaking.Bad.S01E01.720p.HDTV.x264-CTU")

        assert episode.name == "Breaking Bad"
        assert episode.title == ""
        assert episode.metadata.group == "CTU"

    def test_multi_episode_keeps_first(self) -> None:
        """S03E09E10 : seul le premier numero est conserve."""
        episode = parse_episode("Game.of.Thrones.S03E09E10.1080p")

        assert episode.season == 3
        assert episode.episode == 9
        assert episode.metadata.quality is Quality.HD1080

    def test_show_name_keeps_case(self) -> None:
        assert parse_episode("CSI.NY.S01E01").name == "CSI NY"

    def test_no_marker_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_episode("Inception.2010.1080p")


class TestParseMovie:
    """Tests pour le parsing des films."""

    def test_basic_movie(self) -> None:
        movie = parse_movie("Inception.2010.1080p.BluRay.x264-SPARKS")

        assert movie.name == "Inception"
        assert movie.year == 2010
        assert movie.metadata.quality is Quality.HD1080
        assert movie.metadata.source is Source.BLURAY
        assert movie.metadata.codec is Codec.H264
        assert movie.metadata.group == "SPARKS"

    def test_year_in_parentheses(self) -> None:
        movie = parse_movie("The Matrix (1999)")

        assert movie.name == "The Matrix"
        assert movie.year == 1999

    def test_numeric_title(self) -> None:
        """Un titre numerique suivi d'une annee reste un film valide."""
        movie = parse_movie("1917.2019.1080p")

        assert movie.name == "1917"
        assert movie.year == 2019

    def test_last_year_wins(self) -> None:
        movie = parse_movie("Blade.Runner.2049.2017.720p")

        assert movie.name == "Blade Runner 2049"
        assert movie.year == 2017

    def test_no_year_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_movie("Inception.1080p.BluRay")


class TestParseMedia:
    """Tests pour parse_media (episode puis film)."""

    def test_episode_first(self) -> None:
        media = parse_media("Show.2019.S01E01")
        assert media.type_episode() is not None

    def test_falls_back_to_movie(self) -> None:
        media = parse_media("Inception.2010")
        assert media.type_movie() is not None

    def test_unrecognized_raises_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_media("Inception")
        assert not isinstance(exc_info.value, MalformedInputError)

    @pytest.mark.parametrize("filename", ["", "...", " - _ ", "12345"])
    def test_malformed_input(self, filename: str) -> None:
        with pytest.raises(MalformedInputError):
            parse_media(filename)


class TestLanguages:
    """Tests de la resolution des codes langue."""

    @pytest.mark.parametrize(
        "code, expected",
        [("en", "en"), ("eng", "en"), ("ger", "de"), ("fre", "fr"), ("pt-BR", "pt-BR")],
    )
    def test_resolve_language(self, code: str, expected: str) -> None:
        assert str(resolve_language(code)) == expected

    @pytest.mark.parametrize("code", ["720p", "x264", "english", "zz"])
    def test_unknown_code(self, code: str) -> None:
        assert resolve_language(code) is None

    def test_split_language(self) -> None:
        target, language = split_language("Inception.2010.en")

        assert target == "Inception.2010."
        assert language == Language("eng")

    def test_split_without_language(self) -> None:
        target, language = split_language("Inception.2010.720p")

        assert target == "Inception.2010.720p"
        assert str(language) == "und"

    def test_split_requires_two_parts(self) -> None:
        with pytest.raises(ParseError):
            split_language("Inception")


class TestParseSubtitle:
    """Tests pour le parsing des sous-titres."""

    def test_movie_subtitle(self) -> None:
        subtitle = parse_subtitle("Inception.2010.720p.en")

        assert subtitle.media.type_movie() is not None
        assert subtitle.identity() == "inception:2010:en"
        assert subtitle.meta.quality is Quality.HD720

    def test_episode_subtitle(self) -> None:
        subtitle = parse_subtitle("The.Office.S01E02.fr")
        assert subtitle.identity() == "theoffice:1:2:fr"

    def test_subtitle_without_language(self) -> None:
        subtitle = parse_subtitle("Inception.2010.1080p")
        assert subtitle.identity() == "inception:2010:und"

    def test_unrecognized_target_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_subtitle("Unknown.en")


class TestHeuristicFilenameParser:
    """Tests de l'adaptateur IFilenameParser."""

    @pytest.fixture
    def parser(self) -> HeuristicFilenameParser:
        return HeuristicFilenameParser()

    def test_parse_video(self, parser: HeuristicFilenameParser) -> None:
        assert parser.parse("Inception.2010").type_movie() is not None

    def test_parse_subtitle(self, parser: HeuristicFilenameParser) -> None:
        media = parser.parse("Inception.2010.de", is_video=False)

        assert media.type_subtitle() is not None
        assert not media.is_video()
