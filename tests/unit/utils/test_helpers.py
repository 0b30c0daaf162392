"""Tests unitaires pour les fonctions de nettoyage de noms."""

import pytest

from mediakit.utils.helpers import (
    clean_name,
    identity_key,
    normalize_accents,
    strip_invisible_chars,
)


class TestCleanName:
    """Tests pour clean_name."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("The.Office", "The Office"),
            ("The_Office", "The Office"),
            ("  The - Office  ", "The Office"),
            ("Movie.Name.(Director's_Cut)", "Movie Name Director's Cut"),
            ("[Group].Show", "Group Show"),
        ],
    )
    def test_separators_collapse_to_single_space(self, raw: str, expected: str) -> None:
        assert clean_name(raw) == expected

    def test_preserves_case(self) -> None:
        assert clean_name("CSI.NY") == "CSI NY"

    def test_empty_and_separators_only(self) -> None:
        assert clean_name("") == ""
        assert clean_name("._-. ") == ""

    def test_removes_invisible_chars(self) -> None:
        assert clean_name("\u200eThe.Office") == "The Office"


class TestIdentityKey:
    """Tests pour identity_key."""

    def test_case_and_punctuation_insensitive(self) -> None:
        assert identity_key("The.Office") == identity_key("the office") == "theoffice"

    def test_accents_removed(self) -> None:
        assert identity_key("Amélie Poulain") == "ameliepoulain"

    def test_digits_kept(self) -> None:
        assert identity_key("Blade Runner 2049") == "bladerunner2049"

    def test_non_latin_letters_kept(self) -> None:
        assert identity_key("千と千尋") == "千と千尋"


class TestUnicodeHelpers:
    def test_normalize_accents(self) -> None:
        assert normalize_accents("Éléonore") == "Eleonore"

    def test_strip_invisible_chars(self) -> None:
        assert strip_invisible_chars("a\u200fb\ufeff") == "ab"
