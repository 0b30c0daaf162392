"""
Implementation du parser de noms de fichiers avec guessit.

Ce module fournit GuessitFilenameParser qui implemente IFilenameParser
en s'appuyant sur guessit, puis ramene ses proprietes sur le meme
vocabulaire de Metadata que le parser heuristique.
"""

from typing import Any, Optional

from guessit import guessit

from mediakit.adapters.parsing.heuristic_parser import split_language
from mediakit.adapters.parsing.tag_scanner import (
    lookup_codec,
    lookup_quality,
    lookup_source,
    vocabulary_key,
)
from mediakit.core.entities.media import Episode, Media, Movie, Subtitle
from mediakit.core.errors import MalformedInputError, ParseError
from mediakit.core.ports.parser import IFilenameParser
from mediakit.core.value_objects import Metadata
from mediakit.utils.helpers import clean_name


class GuessitFilenameParser(IFilenameParser):
    """
    Parser de noms de fichiers utilisant la bibliotheque guessit.

    guessit reconnait davantage de cas que les motifs heuristiques
    (titres ambigus, annees multiples), au prix d'une dependance lourde.
    """

    def parse_media(self, filename: str) -> Media:
        """
        Parse un nom de fichier video et construit un Movie ou un Episode.

        Raises:
            MalformedInputError: si le nom est vide
            ParseError: si guessit ne trouve ni film date ni episode
        """
        if not clean_name(filename):
            raise MalformedInputError(f"nom de fichier vide : {filename!r}")

        result = guessit(filename)
        title = self._extract_title(result)
        if not title:
            raise ParseError(f"aucun titre reconnu : {filename!r}")

        metadata = self._extract_metadata(result)
        season = self._first(result.get("season"))
        episode = self._first(result.get("episode"))

        if result.get("type") == "episode" and season is not None and episode is not None:
            return Episode(
                name=title,
                season=int(season),
                episode=int(episode),
                title=clean_name(str(result.get("episode_title") or "")),
                metadata=metadata,
            )

        year = result.get("year")
        if year is not None:
            return Movie(name=title, year=int(year), metadata=metadata)

        raise ParseError(f"media non reconnu : {filename!r}")

    def parse_subtitle(self, filename: str) -> Subtitle:
        target, language = split_language(filename)
        return Subtitle(media=self.parse_media(target), language=language)

    def _extract_title(self, result: dict[str, Any]) -> str:
        """
        Extrait le titre depuis le resultat guessit.

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            Titre nettoye, ou chaine vide
        """
        title = result.get("title")
        if not title:
            return ""
        return clean_name(str(title))

    def _first(self, value: Any) -> Optional[Any]:
        """guessit renvoie une liste pour les multi-episodes : on garde le premier."""
        if isinstance(value, list):
            return value[0] if value else None
        return value

    def _extract_metadata(self, result: dict[str, Any]) -> Metadata:
        """
        Convertit les proprietes guessit en Metadata.

        screen_size, source et video_codec sont recherches dans le
        vocabulaire des tags ("Blu-ray" -> BluRay, "H.264" -> H.264).
        Les valeurs de "other" (Proper, Rip...) deviennent des tags divers.
        """
        others = result.get("other") or []
        if not isinstance(others, list):
            others = [others]

        misc: list[str] = []
        for other in others:
            key = vocabulary_key(str(other))
            if key and key not in misc:
                misc.append(key)

        return Metadata(
            source=lookup_source(str(result.get("source") or "")),
            quality=lookup_quality(str(result.get("screen_size") or "")),
            codec=lookup_codec(str(result.get("video_codec") or "")),
            group=str(result.get("release_group") or ""),
            misc=tuple(misc),
        )
