"""
Parser heuristique de noms de fichiers.

Ce module reconnait les episodes, films et sous-titres par motifs
(expressions regulieres) puis delegue le bloc de tags a scan_tags().
Chaque appel est une fonction pure de la chaine d'entree et des tables
de vocabulaire.

Exemples:
    parse_episode("The.Office.S01E02.720p.HDTV")  -> Episode("The Office", 1, 2)
    parse_movie("Inception.2010.1080p.BluRay")    -> Movie("Inception", 2010)
    parse_subtitle("Inception.2010.720p.en")      -> Subtitle(Movie(...), en)
"""

import re
from typing import Optional

from babelfish import Error as BabelfishError
from babelfish import Language

from mediakit.adapters.parsing.tag_scanner import scan_tags
from mediakit.core.entities.media import Episode, Media, Movie, Subtitle
from mediakit.core.errors import MalformedInputError, ParseError
from mediakit.core.ports.parser import IFilenameParser
from mediakit.utils.helpers import clean_name

# <serie><sep>[S]<saison>(E|x)<episode>[E<episode>]<sep><tags>
# Le second numero d'un multi-episode est reconnu puis ignore
EPISODE_RE = re.compile(
    r"^(.*?[\w)]+)[\W_]+?[Ss]?(\d{1,2})[EeXx](\d{1,2})(?:[Ee]\d{1,2})?[\W_]*(.*)$"
)

# <nom><sep>[(]<annee>[)]<sep><tags> ; la derniere annee plausible l'emporte
MOVIE_RE = re.compile(
    r"^(.*[\w)])[\W_]+\(?((?:19|20)\d{2})\)?(?=[\W_]|$)[\W_]*(.*)$"
)

# Code langue : ISO 639-1 / 639-3 / 639-2B, avec region optionnelle (pt-BR)
LANGUAGE_RE = re.compile(r"^([A-Za-z]{2,3})(?:-([A-Za-z]{2}))?$")


def _check_input(filename: str) -> None:
    """
    Rejette les entrees degenerees.

    Raises:
        MalformedInputError: chaine vide, uniquement des separateurs,
            ou un unique bloc de chiffres
    """
    cleaned = clean_name(filename)
    if not cleaned:
        raise MalformedInputError(f"nom de fichier vide : {filename!r}")
    if cleaned.isdigit():
        raise MalformedInputError(f"nom de fichier purement numerique : {filename!r}")


def _clean_required_name(name: str, filename: str) -> str:
    cleaned = clean_name(name)
    if not cleaned:
        raise MalformedInputError(f"aucun nom exploitable dans {filename!r}")
    return cleaned


def parse_episode(filename: str) -> Episode:
    """
    Parse un nom de fichier d'episode (sans extension).

    Le nom doit contenir un marqueur saison/episode (S01E02, 1x02...).

    Raises:
        ParseError: si aucun marqueur saison/episode n'est trouve
    """
    _check_input(filename)
    match = EPISODE_RE.match(filename)
    if match is None:
        raise ParseError(f"impossible de parser l'episode : {filename!r}")

    name, season, episode, tags = match.groups()
    boundary, metadata = scan_tags(tags)

    return Episode(
        name=_clean_required_name(name, filename),
        season=int(season),
        episode=int(episode),
        title=clean_name(tags[:boundary]),
        metadata=metadata,
    )


def parse_movie(filename: str) -> Movie:
    """
    Parse un nom de fichier de film (sans extension).

    Le nom doit contenir une annee entre 1900 et 2099 entouree de
    separateurs ; tout ce qui suit l'annee est analyse comme bloc de tags.

    Raises:
        ParseError: si aucune annee plausible n'est trouvee
    """
    _check_input(filename)
    match = MOVIE_RE.match(filename)
    if match is None:
        raise ParseError(f"impossible de parser le film : {filename!r}")

    name, year, tags = match.groups()
    _, metadata = scan_tags(tags)

    return Movie(
        name=_clean_required_name(name, filename),
        year=int(year),
        metadata=metadata,
    )


def parse_media(filename: str) -> Media:
    """
    Parse un nom de fichier video : episode en priorite, puis film.

    Raises:
        ParseError: si ni l'un ni l'autre ne correspond
    """
    try:
        return parse_episode(filename)
    except MalformedInputError:
        raise
    except ParseError:
        pass
    try:
        return parse_movie(filename)
    except MalformedInputError:
        raise
    except ParseError:
        raise ParseError(f"media non reconnu : {filename!r}") from None


def resolve_language(code: str) -> Optional[Language]:
    """
    Resout un code langue ("en", "eng", "ger", "pt-BR").

    Returns:
        La langue babelfish, ou None si le code n'est pas une langue connue
    """
    match = LANGUAGE_RE.match(code)
    if match is None:
        return None
    subtag, region = match.groups()
    ietf = f"{subtag.lower()}-{region.upper()}" if region else subtag.lower()
    try:
        return Language.fromietf(ietf)
    except (ValueError, BabelfishError):
        pass
    if region is None and len(subtag) == 3:
        try:
            return Language.fromalpha3b(subtag.lower())
        except (ValueError, BabelfishError):
            pass
    return None


def split_language(filename: str) -> tuple[str, Language]:
    """
    Separe le suffixe de langue d'un nom de sous-titre.

    "Inception.2010.en" -> ("Inception.2010.", Language("eng"))
    Sans langue reconnue, le nom entier est conserve et la langue vaut "und".

    Raises:
        ParseError: si le nom contient moins de deux parties separees par un point
    """
    parts = filename.split(".")
    if len(parts) < 2:
        raise ParseError(f"nom de sous-titre invalide : {filename!r}")

    candidate = parts[-1]
    language = resolve_language(candidate)
    if language is None:
        return filename, Language("und")
    return filename[: -len(candidate)], language


def parse_subtitle(filename: str) -> Subtitle:
    """
    Parse un nom de fichier de sous-titre (sans l'extension .srt).

    Le media cible est obligatoire : un sous-titre n'existe pas sans
    film ou episode identifiable.

    Raises:
        ParseError: si le nom est trop court ou si la cible n'est pas reconnue
    """
    target, language = split_language(filename)
    return Subtitle(media=parse_media(target), language=language)


class HeuristicFilenameParser(IFilenameParser):
    """
    Parser de noms de fichiers par motifs.

    Implementation par defaut de IFilenameParser, sans dependance externe
    hormis babelfish pour les codes langue.
    """

    def parse_media(self, filename: str) -> Media:
        return parse_media(filename)

    def parse_subtitle(self, filename: str) -> Subtitle:
        return parse_subtitle(filename)
