"""
Analyse du bloc de tags d'un nom de fichier.

Apres la partie structurelle (serie + saison + episode, ou film + annee),
un nom de fichier contient un titre optionnel suivi de tags de release :

    "The.Dundies.720p.HDTV.x264-LOL"
     ^^^^^^^^^^^ ^^^^^^^^^^^^^^^^^^^
     titre       bloc de tags (boundary = 12)

scan_tags() retourne la position du debut du bloc et les Metadata extraites.
L'analyse ne leve jamais d'erreur : un token inconnu finit en tag divers.
"""

import re
from dataclasses import dataclass
from typing import Optional

from mediakit.core.value_objects import Codec, Metadata, Quality, Source
from mediakit.utils.constants import (
    CODEC_TOKENS,
    MISC_TOKENS,
    QUALITY_TOKENS,
    SOURCE_TOKENS,
)

_TOKEN_RE = re.compile(r"[^\s._\-\[\](){}]+")

_KEY_RE = re.compile(r"[^0-9a-z]+")

# Separateurs toleres apres le groupe de release ("x264-GRP.")
_TRAILING = " ._-"


@dataclass(frozen=True)
class _Token:
    """Mot du suffixe avec sa position (end exclusif)."""

    text: str
    start: int
    end: int


def vocabulary_key(word: str) -> str:
    """Cle de recherche dans le vocabulaire : "WEB-DL" -> "webdl"."""
    return _KEY_RE.sub("", word.lower())


def lookup_quality(word: str) -> Quality:
    value = QUALITY_TOKENS.get(vocabulary_key(word))
    return Quality(value) if value else Quality.NONE


def lookup_source(word: str) -> Source:
    value = SOURCE_TOKENS.get(vocabulary_key(word))
    return Source(value) if value else Source.NONE


def lookup_codec(word: str) -> Codec:
    value = CODEC_TOKENS.get(vocabulary_key(word))
    return Codec(value) if value else Codec.NONE


def misc_key(word: str) -> str:
    """Cle d'un tag divers, point des canaux conserve : "DDP5.1" -> "ddp5.1"."""
    return ".".join(filter(None, (vocabulary_key(part) for part in word.split("."))))


def is_vocabulary(word: str) -> bool:
    """Vrai si le mot appartient au vocabulaire connu des tags."""
    key = vocabulary_key(word)
    return (
        key in QUALITY_TOKENS
        or key in SOURCE_TOKENS
        or key in CODEC_TOKENS
        or key in MISC_TOKENS
    )


def _tokenize(text: str) -> list[_Token]:
    """
    Decoupe le texte sur les separateurs en conservant les positions.

    Deux mots consecutifs qui forment un mot du vocabulaire une fois
    colles ("WEB-DL", "Blu.Ray", "H.264") sont fusionnes en un seul token.
    Un chiffre isole apres "5." ou "DDP7." est rattache au mot precedent
    pour garder la configuration des canaux audio ("5.1", "DDP7.1").
    """
    raw = [_Token(m.group(), m.start(), m.end()) for m in _TOKEN_RE.finditer(text)]
    tokens: list[_Token] = []
    i = 0
    while i < len(raw):
        current = raw[i]
        following = raw[i + 1] if i + 1 < len(raw) else None
        if following is not None and (
            is_vocabulary(current.text + following.text)
            or _is_channel_pair(text, current, following)
        ):
            tokens.append(
                _Token(text[current.start:following.end], current.start, following.end)
            )
            i += 2
            continue
        tokens.append(current)
        i += 1
    return tokens


def _is_channel_pair(text: str, current: _Token, following: _Token) -> bool:
    """Vrai pour "5" + "1" separes par un point, ou "DDP5" + "1"."""
    if text[current.end:following.start] != ".":
        return False
    if len(following.text) != 1 or not following.text.isdigit():
        return False
    head = current.text
    return head[-1].isdigit() and (len(head) == 1 or not head[-2].isdigit())


def _find_group(text: str, tokens: list[_Token]) -> Optional[int]:
    """
    Retourne l'index du token de groupe de release, s'il existe.

    Le groupe est le dernier token, entre crochets en fin de chaine
    ("[GRP]") ou apres un tiret ("x264-GRP"). Pour la forme avec tiret, un
    tag connu doit le preceder afin de ne pas couper un titre ("Spider-Man").
    """
    if not tokens:
        return None
    last = tokens[-1]
    if is_vocabulary(last.text) or not any(c.isalpha() for c in last.text):
        return None

    before = text[last.start - 1] if last.start > 0 else ""
    after = text[last.end:]

    if before == "[" and after.startswith("]") and not after[1:].strip(_TRAILING):
        return len(tokens) - 1
    if before == "-" and not after.strip(_TRAILING):
        if any(is_vocabulary(token.text) for token in tokens[:-1]):
            return len(tokens) - 1
    return None


def scan_tags(suffix: str) -> tuple[int, Metadata]:
    """
    Separe le titre descriptif du bloc de tags.

    Le premier token reconnu (qualite, source, codec, tag divers connu ou
    groupe de release) ouvre le bloc de tags. A partir de ce token : la
    premiere qualite, la premiere source et le premier codec renseignent
    leur facette, le groupe est isole, les autres tokens deviennent des
    tags divers (minuscules, sans doublon, purement numeriques ignores
    sauf les canaux audio comme "5.1").

    Args:
        suffix: Fin du nom de fichier apres la partie structurelle

    Returns:
        (boundary, metadata) ou boundary est la position du debut du bloc
        de tags, len(suffix) si aucun tag n'est reconnu.
    """
    tokens = _tokenize(suffix)
    group_index = _find_group(suffix, tokens)

    first = None
    for index, token in enumerate(tokens):
        if index == group_index or is_vocabulary(token.text):
            first = index
            break

    if first is None:
        return len(suffix), Metadata()

    quality = Quality.NONE
    source = Source.NONE
    codec = Codec.NONE
    misc: list[str] = []

    for index in range(first, len(tokens)):
        if index == group_index:
            continue
        word = tokens[index].text

        token_quality = lookup_quality(word)
        if token_quality is not Quality.NONE:
            if quality is Quality.NONE:
                quality = token_quality
            continue

        token_source = lookup_source(word)
        if token_source is not Source.NONE:
            if source is Source.NONE:
                source = token_source
            continue

        token_codec = lookup_codec(word)
        if token_codec is not Codec.NONE:
            if codec is Codec.NONE:
                codec = token_codec
            continue

        key = misc_key(word)
        if not key or key.isdigit() or key in misc:
            continue
        misc.append(key)

    group = tokens[group_index].text if group_index is not None else ""

    return tokens[first].start, Metadata(
        source=source,
        quality=quality,
        codec=codec,
        group=group,
        misc=tuple(misc),
    )
