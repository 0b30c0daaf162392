"""
Objets valeur pour les metadonnees de release.

Les facettes (qualite, source, codec, groupe, tags divers) sont extraites
du bloc de tags d'un nom de fichier. Elles decrivent un fichier mais
n'identifient jamais un media : deux fichiers de qualites differentes
restent le meme film.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Quality(Enum):
    """Resolution annoncee dans le nom de fichier.

    Valeurs:
        NONE: Aucune qualite reconnue
        SD: Definition standard (480p, 576p...)
        HD720: 720p
        HD1080: 1080p / 1080i
        UHD2160: 2160p / 4K
    """

    NONE = ""
    SD = "SD"
    HD720 = "720p"
    HD1080 = "1080p"
    UHD2160 = "2160p"


class Source(Enum):
    """Support d'origine de la release."""

    NONE = ""
    CAM = "CAM"
    TELESYNC = "TS"
    DVD = "DVD"
    HDTV = "HDTV"
    WEBDL = "WEB-DL"
    WEBRIP = "WEBRip"
    BLURAY = "BluRay"


class Codec(Enum):
    """Codec video annonce."""

    NONE = ""
    XVID = "XviD"
    H264 = "H.264"
    H265 = "H.265"
    VP9 = "VP9"
    AV1 = "AV1"


@dataclass(frozen=True)
class Metadata:
    """
    Facettes descriptives d'un fichier media.

    Objet valeur immutable : deux Metadata ne sont jamais comparees
    pour determiner l'identite d'un media.

    Attributs:
        source: Support d'origine (BluRay, HDTV...)
        quality: Resolution (720p, 1080p...)
        codec: Codec video (H.264, H.265...)
        group: Groupe de release (peut etre vide)
        misc: Tags libres ordonnes et sans doublon (proper, extended...)
    """

    source: Source = Source.NONE
    quality: Quality = Quality.NONE
    codec: Codec = Codec.NONE
    group: str = ""
    misc: tuple[str, ...] = ()

    def all_tags(self) -> list[str]:
        """Liste ordonnee des tags reconnus : qualite, source, codec puis divers."""
        tags = [
            facet.value
            for facet in (self.quality, self.source, self.codec)
            if facet.value
        ]
        tags.extend(self.misc)
        return tags

    def is_empty(self) -> bool:
        """Vrai si aucune facette n'a ete renseignee."""
        return not self.all_tags() and not self.group

    def to_dict(self) -> dict[str, Any]:
        return {
            "quality": self.quality.value,
            "source": self.source.value,
            "codec": self.codec.value,
            "group": self.group,
            "misc": list(self.misc),
            "tags": self.all_tags(),
        }

    def __str__(self) -> str:
        text = " ".join(self.all_tags())
        if self.group:
            return f"{text}-{self.group}" if text else self.group
        return text
