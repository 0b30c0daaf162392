"""
Entite media local.

Un LocalMedia associe un media identifie a son fichier sur le disque
(chemin, taille, date de modification). Toutes les operations media sont
deleguees au media enveloppe.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from mediakit.core.entities.media import Episode, Media, Movie, Subtitle
from mediakit.core.value_objects import Metadata


@dataclass
class LocalMedia(Media):
    """
    Media decouvert sur le systeme de fichiers.

    Attributs:
        media: Media identifie depuis le nom du fichier
        path: Chemin absolu du fichier
        size: Taille en octets
        mod_time: Date de derniere modification du fichier
    """

    media: Media
    path: Path
    size: int = 0
    mod_time: Optional[datetime] = None

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def meta(self) -> Metadata:
        return self.media.meta

    def type_movie(self) -> Optional[Movie]:
        return self.media.type_movie()

    def type_episode(self) -> Optional[Episode]:
        return self.media.type_episode()

    def type_subtitle(self) -> Optional[Subtitle]:
        return self.media.type_subtitle()

    def is_video(self) -> bool:
        return self.media.is_video()

    def identity(self) -> str:
        return self.media.identity()

    def similar(self, other: Media) -> bool:
        return self.media.similar(other)

    def merge(self, other: Media) -> None:
        self.media.merge(other)

    def to_dict(self) -> dict[str, Any]:
        data = self.media.to_dict()
        data.update({
            "filename": self.filename,
            "path": str(self.path),
            "size": self.size,
            "modified": self.mod_time.isoformat() if self.mod_time else None,
        })
        return data

    def __str__(self) -> str:
        return str(self.media)
