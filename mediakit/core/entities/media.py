"""
Entites media.

Un media (film, episode, sous-titre) est construit une fois par un parser
ou par un scraper. Seuls les champs d'enrichissement (nom canonique, titre
d'episode) peuvent etre modifies ensuite, via merge().

Les appelants ne testent jamais le type concret : ils interrogent les
capacites (type_movie, type_episode, type_subtitle) qui renvoient la vue
typee ou None. La classe de base fournit la reponse par defaut "non
applicable", chaque type concret ne surcharge que sa propre capacite.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from babelfish import Language

from mediakit.core.errors import SimilarityMismatchError
from mediakit.core.value_objects import Metadata
from mediakit.utils.helpers import identity_key


class Media(ABC):
    """
    Interface commune a tous les medias.

    Operations:
        identity: Cle canonique (cache, matching)
        similar: Meme media logique, metadonnees ignorees
        merge: Enrichissement depuis un media similaire
    """

    @property
    @abstractmethod
    def meta(self) -> Metadata:
        """Metadonnees descriptives du media."""
        ...

    @abstractmethod
    def identity(self) -> str:
        """
        Retourne la cle d'identite du media.

        Deterministe, insensible a la casse et a la ponctuation :
        deux noms de fichiers differents pour le meme media logique
        donnent la meme identite.
        """
        ...

    @abstractmethod
    def similar(self, other: "Media") -> bool:
        """Vrai si other est du meme type et designe le meme media logique."""
        ...

    @abstractmethod
    def merge(self, other: "Media") -> None:
        """
        Copie les champs d'enrichissement de other dans ce media.

        Raises:
            SimilarityMismatchError: si other n'est pas similaire
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Representation JSON du media."""
        ...

    def type_movie(self) -> Optional["Movie"]:
        return None

    def type_episode(self) -> Optional["Episode"]:
        return None

    def type_subtitle(self) -> Optional["Subtitle"]:
        return None

    def is_video(self) -> bool:
        return False


@dataclass
class Movie(Media):
    """
    Film identifie par son nom et son annee de sortie.

    Attributs:
        name: Nom du film (casse d'origine conservee)
        year: Annee de sortie
        metadata: Facettes extraites du bloc de tags
    """

    name: str = ""
    year: int = 0
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def meta(self) -> Metadata:
        return self.metadata

    def type_movie(self) -> Optional["Movie"]:
        return self

    def is_video(self) -> bool:
        return True

    def identity(self) -> str:
        return f"{identity_key(self.name)}:{self.year}"

    def similar(self, other: Media) -> bool:
        movie = other.type_movie()
        if movie is None:
            return False
        return self.year == movie.year and identity_key(self.name) == identity_key(movie.name)

    def merge(self, other: Media) -> None:
        if not self.similar(other):
            raise SimilarityMismatchError(self, other)
        movie = other.type_movie()
        self.name = movie.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "name": self.name,
            "year": self.year,
            "id": self.identity(),
        }

    def __str__(self) -> str:
        return self.name


@dataclass
class Episode(Media):
    """
    Episode d'une serie TV.

    Les fichiers multi-episodes (S01E01E02) ne conservent que le premier
    numero d'episode.

    Attributs:
        name: Nom de la serie
        season: Numero de saison
        episode: Numero d'episode dans la saison
        title: Titre de l'episode (vide si absent du nom de fichier)
        metadata: Facettes extraites du bloc de tags
    """

    name: str = ""
    season: int = 0
    episode: int = 0
    title: str = ""
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def meta(self) -> Metadata:
        return self.metadata

    def type_episode(self) -> Optional["Episode"]:
        return self

    def is_video(self) -> bool:
        return True

    def identity(self) -> str:
        return f"{identity_key(self.name)}:{self.season}:{self.episode}"

    def similar(self, other: Media) -> bool:
        episode = other.type_episode()
        if episode is None:
            return False
        if self.season != episode.season or self.episode != episode.episode:
            return False
        return identity_key(self.name) == identity_key(episode.name)

    def merge(self, other: Media) -> None:
        if not self.similar(other):
            raise SimilarityMismatchError(self, other)
        episode = other.type_episode()
        self.name = episode.name
        # Un titre vide ne remplace pas un titre connu
        if episode.title:
            self.title = episode.title

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "name": self.name,
            "title": self.title,
            "season": self.season,
            "episode": self.episode,
            "id": self.identity(),
        }

    def __str__(self) -> str:
        return f"{self.name} S{self.season:02d}E{self.episode:02d}"


def _undetermined() -> Language:
    return Language("und")


@dataclass
class Subtitle(Media):
    """
    Sous-titre d'un film ou d'un episode.

    L'identite et la similarite sont entierement deleguees au media cible
    et a la langue.

    Attributs:
        media: Film ou episode sous-titre
        language: Langue du sous-titre ("und" si inconnue)
        hearing_impaired: Toujours False depuis un nom de fichier
    """

    media: Media = field(default_factory=Movie)
    language: Language = field(default_factory=_undetermined)
    hearing_impaired: bool = False

    @property
    def meta(self) -> Metadata:
        return self.media.meta

    def type_subtitle(self) -> Optional["Subtitle"]:
        return self

    def identity(self) -> str:
        return f"{self.media.identity()}:{self.language}"

    def similar(self, other: Media) -> bool:
        subtitle = other.type_subtitle()
        if subtitle is None:
            return False
        return self.media.similar(subtitle.media)

    def merge(self, other: Media) -> None:
        """
        Enrichit le media cible.

        Accepte un autre sous-titre (fusion des cibles) ou directement
        un film/episode, tel que renvoye par un scraper.
        """
        subtitle = other.type_subtitle()
        if subtitle is None:
            self.media.merge(other)
            return
        if not self.similar(other):
            raise SimilarityMismatchError(self, other)
        self.media.merge(subtitle.media)

    def to_dict(self) -> dict[str, Any]:
        return {
            "media": self.media.to_dict(),
            "code": str(self.language),
            "language": self.language.name,
            "hearing_impaired": self.hearing_impaired,
            "id": self.identity(),
        }

    def __str__(self) -> str:
        return self.language.name
