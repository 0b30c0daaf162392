"""
Liste ordonnee et filtrable de medias heterogenes.

Toutes les operations de filtrage sont en lecture seule : elles
construisent une nouvelle MediaList et ne modifient jamais la liste source.
La liste ne dedoublonne pas par identite, c'est a l'appelant de le faire.
"""

import json
from datetime import datetime, timedelta
from typing import Any, Callable, Iterator

from mediakit.core.entities.media import Media


class MediaList:
    """
    Sequence ordonnee de Media, ordre d'insertion conserve.

    Example:
        medias = MediaList(movie, episode, subtitle)
        recent = medias.filter_video().filter_modified(timedelta(days=1))
    """

    def __init__(self, *media: Media) -> None:
        self._items: list[Media] = list(media)

    def add(self, *media: Media) -> None:
        """Ajoute des medias en fin de liste."""
        self._items.extend(media)

    def filter(self, predicate: Callable[[Media], bool]) -> "MediaList":
        """Retourne les elements pour lesquels predicate est vrai, dans l'ordre."""
        return MediaList(*(item for item in self._items if predicate(item)))

    def filter_video(self) -> "MediaList":
        return self.filter(lambda m: m.is_video())

    def filter_movies(self) -> "MediaList":
        return self.filter(lambda m: m.type_movie() is not None)

    def filter_episodes(self) -> "MediaList":
        return self.filter(lambda m: m.type_episode() is not None)

    def filter_subtitles(self) -> "MediaList":
        return self.filter(lambda m: m.type_subtitle() is not None)

    def filter_modified(self, duration: timedelta) -> "MediaList":
        """
        Retourne les medias modifies depuis moins de duration.

        Un element est conserve si now - mod_time <= duration. Les medias
        sans date de modification (non locaux) sont exclus. Une duree
        negative ne conserve que les dates dans le futur.
        """
        now = datetime.now()

        def modified_within(media: Media) -> bool:
            mod_time = getattr(media, "mod_time", None)
            if mod_time is None:
                return False
            return now - mod_time <= duration

        return self.filter(modified_within)

    def to_dicts(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self._items]

    def to_json(self, **kwargs: Any) -> str:
        """Serialise chaque element via sa propre representation, dans l'ordre."""
        return json.dumps(self.to_dicts(), **kwargs)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Media]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Media:
        return self._items[index]

    def __repr__(self) -> str:
        return f"MediaList({len(self._items)} medias)"

    # Definies en dernier : ces noms masquent les builtins dans le corps de la classe
    def len(self) -> int:
        return len(self._items)

    def list(self) -> list[Media]:
        """Copie ordonnee des elements."""
        return list(self._items)
