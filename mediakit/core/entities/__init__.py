"""
Entites metier representant les medias.

Les entites sont construites par un parser ou un scraper puis enrichies
par fusion (merge) avec un media similaire.

Exports:
- Media: Interface commune (identite, similarite, fusion, capacites)
- Movie: Film (nom + annee)
- Episode: Episode de serie (serie + saison + episode)
- Subtitle: Sous-titre d'un film ou d'un episode
- LocalMedia: Media associe a un fichier sur le disque
- MediaList: Liste ordonnee et filtrable de medias
"""

from mediakit.core.entities.media import Episode, Media, Movie, Subtitle
from mediakit.core.entities.local import LocalMedia
from mediakit.core.entities.media_list import MediaList

__all__ = [
    "Media",
    "Movie",
    "Episode",
    "Subtitle",
    "LocalMedia",
    "MediaList",
]
