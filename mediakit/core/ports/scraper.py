"""
Interface port pour les scrapers de metadonnees.

Un scraper interroge une source externe (TMDB, TVDB...) et renvoie des
medias candidats du meme type que le media recherche. Les clients HTTP
concrets sont des adaptateurs hors du coeur.
"""

from abc import ABC, abstractmethod

from mediakit.core.entities.media import Media


class IScraper(ABC):
    """
    Interface de base pour les sources de metadonnees.

    Attributs:
        name: Nom de la source (ex: "tmdb")
    """

    name: str = ""

    @abstractmethod
    def supports(self, media: Media) -> bool:
        """Vrai si la source sait rechercher ce type de media."""
        ...

    @abstractmethod
    def search(self, media: Media) -> list[Media]:
        """
        Recherche les medias candidats correspondant a media.

        Returns:
            Candidats dans l'ordre renvoye par la source (peut etre vide)

        Raises:
            ScrapeError: si la source est injoignable ou repond en erreur
        """
        ...
