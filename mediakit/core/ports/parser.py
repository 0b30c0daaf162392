"""
Interface port pour le parsing de noms de fichiers.

Interface abstraite (port) definissant le contrat pour transformer un nom
de fichier (sans extension) en media type : film, episode ou sous-titre.
"""

from abc import ABC, abstractmethod

from mediakit.core.entities.media import Media, Subtitle


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers media.

    Deux implementations existent : l'analyse heuristique par motifs
    (HeuristicFilenameParser) et l'adaptateur guessit (GuessitFilenameParser).
    """

    @abstractmethod
    def parse_media(self, filename: str) -> Media:
        """
        Parse un nom de fichier video (episode en priorite, puis film).

        Args:
            filename: Nom du fichier sans extension

        Returns:
            Movie ou Episode

        Raises:
            ParseError: si aucun motif ne correspond
        """
        ...

    @abstractmethod
    def parse_subtitle(self, filename: str) -> Subtitle:
        """
        Parse un nom de fichier de sous-titre (ex: "Inception.2010.en").

        Raises:
            ParseError: si le media cible ne peut pas etre identifie
        """
        ...

    def parse(self, filename: str, is_video: bool = True) -> Media:
        """
        Parse un nom de fichier selon la classe de son extension.

        Args:
            filename: Nom du fichier sans extension
            is_video: True pour un conteneur video, False pour un sous-titre
        """
        if is_video:
            return self.parse_media(filename)
        return self.parse_subtitle(filename)
