"""
Interfaces ports pour le systeme de fichiers.

Interface abstraite (port) definissant les operations fichiers dont le
scanner a besoin : existence, taille, date de modification et parcours.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les operations de lecture sur les fichiers.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        ...

    @abstractmethod
    def get_size(self, path: Path) -> int:
        """Taille du fichier en octets (0 si inaccessible)."""
        ...

    @abstractmethod
    def get_mod_time(self, path: Path) -> datetime:
        """Date de derniere modification du fichier (heure locale)."""
        ...

    @abstractmethod
    def list_media_files(self, directory: Path) -> Iterator[Path]:
        """
        Liste recursivement les fichiers video et sous-titres d'un repertoire.

        Args:
            directory: Repertoire racine

        Yields:
            Chemins des fichiers candidats
        """
        ...
