"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IFilenameParser : Parsing d'un nom de fichier en media
- IScraper : Recherche de medias candidats dans une source externe
- IFileSystem : Opérations de lecture sur les fichiers
"""

from mediakit.core.ports.file_system import IFileSystem
from mediakit.core.ports.parser import IFilenameParser
from mediakit.core.ports.scraper import IScraper

__all__ = [
    "IFileSystem",
    "IFilenameParser",
    "IScraper",
]
