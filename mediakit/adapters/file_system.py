"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles,
utilisee par le scanner pour decouvrir les videos et sous-titres.
"""

from datetime import datetime
from pathlib import Path
from typing import Iterator

from mediakit.core.ports.file_system import IFileSystem
from mediakit.utils.constants import SUBTITLE_EXTENSIONS, VIDEO_EXTENSIONS

# Extensions video et sous-titres supportees
MEDIA_EXTENSIONS: frozenset[str] = VIDEO_EXTENSIONS | SUBTITLE_EXTENSIONS


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def get_size(self, path: Path) -> int:
        """
        Recupere la taille du fichier en octets.

        Retourne 0 si le fichier n'existe pas.
        """
        try:
            return path.stat().st_size
        except OSError:
            return 0

    def get_mod_time(self, path: Path) -> datetime:
        """Date de derniere modification (heure locale, sans fuseau)."""
        return datetime.fromtimestamp(path.stat().st_mtime)

    def list_media_files(self, directory: Path) -> Iterator[Path]:
        """
        Liste les fichiers video et sous-titres dans un repertoire (recursif).

        Filtre:
        - Par extension (VIDEO_EXTENSIONS + SUBTITLE_EXTENSIONS)
        - Exclut les fichiers caches (commencant par ".")
        - Exclut les symlinks

        Args:
            directory: Repertoire a scanner

        Yields:
            Chemins vers les fichiers media, dans l'ordre alphabetique
        """
        if not directory.exists():
            return

        for path in sorted(directory.rglob("*")):
            # Ignorer les repertoires
            if path.is_dir():
                continue

            # Ignorer les symlinks
            if path.is_symlink():
                continue

            if path.name.startswith("."):
                continue

            if path.suffix.lower() not in MEDIA_EXTENSIONS:
                continue

            yield path
