"""
Service de scan des repertoires de medias.

Orchestre la decouverte des fichiers video et sous-titres en coordonnant
le systeme de fichiers et le parser de noms de fichiers. Les fichiers dont
le nom n'est pas reconnu sont ignores, jamais fatals.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from mediakit.core.entities import LocalMedia, MediaList
from mediakit.core.errors import ParseError
from mediakit.core.ports.file_system import IFileSystem
from mediakit.core.ports.parser import IFilenameParser
from mediakit.utils.constants import IGNORED_PATTERNS, VIDEO_EXTENSIONS


def is_sample(media: LocalMedia) -> bool:
    """Vrai si le fichier est un extrait (sample, trailer...), insensible a la casse."""
    filename_lower = media.filename.lower()
    return any(pattern in filename_lower for pattern in IGNORED_PATTERNS)


class ScannerService:
    """
    Service construisant une MediaList depuis des repertoires racines.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister les fichiers media
    - Le parser de noms (IFilenameParser) pour identifier chaque fichier
    """

    def __init__(
        self,
        file_system: IFileSystem,
        filename_parser: IFilenameParser,
        skip_samples: bool = True,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour les operations fichiers
            filename_parser: Implementation de IFilenameParser pour le parsing
            skip_samples: Exclut les extraits (sample, trailer...) du resultat
        """
        self._file_system = file_system
        self._filename_parser = filename_parser
        self._skip_samples = skip_samples

    def find_media(self, *roots: Path) -> MediaList:
        """
        Recherche les medias dans les repertoires racines.

        Args:
            roots: Repertoires a parcourir recursivement

        Returns:
            MediaList de LocalMedia, dans l'ordre des racines puis des chemins

        Raises:
            FileNotFoundError: si une racine n'existe pas
        """
        media_list = MediaList()

        for root in roots:
            root = Path(root)
            if not self._file_system.exists(root):
                raise FileNotFoundError(f"Repertoire introuvable : {root}")

            for path in self._file_system.list_media_files(root):
                local = self.load(path)
                if local is None:
                    continue
                if self._skip_samples and is_sample(local):
                    logger.debug(f"Extrait ignore : {path.name}")
                    continue
                media_list.add(local)

        logger.info(f"{len(media_list)} medias trouves")
        return media_list

    def load(self, path: Path) -> Optional[LocalMedia]:
        """
        Identifie un fichier et l'enveloppe en LocalMedia.

        Les conteneurs video passent par parse_media, les autres
        extensions (.srt) par parse_subtitle.

        Returns:
            LocalMedia, ou None si le nom n'est pas reconnu ou le fichier
            a disparu entre le listing et la lecture
        """
        is_video = path.suffix.lower() in VIDEO_EXTENSIONS

        try:
            media = self._filename_parser.parse(path.stem, is_video=is_video)
        except ParseError as e:
            logger.debug(f"Fichier ignore {path.name} : {e}")
            return None

        try:
            mod_time = self._file_system.get_mod_time(path)
        except OSError as e:
            logger.debug(f"Fichier inaccessible {path.name} : {e}")
            return None

        return LocalMedia(
            media=media,
            path=path,
            size=self._file_system.get_size(path),
            mod_time=mod_time,
        )
