"""
Cache persistant des resultats de scraping, indexe par identite de media.

Le cache utilise diskcache : les resultats survivent aux redemarrages et
l'acces est sur entre plusieurs threads d'enrichissement. La taille sur
disque est bornee, les entrees les moins recemment lues sont evincees en
premier. Le container en fournit une instance unique.
"""

from pathlib import Path
from typing import Optional

from diskcache import Cache
from loguru import logger

from mediakit.core.entities.media import Media


class ScrapeCache:
    """
    Cache LRU identite -> media scrape, stocke sur disque.

    Example:
        cache = ScrapeCache(cache_dir="/tmp/mediakit/scrape_cache")
        cache.set(movie.identity(), scraped)
        cached = cache.get(movie.identity())
    """

    DEFAULT_SIZE_LIMIT = 64 * 1024 * 1024  # 64 Mo

    def __init__(
        self, cache_dir: str | Path, size_limit: int = DEFAULT_SIZE_LIMIT
    ) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
            size_limit: Taille maximale sur disque en octets (>= 1)
        """
        if size_limit < 1:
            raise ValueError("size_limit doit etre >= 1")
        self._cache = Cache(
            str(cache_dir),
            eviction_policy="least-recently-used",
            size_limit=size_limit,
        )
        logger.debug(f"Cache de scraping ouvert dans {self._cache.directory}")

    @property
    def directory(self) -> str:
        return self._cache.directory

    @property
    def size_limit(self) -> int:
        return self._cache.size_limit

    def get(self, identity: str) -> Optional[Media]:
        """
        Recupere le media scrape pour une identite.

        Returns:
            Le media, ou None si absent ou evince
        """
        return self._cache.get(identity)

    def set(self, identity: str, media: Media) -> None:
        """Stocke un media scrape (diskcache evince les entrees LRU si plein)."""
        self._cache.set(identity, media)

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        removed = self._cache.clear()
        logger.debug(f"Cache de scraping vide ({removed} entrees)")

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()

    def __contains__(self, identity: object) -> bool:
        return identity in self._cache

    def __len__(self) -> int:
        return len(self._cache)
