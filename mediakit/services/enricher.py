"""
Service d'enrichissement des medias locaux via les scrapers.

Pour chaque media d'une MediaList, le service cherche un candidat dans le
cache (par identite) ou aupres des scrapers, choisit le meilleur candidat
similaire via MatcherService et le fusionne dans le media local.

Chaque media est traite une seule fois par passe : merge() n'est jamais
appele en parallele sur la meme entite.
"""

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from mediakit.adapters.cache import ScrapeCache
from mediakit.core.entities import Media, MediaList
from mediakit.core.errors import ScrapeError
from mediakit.core.ports.scraper import IScraper
from mediakit.services.matcher import MatcherService


class EnrichmentStatus(Enum):
    """Resultat de l'enrichissement d'un media."""

    ENRICHED = "enriched"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    UNSUPPORTED = "unsupported"


@dataclass
class EnrichmentReport:
    """
    Bilan d'une passe d'enrichissement.

    Attributs:
        enriched: Medias fusionnes avec un candidat
        not_found: Medias sans candidat similaire
        failed: Medias dont tous les scrapers ont echoue
        unsupported: Medias qu'aucun scraper ne sait rechercher
    """

    enriched: int = 0
    not_found: int = 0
    failed: int = 0
    unsupported: int = 0

    @property
    def total(self) -> int:
        return self.enriched + self.not_found + self.failed + self.unsupported

    def record(self, status: EnrichmentStatus) -> None:
        if status is EnrichmentStatus.ENRICHED:
            self.enriched += 1
        elif status is EnrichmentStatus.NOT_FOUND:
            self.not_found += 1
        elif status is EnrichmentStatus.FAILED:
            self.failed += 1
        else:
            self.unsupported += 1


class EnricherService:
    """
    Service fusionnant les resultats des scrapers dans les medias locaux.

    Le cache est indexe par l'identite du media cible : un film et ses
    sous-titres partagent la meme entree.
    """

    def __init__(
        self,
        scrapers: list[IScraper],
        matcher: MatcherService,
        cache: ScrapeCache,
    ) -> None:
        """
        Args:
            scrapers: Sources interrogees dans l'ordre
            matcher: Service de scoring des candidats
            cache: Cache des resultats par identite
        """
        self._scrapers = scrapers
        self._matcher = matcher
        self._cache = cache

    def enrich(self, media_list: MediaList) -> EnrichmentReport:
        """Enrichit chaque media de la liste et retourne le bilan."""
        report = EnrichmentReport()
        for media in media_list:
            report.record(self.enrich_media(media))
        logger.info(
            f"Enrichissement termine : {report.enriched}/{report.total} medias enrichis"
        )
        return report

    def enrich_media(self, media: Media) -> EnrichmentStatus:
        """
        Enrichit un media (un sous-titre enrichit son media cible).

        Returns:
            Statut de l'enrichissement
        """
        subtitle = media.type_subtitle()
        target = subtitle.media if subtitle is not None else media
        identity = target.identity()

        cached = self._cache.get(identity)
        if cached is not None:
            media.merge(cached)
            return EnrichmentStatus.ENRICHED

        scrapers = [scraper for scraper in self._scrapers if scraper.supports(target)]
        if not scrapers:
            return EnrichmentStatus.UNSUPPORTED

        failed = False
        for scraper in scrapers:
            try:
                candidates = scraper.search(target)
            except ScrapeError as e:
                logger.warning(f"Echec du scraper {scraper.name} pour {target} : {e}")
                failed = True
                continue

            best = self._matcher.best_match(target, candidates)
            if best is None:
                continue
            match = best.media
            media.merge(match)
            self._cache.set(identity, match)
            logger.debug(f"{target} enrichi via {scraper.name}")
            return EnrichmentStatus.ENRICHED

        if failed:
            return EnrichmentStatus.FAILED
        logger.debug(f"Aucune correspondance pour {target}")
        return EnrichmentStatus.NOT_FOUND
