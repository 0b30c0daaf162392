"""
Couche services (cas d'utilisation).

- scanner : Construction d'une MediaList depuis des repertoires
- matcher : Scoring des candidats renvoyes par les scrapers
- enricher : Fusion des meilleurs candidats sur les medias locaux

Les services dependent des ports de core/, jamais des adaptateurs concrets.
"""

from mediakit.services.enricher import EnricherService, EnrichmentReport, EnrichmentStatus
from mediakit.services.matcher import MatcherService, ScoredCandidate
from mediakit.services.scanner import ScannerService, is_sample

__all__ = [
    "EnricherService",
    "EnrichmentReport",
    "EnrichmentStatus",
    "MatcherService",
    "ScannerService",
    "ScoredCandidate",
    "is_sample",
]
