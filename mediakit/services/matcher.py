"""
Service de scoring pour le matching de medias scrapes.

MatcherService calcule les scores de correspondance entre un media local
et les candidats renvoyes par un scraper, puis les classe.

Formules de scoring:
- Films: 67% titre + 33% annee
- Episodes: 100% nom de la serie

Le scoring ordonne les candidats ; l'acceptation finale reste decidee par
Media.similar(). Le scoring est deterministe pour des resultats reproductibles.
"""

from dataclasses import dataclass
from typing import Optional

from rapidfuzz import fuzz, utils

from mediakit.core.entities.media import Media


@dataclass
class ScoredCandidate:
    """
    Candidat scrape accompagne de son score.

    Attributs:
        media: Media renvoye par le scraper
        score: Score de correspondance (0-100)
    """

    media: Media
    score: float


def _calculate_title_score(query_title: str, candidate_title: str) -> float:
    """
    Calculate title similarity score (0-100).

    Uses token_sort_ratio for word-order independence.
    Normalized via default_process (lowercase, strip whitespace).
    """
    return fuzz.token_sort_ratio(
        query_title, candidate_title, processor=utils.default_process
    )


def _calculate_year_score(query_year: int, candidate_year: int) -> float:
    """
    Calculate year match score (0-100).

    - Exact match or +/-1 year: 100%
    - Each additional year difference: -25%
    """
    diff = abs(query_year - candidate_year)

    if diff <= 1:
        return 100.0

    # Each year beyond tolerance reduces by 25%
    penalty = (diff - 1) * 25
    return max(0.0, 100.0 - penalty)


def calculate_movie_score(
    query_title: str,
    query_year: int,
    candidate_title: str,
    candidate_year: int,
) -> float:
    """
    Calculate movie match score: 67% title + 33% year.

    Returns:
        Match score from 0.0 to 100.0, rounded to 2 decimals
    """
    title_score = _calculate_title_score(query_title, candidate_title)
    year_score = _calculate_year_score(query_year, candidate_year)
    return round(title_score * 0.67 + year_score * 0.33, 2)


def calculate_episode_score(query_show: str, candidate_show: str) -> float:
    """
    Calculate episode match score using 100% show name similarity.

    Returns:
        Match score from 0.0 to 100.0, rounded to 2 decimals
    """
    return round(_calculate_title_score(query_show, candidate_show), 2)


class MatcherService:
    """
    Service for scoring and ranking scraped candidates.

    Only candidates of the same kind as the query are scored: a movie is
    never compared to an episode. Subtitles are scored through their target.
    """

    MATCH_THRESHOLD: int = 85
    """Score threshold for automatic acceptance (85%)."""

    def __init__(self, threshold: int = MATCH_THRESHOLD) -> None:
        self.threshold = threshold

    def score(self, media: Media, candidate: Media) -> Optional[float]:
        """
        Score a candidate against a media.

        Returns:
            Score from 0.0 to 100.0, or None when kinds differ
        """
        subtitle = media.type_subtitle()
        if subtitle is not None:
            media = subtitle.media

        movie = media.type_movie()
        candidate_movie = candidate.type_movie()
        if movie is not None and candidate_movie is not None:
            return calculate_movie_score(
                query_title=movie.name,
                query_year=movie.year,
                candidate_title=candidate_movie.name,
                candidate_year=candidate_movie.year,
            )

        episode = media.type_episode()
        candidate_episode = candidate.type_episode()
        if episode is not None and candidate_episode is not None:
            return calculate_episode_score(episode.name, candidate_episode.name)

        return None

    def rank(self, media: Media, candidates: list[Media]) -> list[ScoredCandidate]:
        """
        Score all candidates and return them sorted by score descending.

        Ties keep the scraper order. Candidates of another kind are dropped.
        """
        scored = []
        for candidate in candidates:
            value = self.score(media, candidate)
            if value is not None:
                scored.append(ScoredCandidate(media=candidate, score=value))
        return sorted(scored, key=lambda c: c.score, reverse=True)

    def best_match(self, media: Media, candidates: list[Media]) -> Optional[ScoredCandidate]:
        """
        Return the best candidate above the threshold that is similar to media.

        Returns:
            ScoredCandidate, or None when no candidate qualifies
        """
        subtitle = media.type_subtitle()
        target = subtitle.media if subtitle is not None else media
        for candidate in self.rank(target, candidates):
            if candidate.score < self.threshold:
                break
            if target.similar(candidate.media):
                return candidate
        return None
