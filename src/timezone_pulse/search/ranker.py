"""
Timezone Search Ranker

Scores timezone candidates against a free-text query for the add-timezone
dialog and returns them most relevant first.

================================================================================
SCORING MODEL
================================================================================

Additive; every term is independent and a candidate can collect several:

    exact match on any field          +100
    any field starts with query        +80
    any field contains query           +60
    fuzzy: 40 × max(0, 1 − d/len(q))   0..40   (d = min edit distance)
    id in recently-used set            +30
    id in popular set                  +20
    rover site (Mars/Jezero)           +50

Fields are name, id, city, country and abbreviation, lower-cased, with
missing fields taken as ''. Scores are unbounded above.

An empty (or whitespace-only) query is "browse all" mode: ranking returns
the input unchanged without scoring anything.
================================================================================
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..geo.zone_catalog import POPULAR_TIMEZONES, ROVER_ZONE_ID
from ..interfaces.zone_models import TimezoneCandidate

logger = logging.getLogger(__name__)

WEIGHTS = {
    'exact_match': 100,
    'starts_with': 80,
    'contains': 60,
    'fuzzy_match': 40,
    'recently_used': 30,
    'popular': 20,
    'rover_location': 50,
}


def levenshtein_distance(field: str, query: str) -> int:
    """
    Edit distance (insert/delete/substitute cost 1).

    The table has one row per query prefix and one column per field prefix.
    """
    track = [[0] * (len(field) + 1) for _ in range(len(query) + 1)]

    for i in range(len(field) + 1):
        track[0][i] = i
    for j in range(len(query) + 1):
        track[j][0] = j

    for j in range(1, len(query) + 1):
        for i in range(1, len(field) + 1):
            indicator = 0 if field[i - 1] == query[j - 1] else 1
            track[j][i] = min(
                track[j][i - 1] + 1,
                track[j - 1][i] + 1,
                track[j - 1][i - 1] + indicator,
            )

    return track[len(query)][len(field)]


def score(
    candidate: TimezoneCandidate,
    query: str,
    recently_used: Optional[Iterable[str]] = None
) -> float:
    """
    Relevance of one candidate for ``query``.

    Args:
        candidate: Timezone row to score
        query: Search text (case-insensitive)
        recently_used: Zone ids the user picked recently

    Returns:
        Additive, unnormalized score (>= 0)
    """
    recent = frozenset(recently_used or ())
    needle = query.lower()
    fields = candidate.search_fields()
    total = 0.0

    if any(f == needle for f in fields):
        total += WEIGHTS['exact_match']
    if any(f.startswith(needle) for f in fields):
        total += WEIGHTS['starts_with']
    if any(needle in f for f in fields):
        total += WEIGHTS['contains']

    # Fuzzy term is undefined for an empty needle
    if needle:
        min_distance = min(levenshtein_distance(f, needle) for f in fields)
        total += max(0.0, WEIGHTS['fuzzy_match'] * (1 - min_distance / len(needle)))

    if candidate.id in recent:
        total += WEIGHTS['recently_used']
    if candidate.id in POPULAR_TIMEZONES:
        total += WEIGHTS['popular']
    if candidate.id == ROVER_ZONE_ID:
        total += WEIGHTS['rover_location']

    return total


def rank_with_scores(
    candidates: Sequence[TimezoneCandidate],
    query: str,
    recently_used: Optional[Iterable[str]] = None
) -> List[Tuple[TimezoneCandidate, Optional[float]]]:
    """
    Candidates paired with their scores, best first.

    In browse-all mode (blank query) the order is the input order and every
    score is None.
    """
    if not query.strip():
        return [(c, None) for c in candidates]

    recent = frozenset(recently_used or ())
    scored = [(c, score(c, query, recent)) for c in candidates]
    # sorted() is stable, so equal scores keep input order
    scored = sorted(scored, key=lambda pair: pair[1], reverse=True)

    if scored:
        best, best_score = scored[0]
        logger.debug(f"Search '{query}': {len(scored)} candidates, top {best.id} ({best_score:.1f})")
    return scored


def rank(
    candidates: Sequence[TimezoneCandidate],
    query: str,
    recently_used: Optional[Iterable[str]] = None
) -> List[TimezoneCandidate]:
    """Candidates ordered by descending relevance; ties keep input order."""
    if not query.strip():
        return list(candidates)
    return [c for c, _ in rank_with_scores(candidates, query, recently_used)]
