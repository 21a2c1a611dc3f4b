"""
Relevance ranking for the add-timezone search box.
"""

from .ranker import WEIGHTS, levenshtein_distance, score, rank, rank_with_scores

__all__ = [
    'WEIGHTS',
    'levenshtein_distance',
    'score',
    'rank',
    'rank_with_scores',
]
