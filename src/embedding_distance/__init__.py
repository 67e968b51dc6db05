"""
embedding-distance: Pairwise semantic distances between strings.

Embed strings with a remote provider and score every pair of them
with cosine, L2, dot product or Manhattan distance.
"""

__version__ = "0.1.0"

from .documents import Document, ScoredPair
from .metrics import (
    cosine_similarity,
    euclidean_distance,
    dot_product_distance,
    manhattan_distance,
    DistanceMetric,
    Direction,
)
from .pairs import score_pairs, rank_pairs
from .matrix import build_matrix, truncate_label, DistanceMatrix

__all__ = [
    "Document",
    "ScoredPair",
    "cosine_similarity",
    "euclidean_distance",
    "dot_product_distance",
    "manhattan_distance",
    "DistanceMetric",
    "Direction",
    "score_pairs",
    "rank_pairs",
    "build_matrix",
    "truncate_label",
    "DistanceMatrix",
]
