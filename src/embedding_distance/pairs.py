"""
Pairwise scoring and ranking of embedded documents.
"""

import logging
import math
from itertools import combinations
from typing import Iterable, Sequence, Union

from .documents import Document, ScoredPair
from .metrics import Direction, DistanceMetric, get_metric

logger = logging.getLogger(__name__)


def score_pairs(
    documents: Sequence[Document],
    metric: Union[str, DistanceMetric] = DistanceMetric.COSINE,
) -> list[ScoredPair]:
    """
    Score every unordered pair of distinct documents exactly once.

    Pairs are keyed on the documents' source indices, never on their text,
    so repeated input strings are still compared against each other.

    Args:
        documents: Embedded documents, at least two
        metric: Metric name or DistanceMetric

    Returns:
        List of ScoredPair in enumeration order, C(n, 2) entries

    Raises:
        ValueError: with fewer than two documents or a repeated source index
    """
    if len(documents) < 2:
        raise ValueError(f"At least 2 documents are required, got {len(documents)}")

    metric = get_metric(metric)
    ordered = sorted(documents, key=lambda doc: doc.source_index)

    for before, after in zip(ordered, ordered[1:]):
        if before.source_index == after.source_index:
            raise ValueError(f"Duplicate source index {after.source_index}: {before.text!r} and {after.text!r}")

    scored = []
    for first, second in combinations(ordered, 2):
        distance = metric.function(first.vector, second.vector)
        scored.append(ScoredPair(distance=distance, first=first, second=second))

    logger.debug("Scored %d pairs of %d documents with %s", len(scored), len(ordered), metric.value)
    return scored


def rank_pairs(
    pairs: Iterable[ScoredPair],
    direction: Union[Direction, DistanceMetric],
) -> list[ScoredPair]:
    """
    Order scored pairs from most to least similar.

    Accepts either a Direction or a DistanceMetric (whose direction is used).
    The sort is stable: ties keep their enumeration order. NaN distances
    are placed last for either direction.
    """
    if isinstance(direction, DistanceMetric):
        direction = direction.direction

    sign = -1.0 if direction == Direction.HIGHER_IS_BETTER else 1.0
    return sorted(
        pairs,
        key=lambda pair: (math.isnan(pair.distance), sign * pair.distance),
    )
