"""
Vector distance and similarity functions.
"""

from enum import Enum
from typing import Callable, Sequence, Union

import numpy as np

VectorLike = Union[np.ndarray, Sequence[float]]


def _as_vector(v: VectorLike) -> np.ndarray:
    return np.asarray(v, dtype=np.float64)


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """Compute cosine similarity between two vectors."""
    a = _as_vector(a)
    b = _as_vector(b)
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)

    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))


def euclidean_distance(a: VectorLike, b: VectorLike) -> float:
    """Compute the L2 distance between two vectors."""
    diff = _as_vector(a) - _as_vector(b)
    return float(np.sqrt(np.sum(diff * diff)))


def dot_product_distance(a: VectorLike, b: VectorLike) -> float:
    """Compute the unnormalized dot product (a similarity, despite the name)."""
    return float(np.dot(_as_vector(a), _as_vector(b)))


def manhattan_distance(a: VectorLike, b: VectorLike) -> float:
    """Compute the L1 distance between two vectors."""
    return float(np.sum(np.abs(_as_vector(a) - _as_vector(b))))


class Direction(str, Enum):
    """Which end of a metric's range means "more similar"."""

    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"


class DistanceMetric(str, Enum):
    """Metrics selectable from the command line."""

    COSINE = "cosine"
    L2 = "l2"
    DOT = "dot"
    MANHATTAN = "manhattan"

    @property
    def function(self) -> Callable[[VectorLike, VectorLike], float]:
        return _METRIC_FUNCTIONS[self]

    @property
    def direction(self) -> Direction:
        if self in (DistanceMetric.COSINE, DistanceMetric.DOT):
            return Direction.HIGHER_IS_BETTER
        return Direction.LOWER_IS_BETTER


_METRIC_FUNCTIONS = {
    DistanceMetric.COSINE: cosine_similarity,
    DistanceMetric.L2: euclidean_distance,
    DistanceMetric.DOT: dot_product_distance,
    DistanceMetric.MANHATTAN: manhattan_distance,
}


def get_metric(metric: Union[str, DistanceMetric]) -> DistanceMetric:
    """Resolve a metric name such as ``"l2"`` to a :class:`DistanceMetric`."""
    if isinstance(metric, DistanceMetric):
        return metric
    try:
        return DistanceMetric(metric.lower())
    except ValueError:
        choices = ", ".join(m.value for m in DistanceMetric)
        raise ValueError(f"Unknown distance metric: {metric} (expected one of {choices})")
