"""
Data model shared by the scoring, ranking and matrix stages.
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class Document:
    """An input string with its embedding and position in the input list."""
    text: str
    vector: np.ndarray = field(compare=False, repr=False)
    source_index: int

    @property
    def dimensions(self) -> int:
        return int(self.vector.shape[0])


@dataclass(frozen=True)
class ScoredPair:
    """A scored unordered pair, with ``first`` preceding ``second`` in the input."""
    distance: float
    first: Document
    second: Document

    @property
    def key(self) -> tuple[int, int]:
        """Canonical identity of the pair: the two source indices, ascending."""
        return (self.first.source_index, self.second.source_index)

    def to_dict(self) -> dict:
        return {
            "distance": self.distance,
            "first": self.first.text,
            "second": self.second.text,
        }
