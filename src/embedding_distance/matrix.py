"""
Distance matrix assembly for table output.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from .documents import Document, ScoredPair
from .metrics import DistanceMetric, get_metric

ABSENT = "-"
LABEL_WIDTH = 10


@dataclass
class DistanceMatrix:
    """Row-major grid of display strings, header row and column included."""
    rows: list[list[str]]

    @property
    def size(self) -> int:
        """Number of documents (rows minus the header)."""
        return len(self.rows) - 1

    @property
    def header(self) -> list[str]:
        return self.rows[0]

    @property
    def body(self) -> list[list[str]]:
        return self.rows[1:]

    def cell(self, i: int, j: int) -> str:
        """Get the cell for documents ``i`` (row) and ``j`` (column)."""
        return self.rows[i + 1][j + 1]


def truncate_label(text: str, width: int = LABEL_WIDTH) -> str:
    """
    Shorten a document text for use as a row/column header.

    Texts of at most ``width`` characters are returned unchanged. Longer
    texts keep their first ``width`` characters, cut back to the first
    period among them if there is one, followed by "...".
    """
    if len(text) <= width:
        return text

    head = text[:width]
    period = head.find(".")
    if period != -1:
        head = head[:period]

    return head + "..."


def format_distance(distance: float) -> str:
    return f"{distance:.4f}"


def build_matrix(
    documents: Sequence[Document],
    pairs: Iterable[ScoredPair],
    symmetric: bool = False,
    metric: Optional[Union[str, DistanceMetric]] = None,
    absent: str = ABSENT,
) -> DistanceMatrix:
    """
    Fold scored pairs into an (n+1) x (n+1) grid keyed by input order.

    Args:
        documents: The embedded documents, in any order
        pairs: Output of score_pairs for the same documents
        symmetric: Mirror pairs into the lower triangle and fill the diagonal
        metric: Required with ``symmetric``, used to score the diagonal
        absent: Marker for cells without a score

    Returns:
        DistanceMatrix; without ``symmetric`` only the upper triangle is set
    """
    if symmetric and metric is None:
        raise ValueError("A metric is required to fill the diagonal of a symmetric matrix")

    ordered = sorted(documents, key=lambda doc: doc.source_index)
    n = len(ordered)
    position = {doc.source_index: i for i, doc in enumerate(ordered)}

    labels = [f"{doc.source_index}: {truncate_label(doc.text)}" for doc in ordered]
    rows = [[""] + labels]
    for label in labels:
        rows.append([label] + [absent] * n)

    for pair in pairs:
        i = position[pair.first.source_index]
        j = position[pair.second.source_index]
        rows[i + 1][j + 1] = format_distance(pair.distance)
        if symmetric:
            rows[j + 1][i + 1] = format_distance(pair.distance)

    if symmetric:
        metric = get_metric(metric)
        for i, doc in enumerate(ordered):
            rows[i + 1][i + 1] = format_distance(metric.function(doc.vector, doc.vector))

    return DistanceMatrix(rows=rows)
