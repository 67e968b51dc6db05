"""
Unit tests for the distance matrix.
"""

import numpy as np
import pytest

from helpers import make_documents
from embedding_distance.matrix import ABSENT, build_matrix, truncate_label
from embedding_distance.pairs import score_pairs


# ---------------------------------------------------------------------------
# LABEL TESTS
# ---------------------------------------------------------------------------


class TestTruncateLabel:
    """Test header label truncation."""

    def test_short_text_unchanged(self):
        assert truncate_label("hello") == "hello"
        assert truncate_label("exactly10!") == "exactly10!"

    def test_long_text_cut_at_ten(self):
        assert truncate_label("hello world example") == "hello worl..."

    def test_cut_at_period(self):
        assert truncate_label("Hi. How are you today") == "Hi..."

    def test_period_after_ten_ignored(self):
        assert truncate_label("abcdefghijkl.mn") == "abcdefghij..."

    def test_short_text_with_period_unchanged(self):
        assert truncate_label("a.b") == "a.b"


# ---------------------------------------------------------------------------
# BUILD MATRIX TESTS
# ---------------------------------------------------------------------------


@pytest.fixture
def hello_documents():
    return make_documents(
        ["hello", "world", "hello world example"],
        [[1.0, 0.0], [0.0, 1.0], [3.0, 4.0]],
    )


class TestBuildMatrix:
    """Test build_matrix grid layout."""

    def test_shape_and_headers(self, hello_documents):
        grid = build_matrix(hello_documents, score_pairs(hello_documents, "l2"))

        assert len(grid.rows) == 4
        assert all(len(row) == 4 for row in grid.rows)
        assert grid.rows[0][0] == ""
        assert grid.header[1:] == ["0: hello", "1: world", "2: hello worl..."]
        assert [row[0] for row in grid.body] == grid.header[1:]
        assert grid.size == 3

    def test_upper_triangle_only(self, hello_documents):
        grid = build_matrix(hello_documents, score_pairs(hello_documents, "l2"))

        assert grid.cell(0, 1) == "1.4142"
        assert grid.cell(0, 2) == f"{np.hypot(2, 4):.4f}"
        assert grid.cell(1, 2) == f"{np.hypot(3, 3):.4f}"
        for i in range(3):
            assert grid.cell(i, i) == ABSENT
            for j in range(i):
                assert grid.cell(i, j) == ABSENT

    def test_indices_follow_input_order(self, hello_documents):
        grid = build_matrix(list(reversed(hello_documents)), score_pairs(hello_documents, "l2"))
        assert grid.header[1] == "0: hello"
        assert grid.cell(0, 1) == "1.4142"

    def test_custom_absent_marker(self, hello_documents):
        grid = build_matrix(hello_documents, score_pairs(hello_documents, "l2"), absent="n/a")
        assert grid.cell(1, 0) == "n/a"

    def test_symmetric_fills_everything(self, hello_documents):
        pairs = score_pairs(hello_documents, "cosine")
        grid = build_matrix(hello_documents, pairs, symmetric=True, metric="cosine")

        for i in range(3):
            assert grid.cell(i, i) == "1.0000"
            for j in range(3):
                assert grid.cell(i, j) == grid.cell(j, i)
        assert ABSENT not in [cell for row in grid.body for cell in row[1:]]

    def test_symmetric_requires_metric(self, hello_documents):
        with pytest.raises(ValueError, match="metric is required"):
            build_matrix(hello_documents, score_pairs(hello_documents, "l2"), symmetric=True)
