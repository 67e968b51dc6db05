"""Shared fixtures for embedding-distance tests."""

import pytest

from helpers import StaticEmbeddings, make_documents


@pytest.fixture
def banana_documents():
    """Two identical texts and one different one."""
    return make_documents(
        ["bananas", "bananas", "good morning"],
        [[1.0, 0.0], [1.0, 0.0], [0.0, 1.0]],
    )


@pytest.fixture
def static_provider():
    return StaticEmbeddings({
        "bananas": [1.0, 0.0],
        "good morning": [0.0, 1.0],
        "muffins": [0.6, 0.8],
        "i :heart: you": [1.0, 0.0],
        ":heart:": [0.6, 0.8],
        "b": [0.0, 1.0],
    })
