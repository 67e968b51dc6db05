"""Test helpers for building documents and fake providers."""

import numpy as np

from embedding_distance.documents import Document


def make_documents(texts, vectors):
    return [
        Document(text=text, vector=np.asarray(vector, dtype=np.float64), source_index=i)
        for i, (text, vector) in enumerate(zip(texts, vectors))
    ]


class StaticEmbeddings:
    """Provider double returning fixed vectors keyed by text."""

    def __init__(self, vectors: dict[str, list[float]]):
        self.vectors = vectors
        self.calls = []

    def embed_documents(self, texts, model=None):
        self.calls.append((list(texts), model))
        return make_documents(texts, [self.vectors[text] for text in texts])
