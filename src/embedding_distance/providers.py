"""
Embedding providers.

Each provider turns a list of strings into Documents with one remote
request. Both implementations satisfy the EmbeddingProvider protocol and
are selected by get_embedding_provider() from an EmbeddingConfig.
"""

import logging
from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np
import requests
from openai import OpenAI, OpenAIError

from .config import EmbeddingConfig, Provider
from .documents import Document
from .errors import ProviderError

logger = logging.getLogger(__name__)

COHERE_EMBED_URL = "https://api.cohere.com/v1/embed"
COHERE_INPUT_TYPE = "search_document"


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Contract for embedding a batch of strings."""

    def embed_documents(self, texts: Sequence[str], model: Optional[str] = None) -> list[Document]:
        """Embed ``texts``, returning one Document per text in input order."""
        ...


def _as_embedding(vector, position: int) -> np.ndarray:
    try:
        array = np.asarray(vector, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ProviderError(f"Embedding {position} is not numeric: {e}") from e

    if array.ndim != 1 or array.size == 0:
        raise ProviderError(f"Embedding {position} is not a non-empty vector: {vector!r}")
    return array


def _to_documents(texts: Sequence[str], vectors: list) -> list[Document]:
    if len(vectors) != len(texts):
        raise ProviderError(f"Expected {len(texts)} embeddings, received {len(vectors)}")

    documents = [
        Document(text=text, vector=_as_embedding(vector, i), source_index=i)
        for i, (text, vector) in enumerate(zip(texts, vectors))
    ]
    if documents:
        logger.debug("Received %d embeddings of %d dimensions", len(documents), documents[0].dimensions)
    return documents


class OpenAIEmbeddings:
    """Embeddings from the OpenAI API."""

    def __init__(self, config: EmbeddingConfig, client: Optional[OpenAI] = None):
        self.config = config
        # No SDK retries: exactly one request per run.
        self._client = client or OpenAI(api_key=config.api_key, max_retries=0)

    def embed_documents(self, texts: Sequence[str], model: Optional[str] = None) -> list[Document]:
        model = model or self.config.model_id
        logger.info("Requesting %d embeddings from OpenAI (%s)", len(texts), model)

        try:
            response = self._client.embeddings.create(input=list(texts), model=model)
        except OpenAIError as e:
            raise ProviderError(f"OpenAI embedding request failed: {e}") from e

        data = sorted(response.data, key=lambda item: item.index)
        return _to_documents(texts, [item.embedding for item in data])


class CohereEmbeddings:
    """Embeddings from the Cohere embed endpoint."""

    def __init__(
        self,
        config: EmbeddingConfig,
        session: Optional[requests.Session] = None,
        url: str = COHERE_EMBED_URL,
    ):
        self.config = config
        self.url = url
        self._session = session

    def embed_documents(self, texts: Sequence[str], model: Optional[str] = None) -> list[Document]:
        model = model or self.config.model_id
        logger.info("Requesting %d embeddings from Cohere (%s)", len(texts), model)

        post = self._session.post if self._session is not None else requests.post
        try:
            response = post(
                self.url,
                headers={"Authorization": f"Bearer {self.config.api_key}"},
                json={
                    "texts": list(texts),
                    "model": model,
                    "input_type": COHERE_INPUT_TYPE,
                },
            )
            response.raise_for_status()
            embeddings = response.json()["embeddings"]
        except requests.RequestException as e:
            raise ProviderError(f"Cohere embedding request failed: {e}") from e
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderError(f"Malformed response from Cohere: {e}") from e

        if not isinstance(embeddings, list):
            raise ProviderError("Malformed response from Cohere: 'embeddings' is not a list")

        return _to_documents(texts, embeddings)


def get_embedding_provider(config: EmbeddingConfig) -> EmbeddingProvider:
    """Factory: the provider implementation named by ``config.provider``."""
    if config.provider == Provider.OPENAI:
        return OpenAIEmbeddings(config)
    if config.provider == Provider.COHERE:
        return CohereEmbeddings(config)
    raise ValueError(f"Unknown provider: {config.provider}")
