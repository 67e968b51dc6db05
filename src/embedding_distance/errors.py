"""
Exceptions raised by embedding-distance.
"""


class EmbeddingDistanceError(Exception):
    """Base class for all fatal errors reported by the CLI."""


class MissingCredentialError(EmbeddingDistanceError):
    """The provider's API key is not set in the environment."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} not set")


class ProviderError(EmbeddingDistanceError):
    """The embedding request failed or returned an unusable response."""


class InputFormatError(EmbeddingDistanceError):
    """The input strings could not be loaded."""
