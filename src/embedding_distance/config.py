"""
Provider selection and credentials.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from .errors import MissingCredentialError


class Provider(str, Enum):
    """Supported embedding providers."""

    OPENAI = "openai"
    COHERE = "cohere"


API_KEY_ENV = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.COHERE: "COHERE_API_KEY",
}


@dataclass(frozen=True)
class EmbeddingConfig:
    """Everything an embedding provider needs for one run."""
    provider: Provider
    api_key: str = field(repr=False)
    model_id: str

    @classmethod
    def from_env(
        cls,
        provider: Union[str, Provider],
        model_id: str,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "EmbeddingConfig":
        """
        Build a config, reading the API key from the provider's variable.

        When ``environ`` is not given, a ``.env`` file in the working
        directory is loaded first and the process environment is used.

        Raises:
            MissingCredentialError: if the variable is unset or empty
        """
        provider = Provider(provider)
        if environ is None:
            load_dotenv()
            environ = os.environ

        env_var = API_KEY_ENV[provider]
        api_key = environ.get(env_var)
        if not api_key:
            raise MissingCredentialError(env_var)

        return cls(provider=provider, api_key=api_key, model_id=model_id)
