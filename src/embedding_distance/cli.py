"""
Command-line interface for embedding-distance.
"""

import functools
import json
import logging
import sys
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import EmbeddingConfig, Provider
from .documents import Document
from .errors import EmbeddingDistanceError
from .loader import load_strings, parse_strings
from .matrix import build_matrix
from .metrics import DistanceMetric, get_metric
from .pairs import rank_pairs, score_pairs
from .providers import get_embedding_provider

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]", emoji=False)
    sys.exit(1)


def embedding_options(command):
    """Options shared by every command that embeds and scores strings."""
    options = [
        click.option("--strings", "-s", help="Comma-separated strings to compare"),
        click.option("--file", "-f", "file", type=click.Path(exists=True, dir_okay=False),
                     help="JSON file containing an array of strings"),
        click.option("--provider", "-p", type=click.Choice([p.value for p in Provider]),
                     default=Provider.OPENAI.value, show_default=True, help="Embedding provider"),
        click.option("--embedding-model", "-e", required=True, help="Provider model identifier"),
        click.option("--distance-metric", "-d", type=click.Choice([m.value for m in DistanceMetric]),
                     default=DistanceMetric.COSINE.value, show_default=True, help="Distance metric"),
    ]
    return functools.reduce(lambda cmd, option: option(cmd), reversed(options), command)


def _read_inputs(strings: Optional[str], file: Optional[str]) -> list[str]:
    if (strings is None) == (file is None):
        raise click.UsageError("Provide exactly one of --strings or --file")

    texts = parse_strings(strings) if strings is not None else load_strings(file)

    if len(texts) < 2:
        raise click.UsageError(f"At least 2 strings are required, got {len(texts)}")
    return texts


def _embed(
    strings: Optional[str],
    file: Optional[str],
    provider: str,
    embedding_model: str,
) -> list[Document]:
    texts = _read_inputs(strings, file)
    config = EmbeddingConfig.from_env(provider, embedding_model)
    logger.debug("Embedding %d strings with %s (%s)", len(texts), config.provider.value, config.model_id)
    return get_embedding_provider(config).embed_documents(texts)


@click.group()
@click.version_option(__version__, prog_name="embedding-distance")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """
    Compute pairwise semantic distances between strings.

    Strings are embedded with OpenAI or Cohere (API key read from
    OPENAI_API_KEY or COHERE_API_KEY, or a .env file) and every pair is
    scored with the chosen metric.

    Examples:

        embedding-distance rank -s 'i love bananas,good morning!,bananas' -e text-embedding-ada-002 -d l2

        embedding-distance matrix -f strings.json -p cohere -e embed-english-v3.0
    """
    _configure_logging(verbose)


@main.command()
@embedding_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def rank(
    strings: Optional[str],
    file: Optional[str],
    provider: str,
    embedding_model: str,
    distance_metric: str,
    as_json: bool,
):
    """
    List every pair of strings, most similar first.
    """
    metric = get_metric(distance_metric)
    try:
        documents = _embed(strings, file, provider, embedding_model)
    except EmbeddingDistanceError as e:
        _fail(str(e))

    ranked = rank_pairs(score_pairs(documents, metric), metric)

    if as_json:
        console.print_json(json.dumps([pair.to_dict() for pair in ranked]))
        return

    for pair in ranked:
        console.print(
            f"{pair.distance}: \n* {pair.first.text}\n* {pair.second.text}",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


@main.command()
@embedding_options
@click.option("--symmetric", is_flag=True, help="Fill both triangles and the diagonal")
def matrix(
    strings: Optional[str],
    file: Optional[str],
    provider: str,
    embedding_model: str,
    distance_metric: str,
    symmetric: bool,
):
    """
    Show the pairwise distances as a matrix.
    """
    metric = get_metric(distance_metric)
    try:
        documents = _embed(strings, file, provider, embedding_model)
    except EmbeddingDistanceError as e:
        _fail(str(e))

    grid = build_matrix(documents, score_pairs(documents, metric), symmetric=symmetric, metric=metric)

    table = Table(title=f"{metric.value} ({metric.direction.value.replace('_', ' ')})")
    for label in grid.header:
        table.add_column(Text(label), justify="right")
    for row in grid.body:
        table.add_row(*(Text(cell) for cell in row))

    console.print()
    console.print(table)


if __name__ == "__main__":
    main()
