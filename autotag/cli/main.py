"""
Command-line interface: encode, decode, layers.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError
from tqdm import tqdm

from autotag.core.config import load_config
from autotag.core.constants import COLUMN_SEPARATOR, LAYER_TAGS
from autotag.core.encoding import EncodingProb
from autotag.core.errors import ConlluFormatError, LayerConfigError, MalformedFeatureStringError, MissingLabelError
from autotag.core.layer import Layer
from autotag.core.layer_encoder import LayerEncoder
from autotag.core.sentence import Sentence
from autotag.processing.conllu import load_sentences, write_sentences

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

LAYER_HELP = 'Layer tag (upos, xpos, feature_string), tag:name (feature:Case, misc:SpaceAfter) or JSON'


def parse_layer_option(value: str) -> Layer:
    """Parse a layer given on the command line."""
    text = value.strip()
    try:
        if text.startswith("{"):
            return Layer.from_config(json.loads(text))
        tag, sep, name = text.partition(":")
        if sep:
            return Layer.from_config({tag: {"feature": name}})
        return Layer.from_config(text)
    except (json.JSONDecodeError, LayerConfigError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--layer") from exc


def resolve_encoder(layer: Optional[str], config: Optional[Path], name: Optional[str]) -> LayerEncoder:
    if config is not None:
        if layer is not None:
            raise typer.BadParameter("--layer cannot be combined with --config", param_hint="--layer")
        if name is None:
            raise typer.BadParameter("--name is required with --config", param_hint="--name")
        try:
            encoders = load_config(config)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise typer.BadParameter(f"{config}: {exc}", param_hint="--config") from exc
        try:
            return encoders.encoder(name)
        except KeyError as exc:
            raise typer.BadParameter(str(exc), param_hint="--name") from exc
    if layer is None:
        raise typer.BadParameter("either --layer or --config is required", param_hint="--layer")
    return LayerEncoder(parse_layer_option(layer))


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _load(input_path: Path) -> List[Sentence]:
    try:
        return load_sentences(input_path)
    except ConlluFormatError as exc:
        _fail(f"{input_path}: {exc}")


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def encode(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    layer: Optional[str] = typer.Option(None, "--layer", "-l", help=LAYER_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, readable=True),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Encoder name in the configuration"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
) -> None:
    """Write one line of tab-separated labels per sentence."""
    encoder = resolve_encoder(layer, config, name)
    sentences = _load(input_path)

    lines = []
    for sentence in tqdm(sentences, desc="Encoding", disable=not progress):
        try:
            labels = encoder.encode(sentence)
        except MissingLabelError as exc:
            _fail(str(exc))
        lines.append(COLUMN_SEPARATOR.join(labels))

    logger.debug(f"Encoded {len(lines)} sentences with layer {encoder.layer}")
    _emit("".join(f"{line}\n" for line in lines), output)


@app.command()
def decode(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    labels_path: Path = typer.Argument(..., exists=True, readable=True),
    layer: Optional[str] = typer.Option(None, "--layer", "-l", help=LAYER_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, readable=True),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Encoder name in the configuration"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
) -> None:
    """Apply tab-separated labels (one line per sentence) and write CoNLL-U.

    An empty label leaves the token unchanged.
    """
    encoder = resolve_encoder(layer, config, name)
    sentences = _load(input_path)
    label_lines = labels_path.read_text(encoding="utf-8").splitlines()

    if len(label_lines) != len(sentences):
        _fail(f"{labels_path} has {len(label_lines)} lines, {input_path} has {len(sentences)} sentences")

    for sent_idx, (sentence, line) in enumerate(
        tqdm(zip(sentences, label_lines), desc="Decoding", total=len(sentences), disable=not progress),
        start=1,
    ):
        candidates = [[EncodingProb(encoding=label)] if label else [] for label in line.split(COLUMN_SEPARATOR)]
        if len(candidates) != len(sentence) - 1:
            _fail(f"sentence {sent_idx}: {len(candidates)} labels for {len(sentence) - 1} tokens")
        try:
            encoder.decode(candidates, sentence)
        except MalformedFeatureStringError as exc:
            _fail(f"sentence {sent_idx}: {exc}")

    _emit(write_sentences(sentences), output)


@app.command()
def layers() -> None:
    """List the supported layer tags."""
    for tag in LAYER_TAGS:
        typer.echo(tag)


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
