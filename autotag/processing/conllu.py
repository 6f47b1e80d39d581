"""
CoNLL-U reading and writing.

Reads ten-column CoNLL-U into `Sentence` objects and writes them back.
Multiword token ranges (``1-2``) and empty nodes (``1.1``) are not tokens;
they are carried through unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from autotag.core.constants import (
    COLUMN_SEPARATOR,
    COMMENT_PREFIX,
    EMPTY_FIELD,
    EMPTY_NODE_SEPARATOR,
    NUM_CONLLU_COLUMNS,
    RANGE_SEPARATOR,
)
from autotag.core.errors import ConlluFormatError, MalformedFeatureStringError
from autotag.core.features import parse_features, parse_misc, render_features, render_misc
from autotag.core.sentence import Sentence, Token

logger = logging.getLogger(__name__)


def _optional(field: str) -> Optional[str]:
    return None if field == EMPTY_FIELD else field


def _field(value: Optional[object]) -> str:
    return EMPTY_FIELD if value is None else str(value)


def parse_token_line(line: str, line_number: Optional[int] = None) -> Token:
    """Parse a single token line."""
    columns = line.split(COLUMN_SEPARATOR)
    if len(columns) != NUM_CONLLU_COLUMNS:
        raise ConlluFormatError(
            f"expected {NUM_CONLLU_COLUMNS} columns, found {len(columns)}",
            line_number,
        )
    _, form, lemma, upos, xpos, feats, head, deprel, deps, misc = columns

    try:
        features = parse_features(feats)
    except MalformedFeatureStringError as exc:
        raise ConlluFormatError(str(exc), line_number) from exc

    head_idx: Optional[int] = None
    if head != EMPTY_FIELD:
        try:
            head_idx = int(head)
        except ValueError as exc:
            raise ConlluFormatError(f"invalid head: {head!r}", line_number) from exc

    return Token(
        form=form,
        lemma=_optional(lemma),
        upos=_optional(upos),
        xpos=_optional(xpos),
        features=features,
        head=head_idx,
        deprel=_optional(deprel),
        deps=_optional(deps),
        misc=parse_misc(misc),
    )


def read_sentences(lines: Iterable[str]) -> Iterator[Sentence]:
    """
    Read sentences from CoNLL-U lines.

    Comment lines are kept as written. Multiword token ranges (``1-2``) and
    empty nodes (``1.1``) are not tokens; they are kept verbatim in
    `Sentence.extra_lines` so that writing the sentence restores them.

    Args:
        lines: CoNLL-U lines, with or without trailing newlines

    Yields:
        Sentence: Each sentence in the input

    Raises:
        ConlluFormatError: If a line cannot be parsed or token ids are not
            consecutive
    """
    tokens: List[Token] = []
    comments: List[str] = []
    extra_lines: Dict[int, List[str]] = {}

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        if not line.strip():
            if tokens:
                yield Sentence(tokens, comments, extra_lines)
            elif comments or extra_lines:
                raise ConlluFormatError("sentence without tokens", line_number)
            tokens, comments, extra_lines = [], [], {}
            continue

        if line.startswith(COMMENT_PREFIX):
            comments.append(line)
            continue

        token_id = line.split(COLUMN_SEPARATOR, 1)[0]
        if RANGE_SEPARATOR in token_id or EMPTY_NODE_SEPARATOR in token_id:
            extra_lines.setdefault(len(tokens) + 1, []).append(line)
            continue
        if token_id != str(len(tokens) + 1):
            raise ConlluFormatError(
                f"expected token id {len(tokens) + 1}, found {token_id!r}",
                line_number,
            )
        tokens.append(parse_token_line(line, line_number))

    if tokens:
        yield Sentence(tokens, comments, extra_lines)
    elif comments or extra_lines:
        raise ConlluFormatError("sentence without tokens")


def _comment_line(comment: str) -> str:
    if comment.startswith(COMMENT_PREFIX):
        return comment
    return f"{COMMENT_PREFIX} {comment}"


def format_sentence(sentence: Sentence) -> str:
    """Render a sentence as CoNLL-U, including the terminating blank line."""
    lines = [_comment_line(comment) for comment in sentence.comments]
    for idx, token in enumerate(sentence, start=1):
        lines.extend(sentence.extra_lines.get(idx, []))
        columns = [
            str(idx),
            token.form,
            _field(token.lemma),
            _field(token.upos),
            _field(token.xpos),
            render_features(token.features),
            _field(token.head),
            _field(token.deprel),
            _field(token.deps),
            render_misc(token.misc),
        ]
        lines.append(COLUMN_SEPARATOR.join(columns))
    lines.extend(sentence.extra_lines.get(len(sentence), []))
    return "\n".join(lines) + "\n\n"


def write_sentences(sentences: Iterable[Sentence]) -> str:
    """Render sentences as a CoNLL-U document."""
    return "".join(format_sentence(sentence) for sentence in sentences)


def load_sentences(path: Union[str, Path]) -> List[Sentence]:
    """Read all sentences from a CoNLL-U file."""
    with open(path, "r", encoding="utf-8") as f:
        sentences = list(read_sentences(f))
    logger.debug(f"Read {len(sentences)} sentences from {path}")
    return sentences


def save_sentences(path: Union[str, Path], sentences: Iterable[Sentence]) -> None:
    """Write sentences to a CoNLL-U file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(write_sentences(sentences))
