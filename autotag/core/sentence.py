"""
Dependency-tree sentences.

A `Sentence` holds a synthetic root at node index 0 followed by its tokens
at indices ``1..n``. It implements the `LayerValue` capability used by the
layer encoder and the `Lemmas` capability for lemma access. Every indexed
operation rejects the root with `RootNodeAccessError`.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from autotag.core.constants import ROOT_INDEX
from autotag.core.errors import RootNodeAccessError
from autotag.core.features import check_feature_entry, parse_features, render_features
from autotag.core.layer import Feature, FeatureString, Layer, Misc, UPos, XPos


class Token(BaseModel):
    """A token with its annotation slots."""

    form: str
    lemma: Optional[str] = None
    upos: Optional[str] = None
    xpos: Optional[str] = None
    features: Dict[str, str] = Field(default_factory=dict)
    head: Optional[int] = None
    deprel: Optional[str] = None
    deps: Optional[str] = None
    misc: Dict[str, Optional[str]] = Field(default_factory=dict)


@runtime_checkable
class HasForm(Protocol):
    form: str


@runtime_checkable
class HasLemma(Protocol):
    lemma: Optional[str]


@runtime_checkable
class SentenceLike(Protocol):
    """Sentences with a root node and indexed tokens."""

    def __len__(self) -> int: ...

    def token(self, idx: int) -> Optional[Token]: ...


@runtime_checkable
class Lemmas(Protocol):
    """Sentences that expose the forms and lemmas of their tokens."""

    def __len__(self) -> int: ...

    def form(self, idx: int) -> str: ...

    def lemma(self, idx: int) -> Optional[str]: ...

    def set_lemma(self, idx: int, lemma: str) -> None: ...


def token_value(token: Token, layer: Layer) -> Optional[str]:
    """Read the slot selected by ``layer`` from a token."""
    if isinstance(layer, UPos):
        return token.upos
    if isinstance(layer, XPos):
        return token.xpos
    if isinstance(layer, FeatureString):
        return render_features(token.features)
    if isinstance(layer, Feature):
        return token.features.get(layer.feature, layer.default)
    if isinstance(layer, Misc):
        if layer.feature not in token.misc:
            return layer.default
        # A flag without a value is never a label.
        return token.misc[layer.feature]
    raise TypeError(f"Unsupported layer: {layer!r}")


def set_token_value(token: Token, layer: Layer, value: str) -> None:
    """
    Write ``value`` into the slot selected by ``layer``.

    Raises:
        MalformedFeatureStringError: If ``layer`` is `FeatureString` and
            ``value`` is not a valid feature string, or ``layer`` is `Feature`
            or `Misc` and the entry would not parse back
    """
    if isinstance(layer, UPos):
        token.upos = value
    elif isinstance(layer, XPos):
        token.xpos = value
    elif isinstance(layer, FeatureString):
        token.features = parse_features(value)
    elif isinstance(layer, Feature):
        check_feature_entry(layer.feature, value)
        token.features[layer.feature] = value
    elif isinstance(layer, Misc):
        check_feature_entry(layer.feature, value)
        token.misc[layer.feature] = value
    else:
        raise TypeError(f"Unsupported layer: {layer!r}")


class Sentence:
    """A sentence of tokens preceded by a root node.

    ``comments`` holds the sentence-level comment lines. ``extra_lines`` holds
    lines that are not tokens, such as multiword token ranges and empty
    nodes, keyed by the index of the token they precede. Lines after the last
    token are keyed by ``len(sentence)``.
    """

    def __init__(
        self,
        tokens: Iterable[Token] = (),
        comments: Optional[Iterable[str]] = None,
        extra_lines: Optional[Mapping[int, Iterable[str]]] = None,
    ) -> None:
        self._tokens: List[Token] = list(tokens)
        self.comments: List[str] = list(comments or [])
        self.extra_lines: Dict[int, List[str]] = {
            idx: list(lines) for idx, lines in (extra_lines or {}).items()
        }

    def __len__(self) -> int:
        return len(self._tokens) + 1

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return (
            self._tokens == other._tokens
            and self.comments == other.comments
            and self.extra_lines == other.extra_lines
        )

    def __repr__(self) -> str:
        forms = " ".join(token.form for token in self._tokens)
        return f"Sentence({forms!r})"

    @property
    def tokens(self) -> List[Token]:
        return self._tokens

    def is_root(self, idx: int) -> bool:
        return idx == ROOT_INDEX

    def token(self, idx: int) -> Optional[Token]:
        """Return the token at ``idx``, or None for the root."""
        self._check_bounds(idx)
        if self.is_root(idx):
            return None
        return self._tokens[idx - 1]

    def _check_bounds(self, idx: int) -> None:
        if idx < 0 or idx >= len(self):
            raise IndexError(f"Node index {idx} out of range for sentence of {len(self)} nodes")

    def _token_at(self, idx: int, action: str) -> Token:
        self._check_bounds(idx)
        if self.is_root(idx):
            raise RootNodeAccessError(f"Attempted to {action} root node")
        return self._tokens[idx - 1]

    # LayerValue

    def form(self, idx: int) -> str:
        return self._token_at(idx, "get form of").form

    def value(self, idx: int, layer: Layer) -> Optional[str]:
        return token_value(self._token_at(idx, "get value from"), layer)

    def set_value(self, idx: int, layer: Layer, value: str) -> None:
        set_token_value(self._token_at(idx, "set value on"), layer, value)

    # Lemmas

    def lemma(self, idx: int) -> Optional[str]:
        return self._token_at(idx, "get lemma from").lemma

    def set_lemma(self, idx: int, lemma: str) -> None:
        self._token_at(idx, "set lemma on").lemma = lemma
