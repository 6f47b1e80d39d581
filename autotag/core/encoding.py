"""
Sentence encoder and decoder interfaces.

An encoder turns a sentence into one label per token. A decoder applies
ranked label candidates (one list per token, most probable first) to a
sentence.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, Tuple, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class EncodingProb(BaseModel):
    """A label candidate with its probability."""

    model_config = ConfigDict(frozen=True)

    encoding: str
    prob: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def coerce(cls, candidate: Union["EncodingProb", Tuple[str, float]]) -> "EncodingProb":
        """Accept either an `EncodingProb` or an ``(encoding, prob)`` pair."""
        if isinstance(candidate, EncodingProb):
            return candidate
        encoding, prob = candidate
        return cls(encoding=encoding, prob=prob)


Candidates = Sequence[Union[EncodingProb, Tuple[str, float]]]


@runtime_checkable
class SentenceEncoder(Protocol):
    def encode(self, sentence: Any) -> List[str]: ...


@runtime_checkable
class SentenceDecoder(Protocol):
    def decode(self, labels: Sequence[Candidates], sentence: Any) -> None: ...
