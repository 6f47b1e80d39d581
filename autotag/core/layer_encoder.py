"""
Layer encoder: sentence layer values to labels and back.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from autotag.core.encoding import Candidates, EncodingProb
from autotag.core.errors import LabelCountMismatchError, MissingLabelError
from autotag.core.layer import LayerField, LayerValue

logger = logging.getLogger(__name__)


class LayerEncoder(BaseModel):
    """Encode sentences using a layer.

    Serializes as ``{"layer": <layer config>}``, e.g. ``{"layer": "upos"}``.
    """

    model_config = ConfigDict(frozen=True)

    layer: LayerField

    def __init__(self, layer: Optional[Any] = None, **data: Any) -> None:
        if layer is not None:
            data["layer"] = layer
        super().__init__(**data)

    def encode(self, sentence: LayerValue) -> List[str]:
        """
        Encode the layer values of a sentence.

        Args:
            sentence: Sentence with a root at index 0

        Returns:
            List[str]: One label per token, in token order

        Raises:
            MissingLabelError: If a token has no value for the layer
        """
        encoding: List[str] = []
        for idx in range(1, len(sentence)):
            label = sentence.value(idx, self.layer)
            if label is None:
                raise MissingLabelError(sentence.form(idx))
            encoding.append(label)
        return encoding

    def decode(self, labels: Sequence[Candidates], sentence: LayerValue) -> None:
        """
        Write the best label of each token into the sentence.

        Tokens whose candidate list is empty are left unchanged.

        Args:
            labels: Per-token label candidates, most probable first
            sentence: Sentence with a root at index 0

        Raises:
            LabelCountMismatchError: If there is not exactly one candidate
                list per token
        """
        if len(labels) != len(sentence) - 1:
            raise LabelCountMismatchError(
                f"Labels and sentence length mismatch: {len(labels)} labels, {len(sentence) - 1} tokens"
            )

        for idx, candidates in enumerate(labels, start=1):
            if not candidates:
                logger.debug(f"No {self.layer} candidates for token {idx}, leaving it unchanged")
                continue
            best = EncodingProb.coerce(candidates[0])
            sentence.set_value(idx, self.layer, best.encoding)

    def encode_all(self, sentences: Iterable[LayerValue]) -> List[List[str]]:
        """Encode a batch of sentences."""
        return [self.encode(sentence) for sentence in sentences]

    def decode_all(self, labels: Sequence[Sequence[Candidates]], sentences: Sequence[LayerValue]) -> None:
        """Decode a batch of sentences, one label sequence per sentence."""
        if len(labels) != len(sentences):
            raise LabelCountMismatchError(
                f"Batch size mismatch: {len(labels)} label sequences, {len(sentences)} sentences"
            )
        for sentence_labels, sentence in zip(labels, sentences):
            self.decode(sentence_labels, sentence)
