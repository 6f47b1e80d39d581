"""
Core Package.

This package provides the tagging layers, the layer encoder and the
sentence representation it operates on.
"""

from autotag.core.config import EncodersConfig, NamedEncoder, load_config
from autotag.core.encoding import EncodingProb, SentenceDecoder, SentenceEncoder
from autotag.core.errors import (
    AutotagError,
    ConlluFormatError,
    ContractViolation,
    EncodeError,
    LabelCountMismatchError,
    LayerConfigError,
    MalformedFeatureStringError,
    MissingLabelError,
    RootNodeAccessError,
)
from autotag.core.features import check_feature_entry, parse_features, parse_misc, render_features, render_misc
from autotag.core.layer import Feature, FeatureString, Layer, LayerValue, Misc, UPos, XPos, feature, misc
from autotag.core.layer_encoder import LayerEncoder
from autotag.core.sentence import HasForm, HasLemma, Lemmas, Sentence, SentenceLike, Token

__all__ = [
    # Layers
    "Layer",
    "UPos",
    "XPos",
    "Feature",
    "FeatureString",
    "Misc",
    "feature",
    "misc",
    "LayerValue",
    # Encoding
    "EncodingProb",
    "SentenceEncoder",
    "SentenceDecoder",
    "LayerEncoder",
    # Sentences
    "Sentence",
    "Token",
    "SentenceLike",
    "HasForm",
    "HasLemma",
    "Lemmas",
    # Features
    "parse_features",
    "render_features",
    "parse_misc",
    "render_misc",
    "check_feature_entry",
    # Configuration
    "NamedEncoder",
    "EncodersConfig",
    "load_config",
    # Errors
    "AutotagError",
    "EncodeError",
    "MissingLabelError",
    "MalformedFeatureStringError",
    "LayerConfigError",
    "ConlluFormatError",
    "ContractViolation",
    "RootNodeAccessError",
    "LabelCountMismatchError",
]
