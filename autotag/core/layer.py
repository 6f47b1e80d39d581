"""
Tagging layers.

A layer selects one annotation slot of a token: one of the two
part-of-speech tags, a single morphological feature, the complete feature
map as a string, or a single entry of the miscellaneous column.

Layers are frozen pydantic models, so they compare and hash structurally.
In configuration files they use a compact externally-tagged form:

    "upos"
    "feature_string"
    {"feature": {"feature": "Case", "default": "None"}}
    {"misc": {"feature": "SpaceAfter"}}
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError

from autotag.core.errors import LayerConfigError

LayerConfig = Union[str, Dict[str, Dict[str, Optional[str]]]]


class Layer(BaseModel):
    """Base class of the tagging layers. Use one of the subclasses."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: ClassVar[str] = ""

    def model_post_init(self, __context: Any) -> None:
        if type(self) is Layer:
            raise TypeError("Layer cannot be instantiated, use one of UPos, XPos, Feature, FeatureString or Misc")

    @classmethod
    def from_config(cls, value: Any) -> "Layer":
        """
        Construct a layer from its serialized form.

        Args:
            value: A bare tag (``"upos"``) or a single-key mapping from tag
                to payload (``{"feature": {"feature": "Case"}}``)

        Returns:
            Layer: The layer described by ``value``

        Raises:
            LayerConfigError: If ``value`` does not describe a layer
        """
        if isinstance(value, Layer):
            if type(value) not in _LAYERS_BY_TAG.values():
                raise LayerConfigError(f"Unsupported layer type: {type(value).__name__}")
            return value
        if isinstance(value, str):
            tag, payload = value, None
        elif isinstance(value, Mapping) and len(value) == 1:
            tag, payload = next(iter(value.items()))
        else:
            raise LayerConfigError(f"Expected a layer tag or a single-key mapping, got: {value!r}")

        layer_cls = _LAYERS_BY_TAG.get(tag)
        if layer_cls is None:
            raise LayerConfigError(f"Unknown layer: {tag!r}, expected one of: {', '.join(_LAYERS_BY_TAG)}")

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise LayerConfigError(f"Layer {tag!r} expects a mapping, got: {payload!r}")

        try:
            return layer_cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise LayerConfigError(f"Invalid {tag!r} layer: {exc}") from exc

    def to_config(self) -> LayerConfig:
        """Serialize the layer to its configuration form."""
        return self.tag

    def __str__(self) -> str:
        return self.tag


class UPos(Layer):
    """Universal part-of-speech tag."""

    tag: ClassVar[str] = "upos"


class XPos(Layer):
    """Language-specific part-of-speech tag."""

    tag: ClassVar[str] = "xpos"


class FeatureString(Layer):
    """All morphological features represented as a single string."""

    tag: ClassVar[str] = "feature_string"


class Feature(Layer):
    """A single morphological feature.

    ``default`` is used when the token does not have the feature.
    """

    tag: ClassVar[str] = "feature"

    feature: str
    default: Optional[str] = None

    def to_config(self) -> LayerConfig:
        return {self.tag: {"feature": self.feature, "default": self.default}}

    def __str__(self) -> str:
        return f"{self.tag}:{self.feature}"


class Misc(Layer):
    """A single entry of the miscellaneous column.

    ``default`` is used when the entry is absent. An entry that is present
    without a value yields no value, regardless of the default.
    """

    tag: ClassVar[str] = "misc"

    feature: str
    default: Optional[str] = None

    def to_config(self) -> LayerConfig:
        return {self.tag: {"feature": self.feature, "default": self.default}}

    def __str__(self) -> str:
        return f"{self.tag}:{self.feature}"


_LAYERS_BY_TAG: Dict[str, type] = {
    layer_cls.tag: layer_cls for layer_cls in (UPos, XPos, Feature, FeatureString, Misc)
}


def feature(name: str, default: Optional[str] = None) -> Feature:
    """Construct a feature layer."""
    return Feature(feature=name, default=default)


def misc(name: str, default: Optional[str] = None) -> Misc:
    """Construct a miscellaneous feature layer."""
    return Misc(feature=name, default=default)


def _coerce_layer(value: Any) -> Layer:
    return Layer.from_config(value)


# Field type for pydantic models that hold a layer in its configuration form.
LayerField = Annotated[
    Layer,
    BeforeValidator(_coerce_layer),
    PlainSerializer(lambda layer: layer.to_config()),
]


@runtime_checkable
class LayerValue(Protocol):
    """Sentences that expose layer values of their tokens.

    Node 0 is the root; tokens occupy indices ``1..len(sentence) - 1``.
    Addressing the root raises `RootNodeAccessError`.
    """

    def __len__(self) -> int: ...

    def form(self, idx: int) -> str: ...

    def value(self, idx: int, layer: Layer) -> Optional[str]: ...

    def set_value(self, idx: int, layer: Layer, value: str) -> None: ...
