"""
Encoder configuration.

Defines the typed configuration for a set of named layer encoders, as read
from a JSON file:

    {
        "encoders": [
            {"name": "pos", "layer": "upos"},
            {"name": "case", "layer": {"feature": {"feature": "Case", "default": "_"}}}
        ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, Field, field_validator

from autotag.core.layer import LayerField
from autotag.core.layer_encoder import LayerEncoder


class NamedEncoder(BaseModel):
    """A named layer encoder."""

    name: str
    layer: LayerField


class EncodersConfig(BaseModel):
    """Configuration for a set of named layer encoders."""

    encoders: List[NamedEncoder] = Field(default_factory=list)

    @field_validator("encoders")
    @classmethod
    def _unique_names(cls, encoders: List[NamedEncoder]) -> List[NamedEncoder]:
        seen = set()
        for entry in encoders:
            if entry.name in seen:
                raise ValueError(f"Duplicate encoder name: {entry.name}")
            seen.add(entry.name)
        return encoders

    def layer_encoders(self) -> Dict[str, LayerEncoder]:
        """Return the encoders by name, in configuration order."""
        return {entry.name: LayerEncoder(entry.layer) for entry in self.encoders}

    def encoder(self, name: str) -> LayerEncoder:
        """
        Get the encoder with the given name.

        Raises:
            KeyError: If no encoder has that name
        """
        for entry in self.encoders:
            if entry.name == name:
                return LayerEncoder(entry.layer)
        raise KeyError(f"No encoder named {name!r}")


def load_config(path: Union[str, Path]) -> EncodersConfig:
    """
    Load an encoder configuration from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        EncodersConfig: The validated configuration
    """
    with open(path, "r", encoding="utf-8") as f:
        return EncodersConfig.model_validate(json.load(f))
