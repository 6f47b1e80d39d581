"""
Feature-map and misc-map codec.

Features are rendered as `key=value` pairs joined by `|`, sorted by key,
with `_` standing for the empty map. The misc column uses the same syntax
but also allows bare keys (flags) that carry no value.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from autotag.core.constants import EMPTY_FIELD, FEATURE_ASSIGNMENT, FEATURE_SEPARATOR
from autotag.core.errors import MalformedFeatureStringError


def parse_features(text: str) -> Dict[str, str]:
    """
    Parse a feature string into a feature map.

    Args:
        text: Feature string such as ``Case=Nom|Number=Sing`` or ``_``

    Returns:
        Dict[str, str]: Feature map

    Raises:
        MalformedFeatureStringError: If an item is not a ``key=value`` pair
    """
    if text == EMPTY_FIELD:
        return {}
    if not text:
        raise MalformedFeatureStringError(text, "empty string, use '_' for no features")

    features: Dict[str, str] = {}
    for item in text.split(FEATURE_SEPARATOR):
        key, sep, value = item.partition(FEATURE_ASSIGNMENT)
        if not sep:
            raise MalformedFeatureStringError(text, f"feature {item!r} has no value")
        if not key:
            raise MalformedFeatureStringError(text, f"feature {item!r} has no name")
        features[key] = value
    return features


def render_features(features: Mapping[str, str]) -> str:
    """
    Render a feature map as a string.

    Args:
        features: Feature map

    Returns:
        str: Sorted ``key=value`` pairs joined by ``|``, or ``_`` if empty
    """
    if not features:
        return EMPTY_FIELD
    return FEATURE_SEPARATOR.join(
        f"{key}{FEATURE_ASSIGNMENT}{features[key]}" for key in sorted(features)
    )


def parse_misc(text: str) -> Dict[str, Optional[str]]:
    """Parse a misc column; bare keys map to None."""
    misc: Dict[str, Optional[str]] = {}
    if not text or text == EMPTY_FIELD:
        return misc
    for item in text.split(FEATURE_SEPARATOR):
        if not item:
            continue
        key, sep, value = item.partition(FEATURE_ASSIGNMENT)
        misc[key] = value if sep else None
    return misc


def render_misc(misc: Mapping[str, Optional[str]]) -> str:
    """Render a misc map, writing flags as bare keys."""
    if not misc:
        return EMPTY_FIELD
    items = []
    for key in sorted(misc):
        value = misc[key]
        items.append(key if value is None else f"{key}{FEATURE_ASSIGNMENT}{value}")
    return FEATURE_SEPARATOR.join(items)


def check_feature_entry(key: str, value: str) -> None:
    """
    Check that a single ``key=value`` entry survives rendering and parsing.

    Raises:
        MalformedFeatureStringError: If the key contains ``|`` or ``=``, or
            the value contains ``|``
    """
    entry = f"{key}{FEATURE_ASSIGNMENT}{value}"
    if FEATURE_SEPARATOR in key or FEATURE_ASSIGNMENT in key:
        raise MalformedFeatureStringError(entry, f"feature name {key!r} contains a separator")
    if FEATURE_SEPARATOR in value:
        raise MalformedFeatureStringError(entry, f"feature value {value!r} contains {FEATURE_SEPARATOR!r}")
