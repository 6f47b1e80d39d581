"""
Error types.

Data errors derive from `AutotagError` and are meant to be reported to the
caller. Contract violations derive from `ContractViolation` (an
`AssertionError`) and signal caller misuse; they should not be caught.
"""

from __future__ import annotations

from typing import Optional


class AutotagError(Exception):
    """Base class for recoverable autotag errors."""


class EncodeError(AutotagError):
    """A sentence could not be encoded."""


class MissingLabelError(EncodeError):
    """A token has no value for the configured layer."""

    def __init__(self, form: str) -> None:
        super().__init__(f"Token without a label: {form}")
        self.form = form


class MalformedFeatureStringError(AutotagError, ValueError):
    """A string cannot be parsed as a feature map."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Malformed feature string {text!r}: {reason}")
        self.text = text
        self.reason = reason


class LayerConfigError(AutotagError, ValueError):
    """A serialized layer cannot be interpreted."""


class ConlluFormatError(AutotagError, ValueError):
    """A CoNLL-U line cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class ContractViolation(AssertionError):
    """Caller misuse of an API contract."""


class RootNodeAccessError(ContractViolation):
    """An operation was addressed at the root node."""


class LabelCountMismatchError(ContractViolation):
    """The number of labels does not match the number of tokens."""
