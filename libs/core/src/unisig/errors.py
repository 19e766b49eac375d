"""Exception taxonomy shared by every adapter.

All failures are raised synchronously before (or instead of) delegating to a
primitive provider. Each class also derives from the matching builtin so that
callers catching ``TypeError``/``ValueError`` keep working.
"""
from __future__ import annotations


class UnisigError(Exception):
    """Base class for errors raised by the validation layer."""


class TypeMismatch(UnisigError, TypeError):
    """Argument does not have the expected shape (bytes, str or dict)."""


class LengthMismatch(UnisigError, ValueError):
    """Argument has the right shape but the wrong size for the algorithm."""


class FormatError(UnisigError, ValueError):
    """A string or mapping could not be normalized into bytes."""


class PrimitiveFailure(UnisigError, RuntimeError):
    """The underlying primitive rejected an otherwise well-formed input."""


MESSAGE_SHAPES = "Message must be a string, bytes, or JSON object"
