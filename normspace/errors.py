"""Exception hierarchy for normspace.

NormError              — base class; subclasses ValueError
InvalidParameterError  — a norm was used with an invalid parameter (Lp with p < 1)
ShapeMismatchError     — two containers of incompatible shape were combined
"""

from __future__ import annotations


class NormError(ValueError):
    """Base class for every error raised by normspace."""


class InvalidParameterError(NormError):
    """A norm was evaluated with a parameter outside its domain.

    This is a programmer error: the parameter is never clamped or
    corrected, and no partial result is produced.
    """


class ShapeMismatchError(NormError):
    """Two operands do not share the same shape.

    Raised by container subtraction and by ``dot``; the metric layer
    propagates it unchanged.
    """
