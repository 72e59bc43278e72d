"""Free-function entry points.

norm(x, n)        — norm of a vector or matrix
metric(n, a, b)   — distance between a and b induced by any norm n
get_norm(spec)    — resolve a name or a p value into a norm

Plain lists and numpy arrays are accepted wherever a container is: 1-D
input becomes a Vector, 2-D input a Matrix.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Literal, Union

import numpy as np

from .containers import BaseMatrix, Matrix, Vector
from .norms import Euclidean, Lp, MatrixNorm, VectorNorm

logger = logging.getLogger(__name__)

NormName = Literal["euclidean", "l1", "l2", "linf", "max"]
AnyNorm = Union[VectorNorm, MatrixNorm]

_NAMED_NORMS = {
    "euclidean": Euclidean(),
    "l2": Euclidean(),
    "l1": Lp(1.0),
    "linf": Lp(math.inf),
    "max": Lp(math.inf),
}


def as_operand(x: Any) -> Union[Vector, BaseMatrix]:
    """Return ``x`` as a Vector or matrix, converting lists and arrays."""
    if isinstance(x, (Vector, BaseMatrix)):
        return x
    arr = np.asarray(x)
    if arr.ndim == 1:
        return Vector(arr)
    if arr.ndim == 2:
        return Matrix.from_rows(arr)
    raise ValueError(f"Expected 1-D or 2-D input, got shape {arr.shape}.")


# ---------------------------------------------------------------------------
# Norm resolution
# ---------------------------------------------------------------------------


def get_norm(spec: Union[NormName, float, AnyNorm] = "euclidean") -> AnyNorm:
    """Resolve ``spec`` into a norm.

    Parameters
    ----------
    spec : a norm instance (returned as is), one of 'euclidean', 'l2',
           'l1', 'linf', 'max', or a real ``p`` giving ``Lp(p)``.
    """
    if isinstance(spec, (VectorNorm, MatrixNorm)):
        return spec
    if isinstance(spec, str):
        try:
            return _NAMED_NORMS[spec.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown norm {spec!r}. "
                f"Valid options: {', '.join(repr(k) for k in _NAMED_NORMS)}."
            ) from None
    if isinstance(spec, numbers.Real) and not isinstance(spec, bool):
        return Lp(float(spec))
    raise TypeError(f"Cannot build a norm from {type(spec).__name__}.")


# ---------------------------------------------------------------------------
# Norm and metric
# ---------------------------------------------------------------------------


def norm(x: Any, n: Union[NormName, float, AnyNorm] = "euclidean") -> float:
    """Compute the norm ``n`` of a vector or matrix."""
    n = get_norm(n)
    x = as_operand(x)
    if isinstance(x, Vector):
        if not isinstance(n, VectorNorm):
            raise TypeError(f"{type(n).__name__} is not a vector norm.")
        return n.norm_vector(x)
    if not isinstance(n, MatrixNorm):
        raise TypeError(f"{type(n).__name__} is not a matrix norm.")
    return n.norm_matrix(x)


def metric(n: Union[NormName, float, AnyNorm], a: Any, b: Any) -> float:
    """Distance between ``a`` and ``b`` induced by the norm ``n``.

    Valid whenever ``a - b`` is defined. Shape mismatches are reported by
    the subtraction as ``ShapeMismatchError``.
    """
    n = get_norm(n)
    a = as_operand(a)
    b = as_operand(b)
    logger.debug("metric %r between %s and %s", n, type(a).__name__, type(b).__name__)
    if isinstance(a, Vector):
        if not isinstance(n, VectorNorm):
            raise TypeError(f"{type(n).__name__} is not a vector norm.")
        return n.metric_vector(a, b)
    if not isinstance(n, MatrixNorm):
        raise TypeError(f"{type(n).__name__} is not a matrix norm.")
    return n.metric_matrix(a, b)
