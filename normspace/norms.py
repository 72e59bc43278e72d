"""Vector and matrix norms, and the metrics they induce.

VectorNorm / MatrixNorm are the two capability interfaces. Each carries
the induced metric as a concrete method,

    d(a, b) = N(a - b)

so any norm, including a user-defined one, gets its metric without
writing extra code. The base classes enforce none of the norm axioms;
a subclass is responsible for defining a genuine norm.

Concrete norms
--------------
Euclidean — square root of the sum of squares (Frobenius on matrices)
Lp(p)     — p-th root of the sum of |x|^p, p >= 1; p = inf gives the
            supremum of the absolute values

Prefer the least generic norm that fits: ``Euclidean()`` rather than
``Lp(2.0)``, although the two agree.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

import numpy as np

from .containers import BaseMatrix, Vector, dot
from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class VectorNorm(ABC):
    """A norm defined on vectors."""

    @abstractmethod
    def norm_vector(self, v: Vector) -> float:
        """Compute the norm of ``v``."""

    def metric_vector(self, v1: Vector, v2: Vector) -> float:
        """Induced metric between two vectors of equal length.

        A length mismatch raises ``ShapeMismatchError`` from the
        subtraction.
        """
        return self.norm_vector(v1 - v2)


class MatrixNorm(ABC):
    """A norm defined on matrices."""

    @abstractmethod
    def norm_matrix(self, m: BaseMatrix) -> float:
        """Compute the norm of ``m``."""

    def metric_matrix(self, m1: BaseMatrix, m2: BaseMatrix) -> float:
        """Induced metric between two matrices of equal shape.

        ``m1`` and ``m2`` may be different matrix kinds, e.g. a Matrix and
        a MatrixSlice.
        """
        return self.norm_matrix(m1 - m2)


class Norm(VectorNorm, MatrixNorm):
    """A norm defined on both vectors and matrices."""

    def norm(self, x: Union[Vector, BaseMatrix]) -> float:
        if isinstance(x, Vector):
            return self.norm_vector(x)
        if isinstance(x, BaseMatrix):
            return self.norm_matrix(x)
        raise TypeError(f"Cannot take a norm of {type(x).__name__}.")

    def metric(self, a: Union[Vector, BaseMatrix], b: Union[Vector, BaseMatrix]) -> float:
        if isinstance(a, Vector):
            return self.metric_vector(a, b)
        if isinstance(a, BaseMatrix):
            return self.metric_matrix(a, b)
        raise TypeError(f"Cannot measure a distance from {type(a).__name__}.")


# ---------------------------------------------------------------------------
# Euclidean
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Euclidean(Norm):
    """The Euclidean norm: ``||v|| = sqrt(sum(v_i * v_i))``.

    On matrices this is the Frobenius norm, accumulated one row at a time.
    """

    def norm_vector(self, v: Vector) -> float:
        return math.sqrt(dot(v.data, v.data))

    def norm_matrix(self, m: BaseMatrix) -> float:
        s = 0.0
        for row in m.iter_rows():
            s += dot(row, row)
        return math.sqrt(s)


# ---------------------------------------------------------------------------
# Lp
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Lp(Norm):
    """The Lp norm: ``||v|| = (sum |v_i|^p)^(1/p)``.

    ``p`` must be >= 1 when the norm is used; ``Lp(0.5)`` can be built but
    raises ``InvalidParameterError`` on ``norm``/``metric``. When ``p`` is
    positive infinity the result is the largest absolute element.
    """

    p: float

    def _check(self) -> None:
        if math.isnan(self.p) or self.p < 1:
            logger.warning("Lp norm used with invalid p=%r", self.p)
            raise InvalidParameterError(
                f"p value in Lp norm must be >= 1, got {self.p!r}"
            )

    def _reduce(self, elements: np.ndarray) -> float:
        self._check()
        a = np.abs(elements)
        if math.isinf(self.p):
            # supremum over |x|; empty input has norm 0
            return float(a.max()) if a.size else 0.0
        return float(np.sum(a ** self.p)) ** (1.0 / self.p)

    def norm_vector(self, v: Vector) -> float:
        return self._reduce(v.data)

    def norm_matrix(self, m: BaseMatrix) -> float:
        elements = np.fromiter(m.iter(), dtype=m.data.dtype, count=m.rows * m.cols)
        return self._reduce(elements)
