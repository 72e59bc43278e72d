"""normspace — pluggable vector and matrix norms with induced metrics.

Any norm yields a distance for free: ``metric(N, a, b) = N(a - b)``.

Public API::

    from normspace import Euclidean, Lp, norm, metric, Vector, Matrix
"""

import logging

from .api import as_operand, get_norm, metric, norm
from .containers import BaseMatrix, Matrix, MatrixSlice, Vector, as_matrix, as_vector, dot
from .errors import InvalidParameterError, NormError, ShapeMismatchError
from .log import get_logger
from .norms import Euclidean, Lp, MatrixNorm, Norm, VectorNorm

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Vector",
    "BaseMatrix",
    "Matrix",
    "MatrixSlice",
    "as_vector",
    "as_matrix",
    "as_operand",
    "dot",
    "VectorNorm",
    "MatrixNorm",
    "Norm",
    "Euclidean",
    "Lp",
    "norm",
    "metric",
    "get_norm",
    "NormError",
    "InvalidParameterError",
    "ShapeMismatchError",
    "get_logger",
]
