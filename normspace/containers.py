"""Numeric containers consumed by the norms.

Vector       — ordered 1-D sequence of floating-point scalars
BaseMatrix   — matrix contract: flat element iteration, row iteration,
               shape-checked subtraction
Matrix       — owned dense row-major matrix
MatrixSlice  — non-copying rectangular view into a Matrix
dot          — dot product of two equal-length element sequences

All containers wrap read-only numpy arrays. Subtraction returns a new
container and never touches either operand.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Sequence, Tuple

import numpy as np

from .config import get_settings
from .errors import ShapeMismatchError

if TYPE_CHECKING:
    from .norms import MatrixNorm, VectorNorm


def _to_float_array(data: Any) -> np.ndarray:
    """Copy ``data`` into a fresh float array, promoting integer input."""
    arr = np.asarray(data)
    if np.iscomplexobj(arr):
        raise ValueError("Complex elements are not supported; pass real values.")
    if not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"Elements must be real numbers, got dtype {arr.dtype}.")
    dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else get_settings().default_dtype
    return np.array(arr, dtype=dtype)


# ---------------------------------------------------------------------------
# Dot product
# ---------------------------------------------------------------------------


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two equal-length element sequences."""
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"dot: length mismatch {a.shape} vs {b.shape}"
        )
    return float(np.dot(a, b))


# ---------------------------------------------------------------------------
# Vector
# ---------------------------------------------------------------------------


class Vector:
    """Ordered, fixed-length sequence of floating-point scalars."""

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[float]) -> None:
        arr = _to_float_array(data)
        if arr.ndim != 1:
            raise ValueError(f"Vector data must be 1-D, got shape {arr.shape}.")
        arr.flags.writeable = False
        self._data = arr

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the elements."""
        return self._data

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size != other.size:
            raise ShapeMismatchError(
                f"Vector length mismatch: {self.size} vs {other.size}"
            )
        return Vector(self._data - other._data)

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

    # ------------------------------------------------------------------

    def norm(self, n: "VectorNorm") -> float:
        """Compute the norm ``n`` of this vector."""
        return n.norm_vector(self)

    def metric(self, n: "VectorNorm", other: "Vector") -> float:
        """Distance to ``other`` under the metric induced by ``n``."""
        return n.metric_vector(self, other)


# ---------------------------------------------------------------------------
# Matrices
# ---------------------------------------------------------------------------


class BaseMatrix(ABC):
    """Read-only matrix contract shared by Matrix and MatrixSlice."""

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """2-D read-only array holding the elements."""

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def cols(self) -> int:
        return int(self.data.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def iter(self) -> Iterator[Any]:
        """Iterate over every element, row-major, regardless of layout."""
        return iter(self.data.flat)

    def iter_rows(self) -> Iterator[np.ndarray]:
        """Iterate over the rows; each row is a contiguous 1-D array."""
        for i in range(self.rows):
            yield self.data[i]

    def __sub__(self, other: "BaseMatrix") -> "Matrix":
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"Matrix shape mismatch: {self.rows}x{self.cols} vs "
                f"{other.rows}x{other.cols}"
            )
        return Matrix(self.rows, self.cols, self.data - other.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data.tolist()!r})"

    # ------------------------------------------------------------------

    def norm(self, n: "MatrixNorm") -> float:
        """Compute the norm ``n`` of this matrix."""
        return n.norm_matrix(self)

    def metric(self, n: "MatrixNorm", other: "BaseMatrix") -> float:
        """Distance to ``other`` under the metric induced by ``n``."""
        return n.metric_matrix(self, other)


class Matrix(BaseMatrix):
    """Dense row-major matrix owning its elements.

    Parameters
    ----------
    rows, cols : dimensions.
    data       : ``rows * cols`` elements in row-major order (any shape
                 numpy can flatten).
    """

    def __init__(self, rows: int, cols: int, data: Any) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be >= 0, got {rows}x{cols}.")
        arr = _to_float_array(data)
        if arr.size != rows * cols:
            raise ValueError(
                f"Matrix data has {arr.size} elements, expected {rows * cols} "
                f"for a {rows}x{cols} matrix."
            )
        arr = arr.reshape(rows, cols)
        arr.flags.writeable = False
        self._data = arr

    @property
    def data(self) -> np.ndarray:
        return self._data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equal-length rows."""
        arr = _to_float_array(rows)
        if arr.ndim != 2:
            raise ValueError(f"Matrix rows must form a 2-D array, got shape {arr.shape}.")
        return cls(arr.shape[0], arr.shape[1], arr)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols, np.zeros(rows * cols, dtype=get_settings().default_dtype))


class MatrixSlice(BaseMatrix):
    """Rectangular view into a Matrix. No elements are copied."""

    def __init__(self, view: np.ndarray) -> None:
        if view.ndim != 2:
            raise ValueError(f"MatrixSlice view must be 2-D, got shape {view.shape}.")
        view = view.view()
        view.flags.writeable = False
        self._data = view

    @property
    def data(self) -> np.ndarray:
        return self._data

    @classmethod
    def from_matrix(
        cls,
        m: BaseMatrix,
        start: Sequence[int],
        rows: int,
        cols: int,
    ) -> "MatrixSlice":
        """View ``rows`` x ``cols`` elements of ``m`` starting at ``start``.

        ``start`` is ``[row, col]`` of the top-left element.
        """
        r0, c0 = start
        if r0 < 0 or c0 < 0 or rows < 0 or cols < 0:
            raise ValueError("Slice start and dimensions must be >= 0.")
        if r0 + rows > m.rows or c0 + cols > m.cols:
            raise ValueError(
                f"Slice [{r0}, {c0}] + {rows}x{cols} exceeds "
                f"{m.rows}x{m.cols} matrix."
            )
        return cls(m.data[r0:r0 + rows, c0:c0 + cols])


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def as_vector(x: Any) -> Vector:
    """Return ``x`` as a Vector, converting lists and arrays."""
    if isinstance(x, Vector):
        return x
    return Vector(x)


def as_matrix(x: Any) -> BaseMatrix:
    """Return ``x`` as a matrix, converting nested lists and 2-D arrays."""
    if isinstance(x, BaseMatrix):
        return x
    return Matrix.from_rows(x)
