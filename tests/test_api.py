"""Unit tests for normspace.api."""

import math

import numpy as np
import pytest

import normspace
from normspace.api import as_operand, get_norm, metric, norm
from normspace.containers import Matrix, MatrixSlice, Vector
from normspace.errors import InvalidParameterError, ShapeMismatchError
from normspace.norms import Euclidean, Lp, VectorNorm


# ---------------------------------------------------------------------------
# get_norm
# ---------------------------------------------------------------------------


def test_get_norm_names():
    assert get_norm("euclidean") == Euclidean()
    assert get_norm("L2") == Euclidean()
    assert get_norm("l1") == Lp(1.0)
    assert get_norm("linf") == Lp(math.inf)
    assert get_norm("max") == Lp(math.inf)


def test_get_norm_numeric_p():
    assert get_norm(3) == Lp(3.0)
    assert get_norm(math.inf) == Lp(math.inf)


def test_get_norm_passthrough():
    n = Lp(4.0)
    assert get_norm(n) is n


def test_get_norm_unknown_name():
    with pytest.raises(ValueError, match="Unknown norm"):
        get_norm("bogus")  # type: ignore[arg-type]


def test_get_norm_rejects_bool():
    with pytest.raises(TypeError):
        get_norm(True)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# as_operand
# ---------------------------------------------------------------------------


def test_as_operand_kinds():
    assert isinstance(as_operand([1.0, 2.0]), Vector)
    assert isinstance(as_operand([[1.0, 2.0]]), Matrix)
    with pytest.raises(ValueError, match="1-D or 2-D"):
        as_operand(np.zeros((2, 2, 2)))


# ---------------------------------------------------------------------------
# norm
# ---------------------------------------------------------------------------


def test_norm_default_is_euclidean():
    assert norm([3.0, 4.0]) == pytest.approx(5.0)
    assert norm([[3.0, 4.0], [1.0, 3.0]]) == pytest.approx(math.sqrt(35.0))


def test_norm_named_and_numeric():
    assert norm([1.0, -2.0, 3.0], "l1") == pytest.approx(6.0)
    assert norm([1.0, -9.0, 3.0], "linf") == pytest.approx(9.0)
    assert norm([1.0, -9.0, 3.0], math.inf) == pytest.approx(9.0)


def test_norm_invalid_p():
    with pytest.raises(InvalidParameterError):
        norm([3.0, 4.0], 0.5)


def test_norm_vector_only_norm_on_matrix():
    class VecOnly(VectorNorm):
        def norm_vector(self, v):
            return 0.0

    with pytest.raises(TypeError, match="not a matrix norm"):
        norm([[1.0]], VecOnly())


# ---------------------------------------------------------------------------
# metric
# ---------------------------------------------------------------------------


def test_metric_vectors():
    assert metric(Euclidean(), [3.0, 4.0], [0.0, 0.0]) == pytest.approx(5.0)
    assert metric(Euclidean(), [3.0, 4.0], [4.0, 3.0]) == pytest.approx(math.sqrt(2.0))
    assert metric("euclidean", [3.0, 4.0], [3.0, 4.0]) == pytest.approx(0.0, abs=1e-12)


def test_metric_vector_length_mismatch():
    with pytest.raises(ShapeMismatchError):
        metric(Euclidean(), [3.0, 4.0], [1.0, 2.0, 3.0])


def test_metric_matrices():
    m = Matrix.from_rows([[3.0, 4.0], [1.0, 3.0]])
    assert metric(Euclidean(), m, Matrix.zeros(2, 2)) == pytest.approx(math.sqrt(35.0))
    assert metric(Euclidean(), m, [[2.0, 3.0], [2.0, 4.0]]) == pytest.approx(2.0)


def test_metric_matrix_and_slice():
    m = Matrix.from_rows([[3.0, 4.0], [1.0, 3.0]])
    s = MatrixSlice.from_matrix(m, [0, 0], 1, 2)
    assert metric(Euclidean(), s, [[0.0, 0.0]]) == pytest.approx(5.0)


def test_metric_lp_inf_negative():
    assert metric(Lp(math.inf), [0.0, 0.0, 0.0], [1.0, 12.0, -2.0]) == pytest.approx(12.0)


def test_metric_vector_against_matrix():
    with pytest.raises(TypeError):
        metric(Euclidean(), [1.0, 2.0], [[1.0, 2.0]])


def test_package_exports():
    assert normspace.norm is norm
    assert normspace.metric is metric
    assert "Lp" in normspace.__all__
