"""Tests for weight validation."""

import math

import numpy as np
import pytest

from weightedreservoir.sampling import (
    InvalidWeightError,
    WeightErrorKind,
    check_weight,
    is_valid_weight,
)


class TestCheckWeightRejects:
    """Weights that cannot take part in sampling."""

    def test_rejects_nan(self):
        """NaN is rejected as NAN."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(float("nan"))

        assert excinfo.value.kind is WeightErrorKind.NAN

    @pytest.mark.parametrize("weight", [math.inf, -math.inf])
    def test_rejects_infinities(self, weight):
        """Both infinities are rejected as INFINITE, not NEGATIVE."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(weight)

        assert excinfo.value.kind is WeightErrorKind.INFINITE

    @pytest.mark.parametrize("weight", [-1.0, -1e-300, -5, -5e-324])
    def test_rejects_negative(self, weight):
        """Negative values are rejected as NEGATIVE."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(weight)

        assert excinfo.value.kind is WeightErrorKind.NEGATIVE

    def test_rejects_negative_zero(self):
        """-0.0 has its sign bit set and is rejected."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(-0.0)

        assert excinfo.value.kind is WeightErrorKind.NEGATIVE

    def test_rejects_numpy_nan(self):
        """numpy scalars go through the same checks."""
        with pytest.raises(InvalidWeightError, match="NaN"):
            check_weight(np.float32("nan"))

    def test_non_numeric_is_a_type_error(self):
        """Non-numbers are a programming error, not an invalid weight."""
        with pytest.raises(TypeError):
            check_weight(None)  # type: ignore[arg-type]


class TestCheckWeightAccepts:
    """Weights that are valid."""

    @pytest.mark.parametrize(
        "weight",
        [0.0, 0, 1, 1.0, 5e-324, 1e-300, 1e300, np.float64(2.5), np.int64(3)],
    )
    def test_accepts(self, weight):
        """Zero and positive finite values pass silently."""
        assert check_weight(weight) is None
        assert is_valid_weight(weight)


class TestInvalidWeightError:
    """Tests for the error type."""

    @pytest.mark.parametrize(
        ("weight", "text"),
        [
            (float("nan"), "cannot sample with invalid weight: NaN"),
            (math.inf, "cannot sample with invalid weight: infinite"),
            (-2.0, "cannot sample with invalid weight: negative"),
        ],
    )
    def test_message(self, weight, text):
        """Message names the kind."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(weight)

        assert str(excinfo.value) == text

    def test_is_value_error(self):
        """Callers catching ValueError also catch invalid weights."""
        with pytest.raises(ValueError):
            check_weight(-1)

    def test_carries_weight(self):
        """The offending weight is kept on the error."""
        with pytest.raises(InvalidWeightError) as excinfo:
            check_weight(-3.5)

        assert excinfo.value.weight == -3.5
        assert excinfo.value.position is None

    def test_at_position(self):
        """at_position returns a tagged copy."""
        err = InvalidWeightError(WeightErrorKind.INFINITE, math.inf)
        tagged = err.at_position(7)

        assert tagged.position == 7
        assert tagged.kind is WeightErrorKind.INFINITE
        assert err.position is None


class TestIsValidWeight:
    """Tests for the boolean companion."""

    @pytest.mark.parametrize("weight", [float("nan"), math.inf, -math.inf, -1.0, -0.0])
    def test_false_for_invalid(self, weight):
        """Invalid weights give False."""
        assert not is_valid_weight(weight)

    def test_prefilter_stream(self):
        """Can be used to drop bad pairs before ingestion."""
        pairs = [(1.0, "a"), (float("nan"), "b"), (-1.0, "c"), (0.0, "d")]

        kept = [v for w, v in pairs if is_valid_weight(w)]

        assert kept == ["a", "d"]
