"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_scalar / check_positive / check_positive_int: configuration values
"""

import numpy as np
import pytest

from pylinreg.core.exceptions import InsufficientDataError, ValidationError
from pylinreg.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_positive,
    check_positive_int,
    check_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# Arrays
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1, "a", None], "x")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "y")


class TestCheck1D:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(ValidationError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_mismatch_reports_lengths(self):
        with pytest.raises(ValidationError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("x", "y"))

    def test_names_must_match_arrays(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))


class TestCheckMinSamples:

    def test_enough_samples(self):
        check_min_samples(2, 2, "Training")

    def test_too_few_samples(self):
        with pytest.raises(InsufficientDataError, match="at least 2 samples, got 1") as exc_info:
            check_min_samples(1, 2, "Training")
        assert exc_info.value.n_required == 2
        assert exc_info.value.n_available == 1


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [0, 1, -3.5, np.float64(2.0), np.int64(7)])
    def test_real_numbers_accepted(self, value):
        assert check_scalar(value, "x") == float(value)

    def test_returns_float(self):
        assert isinstance(check_scalar(3, "x"), float)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError, match="finite"):
            check_scalar(value, "x")

    @pytest.mark.parametrize("value", ["1.0", None, True, [1.0], 1 + 2j])
    def test_non_real_rejected(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "x")


class TestCheckPositive:

    def test_positive_accepted(self):
        assert check_positive(0.01, "learning_rate") == 0.01

    @pytest.mark.parametrize("value", [0, 0.0, -1e-9])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="learning_rate: must be positive"):
            check_positive(value, "learning_rate")


class TestCheckPositiveInt:

    def test_positive_int_accepted(self):
        assert check_positive_int(1000, "max_iterations") == 1000

    def test_numpy_int_accepted(self):
        assert check_positive_int(np.int32(5), "max_iterations") == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_positive_int(0, "max_iterations")

    @pytest.mark.parametrize("value", [10.0, "10", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_positive_int(value, "max_iterations")
