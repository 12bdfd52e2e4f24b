"""Tests for score input validation."""

import logging
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from rankscore.scoring.types import ValidationError
from rankscore.scoring.validation import (
    validate_count,
    validate_count_array,
    validate_fraction,
    validate_positive,
    validate_real,
    validate_real_array,
    validate_rating_arrays,
    validate_rating_counts,
    validate_same_shape,
    validate_timestamp,
    validate_timestamp_array,
    validate_vote_arrays,
    validate_vote_counts,
)


class TestValidateCount:
    """Tests for scalar count validation."""

    def test_accepts_int(self):
        """Plain ints should pass through."""
        assert validate_count(0) == 0
        assert validate_count(2**40) == 2**40

    def test_accepts_numpy_int(self):
        """NumPy integers should be converted to int."""
        result = validate_count(np.int64(7))
        assert result == 7
        assert type(result) is int

    @pytest.mark.parametrize("value", [True, False, np.bool_(True)])
    def test_rejects_bool(self, value):
        """Booleans are not counts."""
        with pytest.raises(ValidationError, match="bool"):
            validate_count(value)

    @pytest.mark.parametrize("value", [1.0, 1.5, "1", [1]])
    def test_rejects_non_integers(self, value):
        """Non-integer types should be rejected."""
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_count(value)

    def test_rejects_none(self):
        """None should be rejected."""
        with pytest.raises(ValidationError, match="is None"):
            validate_count(None)

    def test_rejects_negative(self):
        """Negative counts should be rejected."""
        with pytest.raises(ValidationError, match=">= 0"):
            validate_count(-3)

    def test_maximum(self):
        """An inclusive maximum should be enforced when given."""
        assert validate_count(5, "places", maximum=5) == 5
        with pytest.raises(ValidationError, match="places must be <= 5"):
            validate_count(6, "places", maximum=5)

    def test_custom_name_in_error(self):
        """Custom name should appear in error message."""
        with pytest.raises(ValidationError, match="my_count"):
            validate_count(-1, "my_count")

    def test_error_is_value_error(self):
        """ValidationError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            validate_count(-1)

    def test_rejection_logged(self, caplog):
        """Rejections should be logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="rankscore.scoring.validation"):
            with pytest.raises(ValidationError):
                validate_count(-1, "upvotes")
        assert "upvotes" in caplog.text


class TestValidatePairs:
    """Tests for vote and rating pair validation."""

    def test_vote_counts(self):
        """Valid vote counts should be returned as ints."""
        assert validate_vote_counts(3, 4) == (3, 4)

    def test_vote_counts_names(self):
        """Errors should name the offending field."""
        with pytest.raises(ValidationError, match="downvotes"):
            validate_vote_counts(3, -4)

    def test_rating_counts(self):
        """Rating sum equal to the count is allowed."""
        assert validate_rating_counts(5, 5) == (5, 5)
        assert validate_rating_counts(5, 0) == (5, 0)

    def test_rating_sum_above_count(self):
        """Rating sum above the count should be rejected."""
        with pytest.raises(ValidationError, match="rating_sum 6 > rating_count 5"):
            validate_rating_counts(5, 6)


class TestValidateNumbers:
    """Tests for fraction and positive number validation."""

    @pytest.mark.parametrize("value", [0, 0.0, 0.5, 1, 1.0])
    def test_fraction_accepts_unit_interval(self, value):
        """Values in [0, 1] should pass."""
        assert validate_fraction(value) == float(value)

    @pytest.mark.parametrize("value", [-0.01, 1.01, float("inf"), float("nan"), None, True, "0.5"])
    def test_fraction_rejects(self, value):
        """Values outside [0, 1] or non-numbers should be rejected."""
        with pytest.raises(ValidationError):
            validate_fraction(value)

    def test_positive(self):
        """Positive finite numbers should pass."""
        assert validate_positive(2) == 2.0
        assert validate_positive(0.001) == 0.001

    @pytest.mark.parametrize("value", [0, -1, float("inf"), float("nan"), None, "1"])
    def test_positive_rejects(self, value):
        """Zero, negatives and non-numbers should be rejected."""
        with pytest.raises(ValidationError):
            validate_positive(value)


class TestValidateReal:
    """Tests for real number validation."""

    @pytest.mark.parametrize("value", [0, 1.5, -2, np.float64(0.25)])
    def test_accepts_numbers(self, value):
        """Ints and floats should come back as float."""
        assert validate_real(value) == float(value)

    def test_non_finite_passthrough(self):
        """NaN and infinities are real numbers here."""
        assert validate_real(float("inf")) == float("inf")
        assert np.isnan(validate_real(float("nan")))

    @pytest.mark.parametrize("value", [None, True, "1", b"1", [1]])
    def test_rejects_non_numbers(self, value):
        """Non-numbers should be rejected."""
        with pytest.raises(ValidationError, match="must be a number"):
            validate_real(value)

    def test_real_array_allows_non_finite(self):
        """Array variant keeps NaN and infinities."""
        result = validate_real_array([1.0, np.inf])
        assert result[1] == np.inf

    def test_real_array_rejects_strings(self):
        """String arrays should be rejected."""
        with pytest.raises(ValidationError, match="numeric"):
            validate_real_array(["1"])


class TestValidateTimestamp:
    """Tests for timestamp validation."""

    def test_naive_becomes_utc(self):
        """Naive datetimes should be tagged as UTC without shifting."""
        result = validate_timestamp(datetime(2020, 1, 1, 12, 0, 0))
        assert result == datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_aware_converted_to_utc(self):
        """Aware datetimes should be converted to UTC."""
        plus_two = timezone(timedelta(hours=2))
        result = validate_timestamp(datetime(2020, 1, 1, 12, 0, 0, tzinfo=plus_two))
        assert result == datetime(2020, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        assert result.hour == 10

    @pytest.mark.parametrize("value", [date(2020, 1, 1), "2020-01-01T00:00:00Z", 0, None])
    def test_rejects_non_datetime(self, value):
        """Only datetimes should be accepted."""
        with pytest.raises(ValidationError, match="must be a datetime"):
            validate_timestamp(value)


class TestValidateArrays:
    """Tests for array validation."""

    def test_count_array(self):
        """Integral non-negative counts should become float64."""
        result = validate_count_array([0, 1, 2])
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0.0, 1.0, 2.0])

    def test_whole_number_floats_accepted(self):
        """Float arrays of whole numbers are counts; scalar floats are not."""
        np.testing.assert_array_equal(validate_count_array([3.0, 0.0]), [3.0, 0.0])
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_count(3.0)

    def test_scalar_promoted(self):
        """Scalars should be promoted to 1-d arrays."""
        assert validate_count_array(3).shape == (1,)

    @pytest.mark.parametrize(
        "values,match",
        [
            ([1, -1], "negative"),
            ([1.5], "non-integral"),
            ([1, np.nan], "NaN"),
            ([np.inf], "NaN or infinite"),
            ([True, False], "numeric"),
            (["a"], "numeric"),
            (np.array([1, None], dtype=object), "numeric"),
        ],
    )
    def test_count_array_rejects(self, values, match):
        """Invalid entries should be rejected."""
        with pytest.raises(ValidationError, match=match):
            validate_count_array(values)

    def test_timestamp_array_allows_negative(self):
        """Pre-1970 timestamps are valid."""
        np.testing.assert_array_equal(validate_timestamp_array([-5.5, 0]), [-5.5, 0.0])

    def test_same_shape(self):
        """Matching shapes should pass; mismatches should be rejected."""
        validate_same_shape(a=np.zeros(3), b=np.ones(3))
        with pytest.raises(ValidationError, match="a=\\(3,\\), b=\\(2,\\)"):
            validate_same_shape(a=np.zeros(3), b=np.ones(2))

    def test_vote_arrays(self):
        """Vote arrays should be validated together."""
        up, down = validate_vote_arrays([1, 2], [3, 4])
        np.testing.assert_array_equal(up, [1.0, 2.0])
        np.testing.assert_array_equal(down, [3.0, 4.0])

    def test_rating_arrays(self):
        """Rating sums may equal but not exceed counts."""
        validate_rating_arrays([3, 3], [3, 0])
        with pytest.raises(ValidationError, match="rating_sums"):
            validate_rating_arrays([3, 3], [4, 0])
