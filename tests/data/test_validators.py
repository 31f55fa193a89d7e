"""Tests for bar series validation"""

import pytest

from mtf_app.data.validators import validate_bar_series
from mtf_app.errors import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    TemporalDataError,
)


class TestValidateBarSeries:
    """Test validate_bar_series"""

    def test_valid_series(self, rising_bars):
        """An ordered series passes"""
        validate_bar_series(rising_bars, "daily")

    def test_single_bar(self, make_bars):
        """One bar is a valid series"""
        validate_bar_series(make_bars([100.0]), "daily")

    def test_empty(self):
        """Empty series are rejected with context"""
        with pytest.raises(MissingDataError) as exc_info:
            validate_bar_series([], "15min")

        assert exc_info.value.data_type == "bars"
        assert exc_info.value.context["timeframe"] == "15min"

    def test_duplicate_timestamp(self, make_bars):
        """Equal timestamps are not strictly increasing"""
        bars = make_bars([100.0, 101.0])
        with pytest.raises(TemporalDataError) as exc_info:
            validate_bar_series([bars[0], bars[1], bars[1]], "daily")

        assert exc_info.value.timestamp == bars[1].timestamp
        assert exc_info.value.context["index"] == 2

    def test_reversed_series(self, make_bars):
        """Descending timestamps are rejected"""
        with pytest.raises(TemporalDataError):
            validate_bar_series(list(reversed(make_bars([100.0, 101.0, 102.0]))), "daily")

    @pytest.mark.parametrize("close", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_close(self, make_bars, close):
        """Non-finite closes are rejected"""
        with pytest.raises(MalformedDataError):
            validate_bar_series(make_bars([100.0, close]), "daily")

    def test_errors_are_data_quality(self):
        """All rejections share the data quality base class"""
        with pytest.raises(DataQualityError):
            validate_bar_series([], "daily")
