"""
Tests for the dataset model, option resolution and config validation.
"""

import math

import pandas as pd
import pytest

from chart_data.errors import ChartDataError, ConfigError
from chart_data.models import Dataset, KeyPosition, to_value
from chart_data.options import (
    BarOptions,
    LineOptions,
    PieOptions,
    canonical_key,
    resolve_options
)
from chart_data.validator import ConfigValidator


class TestToValue:
    """Test conversion of raw data cells."""

    def test_numbers_and_numeric_strings(self):
        """Numbers pass through, numeric strings are parsed."""
        assert to_value(3) == 3.0
        assert to_value(12.975) == 12.975
        assert to_value(" 45 ") == 45.0

    def test_absent_markers(self):
        """None, empty string and NaN mean absent."""
        assert to_value(None) is None
        assert to_value("") is None
        assert to_value(float("nan")) is None

    def test_rejects_non_numeric(self):
        """Words, booleans and infinity are not chartable values."""
        with pytest.raises(ChartDataError):
            to_value("lots")
        with pytest.raises(ChartDataError):
            to_value(True)
        with pytest.raises(ChartDataError):
            to_value(math.inf)
        with pytest.raises(ChartDataError):
            to_value(10 ** 400)


class TestDataset:
    """Test series storage."""

    def test_short_series_leaves_trailing_categories_absent(self):
        """Missing trailing values are absent, not zero."""
        dataset = Dataset()
        series = dataset.add_series(["Jan", "Feb", "Mar"], [12])

        assert series.value_for("Jan") == 12.0
        assert series.value_for("Feb") is None
        assert series.value_for("Mar") is None
        assert list(dataset.present_values(["Jan", "Feb", "Mar"])) == [12.0]

    def test_extra_values_are_dropped(self):
        """Values beyond the category count are ignored."""
        dataset = Dataset()
        series = dataset.add_series(["Jan", "Feb"], [1, 2, 3, 4])

        assert list(series.values) == ["Jan", "Feb"]
        assert series.values == {"Jan": 1.0, "Feb": 2.0}

    def test_values_keep_category_order(self):
        """Values are keyed and iterated in category order."""
        dataset = Dataset()
        dataset.add_series(["b", "a"], [1, 2], title="first")
        dataset.add_series(["b", "a"], [3, None], title="second")

        assert list(dataset.series[0].values) == ["b", "a"]
        assert list(dataset.present_values(["b", "a"])) == [1.0, 3.0, 2.0]
        assert len(dataset) == 2

    def test_rejects_non_sequence(self):
        """A string or mapping is not a list of values."""
        dataset = Dataset()
        with pytest.raises(ChartDataError):
            dataset.add_series(["a"], "12")
        with pytest.raises(ChartDataError):
            dataset.add_series(["a"], {"a": 1})

    def test_accepts_pandas_series(self):
        """A pandas Series is read positionally."""
        dataset = Dataset()
        series = dataset.add_series(["a", "b"], pd.Series([5, 6]))

        assert series.values == {"a": 5.0, "b": 6.0}

    def test_add_frame(self):
        """Every column becomes a series; rows match categories by index label."""
        frame = pd.DataFrame(
            {"Sales": [10, 20, None], "Costs": [4, 5, 6]},
            index=["Jan", "Feb", "Mar"]
        )
        dataset = Dataset()
        added = dataset.add_frame(["Mar", "Jan", "Apr"], frame)

        assert [s.title for s in added] == ["Sales", "Costs"]
        assert added[0].values == {"Mar": None, "Jan": 10.0, "Apr": None}
        assert added[1].values == {"Mar": 6.0, "Jan": 4.0, "Apr": None}

    def test_clear(self):
        """Clearing drops every series."""
        dataset = Dataset()
        dataset.add_series(["a"], [1])
        dataset.clear()

        assert dataset.series == []


class TestResolveOptions:
    """Test merging user options over variant defaults."""

    def test_defaults(self):
        """Every recognised option has a value after resolution."""
        options = resolve_options(BarOptions, {"fields": ["a"]})

        assert options.width == 500
        assert options.height == 300
        assert options.style_sheet is None
        assert options.key is False
        assert options.key_position == KeyPosition.RIGHT
        assert options.key_wrap == 3
        assert options.y_start == 0
        assert options.y_marker is None
        assert options.show_x_labels is True
        assert options.x_title == "X Field names"

    def test_variant_defaults(self):
        """Line and pie carry their own options."""
        line = resolve_options(LineOptions, {"fields": ["a"]})
        pie = resolve_options(PieOptions, {"fields": ["a"]})

        assert line.show_data_points is True
        assert line.area_fill is False
        assert pie.show_percent is True
        assert not hasattr(pie, "y_start")

    def test_field_aliases(self):
        """fields and xfields both set the category list."""
        assert canonical_key("fields") == "categories"
        assert canonical_key("xfields") == "categories"
        assert resolve_options(BarOptions, {"xfields": ["x", "y"]}).categories == ["x", "y"]

    def test_categories_become_strings(self):
        """Numeric category names such as years are stored as strings."""
        options = resolve_options(BarOptions, {"fields": [2001, 2002]})

        assert options.categories == ["2001", "2002"]

    def test_wrong_type_keeps_default(self):
        """A recognised key with an invalid value falls back to the default."""
        options = resolve_options(BarOptions, {
            "fields": ["a"],
            "width": "wide",
            "key_position": "left",
            "height": 400
        })

        assert options.width == 500
        assert options.key_position == KeyPosition.RIGHT
        assert options.height == 400

    def test_unrecognised_keys_pass_through(self):
        """Unknown keys are stored untouched."""
        options = resolve_options(BarOptions, {"fields": ["a"], "colour_scheme": "dark"})

        assert options.model_extra["colour_scheme"] == "dark"

    def test_blank_means_not_set(self):
        """An empty string for y_start or style_sheet means unset."""
        options = resolve_options(BarOptions, {"fields": ["a"], "y_start": "", "style_sheet": ""})

        assert options.y_start is None
        assert options.style_sheet is None

    def test_rejects_non_mapping(self):
        """Config must be a dict."""
        with pytest.raises(ConfigError):
            resolve_options(BarOptions, ["fields"])


class TestConfigValidator:
    """Test hard requirements on resolved options."""

    def test_missing_fields(self):
        """An empty category list is reported."""
        validator = ConfigValidator()
        errors = validator.validate_options(BarOptions())

        assert errors == ["fields was not supplied or is empty"]

    def test_fields_not_a_sequence(self):
        """A string for fields keeps the empty default and fails the check."""
        options = resolve_options(BarOptions, {"fields": "Jan,Feb"})

        with pytest.raises(ConfigError, match="fields"):
            ConfigValidator().check(options)

    def test_duplicate_categories(self):
        """Category names must be unique."""
        options = resolve_options(BarOptions, {"fields": ["a", "b", "a"]})
        errors = ConfigValidator().validate_options(options)

        assert len(errors) == 1
        assert "'a'" in errors[0]

    def test_valid_options(self):
        """Valid options produce no errors."""
        options = resolve_options(PieOptions, {"fields": ["a", "b"]})

        assert ConfigValidator().validate_options(options) == []
        ConfigValidator().check(options)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
