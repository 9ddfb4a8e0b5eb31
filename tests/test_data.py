"""Tests for Dataset, validate and normalize in data.py.

Covers coercion from mappings, records and frame-like objects, every
validation failure in order, numeric conversion and the degenerate column
policy of the normalizer.
"""

from collections import namedtuple
from dataclasses import dataclass

import numpy as np
import pytest

from parallelplotqt.data import Dataset, normalize, validate
from parallelplotqt.errors import (
    DegenerateRangeError,
    InsufficientColumnsError,
    InsufficientRowsError,
    MissingValuesError,
    NonNumericValueError,
    NullInputError,
    ParallelPlotError,
    RaggedColumnsError,
    UnknownFeatureError,
)


class FakeFrame:
    """Minimal DataFrame-like object: ``columns`` plus item access."""

    def __init__(self, columns):
        self._columns = columns
        self.columns = list(columns)

    def __getitem__(self, name):
        return self._columns[name]


class TestDataset:
    """Tests for the Dataset container."""

    def test_from_mapping_keeps_order(self, person_columns):
        """Column order follows the mapping."""
        ds = Dataset.coerce(person_columns)
        assert ds.names == ("height", "weight", "age")
        assert ds.n_columns == 3
        assert ds.n_rows == 3
        assert len(ds) == 3

    def test_from_dict_records(self):
        """Records of dicts use the keys of the first row."""
        rows = [{"a": 1, "b": 2}, {"a": 3, "b": 4}]
        ds = Dataset.coerce(rows)
        assert ds.names == ("a", "b")
        assert ds.raw("b") == (2, 4)

    def test_from_dataclass_records(self):
        """Dataclass records use their field order."""
        @dataclass
        class Car:
            horsepower: int
            weight: float

        ds = Dataset.coerce([Car(100, 1.5), Car(200, 2.5)])
        assert ds.names == ("horsepower", "weight")
        np.testing.assert_allclose(ds.column("weight"), [1.5, 2.5])

    def test_from_namedtuple_records(self):
        """Namedtuple records use _fields."""
        Row = namedtuple("Row", ["x", "y"])
        ds = Dataset.coerce([Row(1, 2), Row(3, 4)])
        assert ds.names == ("x", "y")

    def test_record_missing_field_is_none(self):
        """A field absent from a later record becomes a missing cell."""
        ds = Dataset.from_records([{"a": 1, "b": 2}, {"a": 3}])
        assert ds.raw("b") == (2, None)
        assert ds.missing_columns() == ["b"]

    def test_from_frame_like(self):
        """Objects with columns and item access are read column by column."""
        frame = FakeFrame({"p": [1.0, 2.0], "q": [3.0, 4.0]})
        ds = Dataset.coerce(frame)
        assert ds.names == ("p", "q")
        assert ds.raw("q") == (3.0, 4.0)

    def test_coerce_returns_same_dataset(self, person_columns):
        """An existing Dataset is passed through."""
        ds = Dataset(person_columns)
        assert Dataset.coerce(ds) is ds

    def test_coerce_none(self):
        """None is rejected with NullInputError."""
        with pytest.raises(NullInputError):
            Dataset.coerce(None)

    def test_coerce_unsupported(self):
        """Scalars are not tabular."""
        with pytest.raises(TypeError):
            Dataset.coerce(42)

    def test_ragged_columns(self):
        """Columns of different lengths are rejected."""
        with pytest.raises(RaggedColumnsError):
            Dataset({"a": [1, 2, 3], "b": [1, 2]})

    def test_column_coerces_numbers(self):
        """Numeric strings and booleans are converted to float."""
        ds = Dataset({"a": ["1.5", True, 3]})
        np.testing.assert_allclose(ds.column("a"), [1.5, 1.0, 3.0])
        assert ds.column("a").dtype == float

    def test_column_non_numeric(self):
        """Text that is not a number raises NonNumericValueError."""
        ds = Dataset({"a": [1, "abc"]})
        with pytest.raises(NonNumericValueError) as exc:
            ds.column("a")
        assert exc.value.name == "a"
        assert exc.value.value == "abc"

    def test_unknown_column(self, person_columns):
        """Asking for a missing column raises UnknownFeatureError."""
        ds = Dataset(person_columns)
        with pytest.raises(UnknownFeatureError):
            ds.column("income")

    def test_select_reorders(self, person_columns):
        """select returns a new dataset in the requested order."""
        ds = Dataset(person_columns)
        sub = ds.select(["age", "height"])
        assert sub.names == ("age", "height")
        assert ds.names == ("height", "weight", "age")

    def test_contains_and_iter(self, person_columns):
        ds = Dataset(person_columns)
        assert "age" in ds
        assert "income" not in ds
        assert list(ds) == ["height", "weight", "age"]


class TestValidate:
    """Tests for validate()."""

    def test_valid_data(self, person_columns):
        """Two or more rows and columns without gaps pass."""
        assert validate(person_columns) is None

    def test_minimal_valid_data(self):
        """Exactly two rows and two columns is enough."""
        validate({"a": [1, 2], "b": [3, 4]})

    def test_none(self):
        with pytest.raises(NullInputError):
            validate(None)

    def test_one_column(self):
        with pytest.raises(InsufficientColumnsError) as exc:
            validate({"a": [1, 2, 3]})
        assert exc.value.count == 1

    def test_one_row(self):
        with pytest.raises(InsufficientRowsError) as exc:
            validate({"a": [1], "b": [2]})
        assert exc.value.count == 1

    def test_column_check_comes_first(self):
        """A single cell is reported as a column problem."""
        with pytest.raises(InsufficientColumnsError):
            validate({"a": [1]})

    def test_none_cell(self):
        with pytest.raises(MissingValuesError) as exc:
            validate({"a": [1, None, 3], "b": [1, 2, 3]})
        assert exc.value.columns == ("a",)

    def test_nan_cell(self):
        """NaN counts as missing, including numpy floats."""
        with pytest.raises(MissingValuesError) as exc:
            validate({"a": [1.0, 2.0], "b": [np.float64("nan"), 1.0]})
        assert exc.value.columns == ("b",)

    def test_nan_string_cell(self):
        """Text that converts to NaN is missing, not a number."""
        with pytest.raises(MissingValuesError) as exc:
            validate({"a": [1, "nan", 3], "b": [4, 5, 6]})
        assert exc.value.columns == ("a",)

    def test_pandas_na_in_frame(self):
        """pandas' NA marker in a nullable integer column is missing."""
        pd = pytest.importorskip("pandas")
        frame = pd.DataFrame(
            {"a": pd.array([1, None, 3], dtype="Int64"), "b": [4.0, 5.0, 6.0]}
        )
        with pytest.raises(MissingValuesError) as exc:
            validate(frame)
        assert exc.value.columns == ("a",)

    def test_pandas_nat_in_frame_like(self):
        """NaT counts as missing even when the color column is not displayed."""
        pd = pytest.importorskip("pandas")
        frame = FakeFrame({"a": [1, 2], "b": [3, 4], "c": [5, pd.NaT]})
        with pytest.raises(MissingValuesError) as exc:
            validate(frame)
        assert exc.value.columns == ("c",)

    def test_text_is_not_missing(self):
        """Non-numeric text is left for column() to reject."""
        validate({"a": [1, "abc"], "b": [3, 4]})

    def test_errors_are_value_errors(self):
        """Callers can catch plain ValueError."""
        with pytest.raises(ValueError):
            validate({"a": [1, 2]})
        assert issubclass(MissingValuesError, ParallelPlotError)


class TestNormalize:
    """Tests for normalize()."""

    def test_min_max_scaling(self):
        """[10, 20, 30] becomes [0, 0.5, 1]."""
        ds = normalize({"a": [10, 20, 30], "b": [1, 2, 4]})
        np.testing.assert_allclose(ds.column("a"), [0.0, 0.5, 1.0])
        np.testing.assert_allclose(ds.column("b"), [0.0, 1 / 3, 1.0])

    def test_columns_are_independent(self):
        ds = normalize({"a": [0, 100], "b": [-1, 1]})
        np.testing.assert_allclose(ds.column("a"), [0.0, 1.0])
        np.testing.assert_allclose(ds.column("b"), [0.0, 1.0])

    def test_input_not_mutated(self):
        """normalize returns a copy."""
        source = Dataset({"a": [10, 20, 30], "b": [1, 2, 3]})
        normalize(source)
        assert source.raw("a") == (10, 20, 30)

    def test_degenerate_column_centered(self):
        """A constant column maps to the middle of the axis."""
        ds = normalize({"a": [5, 5, 5], "b": [1, 2, 3]})
        np.testing.assert_allclose(ds.column("a"), [0.5, 0.5, 0.5])

    def test_degenerate_column_strict(self):
        with pytest.raises(DegenerateRangeError) as exc:
            normalize({"a": [5, 5, 5], "b": [1, 2, 3]}, strict=True)
        assert exc.value.name == "a"
        assert exc.value.value == 5.0
