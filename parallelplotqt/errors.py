"""Exceptions raised while validating input and resolving plot options.

All errors derive from ``ParallelPlotError`` (a ``ValueError``) and are raised
before anything is drawn, so a failed update never leaves a half-rendered plot.
"""

from __future__ import annotations

from typing import Any, Sequence


class ParallelPlotError(ValueError):
    """Base class for all parallel plot input errors."""


class NullInputError(ParallelPlotError):
    """Raised when no dataset is given."""

    def __init__(self) -> None:
        super().__init__("Data cannot be None")


class RaggedColumnsError(ParallelPlotError):
    """Raised when the columns of a dataset differ in length."""


class InsufficientColumnsError(ParallelPlotError):
    """Raised when a dataset has fewer than two columns."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Data must have at least two columns, currently ({count})")


class InsufficientRowsError(ParallelPlotError):
    """Raised when a dataset has fewer than two rows."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Data must have at least two rows, currently ({count})")


class MissingValuesError(ParallelPlotError):
    """Raised when any cell of a dataset is missing (None or NaN)."""

    def __init__(self, columns: Sequence[str]) -> None:
        self.columns = tuple(columns)
        super().__init__(
            f"Data cannot have missing values (columns: {', '.join(self.columns)})"
        )


class NonNumericValueError(ParallelPlotError):
    """Raised when a cell cannot be converted to a float."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Column {name!r} holds a non-numeric value: {value!r}")


class UnknownFeatureError(ParallelPlotError):
    """Raised when a feature name is not a column of the dataset."""

    def __init__(self, name: Any, available: Sequence[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Feature {name!r} is not available in data {list(self.available)}"
        )


class LabelCountMismatchError(ParallelPlotError):
    """Raised when feature_labels does not have one label per displayed axis."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(
            f"'feature_labels' has {got} labels but {expected} axes are displayed"
        )


class DegenerateRangeError(ParallelPlotError):
    """Raised in strict mode when a column has the same min and max."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Column {name!r} has a degenerate range (every value is {value:g})"
        )
