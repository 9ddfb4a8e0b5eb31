"""Tabular input for the parallel plot: container, validation and normalization.

``Dataset`` is an ordered, immutable set of equally long named columns. It can
be built from a mapping of columns, a DataFrame-like object or a sequence of
records (dicts, dataclasses or plain objects), so callers can pass whatever
they already hold:

    ds = Dataset.coerce({"height": [160, 170], "age": [20, 30]})
    validate(ds)
    unit = normalize(ds)
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    DegenerateRangeError,
    InsufficientColumnsError,
    InsufficientRowsError,
    MissingValuesError,
    NonNumericValueError,
    NullInputError,
    RaggedColumnsError,
    UnknownFeatureError,
)


# pandas missing markers, matched by type name so pandas stays optional
_MISSING_TYPES = ("NAType", "NaTType")


def _is_missing(value: Any) -> bool:
    """None, pandas NA/NaT, and anything that converts to NaN (e.g. "nan")."""
    if value is None or type(value).__name__ in _MISSING_TYPES:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return False


def _record_fields(row: Any) -> List[str]:
    """Field names of a single record."""
    if isinstance(row, Mapping):
        return [str(k) for k in row.keys()]
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return [f.name for f in dataclasses.fields(row)]
    if hasattr(row, "_fields"):  # namedtuple
        return list(row._fields)
    if hasattr(row, "__dict__"):
        return [k for k in vars(row) if not k.startswith("_")]
    raise TypeError(f"Cannot read fields from record of type {type(row).__name__}")


def _record_value(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


class Dataset:
    """Ordered collection of equally long named columns.

    Values are stored as given; numeric conversion happens in ``column()`` so
    that validation can report missing cells before anything is converted.
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: Mapping[str, Sequence[Any]]) -> None:
        cols: Dict[str, Tuple[Any, ...]] = {}
        for name, values in columns.items():
            cols[str(name)] = tuple(values)

        lengths = {len(v) for v in cols.values()}
        if len(lengths) > 1:
            sizes = {name: len(v) for name, v in cols.items()}
            raise RaggedColumnsError(f"All columns must have the same length, got {sizes}")
        self._columns = cols

    @classmethod
    def from_records(
        cls, rows: Sequence[Any], fields: Optional[Sequence[str]] = None
    ) -> "Dataset":
        """Build a dataset from row objects.

        Args:
            rows: Dicts, dataclasses, namedtuples or plain objects.
            fields: Column names in display order. Defaults to the fields of
                the first row.
        """
        rows = list(rows)
        if fields is None:
            fields = _record_fields(rows[0]) if rows else []
        return cls({f: [_record_value(r, f) for r in rows] for f in fields})

    @classmethod
    def coerce(cls, data: Any) -> "Dataset":
        """Return ``data`` as a ``Dataset``.

        Raises:
            NullInputError: If ``data`` is None.
            TypeError: If ``data`` has no recognizable tabular shape.
        """
        if data is None:
            raise NullInputError()
        if isinstance(data, Dataset):
            return data
        if isinstance(data, Mapping):
            return cls(data)
        # pandas/polars style frames
        if hasattr(data, "columns") and hasattr(data, "__getitem__"):
            return cls({str(c): list(data[c]) for c in data.columns})
        if isinstance(data, (list, tuple)):
            return cls.from_records(data)
        raise TypeError(f"Unsupported data type: {type(data).__name__}")

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    @property
    def n_columns(self) -> int:
        return len(self._columns)

    @property
    def n_rows(self) -> int:
        for values in self._columns.values():
            return len(values)
        return 0

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return self.n_rows

    def __repr__(self) -> str:
        return f"Dataset(columns={list(self.names)}, rows={self.n_rows})"

    def raw(self, name: str) -> Tuple[Any, ...]:
        """Values of a column exactly as given."""
        try:
            return self._columns[name]
        except KeyError:
            raise UnknownFeatureError(name, self.names) from None

    def column(self, name: str) -> np.ndarray:
        """Values of a column as a float array.

        Raises:
            UnknownFeatureError: If the column does not exist.
            NonNumericValueError: If a value cannot be converted to float.
        """
        values = self.raw(name)
        out = np.empty(len(values), dtype=float)
        for i, v in enumerate(values):
            try:
                out[i] = float(v)
            except (TypeError, ValueError):
                raise NonNumericValueError(name, v) from None
        return out

    def missing_columns(self) -> List[str]:
        """Names of columns holding at least one missing value."""
        return [
            name
            for name, values in self._columns.items()
            if any(_is_missing(v) for v in values)
        ]

    def select(self, names: Sequence[str]) -> "Dataset":
        """New dataset with only ``names``, in the given order."""
        return Dataset({name: self.raw(name) for name in names})


def validate(data: Any) -> None:
    """Check that ``data`` can be drawn as a parallel plot.

    Raises:
        NullInputError: ``data`` is None.
        InsufficientColumnsError: Fewer than two columns.
        InsufficientRowsError: Fewer than two rows.
        MissingValuesError: Any cell is None or NaN.
    """
    dataset = Dataset.coerce(data)
    if dataset.n_columns < 2:
        raise InsufficientColumnsError(dataset.n_columns)
    if dataset.n_rows < 2:
        raise InsufficientRowsError(dataset.n_rows)
    missing = dataset.missing_columns()
    if missing:
        raise MissingValuesError(missing)


def normalize(data: Any, strict: bool = False) -> Dataset:
    """Rescale every column independently to [0, 1].

    A column whose values are all equal has no extent; its values become 0.5
    (the middle of the axis) unless ``strict`` is set.

    Raises:
        DegenerateRangeError: With ``strict=True``, for a constant column.
    """
    dataset = Dataset.coerce(data)
    out: Dict[str, np.ndarray] = {}
    for name in dataset.names:
        values = dataset.column(name)
        if len(values) == 0:
            out[name] = values
            continue
        lo = float(values.min())
        hi = float(values.max())
        if hi == lo:
            if strict:
                raise DegenerateRangeError(name, lo)
            out[name] = np.full(len(values), 0.5)
        else:
            out[name] = (values - lo) / (hi - lo)
    return Dataset({name: values.tolist() for name, values in out.items()})
