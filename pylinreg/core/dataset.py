"""
Dataset: paired (x, y) samples for simple linear regression.

Dataset is the "I have samples" abstraction. It owns two equal-length
sequences of real numbers plus the axis labels that describe them, and
knows how to ingest them from comma-separated text. It does not know
which algorithm will consume it.

Usage:
    from pylinreg import Dataset

    ds = Dataset.from_file("study_hours.csv")
    ds = Dataset.from_arrays([1, 2, 3], [2.1, 3.9, 6.2])
    ds = Dataset.from_dataframe(df, x='hours', y='score')

    ds.add_point(4, 8.1)
    len(ds)          # 4
    ds.range('x')    # (1.0, 4.0)
    print(ds.summary())
"""

from __future__ import annotations

import csv
import math
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Literal, TextIO, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.exceptions import (
    EmptyDatasetError,
    IngestionError,
    MalformedRowWarning,
    ValidationError,
)
from pylinreg.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_scalar,
)

if TYPE_CHECKING:
    import pandas as pd


Axis = Literal['x', 'y']

DEFAULT_X_LABEL = 'X'
DEFAULT_Y_LABEL = 'Y'
DELIMITER = ','
MAX_WARNING_TEXT = 80


@dataclass(frozen=True)
class SkippedRow:
    """A source line that ingestion rejected."""
    line_number: int
    text: str
    reason: str


@dataclass(frozen=True)
class IngestReport:
    """
    Outcome of a successful Dataset.ingest() call.

    Attributes:
        source: Description of the ingested source
        n_rows: Number of samples loaded
        header: (x_label, y_label) if the first line was a header, else None
        skipped: Rows rejected during parsing, in source order
    """
    source: str
    n_rows: int
    header: tuple[str, str] | None
    skipped: tuple[SkippedRow, ...] = ()

    @property
    def header_detected(self) -> bool:
        return self.header is not None

    @property
    def n_skipped(self) -> int:
        return len(self.skipped)


@dataclass
class Dataset:
    """
    Mutable container of paired samples with axis labels.

    The x and y sequences always have equal length. Bulk ingestion
    replaces the contents atomically; add_point() appends.
    """
    _x: list[float] = field(default_factory=list)
    _y: list[float] = field(default_factory=list)
    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL

    def __post_init__(self):
        if len(self._x) != len(self._y):
            raise ValidationError(
                f"Inconsistent lengths: x={len(self._x)}, y={len(self._y)}"
            )

    # === Factory Methods ===

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        x_label: str = DEFAULT_X_LABEL,
        y_label: str = DEFAULT_Y_LABEL,
    ) -> Dataset:
        """Construct from two 1D array-likes of equal length."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))

        return cls(
            _x=x_arr.tolist(),
            _y=y_arr.tolist(),
            x_label=x_label,
            y_label=y_label,
        )

    @classmethod
    def from_file(cls, source: str | os.PathLike[str] | TextIO) -> Dataset:
        """Construct by ingesting a comma-separated source. See ingest()."""
        dataset = cls()
        dataset.ingest(source)
        return dataset

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        x: str | None = None,
        y: str | None = None,
    ) -> Dataset:
        """
        Construct from two columns of a pandas DataFrame.

        Column names become the axis labels. If x and y are both omitted
        the frame must have exactly two columns, taken in order.
        """
        if x is None and y is None:
            if len(df.columns) != 2:
                raise ValidationError(
                    f"DataFrame must have exactly 2 columns when x and y are "
                    f"not given, got {len(df.columns)}: {list(df.columns)}"
                )
            x, y = df.columns[0], df.columns[1]
        elif x is None or y is None:
            raise ValidationError("Specify both x and y columns, or neither")

        for col in (x, y):
            if col not in df.columns:
                raise ValidationError(
                    f"DataFrame has no column {col!r}. Available: {list(df.columns)}"
                )

        return cls.from_arrays(
            df[x].to_numpy(dtype=np.float64),
            df[y].to_numpy(dtype=np.float64),
            x_label=str(x),
            y_label=str(y),
        )

    # === Mutation ===

    def ingest(self, source: str | os.PathLike[str] | TextIO) -> IngestReport:
        """
        Replace the contents with samples parsed from comma-separated text.

        The first line is a header only if it has exactly two fields and
        neither parses as a number; its tokens then become the axis labels.
        Otherwise it is read as data. Each data line must hold exactly two
        finite numbers. Lines are parsed independently, so an unbalanced
        quote or an oversized field affects only its own line. Lines that
        break these rules are skipped with a MalformedRowWarning and listed in the returned
        report; blank lines are ignored.

        The dataset is only modified once parsing has succeeded.

        Args:
            source: Path to a text file, or an open text stream

        Returns:
            IngestReport describing what was loaded and skipped

        Raises:
            IngestionError: If the source cannot be opened or decoded
            EmptyDatasetError: If no valid data row was found
        """
        name = _describe_source(source)
        lines = _read_lines(source, name)

        xs: list[float] = []
        ys: list[float] = []
        header: tuple[str, str] | None = None
        skipped: list[SkippedRow] = []

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            try:
                row = _split_line(line)
            except csv.Error as e:
                parsed, reason = None, f"unparseable: {e}"
            else:
                if line_number == 1:
                    header = _parse_header(row)
                    if header is not None:
                        continue
                parsed, reason = _parse_row(row)

            if parsed is None:
                skipped.append(SkippedRow(line_number, line, reason))
                warnings.warn(
                    f"{name}: line {line_number}: skipped {_shorten(line)!r}: {reason}",
                    MalformedRowWarning,
                    stacklevel=2,
                )
                continue

            xs.append(parsed[0])
            ys.append(parsed[1])

        if not xs:
            raise EmptyDatasetError(f"No valid data found in {name}", source=name)

        self._x = xs
        self._y = ys
        if header is not None:
            self.x_label, self.y_label = header

        return IngestReport(
            source=name,
            n_rows=len(xs),
            header=header,
            skipped=tuple(skipped),
        )

    def add_point(self, x: float, y: float) -> None:
        """
        Append one sample.

        Raises:
            ValidationError: If x or y is not a finite real number
        """
        x_val = check_scalar(x, 'x')
        y_val = check_scalar(y, 'y')
        self._x.append(x_val)
        self._y.append(y_val)

    def set_labels(self, x_label: str, y_label: str) -> None:
        self.x_label = str(x_label)
        self.y_label = str(y_label)

    def copy(self) -> Dataset:
        return Dataset(
            _x=list(self._x),
            _y=list(self._y),
            x_label=self.x_label,
            y_label=self.y_label,
        )

    # === Access ===

    @property
    def x(self) -> NDArray[np.float64]:
        """x values as a float64 array (a copy)."""
        return np.array(self._x, dtype=np.float64)

    @property
    def y(self) -> NDArray[np.float64]:
        """y values as a float64 array (a copy)."""
        return np.array(self._y, dtype=np.float64)

    @property
    def n_observations(self) -> int:
        return len(self._x)

    def size(self) -> int:
        """Number of samples."""
        return len(self._x)

    def __len__(self) -> int:
        return len(self._x)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(zip(self._x, self._y))

    # === Statistics ===

    def range(self, axis: Axis) -> tuple[float, float]:
        """
        Return (min, max) of one axis.

        Raises:
            EmptyDatasetError: If the dataset has no samples
            ValidationError: If axis is not 'x' or 'y'
        """
        values = self._values(axis)
        if not values:
            raise EmptyDatasetError(f"Cannot compute {axis} range of an empty dataset")
        return min(values), max(values)

    def mean(self, axis: Axis) -> float:
        """
        Arithmetic mean of one axis.

        Raises:
            EmptyDatasetError: If the dataset has no samples
            ValidationError: If axis is not 'x' or 'y'
        """
        values = self._values(axis)
        if not values:
            raise EmptyDatasetError(f"Cannot compute {axis} mean of an empty dataset")
        return float(np.mean(values))

    def contains(self, x: float) -> bool:
        """True if x lies within the closed x range of the samples."""
        lo, hi = self.range('x')
        return lo <= x <= hi

    def summary(self) -> str:
        """Human-readable description: size, labels and value ranges."""
        lines = [
            "Dataset Summary",
            "=" * 40,
            f"Size: {len(self)} data points",
            f"X Label: {self.x_label}",
            f"Y Label: {self.y_label}",
        ]

        if self._x:
            x_min, x_max = self.range('x')
            y_min, y_max = self.range('y')
            lines.append(f"X Range: [{x_min:g}, {x_max:g}]")
            lines.append(f"Y Range: [{y_min:g}, {y_max:g}]")

        return "\n".join(lines)

    def _values(self, axis: str) -> list[float]:
        if axis == 'x':
            return self._x
        if axis == 'y':
            return self._y
        raise ValidationError(f"axis must be 'x' or 'y', got {axis!r}")

    def __repr__(self) -> str:
        return (
            f"Dataset(n={len(self)}, x_label={self.x_label!r}, "
            f"y_label={self.y_label!r})"
        )


def _describe_source(source: Any) -> str:
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    name = getattr(source, 'name', None)
    return str(name) if name else '<stream>'


def _read_lines(source: Any, name: str) -> list[str]:
    """Read the whole source up front so a failed parse touches nothing."""
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(Path(source), newline='', encoding='utf-8-sig') as handle:
                text = handle.read()
        else:
            text = source.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IngestionError(f"Cannot open {name}: {e}", source=name) from e

    if not isinstance(text, str):
        raise IngestionError(
            f"Cannot read {name}: expected text, got {type(text).__name__}",
            source=name,
        )
    return text.splitlines()


def _split_line(line: str) -> list[str]:
    """Split one physical line into fields; quoting never spans lines."""
    return next(csv.reader([line], delimiter=DELIMITER), [])


def _shorten(text: str) -> str:
    if len(text) <= MAX_WARNING_TEXT:
        return text
    return text[:MAX_WARNING_TEXT - 3] + "..."


def _parse_number(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_header(row: list[str]) -> tuple[str, str] | None:
    if len(row) != 2:
        return None
    x_label, y_label = row[0].strip(), row[1].strip()
    if not x_label or not y_label:
        return None
    if _parse_number(x_label) is not None or _parse_number(y_label) is not None:
        return None
    return x_label, y_label


def _parse_row(row: list[str]) -> tuple[tuple[float, float] | None, str]:
    if len(row) != 2:
        return None, f"expected 2 fields, got {len(row)}"

    values = []
    for token in row:
        value = _parse_number(token)
        if value is None:
            return None, f"not a finite number: {token.strip()!r}"
        values.append(value)

    return (values[0], values[1]), ''
