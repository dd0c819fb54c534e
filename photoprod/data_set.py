"""Loading of tabulated data files and the container used for fitting."""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field, replace
from typing import Sequence

import numpy as np

ENV_VAR = "JPACPHOTO"


class DataSetError(RuntimeError):
    """Raised when data files cannot be located."""


def jpacphoto_dir() -> str:
    """Top-level directory holding the data files, from ``$JPACPHOTO``."""
    env = os.environ.get(ENV_VAR, "")
    if not env:
        raise DataSetError(f"Cannot find environment variable {ENV_VAR}!")
    return env


def _full_path(rel_path: str) -> str:
    if not rel_path.startswith("/"):
        rel_path = "/" + rel_path
    return jpacphoto_dir() + rel_path


def _parse_floats(line: str) -> list[float]:
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def _is_skipped(line: str) -> bool:
    return not line or line.startswith("#")


def import_data(rel_path: str, columns: int) -> list[np.ndarray]:
    """Read ``columns`` whitespace-separated columns from a data file.

    Empty lines and lines beginning with ``#`` are skipped; missing values
    in a row are read as zero.
    """
    result: list[list[float]] = [[] for _ in range(columns)]
    with open(_full_path(rel_path), encoding="utf-8") as infile:
        for raw in infile:
            line = raw.rstrip("\n")
            if _is_skipped(line):
                continue
            values = _parse_floats(line)[:columns]
            values += [0.0] * (columns - len(values))
            for column, value in zip(result, values):
                column.append(value)
    return [np.asarray(column, dtype=float) for column in result]


def import_transposed(rel_path: str, rows: int) -> list[np.ndarray]:
    """Read the first ``rows`` lines of a file, each line being one series.

    A line that is empty or a comment leaves its row empty.
    """
    result: list[np.ndarray] = []
    with open(_full_path(rel_path), encoding="utf-8") as infile:
        for _ in range(rows):
            line = infile.readline().rstrip("\n")
            values = [] if _is_skipped(line) else _parse_floats(line)
            result.append(np.asarray(values, dtype=float))
    return result


def reshape_data(data: Sequence[np.ndarray], to_keep: Sequence[int]) -> list[np.ndarray]:
    """Keep only the selected columns, in the given order."""
    return [data[i] for i in to_keep]


def check(data: Sequence[Sequence[float]], name: str) -> int:
    """Common length of all columns, or 0 (with a warning) if they differ."""
    n = len(data[0])
    if any(len(column) != n for column in data):
        warnings.warn(f"Input vectors of {name} have mismatching sizes!", stacklevel=2)
        return 0
    return n


def _empty() -> np.ndarray:
    return np.empty(0, dtype=float)


def _empty_pair() -> tuple[np.ndarray, np.ndarray]:
    return (_empty(), _empty())


def _as_pair(value) -> tuple[np.ndarray, np.ndarray]:
    lower, upper = value
    return (np.asarray(lower, dtype=float), np.asarray(upper, dtype=float))


@dataclass
class DataSet:
    """A set of data points with up to three variables and their errors."""

    n: int = 0
    name: str = "data_set"
    kind: int = 0
    x: np.ndarray = field(default_factory=_empty)
    y: np.ndarray = field(default_factory=_empty)
    z: np.ndarray = field(default_factory=_empty)
    xerr: tuple[np.ndarray, np.ndarray] = field(default_factory=_empty_pair)
    yerr: tuple[np.ndarray, np.ndarray] = field(default_factory=_empty_pair)
    zerr: tuple[np.ndarray, np.ndarray] = field(default_factory=_empty_pair)
    extras: list[float] = field(default_factory=list)
    add_to_legend: bool = False

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float)
        self.z = np.asarray(self.z, dtype=float)
        self.xerr = _as_pair(self.xerr)
        self.yerr = _as_pair(self.yerr)
        self.zerr = _as_pair(self.zerr)
        self.extras = list(self.extras)

    def swap_dependent_variable(self) -> "DataSet":
        """Return a copy with the x and y variables (and their errors) exchanged."""
        return replace(self, x=self.y, xerr=self.yerr, y=self.x, yerr=self.xerr)