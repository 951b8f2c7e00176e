"""Readers for whitespace-separated point records.

Each record line holds ``time x y radius stem_index``. Reading stops at the
first line that does not start with five numbers.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]

_FIELDS = 5


def _records(path: PathLike) -> Iterator[tuple[float, ...]]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            tokens = line.split()[:_FIELDS]
            if len(tokens) < _FIELDS:
                return
            try:
                yield tuple(float(token) for token in tokens)
            except ValueError:
                return


def _collect(path: PathLike, columns: int, pick, dtype) -> np.ndarray:
    rows = [pick(record) for record in _records(path)]
    if not rows:
        return np.empty((0, columns), dtype=dtype)
    return np.array(rows, dtype=dtype)


def read_xy(path: PathLike) -> np.ndarray:
    """Return single-precision rows ``(x, y, 0)`` of shape (n, 3)."""
    return _collect(path, 3, lambda r: (r[1], r[2], 0.0), np.float32)


def read_xyr(path: PathLike) -> np.ndarray:
    """Return rows ``(x, y, radius)`` of shape (n, 3)."""
    return _collect(path, 3, lambda r: (r[1], r[2], r[3]), np.float64)


def read_xy_2d(path: PathLike) -> np.ndarray:
    """Return rows ``(x, y)`` of shape (n, 2)."""
    return _collect(path, 2, lambda r: (r[1], r[2]), np.float64)


def read_time(path: PathLike) -> float:
    """Return the timestamp at the start of the first line.

    An empty file gives -1.0; a first line that does not start with a
    number raises ValueError.
    """
    with open(path, encoding="utf-8") as handle:
        line = handle.readline()
    if not line:
        return -1.0
    tokens = line.split()
    if not tokens:
        raise ValueError(f"no timestamp on the first line of {path}")
    try:
        return float(tokens[0])
    except ValueError:
        raise ValueError(f"bad timestamp {tokens[0]!r} in {path}") from None