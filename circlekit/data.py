"""Planar point sets used as input to the circle fits."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np


def pythag(a: float, b: float) -> float:
    """Return sqrt(a*a + b*b) without destructive overflow or underflow."""
    absa, absb = abs(a), abs(b)
    if absa > absb:
        return absa * math.sqrt(1.0 + (absb / absa) ** 2)
    if absb == 0.0:
        return 0.0
    return absb * math.sqrt(1.0 + (absa / absb) ** 2)


class Data:
    """A set of 2-D points with the coordinates of its centroid.

    ``x`` and ``y`` are one-dimensional float arrays of equal length;
    ``mean_x`` and ``mean_y`` hold the centroid as last computed.
    """

    def __init__(self, x: Iterable[float] = (), y: Iterable[float] = ()) -> None:
        self.x = np.empty(0)
        self.y = np.empty(0)
        self.mean_x = 0.0
        self.mean_y = 0.0
        self.assign_values(x, y)

    @classmethod
    def zeros(cls, n: int) -> "Data":
        """Return a set of ``n`` points, all at the origin."""
        if n < 0:
            raise ValueError("the number of points cannot be negative")
        return cls(np.zeros(n), np.zeros(n))

    @property
    def n(self) -> int:
        """Number of points."""
        return len(self.x)

    def __len__(self) -> int:
        return self.n

    def assign_values(self, x: Iterable[float], y: Iterable[float]) -> None:
        """Replace the points and recompute the centroid."""
        xs = np.array(list(x), dtype=float)
        ys = np.array(list(y), dtype=float)
        if xs.shape != ys.shape:
            raise ValueError(
                f"x and y must have the same length, got {len(xs)} and {len(ys)}"
            )
        self.x, self.y = xs, ys
        if self.n:
            self.means()
        else:
            self.mean_x = self.mean_y = 0.0

    def means(self) -> None:
        """Compute the x- and y-sample means."""
        if not self.n:
            raise ValueError("an empty data set has no centroid")
        self.mean_x = float(self.x.sum() / self.n)
        self.mean_y = float(self.y.sum() / self.n)

    def center(self) -> None:
        """Shift the points so that their centroid lies at the origin."""
        self.means()
        self.x = self.x - self.mean_x
        self.y = self.y - self.mean_y
        self.mean_x = self.mean_y = 0.0

    def scale(self) -> None:
        """Scale the coordinates so that their mean square is one per axis."""
        if not self.n:
            raise ValueError("an empty data set cannot be scaled")
        scaling = math.sqrt(float((self.x @ self.x + self.y @ self.y) / self.n / 2.0))
        if scaling == 0.0:
            raise ValueError("all points lie at the origin; nothing to scale by")
        self.x = self.x / scaling
        self.y = self.y / scaling

    def __str__(self) -> str:
        points = ", ".join(f"({xi:.7g},{yi:.7g})" for xi, yi in zip(self.x, self.y))
        return f"The data set has {self.n} points with coordinates :\n{points}"

    def __repr__(self) -> str:
        return f"Data(x={self.x.tolist()!r}, y={self.y.tolist()!r})"