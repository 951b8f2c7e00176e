"""The circle record returned by the fits."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _zero_vector() -> np.ndarray:
    return np.zeros(3)


@dataclass(eq=False)
class Circle:
    """A circle in space.

    ``px, py, pz`` is the center, ``r`` the radius and ``s`` the fit error.
    ``g``, ``gx``, ``gy`` are gradient slots and ``i``, ``j`` iteration
    counters; ``normal`` is the plane normal and ``u`` an auxiliary vector
    orthogonal to it.
    """

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    r: float = 1.0
    s: float = 0.0
    g: float = 0.0
    gx: float = 0.0
    gy: float = 0.0
    i: int = 0
    j: int = 0
    normal: np.ndarray = field(default_factory=_zero_vector)
    u: np.ndarray = field(default_factory=_zero_vector)

    def _mean_abs_residual(self, offsets: np.ndarray) -> float:
        if offsets.shape[0] == 0:
            raise ValueError("no points to measure the error against")
        distances = np.sqrt((offsets**2).sum(axis=1))
        self.s = float(np.abs(distances - self.r).mean())
        return self.s

    def compute_mse_3d(self, points) -> float:
        """Mean distance of 3-D points from the circle's sphere, stored in ``s``.

        ``points`` has shape (n, 3).
        """
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError("points must have shape (n, 3)")
        center = np.array([self.px, self.py, self.pz])
        return self._mean_abs_residual(pts - center)

    def compute_mse_2d(self, points) -> float:
        """Mean distance of planar points from the circle, stored in ``s``.

        Only the first two columns of ``points`` are used.
        """
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] < 2:
            raise ValueError("points must have shape (n, 2) or wider")
        center = np.array([self.px, self.py])
        return self._mean_abs_residual(pts[:, :2] - center)

    def __str__(self) -> str:
        normal = "\n".join(f"{value:.10g}" for value in self.normal)
        return (
            f"center ({self.px:.10g},{self.py:.10g},{self.pz:.10g})  "
            f"radius {self.r:.10g}  MSE: {self.s:.10g}\n"
            f"normal vector\n{normal}"
        )