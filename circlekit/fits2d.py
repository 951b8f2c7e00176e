"""Algebraic circle fits to planar points.

The Kasa, Pratt, Taubin and Hyper fits work on centered moments of the
data. The least-squares fit solves the linear system
``x*cx + y*cy + c = x^2 + y^2`` directly.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

import numpy as np

from circlekit.circle import Circle
from circlekit.data import Data
from circlekit.utilities import sigma

_ITER_MAX = 99


@dataclass(frozen=True)
class _Moments:
    mean_x: float
    mean_y: float
    mxx: float
    myy: float
    mxy: float
    mxz: float
    myz: float
    mzz: float

    @property
    def mz(self) -> float:
        return self.mxx + self.myy

    @property
    def cov_xy(self) -> float:
        return self.mxx * self.myy - self.mxy * self.mxy

    @property
    def var_z(self) -> float:
        return self.mzz - self.mz * self.mz


def _moments(x: np.ndarray, y: np.ndarray, mean_x: float, mean_y: float) -> _Moments:
    xi = x - mean_x
    yi = y - mean_y
    zi = xi * xi + yi * yi
    return _Moments(
        mean_x=mean_x,
        mean_y=mean_y,
        mxx=float((xi * xi).mean()),
        myy=float((yi * yi).mean()),
        mxy=float((xi * yi).mean()),
        mxz=float((xi * zi).mean()),
        myz=float((yi * zi).mean()),
        mzz=float((zi * zi).mean()),
    )


def _data_moments(data: Data) -> _Moments:
    data.means()
    return _moments(data.x, data.y, data.mean_x, data.mean_y)


def _newton_root(
    a0: float, poly: Callable[[float], float], deriv: Callable[[float], float]
) -> tuple[float, int]:
    """Newton's method from zero; returns the root and the iteration count."""
    x, y = 0.0, a0
    for iteration in range(_ITER_MAX):
        dy = deriv(x)
        if dy == 0.0:
            return x, iteration
        xnew = x - y / dy
        if xnew == x or not math.isfinite(xnew):
            return x, iteration
        ynew = poly(xnew)
        if abs(ynew) >= abs(y):
            return x, iteration
        x, y = xnew, ynew
    return x, _ITER_MAX


def _pratt_hyper_root(m: _Moments) -> tuple[float, int]:
    a2 = 4.0 * m.cov_xy - 3.0 * m.mz * m.mz - m.mzz
    a1 = m.var_z * m.mz + 4.0 * m.cov_xy * m.mz - m.mxz * m.mxz - m.myz * m.myz
    a0 = (
        m.mxz * (m.mxz * m.myy - m.myz * m.mxy)
        + m.myz * (m.myz * m.mxx - m.mxz * m.mxy)
        - m.var_z * m.cov_xy
    )
    a22 = a2 + a2
    return _newton_root(
        a0,
        lambda x: a0 + x * (a1 + x * (a2 + 4.0 * x * x)),
        lambda x: a1 + x * (a22 + 16.0 * x * x),
    )


def _center_offset(m: _Moments, root: float) -> tuple[float, float]:
    det = root * root - root * m.mz + m.cov_xy
    if det == 0.0:
        raise ValueError("degenerate point set: the circle center is undefined")
    xc = (m.mxz * (m.myy - root) - m.myz * m.mxy) / det / 2.0
    yc = (m.myz * (m.mxx - root) - m.mxz * m.mxy) / det / 2.0
    return xc, yc


def _radius(squared: float) -> float:
    if not squared >= 0.0:
        raise ValueError("degenerate point set: the circle radius is undefined")
    return math.sqrt(squared)


def _finish(data: Data, m: _Moments, xc: float, yc: float, r: float, iterations: int) -> Circle:
    circle = Circle(px=xc + m.mean_x, py=yc + m.mean_y, r=r)
    circle.s = sigma(data, circle)
    circle.i = 0
    circle.j = iterations
    return circle


def fit_kasa(data: Data) -> Circle:
    """Kasa fit: minimise the sum of ((x-a)^2 + (y-b)^2 - R^2)^2."""
    m = _data_moments(data)
    if m.mxx <= 0.0:
        raise ValueError("degenerate point set: all x coordinates are equal")
    g11 = math.sqrt(m.mxx)
    g12 = m.mxy / g11
    g22_squared = m.myy - g12 * g12
    if g22_squared <= 0.0:
        raise ValueError("degenerate point set: the points are collinear")
    g22 = math.sqrt(g22_squared)
    d1 = m.mxz / g11
    d2 = (m.myz - d1 * g12) / g22
    c = d2 / g22 / 2.0
    b = (d1 - g12 * c) / g11 / 2.0
    return _finish(data, m, b, c, _radius(b * b + c * c + m.mxx + m.myy), 0)


def fit_pratt(data: Data) -> Circle:
    """Pratt fit: the Kasa objective divided by R^2."""
    m = _data_moments(data)
    root, iterations = _pratt_hyper_root(m)
    xc, yc = _center_offset(m, root)
    r = _radius(xc * xc + yc * yc + m.mz + root + root)
    return _finish(data, m, xc, yc, r, iterations)


def fit_taubin(data: Data) -> Circle:
    """Taubin fit: the Kasa objective divided by the mean squared distance."""
    m = _data_moments(data)
    a3 = 4.0 * m.mz
    a2 = -3.0 * m.mz * m.mz - m.mzz
    a1 = m.var_z * m.mz + 4.0 * m.cov_xy * m.mz - m.mxz * m.mxz - m.myz * m.myz
    a0 = (
        m.mxz * (m.mxz * m.myy - m.myz * m.mxy)
        + m.myz * (m.myz * m.mxx - m.mxz * m.mxy)
        - m.var_z * m.cov_xy
    )
    a22 = a2 + a2
    a33 = a3 + a3 + a3
    root, iterations = _newton_root(
        a0,
        lambda x: a0 + x * (a1 + x * (a2 + x * a3)),
        lambda x: a1 + x * (a22 + a33 * x),
    )
    xc, yc = _center_offset(m, root)
    r = _radius(xc * xc + yc * yc + m.mz)
    return _finish(data, m, xc, yc, r, iterations)


def fit_hyper(data: Data) -> Circle:
    """Hyperaccurate algebraic fit, combining the Pratt and Taubin fits."""
    m = _data_moments(data)
    root, iterations = _pratt_hyper_root(m)
    xc, yc = _center_offset(m, root)
    r = _radius(xc * xc + yc * yc + m.mz - root - root)
    return _finish(data, m, xc, yc, r, iterations)


def _solve_least_square(
    x: np.ndarray, y: np.ndarray, w: Optional[np.ndarray] = None
) -> tuple[float, float, float]:
    if len(x) == 0:
        raise ValueError("no points to fit")
    a = np.column_stack([x, y, np.ones_like(x)])
    b = x * x + y * y
    if w is not None:
        a = a * w[:, None]
        b = b * w
    solution, *_ = np.linalg.lstsq(a, b, rcond=None)
    xc = float(solution[0]) / 2.0
    yc = float(solution[1]) / 2.0
    r = _radius(float(solution[2]) + xc * xc + yc * yc)
    return xc, yc, r


def least_square_xy(
    x: Sequence[float], y: Sequence[float], w: Optional[Sequence[float]] = None
) -> tuple[float, float, float]:
    """Least-squares circle through points; returns ``(xc, yc, r)``.

    Weights are applied only when ``w`` has one entry per point; otherwise
    they are ignored.
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.shape != ys.shape:
        raise ValueError("x and y must have the same length")
    weights = None
    if w is not None:
        ws = np.asarray(w, dtype=float)
        if ws.shape == xs.shape:
            weights = ws
    return _solve_least_square(xs, ys, weights)


def fit_least_square(data: Data) -> Circle:
    """Least-squares fit of ``x^2 + y^2`` by a linear function of x and y."""
    xc, yc, r = _solve_least_square(data.x, data.y)
    circle = Circle(px=xc, py=yc, r=r)
    circle.s = sigma(data, circle)
    return circle


def _planar(points) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] < 2:
        raise ValueError("points must have shape (n, 2) or wider")
    if pts.shape[0] == 0:
        raise ValueError("no points to fit")
    return pts[:, :2]


def fit_hyper_points(points) -> Circle:
    """Hyper fit to the first two columns of an (n, k) array of points.

    Only center and radius are set; the error and counters keep their defaults.
    """
    pts = _planar(points)
    mean = pts.mean(axis=0)
    m = _moments(pts[:, 0], pts[:, 1], float(mean[0]), float(mean[1]))
    root, _ = _pratt_hyper_root(m)
    xc, yc = _center_offset(m, root)
    r = _radius(xc * xc + yc * yc + m.mz - root - root)
    return Circle(px=xc + m.mean_x, py=yc + m.mean_y, r=r)


def fit_least_square_points(points) -> Circle:
    """Least-squares fit to the first two columns of an (n, k) array of points."""
    pts = _planar(points)
    xc, yc, r = _solve_least_square(pts[:, 0], pts[:, 1])
    return Circle(px=xc, py=yc, r=r)