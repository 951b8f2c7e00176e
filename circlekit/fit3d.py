"""Circle fitting to points in space.

The points are centered, a best-fit plane is found, the points are rotated
onto the x-y plane, a planar circle is fitted there, and the center is
rotated back into space.
"""

from __future__ import annotations

import math

import numpy as np

from circlekit.circle import Circle
from circlekit.fits2d import fit_hyper_points

_Z_AXIS = np.array([0.0, 0.0, 1.0])


def _as_points(points) -> np.ndarray:
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("points must have shape (n, 3)")
    return pts


def _unit(vector, name: str) -> np.ndarray:
    vec = np.asarray(vector, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"{name} must be a vector of length 3")
    norm = float(np.linalg.norm(vec))
    if norm == 0.0:
        raise ValueError(f"{name} must not be the zero vector")
    return vec / norm


def _axis_and_angle(n0, n1) -> tuple[np.ndarray, float]:
    """Rotation axis and angle that turn direction ``n0`` onto ``n1``.

    For parallel directions the axis is the zero vector.
    """
    a = _unit(n0, "n0")
    b = _unit(n1, "n1")
    k = np.cross(a, b)
    k_norm = float(np.linalg.norm(k))
    k = k / k_norm if k_norm > 0.0 else np.zeros(3)
    theta = math.acos(float(np.clip(a @ b, -1.0, 1.0)))
    return k, theta


def fit_plane(points) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(centered, mean, normal)`` for an (n, 3) array of points.

    ``centered`` is the points minus their centroid ``mean``; ``normal`` is
    the unit normal of the plane closest to the points.
    """
    pts = _as_points(points)
    if pts.shape[0] == 0:
        raise ValueError("no points to fit a plane to")
    mean = pts.mean(axis=0)
    centered = pts - mean
    _, _, vt = np.linalg.svd(centered, full_matrices=True)
    normal = -vt[2]
    return centered, mean, normal


def rodrigues_rot_original(points, n0, n1) -> np.ndarray:
    """Rotate points by the rotation taking ``n0`` onto ``n1``, row by row formula."""
    pts = _as_points(points)
    k, theta = _axis_and_angle(n0, n1)
    c, s = math.cos(theta), math.sin(theta)
    return pts * c + np.cross(k, pts) * s + np.outer(pts @ k, k) * (1.0 - c)


def rodrigues_rot_vec(points, n0, n1) -> np.ndarray:
    """Rotate points using the matrix ``I + sin K + (1 - cos) K^2``."""
    pts = _as_points(points)
    k, theta = _axis_and_angle(n0, n1)
    cross = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    rotation = np.eye(3) + math.sin(theta) * cross + (1.0 - math.cos(theta)) * (cross @ cross)
    return pts @ rotation.T


def rodrigues_rot_lib(points, n0, n1) -> np.ndarray:
    """Rotate points using the axis-angle rotation matrix."""
    pts = _as_points(points)
    k, theta = _axis_and_angle(n0, n1)
    c, s = math.cos(theta), math.sin(theta)
    skew = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    rotation = c * np.eye(3) + (1.0 - c) * np.outer(k, k) + s * skew
    return pts @ rotation.T


def circle_fitting_3d(points) -> Circle:
    """Fit a circle to an (n, 3) array of points in space.

    The returned circle's normal points upwards (non-negative z) and its
    ``s`` is the mean distance of the points from the fitted circle's sphere.
    """
    original = _as_points(points).copy()
    centered, mean, normal = fit_plane(original)

    planar = rodrigues_rot_lib(centered, normal, _Z_AXIS)
    circle = fit_hyper_points(planar)
    circle.compute_mse_2d(planar)

    center = rodrigues_rot_original([[circle.px, circle.py, 0.0]], _Z_AXIS, normal)[0]
    circle.px, circle.py, circle.pz = (float(v) for v in center + mean)

    if normal[2] < 0:
        normal = -normal
    circle.normal = normal

    circle.compute_mse_3d(original)
    return circle