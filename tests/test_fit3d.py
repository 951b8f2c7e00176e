import math

import numpy as np
import pytest

from circlekit.fit3d import (
    circle_fitting_3d,
    fit_plane,
    rodrigues_rot_lib,
    rodrigues_rot_original,
    rodrigues_rot_vec,
)

Z = np.array([0.0, 0.0, 1.0])

CASE_1 = np.array(
    [
        [1.01, 0.04, 0.52],
        [0.94, 0.43, 0.78],
        [0.79, 0.65, 0.64],
        [0.48, 0.76, 0.67],
        [0.15, 1.04, 0.36],
        [-0.25, 0.87, -0.01],
        [-0.46, 1.13, -0.24],
        [-0.71, 0.87, -0.31],
        [-1.13, 0.43, -0.60],
        [-0.96, -0.12, -0.78],
    ]
)

_X2 = [1.13, 1.21, 1.06, 0.83, 0.59, 0.95, 0.59, 0.54, 0.23, 0.09,
       -0.11, -0.21, -0.27, -0.65, -0.84, -0.99, -1.22, -1.38, -1.84, -2.15]
_Y2 = [4.81, 5.28, 5.35, 5.68, 5.78, 6.36, 6.37, 6.51, 6.87, 6.86,
       7.08, 7.44, 7.71, 7.83, 7.95, 7.97, 8.07, 8.09, 8.01, 8.05]
_Z2 = [5.02, 5.10, 5.27, 5.21, 5.07, 5.01, 5.07, 5.06, 4.91, 4.72,
       4.84, 4.60, 4.63, 4.28, 4.28, 4.24, 4.15, 3.82, 3.71, 3.49]
CASE_2 = np.column_stack([_X2, _Y2, _Z2])


def _circle_points(center, normal, radius, angles):
    n = np.asarray(normal, dtype=float)
    n = n / np.linalg.norm(n)
    helper = np.array([1.0, 0.0, 0.0]) if abs(n[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
    u = np.cross(n, helper)
    u /= np.linalg.norm(u)
    v = np.cross(n, u)
    angles = np.asarray(angles)
    return (
        np.asarray(center, dtype=float)
        + radius * np.outer(np.cos(angles), u)
        + radius * np.outer(np.sin(angles), v)
    )


def test_fit_plane_centers_and_finds_normal():
    normal = np.array([1.0, 1.0, 1.0]) / math.sqrt(3.0)
    pts = _circle_points([1.0, 2.0, 3.0], normal, 2.0, np.linspace(0, 2 * math.pi, 12, endpoint=False))
    centered, mean, found = fit_plane(pts)
    assert np.allclose(mean, [1.0, 2.0, 3.0])
    assert np.allclose(centered.mean(axis=0), 0.0, atol=1e-12)
    assert math.isclose(float(np.linalg.norm(found)), 1.0, rel_tol=1e-12)
    assert math.isclose(abs(float(found @ normal)), 1.0, rel_tol=1e-9)


def test_fit_plane_rejects_bad_shape():
    with pytest.raises(ValueError):
        fit_plane(np.zeros((4, 2)))


def test_fit_plane_rejects_empty():
    with pytest.raises(ValueError):
        fit_plane(np.zeros((0, 3)))


@pytest.mark.parametrize("rotate", [rodrigues_rot_original, rodrigues_rot_vec, rodrigues_rot_lib])
def test_rotation_maps_n0_onto_n1(rotate):
    n0 = np.array([1.0, 2.0, 2.0]) / 3.0
    rotated = rotate(n0[None, :], n0, Z)
    assert np.allclose(rotated[0], Z)


def test_rotation_variants_agree():
    rng = np.random.default_rng(7)
    pts = rng.normal(size=(8, 3))
    n0 = np.array([0.3, -0.5, 0.8])
    a = rodrigues_rot_original(pts, n0, Z)
    b = rodrigues_rot_vec(pts, n0, Z)
    c = rodrigues_rot_lib(pts, n0, Z)
    assert np.allclose(a, b)
    assert np.allclose(a, c)


@pytest.mark.parametrize("rotate", [rodrigues_rot_original, rodrigues_rot_vec, rodrigues_rot_lib])
def test_rotation_preserves_lengths(rotate):
    pts = np.array([[1.0, 0.0, 0.0], [0.5, -2.0, 3.0], [0.0, 0.0, 0.0]])
    rotated = rotate(pts, [0.0, 1.0, 1.0], Z)
    assert np.allclose(np.linalg.norm(rotated, axis=1), np.linalg.norm(pts, axis=1))


def test_rotation_round_trip():
    pts = np.array([[1.0, 2.0, 3.0], [-1.0, 0.5, 0.25]])
    n0 = np.array([2.0, -1.0, 0.5])
    there = rodrigues_rot_lib(pts, n0, Z)
    back = rodrigues_rot_original(there, Z, n0)
    assert np.allclose(back, pts)


@pytest.mark.parametrize("rotate", [rodrigues_rot_original, rodrigues_rot_vec, rodrigues_rot_lib])
def test_rotation_same_direction_is_identity(rotate):
    pts = np.array([[1.0, 2.0, 3.0], [4.0, -5.0, 6.0]])
    assert np.allclose(rotate(pts, [0.0, 0.0, 2.0], Z), pts)


def test_rotation_rejects_zero_direction():
    with pytest.raises(ValueError):
        rodrigues_rot_lib(np.ones((2, 3)), [0.0, 0.0, 0.0], Z)


def test_circle_fitting_3d_recovers_exact_circle():
    normal = np.array([1.0, 1.0, 1.0]) / math.sqrt(3.0)
    pts = _circle_points([1.0, 2.0, 3.0], normal, 2.0, np.linspace(0, 2 * math.pi, 16, endpoint=False))
    circle = circle_fitting_3d(pts)
    assert circle.px == pytest.approx(1.0, abs=1e-6)
    assert circle.py == pytest.approx(2.0, abs=1e-6)
    assert circle.pz == pytest.approx(3.0, abs=1e-6)
    assert circle.r == pytest.approx(2.0, abs=1e-6)
    assert circle.s == pytest.approx(0.0, abs=1e-6)
    assert np.allclose(circle.normal, normal)


def test_circle_fitting_3d_recovers_arc_and_flips_normal_up():
    normal = np.array([0.2, -0.3, -1.0])
    pts = _circle_points([-1.5, 5.0, 3.4], normal, 3.0, np.linspace(0.0, 1.5, 20))
    circle = circle_fitting_3d(pts)
    assert circle.r == pytest.approx(3.0, abs=1e-5)
    assert [circle.px, circle.py, circle.pz] == pytest.approx([-1.5, 5.0, 3.4], abs=1e-5)
    assert circle.normal[2] > 0
    assert np.allclose(circle.normal, -normal / np.linalg.norm(normal))


@pytest.mark.parametrize("points", [CASE_1, CASE_2])
def test_circle_fitting_3d_source_cases_invariants(points):
    before = points.copy()
    circle = circle_fitting_3d(points)
    assert np.array_equal(points, before)
    assert math.isfinite(circle.r) and circle.r > 0
    assert math.isclose(float(np.linalg.norm(circle.normal)), 1.0, rel_tol=1e-9)
    assert circle.normal[2] >= 0
    center = np.array([circle.px, circle.py, circle.pz])
    assert abs(float((center - points.mean(axis=0)) @ circle.normal)) < 1e-9
    s = circle.s
    assert s >= 0
    assert circle.compute_mse_3d(points) == pytest.approx(s)


def test_circle_fitting_3d_rejects_bad_shape():
    with pytest.raises(ValueError):
        circle_fitting_3d(np.zeros((5, 2)))