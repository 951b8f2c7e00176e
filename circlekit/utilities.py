"""Simulation of test data and error measures for fitted circles."""

from __future__ import annotations

import math
import random
from typing import Optional

import numpy as np

from circlekit.circle import Circle
from circlekit.data import Data


def _source(rng: Optional[random.Random]):
    return rng if rng is not None else random


def random_normal_pair(rng: Optional[random.Random] = None) -> tuple[float, float]:
    """Return two independent standard normal values (polar Box-Muller)."""
    draw = _source(rng).random
    while True:
        rand1 = 2.0 * draw() - 1.0
        rand2 = 2.0 * draw() - 1.0
        wrand = rand1 * rand1 + rand2 * rand2
        if 0.0 < wrand < 1.0:
            break
    factor = math.sqrt(-2.0 * math.log(wrand) / wrand)
    return rand1 * factor, rand2 * factor


def simulate_arc(
    data: Data,
    a: float,
    b: float,
    radius: float,
    theta1: float,
    theta2: float,
    sigma: float,
    rng: Optional[random.Random] = None,
) -> None:
    """Fill ``data`` with points equally spaced along an arc, plus Gaussian noise.

    The arc has center ``(a, b)``, the given radius, and runs from angle
    ``theta1`` to ``theta2``; ``sigma`` is the noise standard deviation.
    """
    if data.n < 2:
        raise ValueError("an arc needs at least two points")
    thetas = np.linspace(theta1, theta2, data.n)
    noise = np.array([random_normal_pair(rng) for _ in range(data.n)])
    data.x = a + radius * np.cos(thetas) + sigma * noise[:, 0]
    data.y = b + radius * np.sin(thetas) + sigma * noise[:, 1]
    data.means()


def simulate_random(data: Data, window: float, rng: Optional[random.Random] = None) -> None:
    """Fill ``data`` with points uniform in the square |x| < window, |y| < window."""
    draw = _source(rng).random
    coords = np.array([(draw(), draw()) for _ in range(data.n)]).reshape(-1, 2)
    data.x = window * (2.0 * coords[:, 0] - 1.0)
    data.y = window * (2.0 * coords[:, 1] - 1.0)
    if data.n:
        data.means()


def _distances(data: Data, circle: Circle) -> np.ndarray:
    if not data.n:
        raise ValueError("an empty data set has no error")
    return np.hypot(data.x - circle.px, data.y - circle.py)


def sigma(data: Data, circle: Circle) -> float:
    """Root-mean-square geometric distance of the points from the circle."""
    residuals = _distances(data, circle) - circle.r
    return math.sqrt(float((residuals**2).mean()))


def sigma_reduced(data: Data, circle: Circle) -> float:
    """Like :func:`sigma`, but with the radius that best suits the center."""
    distances = _distances(data, circle)
    return math.sqrt(float(((distances - distances.mean()) ** 2).mean()))


def sigma_reduced_near_linear_case(data: Data, circle: Circle) -> float:
    """Reduced error estimate that stays accurate for nearly straight arcs.

    Relies on ``data.mean_x`` and ``data.mean_y`` being up to date.
    """
    if not data.n:
        raise ValueError("an empty data set has no error")
    a0 = circle.px - data.mean_x
    b0 = circle.py - data.mean_y
    delta = 1.0 / math.sqrt(a0 * a0 + b0 * b0)
    s, c = b0 * delta, a0 * delta
    x = data.x - data.mean_x
    y = data.y - data.mean_y
    z = x * x + y * y
    p = x * c + y * s
    t = delta * z - 2.0 * p
    g = t / (1.0 + np.sqrt(1.0 + delta * t))
    w = float(((z + p * g) / (2.0 + delta * g)).mean())
    zm = float(z.mean())
    return math.sqrt(zm - w * (2.0 + delta * delta * w))


def sigma_reduced_for_centered_scaled(data: Data, circle: Circle) -> float:
    """Reduced error estimate for data that was centered and scaled first."""
    r = float(_distances(data, circle).mean())
    return math.sqrt(circle.px**2 + circle.py**2 - r * r + 2.0)


def optimal_radius(data: Data, circle: Circle) -> float:
    """Mean distance of the points from the circle's center."""
    return float(_distances(data, circle).mean())