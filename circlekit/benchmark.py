"""Run every planar circle fit on the benchmark point sets and report the results."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from circlekit.circle import Circle
from circlekit.data import Data
from circlekit.fits2d import fit_hyper, fit_kasa, fit_least_square, fit_pratt, fit_taubin
from circlekit.utilities import simulate_random

_FITS: tuple[tuple[str, Callable[[Data], Circle]], ...] = (
    ("Kasa", fit_kasa),
    ("Pratt", fit_pratt),
    ("Taubin", fit_taubin),
    ("Hyper", fit_hyper),
    ("LS", fit_least_square),
)


@dataclass(frozen=True)
class _PointSet:
    title: str
    x: tuple[float, ...]
    y: tuple[float, ...]
    note: str = ""


# Benchmark from Gander, Golub and Strebel, "Least squares fitting of circles
# and ellipses" (1994).
_GANDER = _PointSet(
    "Test One",
    (1.0, 2.0, 5.0, 7.0, 9.0, 3.0),
    (7.0, 6.0, 8.0, 7.0, 5.0, 7.0),
)

# Benchmark from Pratt (1987); the Kasa fit grossly underestimates the circle.
_PRATT = _PointSet(
    "Test Three",
    (-1.0, -0.3, 0.3, 1.0),
    (0.0, -0.06, 0.1, 0.0),
)

_SAMPLED = (
    _PointSet(
        "Test from sampled data",
        (1.03, 1.11, 0.86, 1.04, 0.68, 0.85, 0.71, 0.44, 0.61, 0.37, 0.28, 0.20, 0.23, 0.16,
         0.16, 0.04, -0.05, -0.29, -0.34, -0.49, -0.55, -0.81, -0.81, -0.88, -0.80, -0.89,
         -0.71, -0.87, -0.82, -1.08),
        (-0.00, 0.16, 0.28, 0.20, 0.32, 0.62, 0.66, 0.71, 0.97, 0.83, 0.83, 1.16, 0.94, 0.87,
         1.06, 0.88, 1.09, 1.05, 0.77, 0.84, 0.93, 0.72, 0.61, 0.61, 0.55, 0.48, 0.33, 0.31,
         0.16, 0.03),
        "radian: 1  ground truth: [0, 0] 1",
    ),
    _PointSet(
        "Test from sampled data",
        (4.94, 5.06, 4.93, 4.97, 4.97, 4.56, 4.74, 4.65, 4.69, 4.48, 4.30, 4.36, 4.10, 4.00,
         3.88, 3.66, 3.53, 3.34, 3.20, 3.06, 3.03, 2.64, 2.50, 2.35, 2.15, 1.81, 1.61, 1.47,
         1.21, 0.94),
        (-3.02, -2.82, -2.63, -2.37, -2.10, -2.11, -1.62, -1.48, -1.27, -1.24, -0.64, -0.57,
         -0.45, -0.41, -0.34, -0.10, 0.06, 0.26, 0.47, 0.42, 0.48, 0.56, 0.64, 0.79, 0.93,
         0.83, 0.95, 1.02, 0.93, 1.05),
        "radian: 0.5  ground truth: [1, -3] 4",
    ),
    _PointSet(
        "Test from sampled data",
        (1.01, 1.09, 0.92, 0.94, 0.86, 0.91, 0.83, 0.97, 0.82, 0.70, 0.61, 0.44, 0.31, 0.25,
         0.21, -0.03, 0.02, -0.41, -0.54, -0.39, -0.50, -0.51, -0.90, -0.98, -1.06, -1.34,
         -1.68, -1.58, -1.91, -1.98),
        (4.78, 5.11, 5.42, 5.55, 5.73, 5.84, 6.12, 5.89, 6.15, 6.23, 6.46, 6.64, 6.74, 6.93,
         7.25, 7.19, 7.22, 7.20, 7.64, 7.65, 7.59, 7.76, 7.90, 7.98, 7.86, 7.84, 8.04, 7.78,
         8.00, 8.20),
        "radian: 0.5  ground truth: [-2, 5] 3",
    ),
    _PointSet(
        "Test from sampled data",
        (5.18, 5.07, 4.93, 4.60, 4.60, 4.32, 4.15, 3.85, 3.37, 3.10, 2.73, 2.65, 2.18, 2.02,
         1.65, 1.45, 1.21, 1.10, 0.84, 0.95),
        (2.21, 2.21, 2.71, 3.07, 3.34, 3.52, 3.69, 3.82, 3.73, 4.07, 4.10, 3.99, 3.93, 3.65,
         3.39, 3.02, 2.87, 2.57, 2.26, 2.11),
        "radian: 1  ground truth: [3, 2] 2",
    ),
)


def run_all_fits(data: Data) -> dict[str, Circle]:
    """Fit ``data`` with every algebraic fit; keys are fit names in a fixed order."""
    return {name: fit(data) for name, fit in _FITS}


def format_fit(name: str, circle: Circle) -> str:
    """One report line with center, radius and sigma to seven significant digits."""
    return (
        f"  {name:<6} fit:  center ({circle.px:.7g},{circle.py:.7g})  "
        f"radius {circle.r:.7g}  sigma {circle.s:.7g}"
    )


def _report(title: str, data: Data, note: str = "") -> list[str]:
    lines = [f"{title}:"]
    if note:
        lines.append(f"  Num of samples: {data.n}  {note}")
    try:
        results = run_all_fits(data)
    except ValueError as exc:
        lines.append(f"  fit failed: {exc}")
        return lines
    lines.extend(format_fit(name, circle) for name, circle in results.items())
    return lines


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare algebraic circle fits on benchmark point sets."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the randomly generated point set (default: unseeded)",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=10,
        help="number of points in the randomly generated set (default: 10)",
    )
    args = parser.parse_args(argv)
    if args.points < 1:
        parser.error("--points must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the results of every fit on every benchmark point set."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    sections: list[list[str]] = [_report(_GANDER.title, Data(_GANDER.x, _GANDER.y))]

    simulated = Data.zeros(args.points)
    simulate_random(simulated, 1.0, rng)
    sections.append(_report("Test Two", simulated))

    sections.append(_report(_PRATT.title, Data(_PRATT.x, _PRATT.y)))
    for point_set in _SAMPLED:
        sections.append(
            _report(point_set.title, Data(point_set.x, point_set.y), point_set.note)
        )

    sys.stdout.write("\n\n".join("\n".join(lines) for lines in sections) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())