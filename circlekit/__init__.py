"""Algebraic circle fitting in 2D and 3D, point-file readers and a small binary search tree."""

__version__ = "0.1.0"

__all__ = ["bstree", "readers", "data", "circle", "utilities", "fits2d", "fit3d", "benchmark"]