# circlekit

Algebraic circle fitting for planar and spatial point sets, built on numpy.

## Modules

### `circlekit.fits2d`: planar fits

Each of these takes a `Data` and returns a `Circle` with center `px, py`,
radius `r`, and `s` set to the root-mean-square geometric error:

- `fit_kasa`: the Kasa fit.
- `fit_pratt`: the Pratt fit. Its Newton iteration count is stored in `j`.
- `fit_taubin`: the Taubin fit. Its Newton iteration count is stored in `j`.
- `fit_hyper`: the hyperaccurate fit. Its Newton iteration count is stored in `j`.
- `fit_least_square`: solves `x*cx + y*cy + c = x^2 + y^2` by least squares.

Point-array forms use the first two columns of an `(n, k)` array. They set
only the center and the radius:

- `fit_hyper_points`
- `fit_least_square_points`

`least_square_xy(x, y, w=None)` returns `(xc, yc, r)`. The weights are
applied only when `w` has one entry per point.

Degenerate input raises `ValueError`. Examples are collinear points or an
undefined center or radius.

### `circlekit.fit3d`: fitting in space

- `fit_plane(points)` returns `(centered, mean, normal)` for an `(n, 3)`
  array. `normal` is the unit normal of the best-fit plane.
- `rodrigues_rot_original`, `rodrigues_rot_vec` and `rodrigues_rot_lib`
  compute the same rotation in three ways. Each rotates `(n, 3)` points by
  the rotation that turns direction `n0` onto direction `n1`.
- `circle_fitting_3d(points)` runs the whole pipeline:
  1. Center the points and find the plane.
  2. Rotate the points onto the x-y plane.
  3. Fit a Hyper circle there.
  4. Rotate the center back into space.

  It returns a `Circle`. The normal has a non-negative z component. `s` is
  the mean absolute distance of the points from the circle's sphere.

### `circlekit.data.Data`

A set of 2-D points.

- `x`, `y`: numpy arrays.
- `n`: the number of points. `len()` gives the same.
- `mean_x`, `mean_y`: the centroid.
- `Data.zeros(n)`: makes a set of `n` points at the origin.
- `means()`, `center()`, `scale()` and `assign_values(x, y)`.

`circlekit.data.pythag(a, b)` computes `sqrt(a*a + b*b)` without overflow.

### `circlekit.circle.Circle`

A dataclass with these fields:

- `px, py, pz`: the center.
- `r`: the radius.
- `s`: the error.
- `g, gx, gy`: gradient slots.
- `i, j`: counters.
- `normal`, `u`: vectors.

`compute_mse_2d(points)` and `compute_mse_3d(points)` store the mean
absolute residual in `s` and return it. `str(circle)` gives a readable
summary.

### `circlekit.utilities`

Error measures for a `Data` and a `Circle`:

- `sigma`
- `sigma_reduced`
- `sigma_reduced_near_linear_case`
- `sigma_reduced_for_centered_scaled`
- `optimal_radius`

Simulators, each of which accepts an optional `random.Random`:

- `random_normal_pair()`: polar Box-Muller.
- `simulate_arc(...)`: noisy points along an arc.
- `simulate_random(data, window)`: uniform points in a square.

### `circlekit.readers`

Readers for whitespace-separated files whose lines hold
`time x y radius index`. Reading stops at the first line that does not start
with five numbers.

- `read_xy`: float32 rows `(x, y, 0)`.
- `read_xyr`: rows `(x, y, radius)`.
- `read_xy_2d`: rows `(x, y)`.
- `read_time`: the first number of the first line. It returns -1.0 for an
  empty file and raises `ValueError` on a bad value.

### `circlekit.bstree`

A binary search tree of comparable values built from `TreeNode`.

- Building and lookup: `build_tree`, `insert_node`, `contains`.
- Removal: `delete_node` and `take_rightmost_value`. Both return the new root.
- Traversals: the generators `preorder`, `inorder` and `postorder`.
- Shape checks: `height`, `height_rec`, `is_balanced` and
  `has_binary_search_property`.

## Install

    pip install .

## Example

```python
from circlekit.data import Data
from circlekit.fits2d import fit_hyper

data = Data([1.0, 2.0, 5.0, 7.0, 9.0, 3.0], [7.0, 6.0, 8.0, 7.0, 5.0, 7.0])
circle = fit_hyper(data)
print(circle.px, circle.py, circle.r, circle.s)
```

## Benchmark command

    circlekit-benchmark [--seed SEED] [--points N]

This runs all five planar fits on a series of point sets:

- the Gander–Golub–Strebel and Pratt benchmark sets;
- a random set of `N` points, 10 by default, seeded with `--seed` when it
  is given;
- four sampled arcs.

For each fit it prints the center, radius and sigma. A fit failure on a set
is reported in place of that set's results.

## What it does not do

There is no command that fits circles to your own files. The readers and
the fits are library functions, and you call them from Python.

## Tests

    pip install .[test]
    pytest