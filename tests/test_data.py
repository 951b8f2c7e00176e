import math

import numpy as np
import pytest

from circlekit.data import Data, pythag


def test_construction_computes_means():
    data = Data([1.0, 2.0, 5.0, 7.0, 9.0, 3.0], [7.0, 6.0, 8.0, 7.0, 5.0, 7.0])
    assert data.n == 6
    assert data.mean_x == pytest.approx(np.mean([1.0, 2.0, 5.0, 7.0, 9.0, 3.0]))
    assert data.mean_y == pytest.approx(np.mean([7.0, 6.0, 8.0, 7.0, 5.0, 7.0]))


def test_zeros_gives_points_at_origin():
    data = Data.zeros(4)
    assert len(data) == 4
    assert data.x.tolist() == [0.0] * 4
    assert data.y.tolist() == [0.0] * 4


def test_zeros_rejects_negative_count():
    with pytest.raises(ValueError):
        Data.zeros(-1)


def test_empty_data_has_no_centroid():
    data = Data()
    assert data.n == 0
    with pytest.raises(ValueError):
        data.means()


def test_assign_values_replaces_points_and_means():
    data = Data([1.0, 2.0], [3.0, 4.0])
    data.assign_values([-1.0, -0.3, 0.3, 1.0], [0.0, -0.06, 0.1, 0.0])
    assert data.n == 4
    assert data.x.tolist() == [-1.0, -0.3, 0.3, 1.0]
    assert data.mean_x == pytest.approx(0.0)
    assert data.mean_y == pytest.approx(np.mean([0.0, -0.06, 0.1, 0.0]))


def test_assign_values_rejects_mismatched_lengths():
    data = Data()
    with pytest.raises(ValueError):
        data.assign_values([1.0, 2.0], [1.0])


def test_center_moves_centroid_to_origin():
    xs = [1.0, 2.0, 5.0, 7.0, 9.0, 3.0]
    ys = [7.0, 6.0, 8.0, 7.0, 5.0, 7.0]
    data = Data(xs, ys)
    data.center()
    assert data.mean_x == 0.0 and data.mean_y == 0.0
    assert data.x.mean() == pytest.approx(0.0, abs=1e-12)
    assert data.y.mean() == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(data.x - data.x[0], np.array(xs) - xs[0])


def test_scale_normalises_mean_square():
    data = Data([1.0, 2.0, 5.0, 7.0], [7.0, 6.0, 8.0, 7.0])
    original_ratio = data.x[1] / data.x[0]
    data.scale()
    assert float((data.x @ data.x + data.y @ data.y) / data.n) == pytest.approx(2.0)
    assert data.x[1] / data.x[0] == pytest.approx(original_ratio)


def test_scale_of_points_at_origin_raises():
    data = Data.zeros(3)
    with pytest.raises(ValueError):
        data.scale()


def test_str_lists_points():
    data = Data([1.0, 2.5], [3.0, 4.0])
    text = str(data)
    assert text.startswith("The data set has 2 points with coordinates :")
    assert "(1,3), (2.5,4)" in text


@pytest.mark.parametrize("a,b", [(3.0, 4.0), (1e200, 1e200), (-2.0, 0.5), (1e-200, 3e-200)])
def test_pythag_matches_hypot(a, b):
    assert pythag(a, b) == pytest.approx(math.hypot(a, b))


def test_pythag_of_zeros_is_zero():
    assert pythag(0.0, 0.0) == 0.0