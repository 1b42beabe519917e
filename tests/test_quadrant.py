"""Test quadrant transforms"""

import numpy as np
import pytest
from hilbertgen.transforms import transform_to_quadrant, transform_to_quadrant_array


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, (2, 1)),  # flip across the main diagonal
        (1, (1, 6)),  # move up
        (2, (5, 6)),  # move up and right
        (3, (5, 2)),  # flip across the anti-diagonal, move right
    ],
)
def test_transform_to_quadrant(code, expected):
    assert transform_to_quadrant(code, 4, 1, 2) == expected


def test_code_is_masked():
    assert transform_to_quadrant(0b110, 4, 1, 2) == transform_to_quadrant(0b10, 4, 1, 2)


def test_first_order_from_origin():
    cells = [transform_to_quadrant(code, 1, 0, 0) for code in range(4)]
    assert cells == [(0, 0), (0, 1), (1, 1), (1, 0)]


@pytest.mark.parametrize("dtype", [np.uint64, np.float64])
def test_array_matches_scalar(dtype):
    span = 8
    rng = np.random.default_rng(0)
    x = rng.integers(0, span, size=200).astype(dtype)
    y = rng.integers(0, span, size=200).astype(dtype)
    codes = rng.integers(0, 4, size=200).astype(np.uint64)

    new_x, new_y = transform_to_quadrant_array(codes, span, x, y)

    for k in range(len(codes)):
        assert (new_x[k], new_y[k]) == transform_to_quadrant(int(codes[k]), span, int(x[k]), int(y[k]))
    assert new_x.dtype == dtype


def test_array_does_not_modify_inputs():
    x = np.array([0, 1, 2, 3], dtype=np.uint64)
    y = np.array([3, 2, 1, 0], dtype=np.uint64)
    codes = np.array([0, 1, 2, 3], dtype=np.uint64)
    transform_to_quadrant_array(codes, 4, x, y)
    assert x.tolist() == [0, 1, 2, 3]
    assert y.tolist() == [3, 2, 1, 0]
