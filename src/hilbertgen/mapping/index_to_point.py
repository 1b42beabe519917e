import numpy as np
from ..constants import (
    BOTTOM_LEFT,
    TOP_LEFT,
    TOP_RIGHT,
    BOTTOM_RIGHT,
    QUADRANT_MASK,
    INDEX_DTYPE,
    COORD_DTYPE,
)
from ..transforms.quadrant import transform_to_quadrant, transform_to_quadrant_array


def index_to_cell(point_index, order):
    """
    Calculates the grid cell of a point on the Hilbert curve from its index alone,
    without recursion over previous points or subdivisions.

    The index is consumed two bits at a time, least significant pair first. Each
    pair selects the quadrant the point lies in at that subdivision level. Bits
    above 2 * order are ignored. Python integers are used, so any order works.

    Args:
        point_index (int): Index of the point along the curve, 0 <= point_index < 4**order.
        order (int): Number of subdivisions of the curve.

    Returns:
        tuple: (x, y) integer cell, both in [0, 2**order).
    """
    point_index = int(point_index)
    if point_index < 0:
        raise ValueError(f"point_index must be non-negative, got {point_index}")

    x, y = 0, 0
    span = 1  # Grows to 2**level as the sub-curve expands
    for _ in range(order):
        x, y = transform_to_quadrant(point_index & QUADRANT_MASK, span, x, y)
        point_index >>= 2
        span *= 2
    return x, y


def index_to_point(point_index, order, segment_length):
    """
    Calculates the physical coordinates of a point on the Hilbert curve.

    The cell is offset by half a cell so the point lies in the middle of its
    subdivision, then scaled so consecutive points are segment_length apart.

    Args:
        point_index (int): Index of the point along the curve.
        order (int): Number of subdivisions of the curve.
        segment_length (float): Distance between consecutive points.

    Returns:
        tuple: (x, y) floats.
    """
    x, y = index_to_cell(point_index, order)
    return (x + 0.5) * segment_length, (y + 0.5) * segment_length


def indices_to_cells(point_indices, order):
    """
    Vectorized index_to_cell for an array of indices.

    Args:
        point_indices (array_like): Indices along the curve, non-negative.
        order (int): Number of subdivisions, at most 32 (uint64 indices).

    Returns:
        np.ndarray: (N, 2) uint64 array of cells in the order of point_indices.
    """
    working = np.array(point_indices, dtype=INDEX_DTYPE, ndmin=1)
    x = np.zeros(working.shape, dtype=INDEX_DTYPE)
    y = np.zeros(working.shape, dtype=INDEX_DTYPE)

    mask = INDEX_DTYPE(QUADRANT_MASK)
    shift = INDEX_DTYPE(2)
    for level in range(order):
        x, y = transform_to_quadrant_array(working & mask, 1 << level, x, y)
        working >>= shift

    return np.stack((x, y), axis=-1)


def indices_to_points(point_indices, order, segment_length):
    """
    Vectorized index_to_point for an array of indices.

    Returns:
        np.ndarray: (N, 2) float64 array of cell centers scaled by segment_length.
    """
    cells = indices_to_cells(point_indices, order)
    return (cells.astype(COORD_DTYPE) + 0.5) * segment_length


def cell_to_index(x, y, order):
    """
    Inverse of index_to_cell: finds where a grid cell lies along the curve.

    Quadrants are peeled from the outermost level inwards, undoing the
    transform applied at each level.

    Args:
        x (int): Column of the cell, 0 <= x < 2**order.
        y (int): Row of the cell, 0 <= y < 2**order.
        order (int): Number of subdivisions of the curve.

    Returns:
        int: Index of the cell along the curve.
    """
    x, y = int(x), int(y)
    side = 1 << order
    if not (0 <= x < side and 0 <= y < side):
        raise ValueError(f"Cell ({x}, {y}) lies outside the {side}x{side} grid of order {order}")

    point_index = 0
    for level in range(order - 1, -1, -1):
        span = 1 << level
        right = x >= span
        top = y >= span

        if not right and not top:
            code = BOTTOM_LEFT
            x, y = y, x
        elif not right:
            code = TOP_LEFT
            y -= span
        elif top:
            code = TOP_RIGHT
            x -= span
            y -= span
        else:
            code = BOTTOM_RIGHT
            x, y = span - 1 - y, 2 * span - 1 - x

        point_index |= code << (2 * level)

    return point_index


def cells_to_indices(x, y, order):
    """
    Vectorized cell_to_index for arrays of cells.

    Args:
        x (array_like): Columns of the cells, 0 <= x < 2**order.
        y (array_like): Rows of the cells, same shape as x.
        order (int): Number of subdivisions, at most 32 (uint64 indices).

    Returns:
        np.ndarray: uint64 array of indices along the curve.
    """
    x = np.array(x, dtype=INDEX_DTYPE, ndmin=1)
    y = np.array(y, dtype=INDEX_DTYPE, ndmin=1)
    side = 1 << order
    if np.any(x >= side) or np.any(y >= side):
        raise ValueError(f"Cells lie outside the {side}x{side} grid of order {order}")

    one = INDEX_DTYPE(1)
    point_indices = np.zeros(x.shape, dtype=INDEX_DTYPE)
    for level in range(order - 1, -1, -1):
        span = INDEX_DTYPE(1 << level)
        right = x >= span
        top = y >= span

        flip = ~right & ~top
        up = ~right & top
        up_right = right & top
        anti_flip = right & ~top

        codes = np.zeros(x.shape, dtype=INDEX_DTYPE)
        codes[up] = TOP_LEFT
        codes[up_right] = TOP_RIGHT
        codes[anti_flip] = BOTTOM_RIGHT

        new_x = x.copy()
        new_y = y.copy()
        new_x[flip] = y[flip]
        new_y[flip] = x[flip]
        new_y[up] -= span
        new_x[up_right] -= span
        new_y[up_right] -= span
        new_x[anti_flip] = span - one - y[anti_flip]
        new_y[anti_flip] = span + span - one - x[anti_flip]
        x, y = new_x, new_y

        point_indices |= codes << INDEX_DTYPE(2 * level)

    return point_indices
