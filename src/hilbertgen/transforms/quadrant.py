import numpy as np
from ..constants import BOTTOM_LEFT, TOP_LEFT, TOP_RIGHT, BOTTOM_RIGHT, QUADRANT_MASK

# Quadrants follow the order of the first order Hilbert curve, NOT the
# conventional cartesian numbering:
#
#      2nd quadrant          |   3rd quadrant
#      code 1 -> 0b01        |   code 2 -> 0b10
#  __________________________|____________________
#                            |
#      1st quadrant          |   4th quadrant
#      code 0 -> 0b00        |   code 3 -> 0b11
#
# This keeps the curve starting at the origin and growing in +x and +y.


def transform_to_quadrant(code, span, x, y):
    """
    Folds a sub-curve point into the quadrant selected by `code`.

    Args:
        code (int): Quadrant code, only the two least significant bits are used.
        span (int): Side length 2**level of the sub-curve built so far.
        x (int or float): Current x of the accumulated point.
        y (int or float): Current y of the accumulated point.

    Returns:
        tuple: (x, y) of the point placed in its quadrant of the next order.
    """
    code &= QUADRANT_MASK

    if code == BOTTOM_LEFT:
        # Flip across the main diagonal
        return y, x
    if code == TOP_LEFT:
        # Move up
        return x, y + span
    if code == TOP_RIGHT:
        # Move up and right
        return x + span, y + span
    # BOTTOM_RIGHT: flip across the anti-diagonal, then move right
    return span - 1 - y + span, span - 1 - x


def transform_to_quadrant_array(codes, span, x, y):
    """
    Vectorized version of transform_to_quadrant.

    Each element is transformed according to its own code; the inputs are not
    modified.

    Args:
        codes (np.ndarray): Array of quadrant codes (any unsigned integer dtype).
        span (int): Side length 2**level of the sub-curve built so far.
        x (np.ndarray): Current x coordinates.
        y (np.ndarray): Current y coordinates, same shape as x.

    Returns:
        tuple: (new_x, new_y) arrays with the same dtype as x and y.
    """
    codes = codes & QUADRANT_MASK
    span = x.dtype.type(span)
    one = x.dtype.type(1)

    flip = codes == BOTTOM_LEFT
    up = codes == TOP_LEFT
    up_right = codes == TOP_RIGHT
    anti_flip = codes == BOTTOM_RIGHT

    new_x = x.copy()
    new_y = y.copy()

    new_x[flip] = y[flip]
    new_y[flip] = x[flip]

    new_y[up] += span

    new_x[up_right] += span
    new_y[up_right] += span

    # Order of operations keeps uint arithmetic non-negative: y < span always
    new_x[anti_flip] = (span - one - y[anti_flip]) + span
    new_y[anti_flip] = span - one - x[anti_flip]

    return new_x, new_y
