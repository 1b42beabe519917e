import math
from ..constants import MIN_ORDER, MAX_ORDER, DEFAULT_EDGE_LENGTH


def sanitize_inputs(order, edge_length, max_order=MAX_ORDER, verbose=True):
    """
    Clamps user supplied curve inputs to values the curve builder supports.

    Out of range values are replaced rather than rejected; every correction is
    recorded as a warning message (and printed when verbose).

    Args:
        order (int): Requested number of subdivisions. Non-integral values are
                     truncated with a warning.
        edge_length (float): Requested edge length.
        max_order (int): Highest order accepted before clamping.
        verbose (bool): If True, print each warning.

    Returns:
        tuple: (order, edge_length, warnings)
               order (int): Order clamped to [MIN_ORDER, max_order].
               edge_length (float): Positive, finite edge length.
               warnings (list): Messages describing each correction, empty if none.
    """
    warnings = []
    requested_order = order
    order = int(order)

    # Ensure the order is a whole number
    if float(requested_order) != order:
        warnings.append(
            f"Hilbert order must be an integer, got {requested_order}. "
            f"The value has been truncated to {order}."
        )
    # Ensure the order is a positive integer
    if order < MIN_ORDER:
        warnings.append(
            f"Hilbert order must be higher or equal to {MIN_ORDER}, got {order}. "
            f"The value has been set to {MIN_ORDER}."
        )
        order = MIN_ORDER
    # Ensure the order stays within the index width
    if order > max_order:
        warnings.append(
            f"Hilbert order must be lower or equal to {max_order}, got {order}. "
            f"The value has been set to {max_order}."
        )
        order = max_order

    # Ensure the edge length is a positive, finite number
    try:
        edge_length = float(edge_length)
    except (TypeError, ValueError):
        edge_length = math.nan
    if not math.isfinite(edge_length) or edge_length <= 0.0:
        warnings.append(
            f"Edge length must be a finite value higher than 0, got {edge_length}. "
            f"The value has been set to {DEFAULT_EDGE_LENGTH}."
        )
        edge_length = DEFAULT_EDGE_LENGTH

    if verbose:
        for message in warnings:
            print(f"Warning: {message}")

    return order, edge_length, warnings
