import time
from collections import namedtuple

import numpy as np
from ..constants import INDEX_DTYPE, COORD_DTYPE, DEFAULT_CHUNK_SIZE, DEFAULT_MAX_POINTS, MAX_ORDER
from ..mapping.index_to_point import index_to_point, indices_to_points
from .inputs import sanitize_inputs

HilbertCurveResult = namedtuple(
    "HilbertCurveResult",
    [
        "points",
        "number_of_rows",
        "number_of_columns",
        "number_of_points",
        "number_of_segments",
        "segment_length",
        "order",
        "edge_length",
        "warnings",
    ],
)


def get_curve_properties(order, edge_length):
    """
    Calculates the main properties of a Hilbert curve of the given order.

    Args:
        order (int): Number of subdivisions of the curve.
        edge_length (float): Edge length the curve is filling.

    Returns:
        dict: number_of_rows, number_of_columns, number_of_points,
              number_of_segments (ints) and segment_length (float).
    """
    number_of_rows = 2**order
    number_of_points = 4**order
    return {
        "number_of_rows": number_of_rows,
        "number_of_columns": number_of_rows,
        "number_of_points": number_of_points,
        "number_of_segments": number_of_points - 1,
        "segment_length": edge_length / 2 ** (order - 1),
    }


def iter_curve_chunks(order, segment_length, chunk_size=DEFAULT_CHUNK_SIZE, start=0, stop=None):
    """
    Yields consecutive blocks of curve points in index order.

    Args:
        order (int): Number of subdivisions of the curve.
        segment_length (float): Distance between consecutive points.
        chunk_size (int): Maximum number of points per block.
        start (int): First index to produce.
        stop (int, optional): One past the last index. Defaults to 4**order.

    Yields:
        tuple: (chunk_start, points) where points is an (M, 2) float64 array of
               the points with indices chunk_start .. chunk_start + M - 1.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    if stop is None:
        stop = 4**order

    chunk_start = start
    while chunk_start < stop:
        count = min(chunk_size, stop - chunk_start)
        # Offsetting a small arange keeps 4**32 (which overflows uint64) out of numpy
        indices = np.arange(count, dtype=INDEX_DTYPE) + INDEX_DTYPE(chunk_start)
        yield chunk_start, indices_to_points(indices, order, segment_length)
        chunk_start += count


def build_hilbert_curve(order, edge_length, builder_config=None, verbose=False):
    """
    Builds the ordered point sequence of a Hilbert curve and its properties.

    Inputs are expected to be validated already (see sanitize_inputs).

    Args:
        order (int): Number of subdivisions of the curve.
        edge_length (float): Edge length the curve is filling.
        builder_config (dict, optional): Configuration for the point evaluation
            (e.g., {'method': 'vectorized', 'params': {'chunk_size': 4096}}).
            Defaults to the vectorized method.
        verbose (bool): If True, print progress messages.

    Returns:
        HilbertCurveResult: Points as an (4**order, 2) float64 array plus the
                            derived curve properties. warnings is empty.
    """
    properties = get_curve_properties(order, edge_length)
    number_of_points = properties["number_of_points"]
    segment_length = properties["segment_length"]

    # Default builder config
    if builder_config is None:
        builder_config = {"method": "vectorized", "params": {}}

    method = builder_config.get("method", "vectorized")
    params = builder_config.get("params") or {}

    if verbose:
        print(f"Building Hilbert curve of order {order} ({number_of_points} points)...")
    start_time = time.time()

    points = np.empty((number_of_points, 2), dtype=COORD_DTYPE)

    if method == "scalar":
        for point_index in range(number_of_points):
            points[point_index] = index_to_point(point_index, order, segment_length)
    else:
        if method != "vectorized":
            print(f"Unsupported builder method: {method}. Using vectorized fallback.")
        chunk_size = params.get("chunk_size", DEFAULT_CHUNK_SIZE)
        for chunk_start, chunk in iter_curve_chunks(order, segment_length, chunk_size):
            points[chunk_start:chunk_start + len(chunk)] = chunk

    if verbose:
        end_time = time.time()
        print(f"  Curve built in {end_time - start_time:.2f} seconds.")

    return HilbertCurveResult(
        points=points,
        order=order,
        edge_length=edge_length,
        warnings=[],
        **properties,
    )


def get_max_order(max_points):
    """
    Highest order whose curve has at most max_points points, capped at MAX_ORDER.

    Args:
        max_points (int, optional): Point budget. None means no budget.

    Returns:
        int: The order ceiling.
    """
    if max_points is None:
        return MAX_ORDER
    max_points = int(max_points)
    if max_points < 4:
        raise ValueError(f"max_points must allow at least the 4 points of order 1, got {max_points}")
    # 4**order <= max_points  <=>  2 * order <= floor(log2(max_points))
    return min(MAX_ORDER, (max_points.bit_length() - 1) // 2)


def generate_hilbert_curve(order, edge_length, builder_config=None, max_points=DEFAULT_MAX_POINTS, verbose=True):
    """
    Validates the inputs and builds the Hilbert curve.

    Invalid orders and edge lengths are clamped to safe values with a warning
    instead of aborting; the warnings are returned with the result. Orders whose
    curve would exceed max_points are clamped the same way.

    Args:
        order (int): Requested number of subdivisions.
        edge_length (float): Requested edge length.
        builder_config (dict, optional): Passed on to build_hilbert_curve.
        max_points (int, optional): Point budget, 4**12 by default. None lifts the
                                    budget (orders up to MAX_ORDER are then built).
        verbose (bool): If True, print warnings and progress messages.

    Returns:
        HilbertCurveResult: The curve, its properties and the input warnings.
    """
    max_order = get_max_order(max_points)
    order, edge_length, warnings = sanitize_inputs(order, edge_length, max_order=max_order, verbose=verbose)

    result = build_hilbert_curve(order, edge_length, builder_config=builder_config, verbose=verbose)
    return result._replace(warnings=warnings)
