import numpy as np
from hilbertcurve.hilbertcurve import HilbertCurve
from ..mapping.index_to_point import cells_to_indices


def get_hilbert_order(nx, ny, backend="native"):
    """
    Generates a list of (i, j) indices in Hilbert curve order for an nx x ny grid.

    Args:
        nx (int): Number of points in the x-dimension of the grid.
        ny (int): Number of points in the y-dimension of the grid.
        backend (str): 'native' to walk this package's curve, or 'hilbertcurve'
                       to sort by the distances of the hilbertcurve library.

    Returns:
        list: A list of (i, j) tuples representing grid indices in Hilbert order.
              Every grid index appears exactly once.
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"Grid dimensions must be positive, got ({nx}, {ny})")

    # Determine the Hilbert curve level p such that 2^p >= max(nx, ny)
    # Grids that are not powers of 2 are cut out of the enclosing 2^p x 2^p curve,
    # so consecutive indices are then not always neighbours.
    p = max(1, int(np.ceil(np.log2(max(nx, ny)))))

    if backend == "native":
        # Only the nx * ny grid cells are decoded, not the whole enclosing square
        I, J = np.meshgrid(np.arange(nx), np.arange(ny), indexing="ij")
        I, J = I.ravel(), J.ravel()
        distances = cells_to_indices(I, J, p)
        sort_order = np.argsort(distances, kind="stable")
        return [(int(i), int(j)) for i, j in zip(I[sort_order], J[sort_order])]

    if backend == "hilbertcurve":
        n_dims = 2
        hilbert_curve = HilbertCurve(p, n_dims)

        # Generate all grid points (indices) within the nx x ny bounds
        points = [(i, j) for i in range(nx) for j in range(ny)]

        # Calculate Hilbert distances for each point
        distances = hilbert_curve.distances_from_points(points)

        # Sort points based on Hilbert distances
        return [point for _, point in sorted(zip(distances, points))]

    raise ValueError(f"Unknown backend: {backend}")


def is_grid_adjacent(cells):
    """
    Checks that each cell of a sequence is a unit step away from the previous one.

    Args:
        cells (array_like): (N, 2) integer cell coordinates.

    Returns:
        bool: True if every consecutive pair differs by exactly 1 along exactly one axis.
    """
    cells = np.asarray(cells).astype(np.int64)
    if len(cells) < 2:
        return True
    steps = np.abs(np.diff(cells, axis=0))
    return bool(np.all(steps.sum(axis=1) == 1))
