from .sweep_utils import get_hilbert_order, is_grid_adjacent
