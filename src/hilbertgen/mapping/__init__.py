from .index_to_point import (
    index_to_cell,
    index_to_point,
    indices_to_cells,
    indices_to_points,
    cell_to_index,
    cells_to_indices,
)
