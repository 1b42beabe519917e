from .quadrant import transform_to_quadrant, transform_to_quadrant_array
