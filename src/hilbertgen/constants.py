import numpy as np

# --- Supported curve orders ---
MIN_ORDER = 1
# Largest order whose indices fit the uint64 arrays of the vectorized path:
# 4**32 - 1 == 2**64 - 1
MAX_ORDER = 32
DEFAULT_ORDER = 1

# --- Physical scale ---
DEFAULT_EDGE_LENGTH = 1.0

# --- Quadrant codes (layout of the first order curve) ---
QUADRANT_MASK = 0b11
BOTTOM_LEFT = 0
TOP_LEFT = 1
TOP_RIGHT = 2
BOTTOM_RIGHT = 3

# --- Curve assembly ---
INDEX_DTYPE = np.uint64
COORD_DTYPE = np.float64
DEFAULT_CHUNK_SIZE = 2**16  # Indices per vectorized batch
DEFAULT_MAX_POINTS = 4**12  # Default point budget of generate_hilbert_curve and the command line
