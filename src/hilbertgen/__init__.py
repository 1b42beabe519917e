# Import key components for easier access
from . import constants
from . import transforms
from . import mapping
from . import curve_runtime
from . import measurement_helpers

from .mapping import index_to_cell, index_to_point, cell_to_index
from .curve_runtime import build_hilbert_curve, generate_hilbert_curve, HilbertCurveResult

__version__ = "0.1.0"
