from .inputs import sanitize_inputs
from .builder import (
    HilbertCurveResult,
    get_curve_properties,
    iter_curve_chunks,
    build_hilbert_curve,
    generate_hilbert_curve,
    get_max_order,
)
