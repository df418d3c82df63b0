"""Core calculation and geometry utilities."""

from .geometry import (
    ZeroVectorError,
    dot_product,
    magnitude,
    vector_between,
    angle_between_vectors,
)
from .bend_detection import (
    detect_bends,
    detect_bend_angles,
    is_real_bend,
)
from .bend_allowance import (
    compute_bend,
    calculate_flat_pattern_length,
)
from .developed_length import (
    BendMaterialLike,
    flat_length,
    calculate_developed_length,
    developed_length,
)
from .width_selection import (
    get_max_allowed_width,
    find_charged_width,
    select_width,
)
from .pricing import (
    calculate_price,
    calculate_product_price,
    format_price,
)
from .formatting import (
    decimal_to_fraction,
    format_metric,
    format_length,
    format_angle,
    get_precision_label,
)
from .spec_sheet import (
    build_production_sheet,
    generate_html_production_sheet,
)
from .tolerances import (
    ANGLE_EPSILON_DEGREES,
    WIDTH_TOLERANCE_INCHES,
    ZERO_MAGNITUDE,
)

__all__ = [
    # Geometry
    'ZeroVectorError',
    'dot_product',
    'magnitude',
    'vector_between',
    'angle_between_vectors',
    # Bend detection
    'detect_bends',
    'detect_bend_angles',
    'is_real_bend',
    # Bend allowance
    'compute_bend',
    'calculate_flat_pattern_length',
    # Developed length
    'BendMaterialLike',
    'flat_length',
    'calculate_developed_length',
    'developed_length',
    # Width selection
    'get_max_allowed_width',
    'find_charged_width',
    'select_width',
    # Pricing
    'calculate_price',
    'calculate_product_price',
    'format_price',
    # Formatting
    'decimal_to_fraction',
    'format_metric',
    'format_length',
    'format_angle',
    'get_precision_label',
    # Production sheet
    'build_production_sheet',
    'generate_html_production_sheet',
    # Tolerances
    'ANGLE_EPSILON_DEGREES',
    'WIDTH_TOLERANCE_INCHES',
    'ZERO_MAGNITUDE',
]
