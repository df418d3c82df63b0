"""Data models for profiles, materials, bends and pricing."""

from .types import (
    Point2D,
    Vector2D,
    Unit,
    DisplayUnit,
    MaterialType,
    ProductType,
    PRODUCT_TYPES,
    Currency,
)
from .units import (
    PIXELS_PER_MM,
    MM_PER_INCH,
    UnitConfig,
    to_pixels,
    from_pixels,
    convert_length,
    inches_to_unit,
    get_unit_label,
    get_grid_size,
    get_unit_config,
)
from .profile import Point, Segment, ProfileGraph
from .material import Material, validate_material_values, default_materials
from .bend_data import Bend, BendAllowance, DevelopedLength, WidthSelection
from .sheet import SegmentRow, BendRow, ProductionSheet
from .pricing import (
    PricingConfig,
    PriceCalculation,
    clamp_profit_margin,
    validate_pricing_values,
    default_pricing_config,
)

__all__ = [
    # Types
    'Point2D',
    'Vector2D',
    'Unit',
    'DisplayUnit',
    'MaterialType',
    'ProductType',
    'PRODUCT_TYPES',
    'Currency',
    # Units
    'PIXELS_PER_MM',
    'MM_PER_INCH',
    'UnitConfig',
    'to_pixels',
    'from_pixels',
    'convert_length',
    'inches_to_unit',
    'get_unit_label',
    'get_grid_size',
    'get_unit_config',
    # Profile graph
    'Point',
    'Segment',
    'ProfileGraph',
    # Materials
    'Material',
    'validate_material_values',
    'default_materials',
    # Bend data
    'Bend',
    'BendAllowance',
    'DevelopedLength',
    'WidthSelection',
    # Production sheet
    'SegmentRow',
    'BendRow',
    'ProductionSheet',
    # Pricing
    'PricingConfig',
    'PriceCalculation',
    'clamp_profit_margin',
    'validate_pricing_values',
    'default_pricing_config',
]
