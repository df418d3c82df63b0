"""Unit conversion between canvas pixels, millimeters and inches.

Canvas coordinates are stored in pixels. Material data (thickness, sheet and
strip widths) is authored in inches, so calculations that mix geometry with
material data convert to inches first.
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import DisplayUnit, Unit

PIXELS_PER_MM: float = 3.7795  # 96 DPI / 25.4
MM_PER_INCH: float = 25.4

_PIXELS_PER_UNIT: dict[str, float] = {
    'px': 1.0,
    'mm': PIXELS_PER_MM,
    'inch': MM_PER_INCH * PIXELS_PER_MM,
}


def _pixels_per(unit: str) -> float:
    try:
        return _PIXELS_PER_UNIT[unit]
    except KeyError:
        raise ValueError(f"Unknown unit: {unit!r}") from None


def to_pixels(value: float, unit: Unit) -> float:
    """Convert a length in ``unit`` to canvas pixels."""
    return value * _pixels_per(unit)


def from_pixels(pixels: float, unit: Unit) -> float:
    """Convert a length in canvas pixels to ``unit``."""
    return pixels / _pixels_per(unit)


def convert_length(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a length between any two supported units."""
    if from_unit == to_unit:
        # Validate even when no scaling is needed
        _pixels_per(from_unit)
        return value
    return from_pixels(to_pixels(value, from_unit), to_unit)


def inches_to_unit(value: float, unit: Unit) -> float:
    """Scale an inch-authored value (e.g. material thickness) into ``unit``."""
    if unit == 'inch':
        return value
    if unit == 'mm':
        return value * MM_PER_INCH
    return to_pixels(value, 'inch')


def get_unit_label(unit: DisplayUnit) -> str:
    """Short label shown next to lengths."""
    return 'mm' if unit == 'mm' else 'in'


def get_grid_size(unit: DisplayUnit) -> float:
    """Canvas grid spacing in pixels: every 10mm or every 0.5 inch."""
    if unit == 'mm':
        return 10 * PIXELS_PER_MM
    return 0.5 * MM_PER_INCH * PIXELS_PER_MM


@dataclass(frozen=True, slots=True)
class UnitConfig:
    """Display settings for a unit system.

    Attributes:
        unit: Unit key used by the conversion functions
        unit_name: Human-readable unit name
        unit_symbol: Symbol appended to formatted lengths
        is_metric: True for millimeters
        default_precision: Fraction denominator (imperial) or decimal places (metric)
        valid_precisions: Precision values offered to the user
    """

    unit: DisplayUnit
    unit_name: str
    unit_symbol: str
    is_metric: bool
    default_precision: int
    valid_precisions: tuple[int, ...]


IMPERIAL = UnitConfig(
    unit='inch',
    unit_name='in',
    unit_symbol='"',
    is_metric=False,
    default_precision=16,
    valid_precisions=(0, 4, 8, 16, 32),
)

METRIC = UnitConfig(
    unit='mm',
    unit_name='mm',
    unit_symbol='mm',
    is_metric=True,
    default_precision=1,
    valid_precisions=(0, 1, 2),
)


def get_unit_config(unit: DisplayUnit) -> UnitConfig:
    """Return the display configuration for ``unit``."""
    if unit == 'mm':
        return METRIC
    if unit == 'inch':
        return IMPERIAL
    raise ValueError(f"Unknown display unit: {unit!r}")
