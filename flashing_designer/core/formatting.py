"""Formatting of lengths and angles for the production sheet."""

from __future__ import annotations

import math

from ..models.units import UnitConfig


def decimal_to_fraction(value: float, denominator: int) -> str:
    """
    Convert inches to a shop-floor fraction string.

    Args:
        value: Decimal inches (can be negative)
        denominator: Fraction denominator (16 for 1/16", 8 for 1/8", ...).
                     Use 0 for decimal display with three places

    Returns:
        String like "5 15/16", "6" or "0.062" (if denominator is 0).
        "ERROR" for NaN or infinity.
    """
    if math.isnan(value) or math.isinf(value):
        return "ERROR"

    if denominator == 0:
        return f"{value:.3f}"

    if value < 0:
        result = decimal_to_fraction(-value, denominator)
        return result if result == "0" else f"-{result}"

    whole, numerator = divmod(round(value * denominator), denominator)
    if numerator == 0:
        return f"{whole}"

    common = math.gcd(numerator, denominator)
    fraction = f"{numerator // common}/{denominator // common}"
    return fraction if whole == 0 else f"{whole} {fraction}"


def format_metric(value: float, decimal_places: int) -> str:
    """
    Format millimeters.

    Args:
        value: Length in millimeters
        decimal_places: Places after the point; 0 shows whole millimeters
                        above 10mm and one place below

    Returns:
        String like "150.0" or "6"; "ERROR" for NaN or infinity
    """
    if math.isnan(value) or math.isinf(value):
        return "ERROR"

    if decimal_places == 0:
        return f"{value:.1f}" if abs(value) < 10 else f"{value:.0f}"
    return f"{value:.{decimal_places}f}"


def format_length(value: float, precision: int, units: UnitConfig) -> str:
    """
    Format a length with its unit symbol.

    Args:
        value: Length already converted to the display unit
        precision: Fraction denominator (inches) or decimal places (mm)
        units: Display unit configuration

    Returns:
        Formatted string such as '5 15/16"' or '150.0mm'
    """
    if units.is_metric:
        return f"{format_metric(value, precision)}{units.unit_symbol}"
    return f"{decimal_to_fraction(value, precision)}{units.unit_symbol}"


def format_angle(angle: float) -> str:
    """Format an angle in degrees to one decimal place."""
    if math.isnan(angle) or math.isinf(angle):
        return "ERROR"
    return f"{angle:.1f}°"


def get_precision_label(precision: int, units: UnitConfig) -> str:
    """Get human-readable label for a precision value."""
    if units.is_metric:
        if precision == 0:
            return 'Whole mm'
        if precision == 1:
            return f'0.1{units.unit_symbol}'
        if precision == 2:
            return f'0.01{units.unit_symbol}'
        return f'{precision} decimal places'

    if precision == 0:
        return 'Decimal'
    return f'1/{precision}"'
