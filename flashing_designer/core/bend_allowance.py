"""K-factor bend allowance calculation.

All lengths come out in whatever unit thickness and inner radius are given
in. Inputs are not validated here; materials are range-checked when they are
defined or edited.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..config import DEFAULT_BEND_RADIUS_RATIO
from ..models.bend_data import BendAllowance


def compute_bend(
    angle_degrees: float,
    thickness: float,
    k_factor: float,
    inner_radius: float | None = None,
) -> BendAllowance:
    """
    Calculate arc lengths through a bend.

    BA = θ × (R + K × T), where θ is the bend angle in radians, R the inside
    radius, K the K-factor and T the thickness. The neutral fiber sits K × T
    from the inside surface, so its arc length equals the bend allowance.

    Args:
        angle_degrees: Bend angle in degrees
        thickness: Material thickness
        k_factor: Neutral axis ratio (typically 0.33-0.50)
        inner_radius: Inside bend radius (defaults to the thickness)

    Returns:
        BendAllowance with neutral, inner and outer arc lengths
    """
    radius = thickness * DEFAULT_BEND_RADIUS_RATIO if inner_radius is None else inner_radius
    theta = math.radians(angle_degrees)

    neutral_radius = radius + k_factor * thickness
    neutral_axis_length = theta * neutral_radius

    return BendAllowance(
        neutral_axis_length=neutral_axis_length,
        inner_length=theta * radius,
        outer_length=theta * (radius + thickness),
        bend_allowance=neutral_axis_length,
    )


def calculate_flat_pattern_length(
    straight_lengths: Iterable[float],
    bend_angles: Iterable[float],
    thickness: float,
    k_factor: float,
    inner_radius: float | None = None,
) -> float:
    """
    Calculate flat pattern length including bends.

    Args:
        straight_lengths: Straight section lengths
        bend_angles: Bend angles in degrees
        thickness: Material thickness, same unit as the straight lengths
        k_factor: K-factor
        inner_radius: Inside bend radius (optional)

    Returns:
        Total developed length
    """
    total = sum(straight_lengths)
    for angle in bend_angles:
        total += compute_bend(angle, thickness, k_factor, inner_radius).bend_allowance
    return total
