"""2D vector math for bend detection on the profile canvas."""

from __future__ import annotations

import math

from ..models.types import Point2D, Vector2D
from .tolerances import ZERO_MAGNITUDE


class ZeroVectorError(ValueError):
    """Raised when an angle is requested for a vector of (near) zero length."""

    pass


def dot_product(v1: Vector2D, v2: Vector2D) -> float:
    """Dot product of two canvas vectors."""
    return v1[0] * v2[0] + v1[1] * v2[1]


def magnitude(v: Vector2D) -> float:
    """Euclidean length of a canvas vector."""
    return math.hypot(v[0], v[1])


def vector_between(start: Point2D, end: Point2D) -> Vector2D:
    """Vector pointing from ``start`` to ``end``."""
    return (end[0] - start[0], end[1] - start[1])


def _safe_magnitude_product(v1: Vector2D, v2: Vector2D) -> float:
    """
    Product of both magnitudes.

    Raises:
        ZeroVectorError: If either vector is shorter than ZERO_MAGNITUDE
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)

    if mag1 < ZERO_MAGNITUDE:
        raise ZeroVectorError(f"First vector has zero length (magnitude={mag1}): {v1}")
    if mag2 < ZERO_MAGNITUDE:
        raise ZeroVectorError(f"Second vector has zero length (magnitude={mag2}): {v2}")

    return mag1 * mag2


def angle_between_vectors(v1: Vector2D, v2: Vector2D) -> float:
    """
    Interior angle between two vectors leaving the same vertex.

    Args:
        v1: Direction toward the first neighbour
        v2: Direction toward the second neighbour

    Returns:
        Angle in degrees, 0 (folded back) to 180 (straight through)

    Raises:
        ZeroVectorError: If either vector has zero length
    """
    cos_angle = dot_product(v1, v2) / _safe_magnitude_product(v1, v2)
    cos_angle = max(-1.0, min(1.0, cos_angle))  # Clamp rounding error
    return math.degrees(math.acos(cos_angle))
