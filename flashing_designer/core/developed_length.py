"""Developed (flat-pattern) length of a profile.

Flat segment lengths are summed and each detected bend adds its K-factor
bend allowance. Inner and outer surface totals are derived from the same
per-bend data for the production sheet; pricing uses the neutral total only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from ..models.bend_data import Bend, DevelopedLength
from ..models.profile import ProfileGraph
from ..models.types import Unit
from ..models.units import from_pixels, inches_to_unit
from .bend_allowance import compute_bend

logger = logging.getLogger(__name__)


class BendMaterialLike(Protocol):
    """Protocol for objects carrying the bend parameters of a material.

    This enables testing with mock objects that have incomplete data
    without going through Material validation.
    """

    @property
    def thickness_inches(self) -> float: ...

    @property
    def k_factor(self) -> float: ...


def flat_length(graph: ProfileGraph, unit: Unit = 'inch') -> float:
    """
    Sum of all segment lengths converted to ``unit``.

    Segments that reference a missing point are skipped.
    """
    total_pixels = 0.0
    for segment_id in graph.segments:
        length = graph.segment_length(segment_id)
        if length is None:
            logger.warning("Skipping segment %s: references missing point", segment_id)
            continue
        total_pixels += length
    return from_pixels(total_pixels, unit)


def calculate_developed_length(
    graph: ProfileGraph,
    bends: Sequence[Bend],
    material: BendMaterialLike | None,
    unit: Unit = 'inch',
    inner_radius: float | None = None,
) -> DevelopedLength:
    """
    Calculate neutral, inner and outer developed lengths.

    Args:
        graph: Profile graph snapshot
        bends: Bends detected in ``graph``
        material: Material supplying thickness and K-factor, or None
        unit: Unit for all returned lengths
        inner_radius: Inside bend radius in ``unit`` (defaults to the thickness)

    Returns:
        DevelopedLength in ``unit``. Without material data, or with zero
        thickness or K-factor, bends add nothing and every total equals the
        flat length.
    """
    flat = flat_length(graph, unit)

    thickness_inches = material.thickness_inches if material is not None else 0.0
    k_factor = material.k_factor if material is not None else 0.0
    if not bends or not thickness_inches or not k_factor:
        return DevelopedLength(
            unit=unit,
            flat_length=flat,
            neutral_length=flat,
            inner_length=flat,
            outer_length=flat,
            bend_allowance_total=0.0,
            bend_count=len(bends),
        )

    thickness = inches_to_unit(thickness_inches, unit)
    neutral_total = 0.0
    inner_total = 0.0
    outer_total = 0.0
    for bend in bends:
        result = compute_bend(bend.angle_degrees, thickness, k_factor, inner_radius)
        neutral_total += result.bend_allowance
        inner_total += result.inner_length
        outer_total += result.outer_length

    return DevelopedLength(
        unit=unit,
        flat_length=flat,
        neutral_length=flat + neutral_total,
        inner_length=flat + inner_total,
        outer_length=flat + outer_total,
        bend_allowance_total=neutral_total,
        bend_count=len(bends),
    )


def developed_length(
    graph: ProfileGraph,
    bends: Sequence[Bend],
    material: BendMaterialLike | None,
    unit: Unit = 'inch',
) -> float:
    """Neutral-axis developed length in ``unit``; this is the required strip width."""
    return calculate_developed_length(graph, bends, material, unit).neutral_length
