"""Bend and developed length data models."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Unit


@dataclass(frozen=True, slots=True)
class Bend:
    """A bend at a vertex shared by exactly two segments.

    Derived from the profile graph on every calculation; never stored.
    """

    vertex_point_id: str
    angle_degrees: float  # Exclusive range (0, 180)
    segment_a_id: str
    segment_b_id: str

    def __repr__(self) -> str:
        return f"Bend(at={self.vertex_point_id!r}, angle={self.angle_degrees:.1f})"


@dataclass(frozen=True, slots=True)
class BendAllowance:
    """Arc lengths through a single bend, in the unit of the thickness supplied."""

    neutral_axis_length: float
    inner_length: float  # Compression side
    outer_length: float  # Tension side
    bend_allowance: float

    @property
    def stretch(self) -> float:
        """Difference between tension and compression arc lengths."""
        return self.outer_length - self.inner_length


@dataclass(frozen=True, slots=True)
class DevelopedLength:
    """Flat-pattern length of a profile.

    ``neutral_length`` is the developed length used for pricing. The inner
    and outer surface totals are reported for the production sheet only.
    """

    unit: Unit
    flat_length: float
    neutral_length: float
    inner_length: float
    outer_length: float
    bend_allowance_total: float
    bend_count: int

    @property
    def stretch_difference(self) -> float:
        """Outer surface total minus inner surface total."""
        return self.outer_length - self.inner_length


@dataclass(frozen=True, slots=True)
class WidthSelection:
    """Result of fitting a required width to a material's strip catalog (inches)."""

    required_width: float
    charged_width: float
    sheet_fraction: float
    max_allowed_width: float
    is_exceeded: bool

    @property
    def waste(self) -> float:
        """Width paid for but not used. Zero when the width is exceeded."""
        if self.is_exceeded:
            return 0.0
        return max(0.0, self.charged_width - self.required_width)
