"""Production sheet data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bend_data import DevelopedLength
from .pricing import PriceCalculation
from .units import UnitConfig


@dataclass(slots=True)
class SegmentRow:
    """One row of the segment table."""
    label: str
    length: float  # In display units
    direction: float  # Degrees from horizontal


@dataclass(slots=True)
class BendRow:
    """One row of the bend table."""
    number: int
    vertex_label: str
    angle: float  # Degrees
    bend_allowance: float  # In display units, 0 without material data
    inner_length: float
    outer_length: float


@dataclass(slots=True)
class ProductionSheet:
    """All data needed to generate a production specification sheet."""
    name: str
    units: UnitConfig
    precision: int
    segments: list[SegmentRow]
    bends: list[BendRow]
    developed: DevelopedLength
    material_name: str = ""
    thickness_label: str = ""
    k_factor: float | None = None
    price: PriceCalculation | None = None
    warnings: list[str] = field(default_factory=list)
