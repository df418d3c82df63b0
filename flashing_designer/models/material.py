"""Sheet material catalog models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TypedDict

from ..config import MAX_THICKNESS_INCHES
from .types import MaterialType


class MaterialDict(TypedDict):
    """Type definition for Material serialization."""

    id: str
    name: str
    material_type: MaterialType
    thickness_label: str
    thickness_inches: float
    k_factor: float
    sheet_price: float
    sheet_width: float
    sheet_length: float
    allowed_widths: list[float]
    finish: str
    weight: float | None
    color: str


def _is_finite(value: float) -> bool:
    return not (math.isnan(value) or math.isinf(value))


def validate_material_values(
    thickness_inches: float | None = None,
    k_factor: float | None = None,
    sheet_price: float | None = None,
    sheet_width: float | None = None,
    sheet_length: float | None = None,
    allowed_widths: list[float] | None = None,
) -> None:
    """Validate material numeric values.

    Args:
        thickness_inches: Material thickness (must be in (0, 0.25] if provided)
        k_factor: Neutral axis ratio (must be in (0, 1) if provided)
        sheet_price: Price of a full sheet (must be positive if provided)
        sheet_width: Sheet width in inches (must be positive if provided)
        sheet_length: Sheet length in inches (must be positive if provided)
        allowed_widths: Strip width catalog (must be non-empty, all positive, if provided)

    Raises:
        ValueError: If any value violates its constraint
    """
    if thickness_inches is not None and not (
        _is_finite(thickness_inches) and 0 < thickness_inches <= MAX_THICKNESS_INCHES
    ):
        raise ValueError(
            f"thickness_inches must be in (0, {MAX_THICKNESS_INCHES}], got {thickness_inches}"
        )
    if k_factor is not None and not (_is_finite(k_factor) and 0 < k_factor < 1):
        raise ValueError(f"k_factor must be between 0 and 1 (exclusive), got {k_factor}")
    if sheet_price is not None and not (_is_finite(sheet_price) and sheet_price > 0):
        raise ValueError(f"sheet_price must be positive, got {sheet_price}")
    if sheet_width is not None and not (_is_finite(sheet_width) and sheet_width > 0):
        raise ValueError(f"sheet_width must be positive, got {sheet_width}")
    if sheet_length is not None and not (_is_finite(sheet_length) and sheet_length > 0):
        raise ValueError(f"sheet_length must be positive, got {sheet_length}")
    if allowed_widths is not None:
        if not allowed_widths:
            raise ValueError("allowed_widths cannot be empty")
        for width in allowed_widths:
            if not (_is_finite(width) and width > 0):
                raise ValueError(f"allowed_widths entries must be positive, got {width}")


@dataclass(slots=True)
class Material:
    """
    Represents a sheet material that flashing is formed from.

    Attributes:
        id: Unique identifier for the material
        name: Display name (e.g., '24 Ga Kynar Steel')
        material_type: Metal family
        thickness_label: Thickness as sold (e.g., '16 oz', '24 Ga', '0.032"')
        thickness_inches: Actual thickness used for bend calculations
        k_factor: Neutral axis offset as a fraction of thickness
        sheet_price: Price of one full sheet
        sheet_width: Sheet width in inches
        sheet_length: Sheet length in inches
        allowed_widths: Stockable strip widths in inches
        finish: Optional finish (e.g., 'Kynar')
        weight: Optional weight per square foot
        color: Optional display color
    """

    id: str
    name: str
    material_type: MaterialType
    thickness_label: str
    thickness_inches: float
    k_factor: float
    sheet_price: float
    sheet_width: float
    sheet_length: float
    allowed_widths: list[float] = field(default_factory=list)
    finish: str = ""
    weight: float | None = None
    color: str = ""

    def __post_init__(self) -> None:
        """Reject materials the calculators cannot work with."""
        validate_material_values(
            thickness_inches=self.thickness_inches,
            k_factor=self.k_factor,
            sheet_price=self.sheet_price,
            sheet_width=self.sheet_width,
            sheet_length=self.sheet_length,
            allowed_widths=self.allowed_widths,
        )

    def __repr__(self) -> str:
        return (
            f"Material(id={self.id!r}, thickness={self.thickness_inches}, "
            f"k={self.k_factor}, sheet_width={self.sheet_width})"
        )

    @property
    def max_allowed_width(self) -> float:
        """Widest strip that can be produced from this material (inches)."""
        return min(self.sheet_width, max(self.allowed_widths))

    @property
    def display_name(self) -> str:
        """Name with finish, as printed on production sheets."""
        if self.finish and self.finish not in self.name:
            return f"{self.name} ({self.finish})"
        return self.name

    def to_dict(self) -> MaterialDict:
        """Convert to dictionary for JSON serialization."""
        return MaterialDict(
            id=self.id,
            name=self.name,
            material_type=self.material_type,
            thickness_label=self.thickness_label,
            thickness_inches=self.thickness_inches,
            k_factor=self.k_factor,
            sheet_price=self.sheet_price,
            sheet_width=self.sheet_width,
            sheet_length=self.sheet_length,
            allowed_widths=list(self.allowed_widths),
            finish=self.finish,
            weight=self.weight,
            color=self.color,
        )

    @classmethod
    def from_dict(cls, data: MaterialDict) -> Material:
        """Create Material from dictionary.

        Widths are stored sorted. Values are not clamped: a material that
        fails validation is a configuration error and raises ValueError.
        """
        return cls(
            id=data['id'],
            name=data['name'],
            material_type=data['material_type'],
            thickness_label=data.get('thickness_label', ''),
            thickness_inches=float(data['thickness_inches']),
            k_factor=float(data['k_factor']),
            sheet_price=float(data['sheet_price']),
            sheet_width=float(data['sheet_width']),
            sheet_length=float(data.get('sheet_length', 120.0)),
            allowed_widths=sorted(float(w) for w in data['allowed_widths']),
            finish=data.get('finish', ''),
            weight=data.get('weight'),
            color=data.get('color', ''),
        )


def default_materials() -> list[Material]:
    """Stock materials offered when no catalog exists yet."""
    return [
        Material(
            id='copper-16oz',
            name='16 oz Copper (36"x120")',
            material_type='copper',
            thickness_label='16 oz',
            thickness_inches=0.0216,
            k_factor=0.40,
            sheet_price=242.0,
            sheet_width=36.0,    # 3'
            sheet_length=120.0,  # 10'
            allowed_widths=[3, 4, 6, 9, 12, 18, 36],
            weight=1.0,
            color='#B87333',
        ),
        Material(
            id='copper-16oz-24x120',
            name='16 oz Copper (24"x120")',
            material_type='copper',
            thickness_label='16 oz',
            thickness_inches=0.0216,
            k_factor=0.40,
            sheet_price=163.0,
            sheet_width=24.0,    # 2'
            sheet_length=120.0,
            allowed_widths=[3, 4, 6, 8, 12, 24],
            weight=1.0,
            color='#B87333',
        ),
        Material(
            id='steel-24ga-kynar',
            name='24 Ga Kynar Steel',
            material_type='steel',
            thickness_label='24 Ga',
            thickness_inches=0.0276,
            k_factor=0.44,
            finish='Kynar',
            sheet_price=90.0,
            sheet_width=48.0,    # 4'
            sheet_length=120.0,
            allowed_widths=[3, 4, 6, 9.6, 12, 16, 24, 48],
            weight=0.75,
            color='#8B9198',
        ),
        Material(
            id='aluminum-032-kynar',
            name='0.032" Kynar Aluminum',
            material_type='aluminum',
            thickness_label='0.032"',
            thickness_inches=0.032,
            k_factor=0.33,
            finish='Kynar',
            sheet_price=126.5,
            sheet_width=48.0,
            sheet_length=120.0,
            allowed_widths=[3, 4, 6, 9.6, 12, 16, 24, 48],
            weight=0.45,
            color='#C0C0C0',
        ),
    ]
