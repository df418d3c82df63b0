"""Pricing configuration and price breakdown models."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, replace
from typing import NotRequired, TypedDict

from ..config import (
    DEFAULT_LABOR_COST,
    DEFAULT_PROFIT_MARGIN,
    DEFAULT_QUANTITY,
    DEFAULT_SETUP_FEE,
    STRIP_LENGTH_FEET,
)
from .types import ProductType


class LaborCostDict(TypedDict):
    """Type definition for a labor cost entry."""

    product_type: str
    cost_per_unit: float


class PricingConfigDict(TypedDict):
    """Type definition for PricingConfig serialization."""

    profit_margin: float
    labor_costs: list[LaborCostDict]
    setup_fee: float
    quantity: int
    default_labor_cost: NotRequired[float]


def clamp_profit_margin(margin: float) -> float:
    """Clamp a user-entered margin percentage to [0, 100]. NaN becomes 0."""
    if math.isnan(margin):
        return 0.0
    return max(0.0, min(100.0, margin))


def validate_pricing_values(
    profit_margin: float | None = None,
    setup_fee: float | None = None,
    quantity: int | None = None,
    labor_cost: float | None = None,
) -> None:
    """Validate pricing values.

    Args:
        profit_margin: Margin percentage (must be in [0, 100] if provided)
        setup_fee: Flat setup fee (must be non-negative if provided)
        quantity: Units ordered (must be an integer >= 1 if provided)
        labor_cost: Labor cost per unit (must be non-negative if provided)

    Raises:
        ValueError: If any value violates its constraint
    """
    if profit_margin is not None and not (0 <= profit_margin <= 100):
        raise ValueError(f"profit_margin must be between 0 and 100, got {profit_margin}")
    if setup_fee is not None and not (setup_fee >= 0 and not math.isinf(setup_fee)):
        raise ValueError(f"setup_fee cannot be negative, got {setup_fee}")
    if quantity is not None and (
        isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1
    ):
        raise ValueError(f"quantity must be a positive integer, got {quantity!r}")
    if labor_cost is not None and not (labor_cost >= 0 and not math.isinf(labor_cost)):
        raise ValueError(f"labor_cost cannot be negative, got {labor_cost}")


@dataclass(frozen=True, slots=True)
class PricingConfig:
    """
    User-adjustable pricing inputs.

    Frozen so every calculation sees a consistent snapshot; the ``with_*``
    methods return updated copies.

    Attributes:
        profit_margin: Margin percentage applied to the subtotal
        labor_costs: Labor cost per unit keyed by product type
        setup_fee: Flat fee charged on small orders
        quantity: Number of units ordered
        default_labor_cost: Labor cost for product types missing from labor_costs
    """

    profit_margin: float = DEFAULT_PROFIT_MARGIN
    labor_costs: dict[str, float] = field(default_factory=dict)
    setup_fee: float = DEFAULT_SETUP_FEE
    quantity: int = DEFAULT_QUANTITY
    default_labor_cost: float = DEFAULT_LABOR_COST

    def __post_init__(self) -> None:
        """Validate all values and take a private copy of the labor table."""
        object.__setattr__(self, 'labor_costs', dict(self.labor_costs))
        validate_pricing_values(
            profit_margin=self.profit_margin,
            setup_fee=self.setup_fee,
            quantity=self.quantity,
            labor_cost=self.default_labor_cost,
        )
        for cost in self.labor_costs.values():
            validate_pricing_values(labor_cost=cost)

    def labor_cost_for(self, product_type: ProductType) -> float:
        """Labor cost for a product type, falling back to the default rather than zero."""
        return self.labor_costs.get(product_type, self.default_labor_cost)

    def with_profit_margin(self, margin: float) -> PricingConfig:
        """Copy with a new margin, clamped to [0, 100]."""
        return replace(self, profit_margin=clamp_profit_margin(margin))

    def with_quantity(self, quantity: int) -> PricingConfig:
        """Copy with a new order quantity."""
        return replace(self, quantity=quantity)

    def with_setup_fee(self, setup_fee: float) -> PricingConfig:
        """Copy with a new setup fee."""
        return replace(self, setup_fee=setup_fee)

    def with_labor_cost(self, product_type: ProductType, cost: float) -> PricingConfig:
        """Copy with one product type's labor cost changed."""
        validate_pricing_values(labor_cost=cost)
        labor_costs = dict(self.labor_costs)
        labor_costs[product_type] = cost
        return replace(self, labor_costs=labor_costs)

    def to_dict(self) -> PricingConfigDict:
        """Convert to dictionary for JSON serialization."""
        return PricingConfigDict(
            profit_margin=self.profit_margin,
            labor_costs=[
                LaborCostDict(product_type=product_type, cost_per_unit=cost)
                for product_type, cost in self.labor_costs.items()
            ],
            setup_fee=self.setup_fee,
            quantity=self.quantity,
            default_labor_cost=self.default_labor_cost,
        )

    @classmethod
    def from_dict(cls, data: PricingConfigDict) -> PricingConfig:
        """Create PricingConfig from dictionary.

        The margin is clamped since it comes straight from user input.
        """
        return cls(
            profit_margin=clamp_profit_margin(float(data.get('profit_margin', DEFAULT_PROFIT_MARGIN))),
            labor_costs={
                entry['product_type']: float(entry['cost_per_unit'])
                for entry in data.get('labor_costs', [])
            },
            setup_fee=float(data.get('setup_fee', DEFAULT_SETUP_FEE)),
            quantity=int(data.get('quantity', DEFAULT_QUANTITY)),
            default_labor_cost=float(data.get('default_labor_cost', DEFAULT_LABOR_COST)),
        )


def default_pricing_config() -> PricingConfig:
    """Labor table and margin used until the user changes them."""
    return PricingConfig(
        profit_margin=DEFAULT_PROFIT_MARGIN,
        labor_costs={
            'coping-cap': 5.0,
            'z-closure': 3.0,
            'd-style': 3.0,
            't-style': 3.0,
            'valley': 3.0,
            'roof-to-wall': 3.0,
            'other': 3.0,
        },
        setup_fee=DEFAULT_SETUP_FEE,
        quantity=DEFAULT_QUANTITY,
    )


@dataclass(frozen=True, slots=True)
class PriceCalculation:
    """
    Full price breakdown for a profile. Widths are in inches.

    Attributes:
        material_cost: Sheet price times sheet fraction, per unit
        labor_cost: Labor cost per unit
        setup_fee: Setup fee charged (0 for bulk orders)
        subtotal: (material + labor) * quantity + setup fee
        profit_margin: Margin percentage applied
        profit_amount: Subtotal times margin
        total_cost: Subtotal plus profit
        total_cost_per_unit: Total cost divided by quantity
        quantity: Units ordered
        required_width: Developed width of the profile
        charged_width: Strip width paid for
        strip_length: Strip length in feet
        sheet_fraction: Charged width over sheet width
        max_allowed_width: Widest strip the material allows
        is_width_exceeded: True if the profile cannot be produced from this material
    """

    material_cost: float
    labor_cost: float
    setup_fee: float
    subtotal: float
    profit_margin: float
    profit_amount: float
    total_cost: float
    total_cost_per_unit: float
    quantity: int
    required_width: float
    charged_width: float
    strip_length: float
    sheet_fraction: float
    max_allowed_width: float
    is_width_exceeded: bool

    @classmethod
    def empty(cls, pricing_config: PricingConfig) -> PriceCalculation:
        """All-zero result for when there is no material or no geometry."""
        return cls(
            material_cost=0.0,
            labor_cost=0.0,
            setup_fee=0.0,
            subtotal=0.0,
            profit_margin=pricing_config.profit_margin,
            profit_amount=0.0,
            total_cost=0.0,
            total_cost_per_unit=0.0,
            quantity=pricing_config.quantity,
            required_width=0.0,
            charged_width=0.0,
            strip_length=STRIP_LENGTH_FEET,
            sheet_fraction=0.0,
            max_allowed_width=0.0,
            is_width_exceeded=False,
        )

    @property
    def can_order(self) -> bool:
        """True if a quote exists and the profile can be manufactured."""
        return not self.is_width_exceeded and self.total_cost > 0

    def to_dict(self) -> dict[str, float | int | bool]:
        """Convert to dictionary for the presentation layer."""
        return asdict(self)
