"""Price calculation for a flashing profile.

Pricing runs on the developed width in inches: the profile is formed from a
10' strip whose width is the next stockable width up, and the strip is
charged as a fraction of a full sheet.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CURRENCY, SETUP_FEE_WAIVER_QUANTITY, STRIP_LENGTH_FEET
from ..models.material import Material
from ..models.pricing import PriceCalculation, PricingConfig
from ..models.profile import ProfileGraph
from ..models.types import Currency, ProductType
from .bend_detection import detect_bends
from .developed_length import developed_length
from .width_selection import select_width

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS: dict[str, str] = {
    'USD': '$',
    'EUR': '€',
    'PLN': 'zł',
}


def calculate_price(
    required_width: float,
    material: Material | None,
    product_type: ProductType,
    pricing_config: PricingConfig,
    has_geometry: bool = True,
) -> PriceCalculation:
    """
    Calculate the price breakdown for a developed width.

    Args:
        required_width: Developed length of the profile in inches
        material: Selected material, or None
        product_type: Product type used to look up labor cost
        pricing_config: Pricing snapshot; its margin must already be clamped to [0, 100]
        has_geometry: False when the profile has no points or segments

    Returns:
        PriceCalculation. All zeros when there is no material or geometry.
        When the width exceeds what the material allows, all costs are zero
        and ``is_width_exceeded`` is set with the widths filled in.
    """
    if material is None or not has_geometry:
        return PriceCalculation.empty(pricing_config)

    selection = select_width(required_width, material.allowed_widths, material.sheet_width)

    # Hard stop: cannot manufacture beyond max width
    if selection.is_exceeded:
        logger.debug("No quote for material %s: width exceeded", material.id)
        return PriceCalculation(
            material_cost=0.0,
            labor_cost=0.0,
            setup_fee=0.0,
            subtotal=0.0,
            profit_margin=pricing_config.profit_margin,
            profit_amount=0.0,
            total_cost=0.0,
            total_cost_per_unit=0.0,
            quantity=pricing_config.quantity,
            required_width=required_width,
            charged_width=selection.charged_width,
            strip_length=STRIP_LENGTH_FEET,
            sheet_fraction=selection.sheet_fraction,
            max_allowed_width=selection.max_allowed_width,
            is_width_exceeded=True,
        )

    quantity = pricing_config.quantity
    material_cost = material.sheet_price * selection.sheet_fraction
    labor_cost = pricing_config.labor_cost_for(product_type)
    setup_fee = 0.0 if quantity > SETUP_FEE_WAIVER_QUANTITY else pricing_config.setup_fee

    cost_per_unit = material_cost + labor_cost
    subtotal = cost_per_unit * quantity + setup_fee
    profit_amount = subtotal * (pricing_config.profit_margin / 100)
    total_cost = subtotal + profit_amount

    return PriceCalculation(
        material_cost=material_cost,
        labor_cost=labor_cost,
        setup_fee=setup_fee,
        subtotal=subtotal,
        profit_margin=pricing_config.profit_margin,
        profit_amount=profit_amount,
        total_cost=total_cost,
        total_cost_per_unit=total_cost / quantity,
        quantity=quantity,
        required_width=required_width,
        charged_width=selection.charged_width,
        strip_length=STRIP_LENGTH_FEET,
        sheet_fraction=selection.sheet_fraction,
        max_allowed_width=selection.max_allowed_width,
        is_width_exceeded=False,
    )


def calculate_product_price(
    graph: ProfileGraph,
    material: Material | None,
    product_type: ProductType,
    pricing_config: PricingConfig,
) -> PriceCalculation:
    """
    Run the full pipeline: bends, developed width in inches, then price.

    Args:
        graph: Profile graph snapshot
        material: Selected material, or None
        product_type: Product type used to look up labor cost
        pricing_config: Pricing snapshot

    Returns:
        PriceCalculation for the profile
    """
    if material is None or graph.is_empty:
        return PriceCalculation.empty(pricing_config)
    if graph.total_length() == 0:
        logger.debug(
            "No measurable segments (%d dangling); nothing to price",
            len(graph.dangling_segments()),
        )
        return PriceCalculation.empty(pricing_config)

    bends = detect_bends(graph)
    required_width = developed_length(graph, bends, material, 'inch')
    return calculate_price(required_width, material, product_type, pricing_config)


def format_price(price: float, currency: Currency = DEFAULT_CURRENCY) -> str:
    """Format a price for display, e.g. ``$29.10``."""
    return f"{CURRENCY_SYMBOLS[currency]}{price:.2f}"
