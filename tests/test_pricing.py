"""
Tests for pricing models and the price calculator.

Run with: pytest tests/ -v
"""
import math
from dataclasses import replace
from typing import get_args

import pytest

from flashing_designer.core.pricing import calculate_price, calculate_product_price, format_price
from flashing_designer.models import (
    PRODUCT_TYPES,
    Material,
    PriceCalculation,
    PricingConfig,
    ProductType,
    ProfileGraph,
    Segment,
    clamp_profit_margin,
    default_pricing_config,
)

from helpers import make_chain


class TestClampProfitMargin:
    """Test margin clamping at the input boundary."""

    def test_in_range(self) -> None:
        assert clamp_profit_margin(35.0) == 35.0

    def test_clamps(self) -> None:
        assert clamp_profit_margin(-5.0) == 0.0
        assert clamp_profit_margin(150.0) == 100.0

    def test_nan(self) -> None:
        assert clamp_profit_margin(float('nan')) == 0.0


class TestPricingConfig:
    """Test PricingConfig validation and helpers."""

    def test_defaults(self) -> None:
        config = PricingConfig()
        assert config.profit_margin == 20.0
        assert config.setup_fee == 10.0
        assert config.quantity == 1

    def test_zero_quantity_raises(self) -> None:
        with pytest.raises(ValueError, match="quantity must be a positive integer"):
            PricingConfig(quantity=0)

    def test_fractional_quantity_raises(self) -> None:
        with pytest.raises(ValueError, match="quantity must be a positive integer"):
            PricingConfig(quantity=2.5)  # type: ignore[arg-type]

    def test_negative_setup_fee_raises(self) -> None:
        with pytest.raises(ValueError, match="setup_fee cannot be negative"):
            PricingConfig(setup_fee=-1.0)

    def test_negative_labor_cost_raises(self) -> None:
        with pytest.raises(ValueError, match="labor_cost cannot be negative"):
            PricingConfig(labor_costs={'valley': -3.0})

    def test_out_of_range_margin_raises(self) -> None:
        with pytest.raises(ValueError, match="profit_margin must be between"):
            PricingConfig(profit_margin=120.0)

    def test_with_profit_margin_clamps(self) -> None:
        config = PricingConfig().with_profit_margin(250.0)
        assert config.profit_margin == 100.0

    def test_with_methods_return_copies(self) -> None:
        original = PricingConfig(labor_costs={'valley': 3.0})
        updated = original.with_labor_cost('valley', 4.5).with_quantity(12).with_setup_fee(0.0)
        assert original.labor_costs == {'valley': 3.0}
        assert original.quantity == 1
        assert updated.labor_costs == {'valley': 4.5}
        assert updated.quantity == 12
        assert updated.setup_fee == 0.0

    def test_labor_cost_fallback(self) -> None:
        config = PricingConfig(labor_costs={'coping-cap': 5.0})
        assert config.labor_cost_for('coping-cap') == 5.0
        assert config.labor_cost_for('gravel-stop') == 3.0

    def test_default_pricing_config(self) -> None:
        config = default_pricing_config()
        assert config.labor_cost_for('coping-cap') == 5.0
        assert config.labor_cost_for('valley') == 3.0
        assert config.profit_margin == 20.0

    def test_dict_round_trip(self) -> None:
        config = replace(default_pricing_config().with_quantity(4), default_labor_cost=7.5)
        restored = PricingConfig.from_dict(config.to_dict())
        assert restored == config
        assert restored.default_labor_cost == 7.5

    def test_from_dict_without_default_labor_cost(self) -> None:
        config = PricingConfig.from_dict({
            'profit_margin': 20,
            'labor_costs': [],
            'setup_fee': 10,
            'quantity': 1,
        })
        assert config.default_labor_cost == 3.0

    def test_labor_costs_copied_on_construction(
        self, steel: Material
    ) -> None:
        costs = {'valley': 3.0}
        config = PricingConfig(labor_costs=costs)
        costs['valley'] = -50.0
        assert config.labor_costs == {'valley': 3.0}
        result = calculate_price(5.0, steel, 'valley', config)
        assert result.labor_cost == pytest.approx(3.0)
        assert result.subtotal == pytest.approx(24.25)

    def test_product_types_match_literal(self) -> None:
        assert PRODUCT_TYPES == get_args(ProductType)
        assert 'coping-cap' in PRODUCT_TYPES
        assert 'other' in PRODUCT_TYPES

    def test_from_dict_clamps_margin(self) -> None:
        config = PricingConfig.from_dict({
            'profit_margin': 140,
            'labor_costs': [],
            'setup_fee': 5,
            'quantity': 2,
        })
        assert config.profit_margin == 100.0


class TestCalculatePrice:
    """Test calculate_price() business rules."""

    def test_basic_breakdown(self, steel: Material, pricing: PricingConfig) -> None:
        result = calculate_price(5.97, steel, 'z-closure', pricing)
        assert result.charged_width == 6
        assert result.sheet_fraction == pytest.approx(0.125)
        assert result.material_cost == pytest.approx(11.25)
        assert result.labor_cost == pytest.approx(3.0)
        assert result.setup_fee == pytest.approx(10.0)
        assert result.subtotal == pytest.approx(24.25)
        assert result.profit_amount == pytest.approx(4.85)
        assert result.total_cost == pytest.approx(29.10)
        assert result.total_cost_per_unit == pytest.approx(29.10)
        assert result.strip_length == 10.0
        assert result.is_width_exceeded is False
        assert result.can_order is True

    def test_unknown_product_type_uses_default_labor(
        self, steel: Material, pricing: PricingConfig
    ) -> None:
        result = calculate_price(5.0, steel, 'gravel-stop', pricing)
        assert result.labor_cost == pytest.approx(3.0)

    def test_quantity_ten_pays_setup(self, steel: Material, pricing: PricingConfig) -> None:
        result = calculate_price(5.0, steel, 'z-closure', pricing.with_quantity(10))
        assert result.setup_fee == pytest.approx(10.0)
        assert result.subtotal == pytest.approx(14.25 * 10 + 10.0)

    def test_bulk_order_waives_setup(self, steel: Material, pricing: PricingConfig) -> None:
        result = calculate_price(5.0, steel, 'z-closure', pricing.with_quantity(11))
        assert result.setup_fee == 0.0
        assert result.subtotal == pytest.approx(14.25 * 11)
        assert result.total_cost_per_unit == pytest.approx(14.25 * 1.2)

    def test_zero_margin(self, steel: Material, pricing: PricingConfig) -> None:
        result = calculate_price(5.0, steel, 'z-closure', pricing.with_profit_margin(0))
        assert result.profit_amount == 0.0
        assert result.total_cost == pytest.approx(result.subtotal)

    def test_width_exceeded_gate(self, copper: Material, pricing: PricingConfig) -> None:
        result = calculate_price(40.0, copper, 'z-closure', pricing)
        assert result.is_width_exceeded is True
        assert result.material_cost == 0.0
        assert result.labor_cost == 0.0
        assert result.setup_fee == 0.0
        assert result.subtotal == 0.0
        assert result.total_cost == 0.0
        assert result.total_cost_per_unit == 0.0
        assert result.charged_width == 36
        assert result.max_allowed_width == 36
        assert result.required_width == 40.0
        assert result.can_order is False

    def test_no_material_is_empty(self, pricing: PricingConfig) -> None:
        result = calculate_price(5.0, None, 'z-closure', pricing)
        assert result == PriceCalculation.empty(pricing)

    def test_no_geometry_is_empty(self, steel: Material, pricing: PricingConfig) -> None:
        result = calculate_price(0.0, steel, 'z-closure', pricing, has_geometry=False)
        assert result == PriceCalculation.empty(pricing)

    def test_all_outputs_non_negative(self, copper: Material, pricing: PricingConfig) -> None:
        for width in (0.0, 2.9, 3.0, 11.0, 35.9, 36.0, 50.0):
            result = calculate_price(width, copper, 'valley', pricing)
            for value in (result.material_cost, result.labor_cost, result.setup_fee,
                          result.subtotal, result.profit_amount, result.total_cost):
                assert value >= 0


class TestCalculateProductPrice:
    """End-to-end: graph to price."""

    def test_right_angle_bracket(
        self, bracket_mm: ProfileGraph, steel: Material, pricing: PricingConfig
    ) -> None:
        result = calculate_product_price(bracket_mm, steel, 'z-closure', pricing)
        bend_allowance = (math.pi / 2) * (0.0276 + 0.44 * 0.0276)
        assert result.required_width == pytest.approx(150.0 / 25.4 + bend_allowance)
        assert result.required_width == pytest.approx(5.97, abs=0.01)
        assert result.charged_width == 6
        assert result.sheet_fraction == pytest.approx(0.125)
        assert result.material_cost == pytest.approx(11.25)
        assert result.labor_cost == pytest.approx(3.0)
        assert result.subtotal == pytest.approx(24.25)
        assert result.profit_amount == pytest.approx(4.85)
        assert result.total_cost == pytest.approx(29.10)

    def test_wide_profile_blocked(self, copper: Material, pricing: PricingConfig) -> None:
        graph = make_chain([(0, 0), (20, 0), (20, 20)], unit='inch')
        result = calculate_product_price(graph, copper, 'coping-cap', pricing)
        assert result.is_width_exceeded is True
        assert result.total_cost == 0.0

    def test_empty_state_is_idempotent(self, steel: Material, pricing: PricingConfig) -> None:
        points_only = ProfileGraph()
        points_only.add_point(0, 0)
        results = [
            calculate_product_price(ProfileGraph(), steel, 'valley', pricing),
            calculate_product_price(points_only, steel, 'valley', pricing),
            calculate_product_price(make_chain([(0, 0), (1, 0)]), None, 'valley', pricing),
            calculate_product_price(ProfileGraph(), None, 'valley', pricing),
        ]
        expected = PriceCalculation.empty(pricing)
        assert all(r == expected for r in results)
        assert expected.total_cost == 0.0
        assert expected.strip_length == 10.0
        assert expected.is_width_exceeded is False

    def test_only_dangling_segments_is_empty(
        self, steel: Material, pricing: PricingConfig
    ) -> None:
        graph = ProfileGraph()
        graph.add_point(0, 0)
        graph.segments['ghost'] = Segment(id='ghost', start_point_id='gone', end_point_id='lost')
        result = calculate_product_price(graph, steel, 'valley', pricing)
        assert result == PriceCalculation.empty(pricing)
        assert result.charged_width == 0.0

    def test_does_not_mutate_inputs(
        self, bracket_mm: ProfileGraph, steel: Material, pricing: PricingConfig
    ) -> None:
        before = bracket_mm.to_dict()
        calculate_product_price(bracket_mm, steel, 'z-closure', pricing)
        assert bracket_mm.to_dict() == before

    def test_to_dict(self, bracket_mm: ProfileGraph, steel: Material, pricing: PricingConfig) -> None:
        data = calculate_product_price(bracket_mm, steel, 'z-closure', pricing).to_dict()
        assert data['charged_width'] == 6
        assert data['is_width_exceeded'] is False
        assert set(data) >= {'material_cost', 'total_cost', 'sheet_fraction', 'max_allowed_width'}


class TestFormatPrice:
    """Test format_price()."""

    def test_usd(self) -> None:
        assert format_price(29.1) == "$29.10"

    def test_other_currencies(self) -> None:
        assert format_price(5, 'EUR') == "€5.00"
        assert format_price(5, 'PLN') == "zł5.00"
