"""
Pytest configuration for FlashingDesigner tests.

Adds the project root to sys.path so the tests run from a plain checkout
as well as from an installed package, and provides shared fixtures.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).parent))

from flashing_designer.models import Material, PricingConfig, ProfileGraph  # noqa: E402

from helpers import make_chain  # noqa: E402


@pytest.fixture
def steel() -> Material:
    """24 Ga Kynar steel, 48" sheets."""
    return Material(
        id='steel-24ga-kynar',
        name='24 Ga Kynar Steel',
        material_type='steel',
        thickness_label='24 Ga',
        thickness_inches=0.0276,
        k_factor=0.44,
        sheet_price=90.0,
        sheet_width=48.0,
        sheet_length=120.0,
        allowed_widths=[3, 4, 6, 9.6, 12, 16, 24, 48],
        finish='Kynar',
    )


@pytest.fixture
def copper() -> Material:
    """16 oz copper, 36" sheets."""
    return Material(
        id='copper-16oz',
        name='16 oz Copper (36"x120")',
        material_type='copper',
        thickness_label='16 oz',
        thickness_inches=0.0216,
        k_factor=0.40,
        sheet_price=242.0,
        sheet_width=36.0,
        sheet_length=120.0,
        allowed_widths=[3, 4, 6, 9, 12, 18, 36],
    )


@pytest.fixture
def pricing() -> PricingConfig:
    """Single unit, $10 setup, 20% margin, $3 labor for z-closures."""
    return PricingConfig(
        profit_margin=20.0,
        labor_costs={'z-closure': 3.0, 'coping-cap': 5.0},
        setup_fee=10.0,
        quantity=1,
    )


@pytest.fixture
def bracket_mm() -> ProfileGraph:
    """Right-angle bracket (0,0)-(100,0)-(100,50) drawn in millimeters."""
    return make_chain([(0, 0), (100, 0), (100, 50)], unit='mm')
