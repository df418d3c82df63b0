"""Shared type aliases for profile geometry and pricing."""

from __future__ import annotations

from typing import Literal, get_args

Point2D = tuple[float, float]
Vector2D = tuple[float, float]

Unit = Literal['px', 'mm', 'inch']
DisplayUnit = Literal['mm', 'inch']

MaterialType = Literal['copper', 'steel', 'aluminum', 'stainless']

ProductType = Literal[
    'coping-cap',
    'z-closure',
    'd-style',
    't-style',
    'valley',
    'roof-to-wall',
    'gravel-stop',
    'j-channel',
    'other',
]

PRODUCT_TYPES: tuple[str, ...] = get_args(ProductType)

Currency = Literal['USD', 'EUR', 'PLN']
