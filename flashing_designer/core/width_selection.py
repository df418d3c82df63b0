"""Strip width selection and the maximum-width manufacturability check."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.bend_data import WidthSelection
from .tolerances import WIDTH_TOLERANCE_INCHES

logger = logging.getLogger(__name__)


def get_max_allowed_width(allowed_widths: Sequence[float], sheet_width: float) -> float:
    """
    Widest strip a material can produce.

    Raises:
        ValueError: If ``allowed_widths`` is empty
    """
    if not allowed_widths:
        raise ValueError("allowed_widths cannot be empty")
    return min(sheet_width, max(allowed_widths))


def find_charged_width(required_width: float, allowed_widths: Sequence[float]) -> float:
    """
    Find the smallest allowed width that fits the required width.

    The difference is waste the customer pays for. If nothing fits, the
    largest allowed width is returned.

    Raises:
        ValueError: If ``allowed_widths`` is empty
    """
    if not allowed_widths:
        raise ValueError("allowed_widths cannot be empty")
    sorted_widths = sorted(allowed_widths)
    for width in sorted_widths:
        if width >= required_width:
            return width
    return sorted_widths[-1]


def select_width(
    required_width: float,
    allowed_widths: Sequence[float],
    sheet_width: float,
) -> WidthSelection:
    """
    Fit a required developed width to a material's strip catalog.

    Args:
        required_width: Developed width of the profile in inches
        allowed_widths: Stockable strip widths in inches
        sheet_width: Full sheet width in inches

    Returns:
        WidthSelection. When the required width exceeds the maximum, the
        charged width is clamped to the maximum for display and
        ``is_exceeded`` is set; callers must not quote a price.
    """
    max_allowed_width = get_max_allowed_width(allowed_widths, sheet_width)
    is_exceeded = required_width > max_allowed_width + WIDTH_TOLERANCE_INCHES

    if is_exceeded:
        logger.debug(
            "Required width %.4f exceeds maximum %.4f", required_width, max_allowed_width
        )
        charged_width = max_allowed_width
    else:
        charged_width = find_charged_width(required_width, allowed_widths)

    return WidthSelection(
        required_width=required_width,
        charged_width=charged_width,
        sheet_fraction=charged_width / sheet_width,
        max_allowed_width=max_allowed_width,
        is_exceeded=is_exceeded,
    )
