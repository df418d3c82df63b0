"""Production specification sheet: data assembly and HTML rendering."""

from __future__ import annotations

import html as html_lib
import logging

from ..config import DEFAULT_UNIT
from ..models.material import Material
from ..models.pricing import PriceCalculation
from ..models.profile import ProfileGraph
from ..models.sheet import BendRow, ProductionSheet, SegmentRow
from ..models.types import DisplayUnit
from ..models.units import from_pixels, get_unit_config, inches_to_unit
from .bend_allowance import compute_bend
from .bend_detection import detect_bends
from .developed_length import calculate_developed_length
from .formatting import format_angle, format_length, get_precision_label
from .pricing import format_price

logger = logging.getLogger(__name__)


def build_production_sheet(
    graph: ProfileGraph,
    material: Material | None,
    unit: DisplayUnit = DEFAULT_UNIT,
    name: str = 'Product Specification',
    precision: int | None = None,
    price: PriceCalculation | None = None,
) -> ProductionSheet:
    """
    Collect segment, bend and length data for a production sheet.

    Args:
        graph: Profile graph snapshot
        material: Selected material, or None
        unit: Display unit for every length on the sheet
        name: Product or sketch name printed as the title
        precision: Display precision (defaults to the unit's default)
        price: Optional price breakdown to include

    Returns:
        ProductionSheet ready for rendering
    """
    units = get_unit_config(unit)
    if precision is None:
        precision = units.default_precision

    warnings: list[str] = []
    segment_rows: list[SegmentRow] = []
    for index, segment in enumerate(graph.segments.values()):
        length = graph.segment_length(segment.id)
        if length is None:
            logger.warning("Segment %s omitted from sheet: references missing point", segment.id)
            warnings.append(f"Segment {segment.label or segment.id} references a missing point")
            continue
        segment_rows.append(SegmentRow(
            label=segment.label or str(index + 1),
            length=from_pixels(length, unit),
            direction=graph.segment_angle(segment.id) or 0.0,
        ))

    bends = detect_bends(graph)
    bend_rows: list[BendRow] = []
    point_order = {point_id: i for i, point_id in enumerate(graph.points)}
    for number, bend in enumerate(bends, start=1):
        vertex = graph.points[bend.vertex_point_id]
        allowance = inner = outer = 0.0
        if material is not None:
            result = compute_bend(
                bend.angle_degrees,
                inches_to_unit(material.thickness_inches, unit),
                material.k_factor,
            )
            allowance, inner, outer = result.bend_allowance, result.inner_length, result.outer_length
        bend_rows.append(BendRow(
            number=number,
            vertex_label=vertex.label or f"P{point_order[bend.vertex_point_id] + 1}",
            angle=bend.angle_degrees,
            bend_allowance=allowance,
            inner_length=inner,
            outer_length=outer,
        ))

    if price is not None and price.is_width_exceeded:
        warnings.append(
            f"Required width {price.required_width:.3f}\" exceeds the maximum "
            f"{price.max_allowed_width:.3f}\" for this material"
        )

    return ProductionSheet(
        name=name,
        units=units,
        precision=precision,
        segments=segment_rows,
        bends=bend_rows,
        developed=calculate_developed_length(graph, bends, material, unit),
        material_name=material.display_name if material else "",
        thickness_label=material.thickness_label if material else "",
        k_factor=material.k_factor if material else None,
        price=price,
        warnings=warnings,
    )


def _escape_html(text: str | None) -> str:
    """Escape HTML special characters; None becomes an empty string."""
    if text is None:
        return ""
    return html_lib.escape(str(text), quote=True)


def _generate_html_head(sheet: ProductionSheet) -> str:
    """Generate the DOCTYPE, head element, and CSS styles."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{_escape_html(sheet.name)}</title>
    <style>
        * {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif; }}
        body {{ max-width: 8.27in; margin: 0 auto; padding: 0.5in; font-size: 11pt; line-height: 1.4; }}
        h1 {{ font-size: 18pt; color: #fff; background-color: #163c6b; padding: 0.1in 0.15in; margin-bottom: 0.1in; }}
        h2 {{ font-size: 14pt; color: #444; margin-top: 0; }}
        h3 {{ font-size: 12pt; margin-top: 0.3in; margin-bottom: 0.1in; color: #333; }}
        .warning {{ color: #c00; font-weight: bold; margin-bottom: 0.1in; }}
        .summary {{ background-color: #f0f0f0; padding: 0.1in 0.15in; margin-bottom: 0.2in; }}
        table {{ border-collapse: collapse; width: 100%; margin-bottom: 0.2in; font-size: 10pt; }}
        th, td {{ border: 1px solid #333; padding: 4px 8px; text-align: left; }}
        th {{ background-color: #f0f0f0; font-weight: bold; }}
        .right {{ text-align: right; }}
        .center {{ text-align: center; }}
        .total-row {{ font-weight: bold; background-color: #e8e8e8; }}
        @media print {{ body {{ padding: 0; }} }}
    </style>
</head>
<body>
"""


def _generate_summary(sheet: ProductionSheet) -> str:
    """Generate the title and dimensions summary."""
    units = sheet.units
    precision = sheet.precision

    html = "<h1>PRODUCTION SPECIFICATION</h1>\n"
    html += f"<h2>{_escape_html(sheet.name)}</h2>\n"
    for warning in sheet.warnings:
        html += f'<div class="warning">⚠️ {_escape_html(warning)}</div>\n'

    html += '<div class="summary">\n'
    if sheet.material_name:
        html += f"<div>Material: {_escape_html(sheet.material_name)}</div>\n"
    html += f"<div>Developed Length: {format_length(sheet.developed.neutral_length, precision, units)}</div>\n"
    html += f"<div>Number of Segments: {len(sheet.segments)}</div>\n"
    html += f"<div>Number of Bends: {len(sheet.bends)}</div>\n"
    html += "</div>\n"
    return html


def _generate_segment_table(sheet: ProductionSheet) -> str:
    """Generate the segment details table."""
    units = sheet.units
    precision = sheet.precision

    html = "<h3>Segment Details</h3>\n<table>\n"
    html += "<tr><th>Segment</th><th class='right'>Length</th><th class='right'>Direction</th></tr>\n"
    for row in sheet.segments:
        html += f"<tr><td>{_escape_html(row.label)}</td>"
        html += f"<td class='right'>{format_length(row.length, precision, units)}</td>"
        html += f"<td class='right'>{format_angle(row.direction)}</td></tr>\n"
    html += "<tr class='total-row'><td>Total</td>"
    html += f"<td class='right'>{format_length(sheet.developed.flat_length, precision, units)}</td>"
    html += "<td></td></tr>\n</table>\n"
    return html


def _generate_bend_table(sheet: ProductionSheet) -> str:
    """Generate the bend table. Empty when the profile has no bends."""
    if not sheet.bends:
        return ""

    units = sheet.units
    precision = sheet.precision

    html = "<h3>Bends</h3>\n<table>\n"
    html += "<tr><th class='center'>Bend</th><th>At</th><th class='right'>Angle</th>"
    html += "<th class='right'>Bend Allowance</th><th class='right'>Inner Arc</th>"
    html += "<th class='right'>Outer Arc</th></tr>\n"
    for row in sheet.bends:
        html += f"<tr><td class='center'>{row.number}</td><td>{_escape_html(row.vertex_label)}</td>"
        html += f"<td class='right'>{format_angle(row.angle)}</td>"
        html += f"<td class='right'>{format_length(row.bend_allowance, precision, units)}</td>"
        html += f"<td class='right'>{format_length(row.inner_length, precision, units)}</td>"
        html += f"<td class='right'>{format_length(row.outer_length, precision, units)}</td></tr>\n"
    html += "</table>\n"
    return html


def _generate_lengths(sheet: ProductionSheet) -> str:
    """Generate the developed length table."""
    units = sheet.units
    precision = sheet.precision
    developed = sheet.developed

    html = "<h3>Developed Length</h3>\n<table>\n"
    html += f"<tr><td>Flat (segments only)</td><td class='right'>{format_length(developed.flat_length, precision, units)}</td></tr>\n"
    html += f"<tr><td>Inner surface</td><td class='right'>{format_length(developed.inner_length, precision, units)}</td></tr>\n"
    html += f"<tr class='total-row'><td>Neutral axis</td><td class='right'>{format_length(developed.neutral_length, precision, units)}</td></tr>\n"
    html += f"<tr><td>Outer surface</td><td class='right'>{format_length(developed.outer_length, precision, units)}</td></tr>\n"
    html += f"<tr><td>Stretch difference</td><td class='right'>{format_length(developed.stretch_difference, precision, units)}</td></tr>\n"
    html += "</table>\n"
    return html


def _generate_specifications(sheet: ProductionSheet) -> str:
    """Generate the material and price specifications table."""
    html = "<h3>Specifications</h3>\n<table>\n"
    if sheet.material_name:
        html += f"<tr><td>Material</td><td>{_escape_html(sheet.material_name)}</td></tr>\n"
    if sheet.thickness_label:
        html += f"<tr><td>Thickness</td><td>{_escape_html(sheet.thickness_label)}</td></tr>\n"
    if sheet.k_factor is not None:
        html += f"<tr><td>K-Factor</td><td>{sheet.k_factor:.2f}</td></tr>\n"
    html += f"<tr><td>Units</td><td>{sheet.units.unit_name}</td></tr>\n"
    html += f"<tr><td>Precision</td><td>{get_precision_label(sheet.precision, sheet.units)}</td></tr>\n"

    price = sheet.price
    if price is not None and not price.is_width_exceeded:
        html += f"<tr><td>Strip</td><td>{price.charged_width:g}\" x {price.strip_length:g}'</td></tr>\n"
        html += f"<tr><td>Quantity</td><td>{price.quantity}</td></tr>\n"
        html += f"<tr><td>Price per Unit</td><td>{format_price(price.total_cost_per_unit)}</td></tr>\n"
        html += f"<tr><td>Total</td><td>{format_price(price.total_cost)}</td></tr>\n"
    html += "</table>\n"
    return html


def _generate_footer() -> str:
    """Generate the closing HTML tags."""
    return "</body>\n</html>"


def generate_html_production_sheet(sheet: ProductionSheet) -> str:
    """
    Generate a printable HTML production specification sheet.

    Args:
        sheet: Assembled production sheet data

    Returns:
        Complete HTML document as string
    """
    parts = [
        _generate_html_head(sheet),
        _generate_summary(sheet),
        _generate_segment_table(sheet),
        _generate_bend_table(sheet),
        _generate_lengths(sheet),
        _generate_specifications(sheet),
        _generate_footer(),
    ]
    return "".join(parts)
