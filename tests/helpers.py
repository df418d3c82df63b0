"""
Shared test helpers for FlashingDesigner tests.

This module contains mock classes and graph builders used across multiple test files.
"""
from __future__ import annotations

from dataclasses import dataclass

from flashing_designer.models import Point, ProfileGraph, Segment, to_pixels


@dataclass
class MockMaterial:
    """Mock material carrying only bend parameters.

    Satisfies BendMaterialLike Protocol from core.developed_length, and can
    hold values a validated Material would reject.
    """

    thickness_inches: float = 0.0
    k_factor: float = 0.0


def make_chain(coords: list[tuple[float, float]], unit: str = 'px') -> ProfileGraph:
    """Build an open chain P1-P2-...-Pn from coordinates given in ``unit``.

    Point ids are 'p1'..'pn' and segment ids 's1'..'s(n-1)' so tests can
    refer to them directly.
    """
    graph = ProfileGraph()
    for i, (x, y) in enumerate(coords, start=1):
        point = Point(id=f'p{i}', x=to_pixels(x, unit), y=to_pixels(y, unit))
        graph.points[point.id] = point
    for i in range(1, len(coords)):
        segment = Segment(id=f's{i}', start_point_id=f'p{i}', end_point_id=f'p{i + 1}')
        graph.segments[segment.id] = segment
    return graph
