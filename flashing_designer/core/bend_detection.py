"""Bend detection from a profile graph.

A bend exists at every vertex shared by exactly two segments whose
directions are neither collinear nor folded back on each other. Endpoints of
an open chain and branch points (three or more segments) produce no bend.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from ..models.bend_data import Bend
from ..models.profile import ProfileGraph, Segment
from .geometry import ZeroVectorError, angle_between_vectors, vector_between
from .tolerances import ANGLE_EPSILON_DEGREES

logger = logging.getLogger(__name__)


def _build_adjacency(graph: ProfileGraph) -> dict[str, list[Segment]]:
    """Map each point id to its incident segments, skipping dangling segments."""
    adjacency: dict[str, list[Segment]] = defaultdict(list)
    for segment in graph.segments.values():
        if segment.start_point_id not in graph.points or segment.end_point_id not in graph.points:
            logger.warning(
                "Skipping segment %s: references missing point (%s -> %s)",
                segment.id, segment.start_point_id, segment.end_point_id,
            )
            continue
        adjacency[segment.start_point_id].append(segment)
        adjacency[segment.end_point_id].append(segment)
    return adjacency


def is_real_bend(angle: float) -> bool:
    """True if ``angle`` is far enough from 0 and 180 degrees to count as a bend."""
    return ANGLE_EPSILON_DEGREES < angle < 180.0 - ANGLE_EPSILON_DEGREES


def detect_bends(graph: ProfileGraph) -> list[Bend]:
    """
    Find every bend in the profile.

    For a vertex P joined to A by the first segment and to B by the second,
    the bend angle is the angle between (A - P) and (B - P).

    Args:
        graph: Profile graph snapshot

    Returns:
        Bends in point insertion order
    """
    adjacency = _build_adjacency(graph)
    bends: list[Bend] = []

    for point_id, point in graph.points.items():
        connected = adjacency.get(point_id, [])
        if len(connected) != 2:
            if len(connected) > 2:
                logger.debug("Point %s joins %d segments; not a bend", point_id, len(connected))
            continue

        seg_a, seg_b = connected
        other_a = graph.points[seg_a.other_end(point_id)]
        other_b = graph.points[seg_b.other_end(point_id)]
        v1 = vector_between((point.x, point.y), (other_a.x, other_a.y))
        v2 = vector_between((point.x, point.y), (other_b.x, other_b.y))

        try:
            angle = angle_between_vectors(v1, v2)
        except ZeroVectorError:
            logger.debug("Point %s has a zero-length segment; no angle defined", point_id)
            continue

        if not is_real_bend(angle):
            logger.debug("Point %s angle %.4f is not a real bend", point_id, angle)
            continue

        bends.append(Bend(
            vertex_point_id=point_id,
            angle_degrees=angle,
            segment_a_id=seg_a.id,
            segment_b_id=seg_b.id,
        ))

    return bends


def detect_bend_angles(graph: ProfileGraph) -> list[float]:
    """Bend angles in degrees, in the same order as :func:`detect_bends`."""
    return [bend.angle_degrees for bend in detect_bends(graph)]
