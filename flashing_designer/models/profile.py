"""Profile graph model: points connected by segments.

Points and segments are held in id-keyed arenas. Segments reference their
endpoints by id only. Segment length and direction are never stored; they are
recomputed from the current point positions on every access so they cannot
drift after a point moves.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace
from typing import NotRequired, TypedDict


class PointDict(TypedDict):
    """Type definition for Point serialization."""

    id: str
    x: float
    y: float
    label: NotRequired[str | None]


class SegmentDict(TypedDict):
    """Type definition for Segment serialization.

    ``length`` and ``angle`` are written for consumers of the exported data
    and ignored on load.
    """

    id: str
    start_point_id: str
    end_point_id: str
    label: NotRequired[str | None]
    length: NotRequired[float]
    angle: NotRequired[float]


class ProfileGraphDict(TypedDict):
    """Type definition for ProfileGraph serialization."""

    points: list[PointDict]
    segments: list[SegmentDict]


def _generate_id(prefix: str) -> str:
    """Generate a unique ID."""
    return f"{prefix}-{str(uuid.uuid4())[:8]}"


def segment_label(index: int) -> str:
    """Letter label for the Nth segment: A, B, ... Z, AA, AB, ..."""
    label = ''
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(65 + remainder) + label
    return label


@dataclass(frozen=True, slots=True)
class Point:
    """A vertex on the drawing canvas (coordinates in pixels)."""

    id: str
    x: float
    y: float
    label: str | None = None

    def to_dict(self) -> PointDict:
        """Convert to dictionary for JSON serialization."""
        return PointDict(id=self.id, x=self.x, y=self.y, label=self.label)

    @classmethod
    def from_dict(cls, data: PointDict) -> Point:
        """Create Point from dictionary."""
        return cls(
            id=data['id'],
            x=float(data['x']),
            y=float(data['y']),
            label=data.get('label'),
        )


@dataclass(frozen=True, slots=True)
class Segment:
    """An edge between two points, referenced by id."""

    id: str
    start_point_id: str
    end_point_id: str
    label: str | None = None

    def __post_init__(self) -> None:
        """Reject segments that start and end on the same point."""
        if self.start_point_id == self.end_point_id:
            raise ValueError(
                f"Segment {self.id!r} cannot start and end on point {self.start_point_id!r}"
            )

    def other_end(self, point_id: str) -> str:
        """Return the endpoint opposite ``point_id``."""
        if point_id == self.start_point_id:
            return self.end_point_id
        if point_id == self.end_point_id:
            return self.start_point_id
        raise ValueError(f"Point {point_id!r} is not an endpoint of segment {self.id!r}")

    def touches(self, point_id: str) -> bool:
        """True if ``point_id`` is one of this segment's endpoints."""
        return point_id in (self.start_point_id, self.end_point_id)


@dataclass(slots=True)
class ProfileGraph:
    """
    Points and segments of a flashing profile at a point in time.

    Not required to be connected or to form a single chain. The graph is
    owned by the editing layer; calculation functions only read it.

    Attributes:
        points: Points keyed by id, in insertion order
        segments: Segments keyed by id, in insertion order
    """

    points: dict[str, Point] = field(default_factory=dict)
    segments: dict[str, Segment] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"ProfileGraph(points={len(self.points)}, segments={len(self.segments)})"

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to measure."""
        return not self.points or not self.segments

    # Derived values

    def segment_endpoints(self, segment_id: str) -> tuple[Point, Point] | None:
        """Return the (start, end) points of a segment, or None if either is missing."""
        segment = self.segments[segment_id]
        start = self.points.get(segment.start_point_id)
        end = self.points.get(segment.end_point_id)
        if start is None or end is None:
            return None
        return start, end

    def segment_length(self, segment_id: str) -> float | None:
        """
        Euclidean length of a segment in pixels.

        Returns:
            Length, or None if the segment references a missing point
        """
        endpoints = self.segment_endpoints(segment_id)
        if endpoints is None:
            return None
        start, end = endpoints
        return math.hypot(end.x - start.x, end.y - start.y)

    def segment_angle(self, segment_id: str) -> float | None:
        """Direction of a segment in degrees relative to the horizontal axis."""
        endpoints = self.segment_endpoints(segment_id)
        if endpoints is None:
            return None
        start, end = endpoints
        return math.degrees(math.atan2(end.y - start.y, end.x - start.x))

    def incident_segments(self, point_id: str) -> list[Segment]:
        """Segments that have ``point_id`` as an endpoint."""
        return [s for s in self.segments.values() if s.touches(point_id)]

    def dangling_segments(self) -> list[Segment]:
        """Segments that reference a point not in the graph."""
        return [
            s for s in self.segments.values()
            if s.start_point_id not in self.points or s.end_point_id not in self.points
        ]

    def total_length(self) -> float:
        """Sum of all measurable segment lengths in pixels."""
        total = 0.0
        for segment_id in self.segments:
            length = self.segment_length(segment_id)
            if length is not None:
                total += length
        return total

    # Editing

    def add_point(self, x: float, y: float, label: str | None = None,
                  connect: bool = False) -> Point:
        """
        Add a point to the graph.

        Args:
            x: Canvas x in pixels
            y: Canvas y in pixels
            label: Optional display label
            connect: Also add a segment from the most recently added point

        Returns:
            The created Point
        """
        previous = next(reversed(self.points.values()), None)
        point = Point(id=_generate_id('point'), x=x, y=y, label=label)
        self.points[point.id] = point
        if connect and previous is not None:
            self.add_segment(previous.id, point.id)
        return point

    def add_segment(self, start_point_id: str, end_point_id: str,
                    label: str | None = None) -> Segment:
        """
        Connect two existing points.

        Raises:
            KeyError: If either point does not exist
            ValueError: If both ids refer to the same point
        """
        for point_id in (start_point_id, end_point_id):
            if point_id not in self.points:
                raise KeyError(f"Unknown point: {point_id!r}")
        if label is None:
            label = segment_label(len(self.segments))
        segment = Segment(
            id=_generate_id('segment'),
            start_point_id=start_point_id,
            end_point_id=end_point_id,
            label=label,
        )
        self.segments[segment.id] = segment
        return segment

    def move_point(self, point_id: str, x: float, y: float) -> None:
        """Move a point. Connected segment lengths follow automatically."""
        self.points[point_id] = replace(self.points[point_id], x=x, y=y)

    def delete_point(self, point_id: str) -> bool:
        """
        Delete a point and every segment attached to it.

        Returns:
            True if the point was found and deleted
        """
        if point_id not in self.points:
            return False
        del self.points[point_id]
        for segment in self.incident_segments(point_id):
            del self.segments[segment.id]
        return True

    def delete_segment(self, segment_id: str) -> bool:
        """Delete a segment. Returns True if found and removed."""
        return self.segments.pop(segment_id, None) is not None

    def merge_points(self, source_id: str, target_id: str) -> None:
        """
        Merge ``source_id`` into ``target_id``.

        Segments attached to the source are rewired to the target. A segment
        that would then connect the target to itself is removed.

        Raises:
            KeyError: If either point does not exist
        """
        for point_id in (source_id, target_id):
            if point_id not in self.points:
                raise KeyError(f"Unknown point: {point_id!r}")
        if source_id == target_id:
            return

        for segment in self.incident_segments(source_id):
            start = target_id if segment.start_point_id == source_id else segment.start_point_id
            end = target_id if segment.end_point_id == source_id else segment.end_point_id
            if start == end:
                del self.segments[segment.id]
            else:
                self.segments[segment.id] = replace(
                    segment, start_point_id=start, end_point_id=end
                )
        del self.points[source_id]

    def set_segment_length(self, segment_id: str, length: float) -> None:
        """Resize a segment (pixels) by moving its end point along its current direction."""
        endpoints = self.segment_endpoints(segment_id)
        if endpoints is None:
            return
        start, end = endpoints
        direction = math.atan2(end.y - start.y, end.x - start.x)
        self.move_point(
            end.id,
            start.x + length * math.cos(direction),
            start.y + length * math.sin(direction),
        )

    def set_segment_angle(self, segment_id: str, angle: float) -> None:
        """Point a segment in a new direction (degrees) keeping its length."""
        endpoints = self.segment_endpoints(segment_id)
        if endpoints is None:
            return
        start, end = endpoints
        length = math.hypot(end.x - start.x, end.y - start.y)
        radians = math.radians(angle)
        self.move_point(
            end.id,
            start.x + length * math.cos(radians),
            start.y + length * math.sin(radians),
        )

    def rotate(self, angle: float) -> None:
        """Rotate every point about the centroid by ``angle`` degrees."""
        if not self.points:
            return
        center_x = sum(p.x for p in self.points.values()) / len(self.points)
        center_y = sum(p.y for p in self.points.values()) / len(self.points)
        cos = math.cos(math.radians(angle))
        sin = math.sin(math.radians(angle))
        for point in list(self.points.values()):
            dx = point.x - center_x
            dy = point.y - center_y
            self.move_point(
                point.id,
                center_x + dx * cos - dy * sin,
                center_y + dx * sin + dy * cos,
            )

    def clear(self) -> None:
        """Remove all points and segments."""
        self.points.clear()
        self.segments.clear()

    def copy(self) -> ProfileGraph:
        """Snapshot of the graph. Points and segments are immutable, so a shallow copy suffices."""
        return ProfileGraph(points=dict(self.points), segments=dict(self.segments))

    # Serialization

    def to_dict(self) -> ProfileGraphDict:
        """Convert to dictionary for JSON serialization, including derived lengths."""
        segments: list[SegmentDict] = []
        for segment in self.segments.values():
            data = SegmentDict(
                id=segment.id,
                start_point_id=segment.start_point_id,
                end_point_id=segment.end_point_id,
                label=segment.label,
            )
            endpoints = self.segment_endpoints(segment.id)
            if endpoints is not None:
                start, end = endpoints
                data['length'] = math.hypot(end.x - start.x, end.y - start.y)
                data['angle'] = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
            segments.append(data)
        return ProfileGraphDict(
            points=[p.to_dict() for p in self.points.values()],
            segments=segments,
        )

    @classmethod
    def from_dict(cls, data: ProfileGraphDict) -> ProfileGraph:
        """Create ProfileGraph from dictionary. Stored lengths and angles are ignored."""
        graph = cls()
        for point_data in data.get('points', []):
            point = Point.from_dict(point_data)
            graph.points[point.id] = point
        for segment_data in data.get('segments', []):
            segment = Segment(
                id=segment_data['id'],
                start_point_id=segment_data['start_point_id'],
                end_point_id=segment_data['end_point_id'],
                label=segment_data.get('label'),
            )
            graph.segments[segment.id] = segment
        return graph
