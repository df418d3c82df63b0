"""
Tests for the profile graph model.

Run with: pytest tests/ -v
"""
import math

import pytest

from flashing_designer.models.profile import (
    Point,
    ProfileGraph,
    Segment,
    segment_label,
)

from helpers import make_chain


class TestSegment:
    """Test Segment dataclass."""

    def test_self_loop_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot start and end on point"):
            Segment(id='s1', start_point_id='p1', end_point_id='p1')

    def test_other_end(self) -> None:
        segment = Segment(id='s1', start_point_id='p1', end_point_id='p2')
        assert segment.other_end('p1') == 'p2'
        assert segment.other_end('p2') == 'p1'

    def test_other_end_unknown_point_raises(self) -> None:
        segment = Segment(id='s1', start_point_id='p1', end_point_id='p2')
        with pytest.raises(ValueError, match="not an endpoint"):
            segment.other_end('p3')


class TestSegmentLabel:
    """Test letter labels for segments."""

    def test_first_labels(self) -> None:
        assert [segment_label(i) for i in range(3)] == ['A', 'B', 'C']

    def test_wraps_after_z(self) -> None:
        assert segment_label(25) == 'Z'
        assert segment_label(26) == 'AA'
        assert segment_label(27) == 'AB'


class TestDerivedValues:
    """Segment length and direction are computed from point positions."""

    def test_segment_length(self) -> None:
        graph = make_chain([(0, 0), (30, 40)])
        assert graph.segment_length('s1') == pytest.approx(50.0)

    def test_segment_angle(self) -> None:
        graph = make_chain([(0, 0), (0, 10)])
        assert graph.segment_angle('s1') == pytest.approx(90.0)

    def test_length_follows_point_move(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        graph.move_point('p2', 0, 20)
        assert graph.segment_length('s1') == pytest.approx(20.0)

    def test_dangling_segment_has_no_length(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        del graph.points['p2']
        assert graph.segment_length('s1') is None
        assert graph.segment_angle('s1') is None
        assert [s.id for s in graph.dangling_segments()] == ['s1']

    def test_total_length_skips_dangling(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 5)])
        graph.segments['ghost'] = Segment(id='ghost', start_point_id='p1', end_point_id='missing')
        assert graph.total_length() == pytest.approx(15.0)

    def test_is_empty(self) -> None:
        assert ProfileGraph().is_empty
        graph = ProfileGraph()
        graph.add_point(0, 0)
        assert graph.is_empty  # points but no segments
        assert not make_chain([(0, 0), (1, 0)]).is_empty


class TestEditing:
    """Test graph editing operations."""

    def test_add_point_connect_builds_chain(self) -> None:
        graph = ProfileGraph()
        graph.add_point(0, 0, connect=True)
        graph.add_point(10, 0, connect=True)
        graph.add_point(10, 10, connect=True)
        assert len(graph.points) == 3
        assert [s.label for s in graph.segments.values()] == ['A', 'B']
        assert graph.total_length() == pytest.approx(20.0)

    def test_add_point_without_connect(self) -> None:
        graph = ProfileGraph()
        graph.add_point(0, 0)
        graph.add_point(10, 0)
        assert graph.segments == {}

    def test_add_segment_unknown_point_raises(self) -> None:
        graph = ProfileGraph()
        p1 = graph.add_point(0, 0)
        with pytest.raises(KeyError):
            graph.add_segment(p1.id, 'nope')

    def test_add_segment_same_point_raises(self) -> None:
        graph = ProfileGraph()
        p1 = graph.add_point(0, 0)
        with pytest.raises(ValueError):
            graph.add_segment(p1.id, p1.id)

    def test_add_segment_explicit_label(self) -> None:
        graph = ProfileGraph()
        p1 = graph.add_point(0, 0)
        p2 = graph.add_point(5, 0)
        segment = graph.add_segment(p1.id, p2.id, label='Hem')
        assert segment.label == 'Hem'

    def test_delete_point_cascades(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 10)])
        assert graph.delete_point('p2') is True
        assert 'p2' not in graph.points
        assert graph.segments == {}

    def test_delete_missing_point(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        assert graph.delete_point('nope') is False

    def test_delete_segment(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 10)])
        assert graph.delete_segment('s1') is True
        assert graph.delete_segment('s1') is False
        assert list(graph.segments) == ['s2']
        assert len(graph.points) == 3

    def test_merge_points_rewires_segments(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 10)])
        extra = graph.add_point(20, 20)
        graph.add_segment('p3', extra.id)
        graph.merge_points(extra.id, 'p1')
        assert extra.id not in graph.points
        rewired = [s for s in graph.segments.values() if s.touches('p1')]
        assert len(rewired) == 2

    def test_merge_points_drops_collapsed_segment(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 10)])
        graph.merge_points('p2', 'p1')
        # s1 joined p1-p2 and would become p1-p1
        assert 's1' not in graph.segments
        assert graph.segments['s2'].start_point_id == 'p1'
        assert graph.segment_length('s2') == pytest.approx(math.hypot(10, 10))

    def test_merge_point_into_itself_is_noop(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        graph.merge_points('p1', 'p1')
        assert len(graph.points) == 2
        assert len(graph.segments) == 1

    def test_set_segment_length(self) -> None:
        graph = make_chain([(0, 0), (3, 4)])
        graph.set_segment_length('s1', 10.0)
        assert graph.segment_length('s1') == pytest.approx(10.0)
        assert graph.points['p2'].x == pytest.approx(6.0)
        assert graph.points['p2'].y == pytest.approx(8.0)

    def test_set_segment_angle_keeps_length(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        graph.set_segment_angle('s1', 90.0)
        assert graph.segment_length('s1') == pytest.approx(10.0)
        assert graph.segment_angle('s1') == pytest.approx(90.0)

    def test_rotate_preserves_lengths(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 5)])
        graph.rotate(37.0)
        assert graph.segment_length('s1') == pytest.approx(10.0)
        assert graph.segment_length('s2') == pytest.approx(5.0)

    def test_clear(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        graph.clear()
        assert graph.is_empty
        assert graph.points == {}

    def test_copy_is_independent(self) -> None:
        graph = make_chain([(0, 0), (10, 0)])
        snapshot = graph.copy()
        graph.move_point('p2', 50, 0)
        assert snapshot.segment_length('s1') == pytest.approx(10.0)


class TestSerialization:
    """Test to_dict / from_dict."""

    def test_to_dict_includes_derived_values(self) -> None:
        graph = make_chain([(0, 0), (0, 10)])
        data = graph.to_dict()
        assert data['segments'][0]['length'] == pytest.approx(10.0)
        assert data['segments'][0]['angle'] == pytest.approx(90.0)

    def test_round_trip(self) -> None:
        graph = make_chain([(0, 0), (10, 0), (10, 10)])
        restored = ProfileGraph.from_dict(graph.to_dict())
        assert restored.points == graph.points
        assert restored.segments == graph.segments

    def test_from_dict_ignores_stale_length(self) -> None:
        data = {
            'points': [
                {'id': 'a', 'x': 0, 'y': 0},
                {'id': 'b', 'x': 3, 'y': 4},
            ],
            'segments': [
                {'id': 's', 'start_point_id': 'a', 'end_point_id': 'b', 'length': 999.0},
            ],
        }
        graph = ProfileGraph.from_dict(data)
        assert graph.segment_length('s') == pytest.approx(5.0)

    def test_point_from_dict_label_optional(self) -> None:
        point = Point.from_dict({'id': 'a', 'x': 1, 'y': 2})
        assert point.label is None
        assert point.x == 1.0
