"""Tests for resolving connections into line segments."""

import pytest

from compositeviz.graph import Connection, ProcessingNode, SourceNode
from compositeviz.viz.edges import index_render_nodes, resolve_connections
from compositeviz.viz.geometry import RenderNode
from compositeviz.viz.layout import layout_nodes


def _rn(node, x, y, w=10, h=10):
    return RenderNode(x=x, y=y, w=w, h=h, color="#fff", node=node)


class TestResolveConnections:
    def test_segment_joins_centres(self):
        a, b = SourceNode("a"), ProcessingNode("b")
        render_nodes = [_rn(a, 0, 0, 20, 10), _rn(b, 100, 50, 20, 10)]

        (seg,) = resolve_connections(render_nodes, [Connection(a, b)])
        assert seg.start == (10, 5)
        assert seg.end == (110, 55)

    def test_missing_endpoint_skipped(self):
        a, b = SourceNode("a"), ProcessingNode("b")
        outsider = ProcessingNode("outsider")
        render_nodes = [_rn(a, 0, 0), _rn(b, 50, 50)]

        connections = [Connection(a, outsider), Connection(outsider, b), Connection(a, b)]
        segments = resolve_connections(render_nodes, connections)
        assert len(segments) == 1

    def test_duplicates_drawn_independently(self):
        a, b = SourceNode("a"), ProcessingNode("b")
        render_nodes = [_rn(a, 0, 0), _rn(b, 50, 50)]

        segments = resolve_connections(render_nodes, [Connection(a, b), Connection(a, b), Connection(b, a)])
        assert len(segments) == 3
        assert segments[0] == segments[1]
        assert segments[2].start == segments[0].end

    def test_lookup_is_by_identity(self):
        """Equal-looking nodes are different vertices."""
        a = SourceNode("same")
        twin = SourceNode("same")
        b = ProcessingNode("b")
        render_nodes = [_rn(a, 0, 0), _rn(b, 50, 50)]

        assert resolve_connections(render_nodes, [Connection(twin, b)]) == []

    def test_stroke_count_matches_resolvable_connections(self, crossfade):
        crossfade.connect(ProcessingNode("ghost"), crossfade.destination)
        render_nodes = layout_nodes(800, 400, crossfade)

        segments = resolve_connections(render_nodes, crossfade.connections)
        assert len(segments) == len(crossfade.connections) - 1


class TestIndexRenderNodes:
    def test_first_match_wins(self):
        a = SourceNode("a")
        first, second = _rn(a, 0, 0), _rn(a, 99, 99)

        assert index_render_nodes([first, second])[a] is first

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_one_entry_per_node(self, count):
        nodes = [ProcessingNode(str(i)) for i in range(count)]
        index = index_render_nodes([_rn(n, 0, 0) for n in nodes])
        assert list(index) == nodes
