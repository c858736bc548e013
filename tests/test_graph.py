"""Tests for the snapshot data model."""

import networkx as nx

from compositeviz.graph import (
    CompositingNode,
    Connection,
    DestinationNode,
    GraphSnapshot,
    Interval,
    MediaKind,
    NodeKind,
    ProcessingNode,
    SourceNode,
    TransitionNode,
)


class TestNodes:
    def test_identity_equality(self):
        a = SourceNode("clip", start_time=0, stop_time=1)
        b = SourceNode("clip", start_time=0, stop_time=1)

        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_kinds(self):
        assert SourceNode().kind is NodeKind.SOURCE
        assert ProcessingNode().kind is NodeKind.PROCESSING
        assert TransitionNode().kind is NodeKind.TRANSITION
        assert CompositingNode().kind is NodeKind.COMPOSITING
        assert DestinationNode().kind is NodeKind.DESTINATION

    def test_processing_subkinds(self):
        assert NodeKind.TRANSITION.is_processing
        assert NodeKind.COMPOSITING.is_processing
        assert not NodeKind.SOURCE.is_processing
        assert not NodeKind.DESTINATION.is_processing

    def test_source_defaults(self):
        source = SourceNode("clip", start_time=1.5, stop_time=4)
        assert source.media_kind is MediaKind.VIDEO
        assert source.duration == 2.5

    def test_repr_uses_name(self):
        assert repr(TransitionNode("fade")) == "TransitionNode('fade')"


class TestTransitionNode:
    def test_transition_appends_in_order(self):
        fade = TransitionNode("fade")
        fade.transition(0, 1, "mix")
        fade.transition(2, 3, "mix")
        fade.transition(1, 2, "opacity")

        assert fade.transitions == {
            "mix": [Interval(0, 1), Interval(2, 3)],
            "opacity": [Interval(1, 2)],
        }
        assert list(fade.iter_intervals()) == [
            ("mix", Interval(0, 1)),
            ("mix", Interval(2, 3)),
            ("opacity", Interval(1, 2)),
        ]

    def test_interval_length(self):
        assert Interval(1.5, 4).length == 2.5


class TestGraphSnapshot:
    def _snapshot(self):
        src = SourceNode("src", stop_time=2)
        fade, comp = TransitionNode("fade"), CompositingNode("comp")
        snapshot = GraphSnapshot([src], [comp, fade], DestinationNode("out"), duration=2)
        snapshot.connect(src, fade).connect(fade, comp).connect(comp, snapshot.destination)
        return snapshot

    def test_connect_chains(self):
        snapshot = self._snapshot()
        assert len(snapshot.connections) == 3
        assert all(isinstance(c, Connection) for c in snapshot.connections)

    def test_transition_nodes_subset(self):
        snapshot = self._snapshot()
        assert [n.name for n in snapshot.transition_nodes] == ["fade"]

    def test_iter_nodes_order(self):
        snapshot = self._snapshot()
        assert [n.name for n in snapshot.iter_nodes()] == ["out", "src", "comp", "fade"]

    def test_to_nx_graph(self):
        snapshot = self._snapshot()
        outsider = ProcessingNode("outsider")
        snapshot.connect(outsider, snapshot.destination)
        snapshot.connect(outsider, snapshot.destination)

        G = snapshot.to_nx_graph()
        assert isinstance(G, nx.MultiDiGraph)
        assert G.number_of_nodes() == 5
        assert G.number_of_edges() == 5
        assert G.nodes[outsider]["in_snapshot"] is False
        assert G.nodes[snapshot.destination]["kind"] is NodeKind.DESTINATION
        assert G.graph["duration"] == 2

    def test_repr(self):
        assert repr(self._snapshot()) == "GraphSnapshot(sources=1, processing=2, connections=3, duration=2)"
