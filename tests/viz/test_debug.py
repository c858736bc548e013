"""Tests for the visualization debug utilities."""

from compositeviz.graph import ProcessingNode, SourceNode, TransitionNode
from compositeviz.viz.debug import ValidationResult, VizDebugger, find_issues
from tests.viz.builders import make_snapshot


class TestValidation:
    """Tests for snapshot validation."""

    def test_valid_snapshot(self, crossfade):
        result = find_issues(crossfade)

        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_no_sources_is_an_error(self, empty_snapshot):
        result = find_issues(empty_snapshot)
        assert result.valid is False
        assert any("no source nodes" in e for e in result.errors)

    def test_bad_duration_is_an_error(self):
        result = find_issues(make_snapshot(1, duration=0))
        assert result.valid is False
        assert any("duration" in e for e in result.errors)

    def test_inverted_source_warns(self):
        snapshot = make_snapshot(1)
        snapshot.source_nodes[0].start_time = 5
        snapshot.source_nodes[0].stop_time = 2

        result = find_issues(snapshot)
        assert result.valid is True
        assert any("stops" in w for w in result.warnings)

    def test_inverted_transition_warns(self, crossfade):
        crossfade.transition_nodes[0].transition(6, 5, "mix")

        result = find_issues(crossfade)
        assert any("ends before it starts" in w for w in result.warnings)

    def test_isolated_processing_node_warns(self, crossfade):
        crossfade.processing_nodes.append(ProcessingNode("lonely"))

        result = find_issues(crossfade)
        assert any("'lonely'" in w and "no connections" in w for w in result.warnings)

    def test_source_listed_as_processing_warns(self, crossfade):
        stray = SourceNode("stray")
        crossfade.processing_nodes.append(stray)
        crossfade.connect(stray, crossfade.destination)

        result = find_issues(crossfade)
        assert result.valid is True
        assert "SourceNode('stray') is listed as processing but has kind 'source'" in result.warnings

    def test_processing_kinds_do_not_warn(self, crossfade):
        result = find_issues(crossfade)
        assert not any("listed as processing" in w for w in result.warnings)


class TestUnresolvedConnections:
    def test_none_for_closed_graph(self, crossfade):
        assert VizDebugger(crossfade).unresolved_connections() == []

    def test_outside_endpoint_reported(self, crossfade):
        ghost = TransitionNode("ghost")
        crossfade.connect(crossfade.source_nodes[0], ghost)

        unresolved = VizDebugger(crossfade).unresolved_connections()
        assert len(unresolved) == 1
        assert unresolved[0].destination is ghost

        result = find_issues(crossfade)
        assert any("outside the snapshot" in w for w in result.warnings)


class TestTraceNode:
    def test_trace_found(self, crossfade):
        fade = crossfade.processing_nodes[0]
        info = VizDebugger(crossfade).trace_node(fade)

        assert info.status == "FOUND"
        assert info.kind == "transition"
        assert info.incoming == crossfade.source_nodes
        assert info.outgoing == [crossfade.processing_nodes[1]]

    def test_trace_external(self, crossfade):
        ghost = SourceNode("ghost")
        crossfade.connect(ghost, crossfade.destination)

        info = VizDebugger(crossfade).trace_node(ghost)
        assert info.status == "EXTERNAL"
        assert info.outgoing == [crossfade.destination]

    def test_trace_not_found(self, crossfade):
        info = VizDebugger(crossfade).trace_node(ProcessingNode("nowhere"))
        assert info.status == "NOT_FOUND"
        assert info.incoming == []

    def test_parallel_edges_kept(self, crossfade):
        intro, fade = crossfade.source_nodes[0], crossfade.processing_nodes[0]
        crossfade.connect(intro, fade)

        info = VizDebugger(crossfade).trace_node(fade)
        assert info.incoming.count(intro) == 2


class TestDebugDump:
    def test_dump_shape(self, crossfade):
        dump = VizDebugger(crossfade).debug_dump()

        assert dump["duration"] == 8
        assert dump["unresolved"] == 0
        assert len(dump["nodes"]) == 5
        assert len(dump["connections"]) == 4
        out = next(n for n in dump["nodes"] if n["name"] == "out")
        assert out == {"name": "out", "kind": "destination", "in_snapshot": True, "in_degree": 1, "out_degree": 0}
