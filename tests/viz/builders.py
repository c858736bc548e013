"""Snapshot builders shared by the visualization tests."""

from compositeviz.graph import (
    CompositingNode,
    DestinationNode,
    GraphSnapshot,
    MediaKind,
    SourceNode,
    TransitionNode,
)


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def make_snapshot(source_count: int = 2, duration: float = 10.0) -> GraphSnapshot:
    """Snapshot with ``source_count`` back-to-back video sources and no processing."""
    sources = [
        SourceNode(f"src{i}", start_time=float(i), stop_time=float(i + 1)) for i in range(source_count)
    ]
    return GraphSnapshot(source_nodes=sources, destination=DestinationNode("out"), duration=duration)


def make_crossfade() -> GraphSnapshot:
    """Two sources crossfaded through a transition, composited onto the output.

    intro ──┐
            ├─> fade ─> comp ─> out
    outro ──┘
    """
    intro = SourceNode("intro", start_time=0, stop_time=4)
    outro = SourceNode("outro", start_time=3, stop_time=8, media_kind=MediaKind.IMAGE)
    fade = TransitionNode("fade")
    fade.transition(3, 4, "mix")
    comp = CompositingNode("comp")

    snapshot = GraphSnapshot(
        source_nodes=[intro, outro],
        processing_nodes=[fade, comp],
        destination=DestinationNode("out"),
        duration=8,
    )
    snapshot.connect(intro, fade).connect(outro, fade).connect(fade, comp).connect(comp, snapshot.destination)
    return snapshot
