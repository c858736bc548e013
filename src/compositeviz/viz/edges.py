"""Resolve graph connections into line segments between laid-out nodes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from compositeviz.viz.geometry import RenderNode, Segment

if TYPE_CHECKING:
    from compositeviz.graph.nodes import Connection, Node


def index_render_nodes(render_nodes: Sequence[RenderNode]) -> dict[Node, RenderNode]:
    """Map node identity -> RenderNode, keeping the first match per node."""
    index: dict[Node, RenderNode] = {}
    for rn in render_nodes:
        index.setdefault(rn.node, rn)
    return index


def resolve_connections(
    render_nodes: Sequence[RenderNode],
    connections: Iterable[Connection],
) -> list[Segment]:
    """Line segments for every connection whose endpoints were laid out.

    Connections with an endpoint outside ``render_nodes`` are skipped
    silently. Each remaining connection, including duplicates, gets its own
    segment between the centres of the two rectangles, in connection order.
    """
    index = index_render_nodes(render_nodes)
    segments = []
    for conn in connections:
        source = index.get(conn.source)
        destination = index.get(conn.destination)
        if source is None or destination is None:
            continue
        segments.append(Segment(source.center, destination.center))
    return segments
