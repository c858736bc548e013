"""Issue layout results against a drawing surface.

Public API:
    from compositeviz.viz.renderer import render_graph_view, render_timeline_view

Every call is a full redraw: the surface is cleared, then primitives are
issued in layout order. Preconditions are checked before the clear, so a
rejected snapshot leaves the surface untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from compositeviz.viz.edges import resolve_connections
from compositeviz.viz.layout import RandomSource, layout_nodes
from compositeviz.viz.timeline import map_timeline

if TYPE_CHECKING:
    from compositeviz.graph.snapshot import GraphSnapshot
    from compositeviz.viz.geometry import Rect, Segment
    from compositeviz.viz.surface import Surface

logger = logging.getLogger(__name__)


class CanvasRenderer:
    """Thin executor that replays geometry onto a Surface."""

    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def clear(self) -> None:
        self.surface.clear_rect(0, 0, self.surface.width, self.surface.height)

    def fill(self, rects: Iterable[Rect]) -> int:
        count = 0
        for r in rects:
            self.surface.fill_rect(r.x, r.y, r.w, r.h, r.color)
            count += 1
        return count

    def stroke(self, segments: Iterable[Segment]) -> int:
        count = 0
        for seg in segments:
            self.surface.stroke_line(seg.start[0], seg.start[1], seg.end[0], seg.end[1])
            count += 1
        return count


def render_graph_view(graph: GraphSnapshot, surface: Surface, *, rng: RandomSource | None = None) -> None:
    """Draw the node-link diagram of ``graph`` onto ``surface``.

    Connections are stroked before any node is filled so rectangles
    occlude the line ends beneath them.

    Raises:
        VisualizationConfigError: If the snapshot has no source nodes.
    """
    render_nodes = layout_nodes(surface.width, surface.height, graph, rng=rng)
    segments = resolve_connections(render_nodes, graph.connections)

    renderer = CanvasRenderer(surface)
    renderer.clear()
    strokes = renderer.stroke(segments)
    fills = renderer.fill(render_nodes)
    logger.debug("Rendered graph view: %d connections, %d nodes", strokes, fills)


def render_timeline_view(
    graph: GraphSnapshot,
    surface: Surface,
    current_time: float | None = None,
) -> None:
    """Draw the timeline of ``graph`` onto ``surface``.

    Transition overlays go first, then source tracks, then the playhead
    when ``current_time`` is given.

    Raises:
        VisualizationConfigError: If the snapshot has no source nodes or
            its duration is not positive.
    """
    frame = map_timeline(surface.width, surface.height, graph, current_time)

    renderer = CanvasRenderer(surface)
    renderer.clear()
    fills = renderer.fill(frame.rects())
    logger.debug("Rendered timeline view: %d rectangles", fills)
