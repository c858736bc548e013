"""Node placement for the graph view.

Assigns every node of a snapshot a rectangle and colour:

- the destination sits centred on the right edge,
- sources are stacked on the left edge, one lane per index,
- processing nodes are scattered at random inside the remaining area.

Processing-node placement is random per call unless an ``rng`` with a
``random()`` method is passed (e.g. ``random.Random(seed)``).
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Protocol

from compositeviz.exceptions import VisualizationConfigError
from compositeviz.viz.geometry import RenderNode
from compositeviz.viz.styles.colors import node_color

if TYPE_CHECKING:
    from compositeviz.graph.snapshot import GraphSnapshot

logger = logging.getLogger(__name__)

GOLDEN_RATIO = 1.618


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


def node_size(height: float, source_count: int) -> tuple[float, float]:
    """(width, height) shared by every node rectangle.

    Raises:
        VisualizationConfigError: If there are no source nodes.
    """
    if source_count <= 0:
        raise VisualizationConfigError(
            "no_sources",
            "Graph snapshot has no source nodes; node height is undefined",
        )
    nh = height / (2 * source_count)
    return nh * GOLDEN_RATIO, nh


def layout_nodes(
    width: float,
    height: float,
    graph: GraphSnapshot,
    rng: RandomSource | None = None,
) -> list[RenderNode]:
    """Compute the render rectangle of every node in the snapshot.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        graph: Snapshot to lay out
        rng: Random source for processing-node placement (default: module ``random``)

    Returns:
        RenderNodes ordered destination, sources, processing nodes

    Raises:
        VisualizationConfigError: If the snapshot has no source nodes.
    """
    n = len(graph.source_nodes)
    nw, nh = node_size(height, n)
    rng = rng or random

    render_nodes = [
        RenderNode(
            x=width - nw,
            y=height / 2 - nh / 2,
            w=nw,
            h=nh,
            color=node_color(graph.destination.kind),
            node=graph.destination,
        )
    ]

    lane_height = height / n
    for i, source in enumerate(graph.source_nodes):
        render_nodes.append(
            RenderNode(x=0, y=i * lane_height, w=nw, h=nh, color=node_color(source.kind), node=source)
        )

    # Negative spans mean the canvas is too small; pin to the lower bound
    x_span = max(width - nw * 4, 0.0)
    y_span = max(height - nh * 2, 0.0)
    for proc in graph.processing_nodes:
        render_nodes.append(
            RenderNode(
                x=rng.random() * x_span + nw * 2,
                y=rng.random() * y_span + nh,
                w=nw,
                h=nh,
                color=node_color(proc.kind),
                node=proc,
            )
        )

    logger.debug(
        "Laid out %d nodes on %sx%s canvas (node size %.1fx%.1f)",
        len(render_nodes),
        width,
        height,
        nw,
        nh,
    )
    return render_nodes
