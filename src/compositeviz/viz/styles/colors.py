"""Colour definitions for the graph and timeline views.

Each node kind and media kind has an explicit colour so they can be tuned
in one place. Values are CSS colour strings understood by canvas-like
surfaces and SVG.
"""

from __future__ import annotations

from compositeviz.exceptions import VisualizationConfigError
from compositeviz.graph.nodes import MediaKind, NodeKind

# ============================================================
# GRAPH VIEW
# ============================================================

DESTINATION_COLOR = "#7D9F35"
SOURCE_COLOR = "#572A72"
PROCESSING_COLOR = "#AA9639"
COMPOSITING_COLOR = "#000000"

# ============================================================
# TIMELINE VIEW
# ============================================================

TRANSITION_OVERLAY_COLOR = "rgba(0,0,0, 0.3)"
PLAYHEAD_COLOR = "#000"

MEDIA_SOURCE_STYLE: dict[MediaKind, tuple[str, ...]] = {
    MediaKind.VIDEO: ("#572A72", "#3C1255"),
    MediaKind.IMAGE: ("#7D9F35", "#577714"),
    MediaKind.CANVAS: ("#AA9639", "#806D15"),
}


# Registry for lookup
NODE_COLORS: dict[NodeKind, str] = {
    NodeKind.DESTINATION: DESTINATION_COLOR,
    NodeKind.SOURCE: SOURCE_COLOR,
    NodeKind.PROCESSING: PROCESSING_COLOR,
    NodeKind.TRANSITION: PROCESSING_COLOR,
    NodeKind.COMPOSITING: COMPOSITING_COLOR,
}


def node_color(kind: NodeKind) -> str:
    """Fill colour for a node of the given kind, with fallback to PROCESSING."""
    return NODE_COLORS.get(kind, PROCESSING_COLOR)


def track_color(
    media_kind: MediaKind,
    lane: int,
    palettes: dict[MediaKind, tuple[str, ...]] = MEDIA_SOURCE_STYLE,
) -> str:
    """Track colour for a source at ``lane``, cycling through its palette.

    Raises:
        VisualizationConfigError: If the media kind has no colours.
    """
    palette = palettes.get(media_kind, ())
    if not palette:
        raise VisualizationConfigError(
            "empty_palette",
            f"No track colours defined for media kind '{media_kind.value}'",
        )
    return palette[lane % len(palette)]
