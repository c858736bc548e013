"""Colour definitions."""

from compositeviz.viz.styles.colors import (
    MEDIA_SOURCE_STYLE,
    NODE_COLORS,
    node_color,
    track_color,
)

__all__ = ["MEDIA_SOURCE_STYLE", "NODE_COLORS", "node_color", "track_color"]
