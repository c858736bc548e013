"""Geometry types produced by the layout components.

These are per-call projections of graph state into screen space. They are
created fresh on every render call and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compositeviz.graph.nodes import Node


@dataclass(frozen=True)
class Rect:
    """Filled rectangle with a CSS-style colour."""

    x: float  # Left edge
    y: float  # Top edge
    w: float
    h: float
    color: str

    @property
    def center(self) -> tuple[float, float]:
        """(x, y) of the rectangle centre - where connection lines attach."""
        return (self.x + self.w / 2, self.y + self.h / 2)


@dataclass(frozen=True)
class RenderNode(Rect):
    """Screen rectangle computed for one graph node."""

    node: Node | None = None


@dataclass(frozen=True)
class Segment:
    """Straight line between two rectangle centres."""

    start: tuple[float, float]
    end: tuple[float, float]
