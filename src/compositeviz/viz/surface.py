"""2D drawing surfaces the renderer issues primitives against.

A surface exposes three primitives: clear a region, fill a rectangle and
stroke a line. How pixels end up on screen is the surface's business.

Shipped implementations:
    RecordingSurface: keeps an ordered log of DrawCommands
    SvgSurface: accumulates primitives into an SVG document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union
from xml.sax.saxutils import quoteattr


class Surface(Protocol):
    """Protocol for an external 2D drawing surface."""

    width: float
    height: float

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float) -> None: ...


# =============================================================================
# Draw commands
# =============================================================================


@dataclass(frozen=True)
class ClearRect:
    x: float
    y: float
    w: float
    h: float

    def to_dict(self) -> dict[str, Any]:
        return {"op": "clear", "x": self.x, "y": self.y, "w": self.w, "h": self.h}


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    w: float
    h: float
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"op": "fill", "x": self.x, "y": self.y, "w": self.w, "h": self.h, "color": self.color}


@dataclass(frozen=True)
class StrokeLine:
    x0: float
    y0: float
    x1: float
    y1: float

    def to_dict(self) -> dict[str, Any]:
        return {"op": "stroke", "x0": self.x0, "y0": self.y0, "x1": self.x1, "y1": self.y1}


DrawCommand = Union[ClearRect, FillRect, StrokeLine]


@dataclass
class RecordingSurface:
    """Surface that records every primitive instead of drawing it.

    Example:
        >>> surface = RecordingSurface(800, 400)
        >>> surface.fill_rect(0, 0, 10, 10, "#000")
        >>> surface.commands
        [FillRect(x=0, y=0, w=10, h=10, color='#000')]
    """

    width: float
    height: float
    commands: list[DrawCommand] = field(default_factory=list)

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.commands.append(ClearRect(x, y, w, h))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.commands.append(FillRect(x, y, w, h, color))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.commands.append(StrokeLine(x0, y0, x1, y1))

    def of_type(self, command_type: type) -> list[DrawCommand]:
        """Recorded commands of one type, in issue order."""
        return [c for c in self.commands if isinstance(c, command_type)]

    def to_list(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self.commands]


class SvgSurface:
    """Surface that renders primitives as SVG elements.

    A clear covering the whole canvas starts a fresh document, including
    elements that stick out past the canvas edges. A partial clear drops
    only the elements lying fully inside the cleared region.
    """

    def __init__(self, width: float, height: float, *, stroke: str = "#000", stroke_width: float = 1) -> None:
        self.width = width
        self.height = height
        self.stroke = stroke
        self.stroke_width = stroke_width
        self._elements: list[tuple[tuple[float, float, float, float], str]] = []

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        if _contains((x, y, w, h), (0, 0, self.width, self.height)):
            self._elements = []
            return
        self._elements = [
            (bounds, el) for bounds, el in self._elements if not _contains((x, y, w, h), bounds)
        ]

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        el = f'<rect x="{_num(x)}" y="{_num(y)}" width="{_num(w)}" height="{_num(h)}" fill={quoteattr(color)} />'
        self._elements.append(((x, y, w, h), el))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        el = (
            f'<line x1="{_num(x0)}" y1="{_num(y0)}" x2="{_num(x1)}" y2="{_num(y1)}" '
            f"stroke={quoteattr(self.stroke)} stroke-width=\"{_num(self.stroke_width)}\" />"
        )
        bounds = (min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))
        self._elements.append((bounds, el))

    def __len__(self) -> int:
        return len(self._elements)

    def to_svg(self) -> str:
        """Serialize the current elements as a standalone SVG document."""
        body = "\n".join(f"  {el}" for _, el in self._elements)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(self.width)}" '
            f'height="{_num(self.height)}" viewBox="0 0 {_num(self.width)} {_num(self.height)}">\n'
            f"{body}\n</svg>\n"
        )


def _num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _contains(outer: tuple[float, float, float, float], inner: tuple[float, float, float, float]) -> bool:
    ox, oy, ow, oh = outer
    ix, iy, iw, ih = inner
    return ox <= ix and oy <= iy and ix + iw <= ox + ow and iy + ih <= oy + oh
