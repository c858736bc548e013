"""Visualization module for compositeviz.

Usage:
    from compositeviz.viz import RecordingSurface, render_graph_view, render_timeline_view

    surface = RecordingSurface(800, 400)
    render_graph_view(snapshot, surface)
    render_timeline_view(snapshot, surface, current_time=2.5)

Debug:
    from compositeviz.viz import VizDebugger, find_issues

    debugger = VizDebugger(snapshot)
    debugger.unresolved_connections()  # edges the graph view will skip
    debugger.find_issues()  # comprehensive diagnostics
"""

from compositeviz.viz.debug import NodeTrace, ValidationResult, VizDebugger, find_issues
from compositeviz.viz.edges import resolve_connections
from compositeviz.viz.geometry import Rect, RenderNode, Segment
from compositeviz.viz.layout import layout_nodes
from compositeviz.viz.renderer import CanvasRenderer, render_graph_view, render_timeline_view
from compositeviz.viz.surface import (
    ClearRect,
    DrawCommand,
    FillRect,
    RecordingSurface,
    StrokeLine,
    Surface,
    SvgSurface,
)
from compositeviz.viz.timeline import TimelineFrame, TimeScale, map_timeline

__all__ = [
    "CanvasRenderer",
    "ClearRect",
    "DrawCommand",
    "FillRect",
    "NodeTrace",
    "Rect",
    "RecordingSurface",
    "RenderNode",
    "Segment",
    "StrokeLine",
    "Surface",
    "SvgSurface",
    "TimeScale",
    "TimelineFrame",
    "ValidationResult",
    "VizDebugger",
    "find_issues",
    "layout_nodes",
    "map_timeline",
    "render_graph_view",
    "render_timeline_view",
    "resolve_connections",
]
