"""compositeviz - debug views for video-compositing render graphs."""

from compositeviz.exceptions import (
    ShaderCompileError,
    ShaderLinkError,
    VisualizationConfigError,
)
from compositeviz.graph import (
    CompositingNode,
    Connection,
    DestinationNode,
    GraphSnapshot,
    Interval,
    MediaKind,
    Node,
    NodeKind,
    ProcessingNode,
    SourceNode,
    TransitionNode,
)
from compositeviz.inspector import ControlForm, Slider, build_control_form
from compositeviz.viz import (
    RecordingSurface,
    SvgSurface,
    VizDebugger,
    render_graph_view,
    render_timeline_view,
)

__all__ = [
    # Data model
    "Node",
    "NodeKind",
    "MediaKind",
    "SourceNode",
    "ProcessingNode",
    "CompositingNode",
    "TransitionNode",
    "DestinationNode",
    "Interval",
    "Connection",
    "GraphSnapshot",
    # Rendering
    "render_graph_view",
    "render_timeline_view",
    "RecordingSurface",
    "SvgSurface",
    "VizDebugger",
    # Inspector
    "ControlForm",
    "Slider",
    "build_control_form",
    # Errors
    "VisualizationConfigError",
    "ShaderCompileError",
    "ShaderLinkError",
]
