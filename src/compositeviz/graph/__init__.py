"""Graph snapshot data model."""

from compositeviz.graph.nodes import (
    CompositingNode,
    Connection,
    DestinationNode,
    Interval,
    MediaKind,
    Node,
    NodeKind,
    ProcessingNode,
    SourceNode,
    TransitionNode,
)
from compositeviz.graph.snapshot import GraphSnapshot

__all__ = [
    "CompositingNode",
    "Connection",
    "DestinationNode",
    "GraphSnapshot",
    "Interval",
    "MediaKind",
    "Node",
    "NodeKind",
    "ProcessingNode",
    "SourceNode",
    "TransitionNode",
]
