"""Debug utilities for compositeviz snapshots.

Spots problems that make a view look wrong or fail before rendering it.

Usage:
    from compositeviz.viz.debug import VizDebugger

    debugger = VizDebugger(snapshot)

    # Quick validation
    result = debugger.find_issues()
    if not result.valid:
        print("Issues found:", result.errors)

    # Connections the graph view will skip
    for conn in debugger.unresolved_connections():
        print(conn.source, "->", conn.destination)

    # Trace node connections ("points from" / "points to")
    info = debugger.trace_node(node)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import networkx as nx

if TYPE_CHECKING:
    from compositeviz.graph.nodes import Connection, Node
    from compositeviz.graph.snapshot import GraphSnapshot


@dataclass
class ValidationResult:
    """Result of snapshot validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class NodeTrace:
    """Trace information for a single node."""

    status: str  # "FOUND", "EXTERNAL" or "NOT_FOUND"
    node: Node
    kind: str | None = None
    incoming: list[Node] = field(default_factory=list)
    outgoing: list[Node] = field(default_factory=list)


class VizDebugger:
    """Inspect a GraphSnapshot the way the renderers will see it."""

    def __init__(self, graph: GraphSnapshot) -> None:
        self.graph = graph
        self._nx: nx.MultiDiGraph | None = None

    @property
    def nx_graph(self) -> nx.MultiDiGraph:
        """NetworkX view of the snapshot, built on first access."""
        if self._nx is None:
            self._nx = self.graph.to_nx_graph()
        return self._nx

    def unresolved_connections(self) -> list[Connection]:
        """Connections with an endpoint outside the rendered node set."""
        rendered = set(self.graph.iter_nodes())
        return [
            conn
            for conn in self.graph.connections
            if conn.source not in rendered or conn.destination not in rendered
        ]

    def trace_node(self, node: Node) -> NodeTrace:
        """Show which nodes feed into and out of ``node``."""
        G = self.nx_graph
        if node not in G:
            return NodeTrace(status="NOT_FOUND", node=node)

        attrs = G.nodes[node]
        return NodeTrace(
            status="FOUND" if attrs["in_snapshot"] else "EXTERNAL",
            node=node,
            kind=attrs["kind"].value,
            incoming=[src for src, _, _ in G.in_edges(node, keys=True)],
            outgoing=[dst for _, dst, _ in G.out_edges(node, keys=True)],
        )

    def find_issues(self) -> ValidationResult:
        """Run every check and collect errors and warnings.

        Errors make rendering fail; warnings produce odd-looking output.
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not self.graph.source_nodes:
            errors.append("Snapshot has no source nodes; both views will fail")
        if self.graph.duration <= 0:
            errors.append(f"Timeline duration must be positive (got {self.graph.duration})")

        for conn in self.unresolved_connections():
            warnings.append(f"Connection {conn.source!r} -> {conn.destination!r} has an endpoint outside the snapshot")

        for source in self.graph.source_nodes:
            if source.duration < 0:
                warnings.append(f"{source!r} stops ({source.stop_time}) before it starts ({source.start_time})")

        for n in self.graph.processing_nodes:
            if not n.kind.is_processing:
                warnings.append(f"{n!r} is listed as processing but has kind '{n.kind.value}'")

        for node in self.graph.transition_nodes:
            for prop, interval in node.iter_intervals():
                if interval.length < 0:
                    warnings.append(f"{node!r} transition on '{prop}' ends before it starts")

        isolated = [n for n in self.graph.processing_nodes if self.nx_graph.degree(n) == 0]
        for n in isolated:
            warnings.append(f"{n!r} has no connections")

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    def debug_dump(self) -> dict[str, Any]:
        """Structured summary of the snapshot (JSON-friendly)."""
        G = self.nx_graph
        return {
            "duration": self.graph.duration,
            "nodes": [
                {
                    "name": node.name,
                    "kind": attrs["kind"].value,
                    "in_snapshot": attrs["in_snapshot"],
                    "in_degree": G.in_degree(node),
                    "out_degree": G.out_degree(node),
                }
                for node, attrs in G.nodes(data=True)
            ],
            "connections": [
                {"source": conn.source.name, "destination": conn.destination.name}
                for conn in self.graph.connections
            ],
            "unresolved": len(self.unresolved_connections()),
        }


def find_issues(graph: GraphSnapshot) -> ValidationResult:
    """Convenience wrapper for ``VizDebugger(graph).find_issues()``."""
    return VizDebugger(graph).find_issues()
