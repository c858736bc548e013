"""GraphSnapshot: the read-only view of a compositing graph for one render call."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import networkx as nx

from compositeviz.graph.nodes import (
    Connection,
    DestinationNode,
    Node,
    NodeKind,
    ProcessingNode,
    SourceNode,
    TransitionNode,
)


@dataclass
class GraphSnapshot:
    """State of a compositing graph as seen by the visualizer.

    The snapshot is owned by the graph system; renderers only read it.

    Attributes:
        source_nodes: Media inputs, in lane order
        processing_nodes: Processing nodes (order carries no meaning)
        destination: The single output sink
        connections: Directed edges, drawn in this order
        duration: Length of the timeline in seconds

    Example:
        >>> video = SourceNode("intro", start_time=0, stop_time=4)
        >>> fade = TransitionNode("fade")
        >>> g = GraphSnapshot([video], [fade], DestinationNode("out"), duration=4)
        >>> g.connect(video, fade).connect(fade, g.destination)
        GraphSnapshot(sources=1, processing=1, connections=2, duration=4)
    """

    source_nodes: list[SourceNode] = field(default_factory=list)
    processing_nodes: list[ProcessingNode] = field(default_factory=list)
    destination: DestinationNode = field(default_factory=DestinationNode)
    connections: list[Connection] = field(default_factory=list)
    duration: float = 0.0

    def __repr__(self) -> str:
        return (
            f"GraphSnapshot(sources={len(self.source_nodes)}, "
            f"processing={len(self.processing_nodes)}, "
            f"connections={len(self.connections)}, duration={self.duration})"
        )

    @property
    def transition_nodes(self) -> list[TransitionNode]:
        """Processing nodes that carry time-bound transitions."""
        return [n for n in self.processing_nodes if n.kind is NodeKind.TRANSITION]

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every node: destination, sources, then processing nodes."""
        yield self.destination
        yield from self.source_nodes
        yield from self.processing_nodes

    def connect(self, source: Node, destination: Node) -> GraphSnapshot:
        """Append a connection and return self for chaining."""
        self.connections.append(Connection(source, destination))
        return self

    def to_nx_graph(self) -> nx.MultiDiGraph:
        """Build a NetworkX multigraph keyed by node identity.

        Connection endpoints that are not part of the snapshot are still
        added as vertices, flagged with ``in_snapshot=False``.
        """
        G = nx.MultiDiGraph(duration=self.duration)
        for node in self.iter_nodes():
            G.add_node(node, kind=node.kind, name=node.name, in_snapshot=True)

        for index, conn in enumerate(self.connections):
            for endpoint in (conn.source, conn.destination):
                if endpoint not in G:
                    G.add_node(endpoint, kind=endpoint.kind, name=endpoint.name, in_snapshot=False)
            G.add_edge(conn.source, conn.destination, index=index)
        return G
