"""Node and connection types of a compositing graph snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Kinds of nodes in a compositing graph.

    TRANSITION and COMPOSITING are specialised processing nodes.
    """

    SOURCE = "source"
    PROCESSING = "processing"
    TRANSITION = "transition"
    COMPOSITING = "compositing"
    DESTINATION = "destination"

    @property
    def is_processing(self) -> bool:
        return self in (NodeKind.PROCESSING, NodeKind.TRANSITION, NodeKind.COMPOSITING)


class MediaKind(str, Enum):
    """Media type of a source node. Only affects track colour."""

    VIDEO = "video"
    IMAGE = "image"
    CANVAS = "canvas"


@dataclass(frozen=True)
class Interval:
    """One time-bound animation of a property, in seconds."""

    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(eq=False)
class Node:
    """Base class for graph nodes.

    Nodes compare and hash by identity: two nodes with equal fields are
    still distinct vertices of the graph.

    Attributes:
        name: Display name (not used for lookups)
        properties: Property name -> current value, edited by the inspector
    """

    name: str = ""
    properties: dict[str, Any] = field(default_factory=dict)

    kind: NodeKind = field(default=NodeKind.PROCESSING, init=False)

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        return f"{type(self).__name__}({label!r})"


@dataclass(eq=False, repr=False)
class SourceNode(Node):
    """Media input placed on the global timeline."""

    start_time: float = 0.0
    stop_time: float = 0.0
    media_kind: MediaKind = MediaKind.VIDEO

    kind: NodeKind = field(default=NodeKind.SOURCE, init=False)

    @property
    def duration(self) -> float:
        return self.stop_time - self.start_time


@dataclass(eq=False, repr=False)
class ProcessingNode(Node):
    """A node transforming one or more inputs."""

    kind: NodeKind = field(default=NodeKind.PROCESSING, init=False)


@dataclass(eq=False, repr=False)
class CompositingNode(ProcessingNode):
    """Processing node that layers its inputs."""

    kind: NodeKind = field(default=NodeKind.COMPOSITING, init=False)


@dataclass(eq=False, repr=False)
class TransitionNode(ProcessingNode):
    """Processing node that animates properties over explicit intervals.

    Attributes:
        transitions: Property name -> ordered intervals animating it
    """

    transitions: dict[str, list[Interval]] = field(default_factory=dict)

    kind: NodeKind = field(default=NodeKind.TRANSITION, init=False)

    def transition(self, start: float, end: float, property_name: str) -> Interval:
        """Schedule an animation of ``property_name`` over ``[start, end]``."""
        interval = Interval(start, end)
        self.transitions.setdefault(property_name, []).append(interval)
        return interval

    def iter_intervals(self):
        """Yield (property_name, interval) for every scheduled transition."""
        for property_name, intervals in self.transitions.items():
            for interval in intervals:
                yield property_name, interval


@dataclass(eq=False, repr=False)
class DestinationNode(Node):
    """The sink where composed output is presented."""

    kind: NodeKind = field(default=NodeKind.DESTINATION, init=False)


@dataclass(frozen=True, eq=False)
class Connection:
    """Directed edge between two nodes. Parallel edges are allowed."""

    source: Node
    destination: Node
