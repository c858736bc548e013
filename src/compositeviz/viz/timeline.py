"""Map the timeline of a graph snapshot to pixel-space rectangles.

Horizontal position is time: ``x = seconds * pixels_per_second`` where
``pixels_per_second = width / duration``. Each source node owns one lane of
height ``height / len(source_nodes)``, assigned by its index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from compositeviz.exceptions import VisualizationConfigError
from compositeviz.viz.geometry import Rect
from compositeviz.viz.styles.colors import (
    MEDIA_SOURCE_STYLE,
    PLAYHEAD_COLOR,
    TRANSITION_OVERLAY_COLOR,
    track_color,
)

if TYPE_CHECKING:
    from compositeviz.graph.nodes import MediaKind
    from compositeviz.graph.snapshot import GraphSnapshot

logger = logging.getLogger(__name__)

PLAYHEAD_WIDTH = 1


@dataclass(frozen=True)
class TimeScale:
    """Seconds -> pixels conversion for one timeline frame."""

    pixels_per_second: float
    track_height: float

    def to_x(self, seconds: float) -> float:
        return seconds * self.pixels_per_second

    def to_width(self, seconds: float) -> float:
        return seconds * self.pixels_per_second

    def lane_y(self, lane: int) -> float:
        return lane * self.track_height


@dataclass
class TimelineFrame:
    """All fills for one timeline frame.

    Attributes:
        scale: Conversion used to produce the rectangles
        overlays: Translucent transition spans, one per interval
        tracks: One opaque rectangle per source node, in lane order
        playhead: Current-time marker, or None when no time was given
    """

    scale: TimeScale
    overlays: list[Rect] = field(default_factory=list)
    tracks: list[Rect] = field(default_factory=list)
    playhead: Rect | None = None

    def rects(self) -> Iterator[Rect]:
        """Yield rectangles in draw order: overlays, tracks, playhead."""
        yield from self.overlays
        yield from self.tracks
        if self.playhead is not None:
            yield self.playhead


def time_scale(width: float, height: float, graph: GraphSnapshot) -> TimeScale:
    """Validate the snapshot and build its time scale.

    Raises:
        VisualizationConfigError: If there are no sources or duration <= 0.
    """
    n = len(graph.source_nodes)
    if n == 0:
        raise VisualizationConfigError(
            "no_sources",
            "Graph snapshot has no source nodes; track height is undefined",
        )
    if graph.duration <= 0:
        raise VisualizationConfigError(
            "duration",
            f"Timeline duration must be positive, got {graph.duration}",
        )
    return TimeScale(pixels_per_second=width / graph.duration, track_height=height / n)


def map_timeline(
    width: float,
    height: float,
    graph: GraphSnapshot,
    current_time: float | None = None,
    *,
    palettes: dict[MediaKind, tuple[str, ...]] = MEDIA_SOURCE_STYLE,
) -> TimelineFrame:
    """Compute the fill rectangles of one timeline frame.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        graph: Snapshot providing sources, transition nodes and duration
        current_time: Playhead position in seconds; no playhead when None
        palettes: Track colours per media kind

    Returns:
        TimelineFrame with overlays, tracks and optional playhead

    Raises:
        VisualizationConfigError: If there are no sources, duration <= 0,
            or a source's media kind has an empty palette.
    """
    scale = time_scale(width, height, graph)
    frame = TimelineFrame(scale=scale)

    # Overlapping intervals stack through repeated translucent fills
    for node in graph.transition_nodes:
        for _prop, interval in node.iter_intervals():
            frame.overlays.append(
                Rect(
                    x=scale.to_x(interval.start),
                    y=0,
                    w=scale.to_width(interval.length),
                    h=height,
                    color=TRANSITION_OVERLAY_COLOR,
                )
            )

    for lane, source in enumerate(graph.source_nodes):
        frame.tracks.append(
            Rect(
                x=scale.to_x(source.start_time),
                y=scale.lane_y(lane),
                w=scale.to_width(source.duration),
                h=scale.track_height,
                color=track_color(source.media_kind, lane, palettes),
            )
        )

    if current_time is not None:
        frame.playhead = Rect(
            x=scale.to_x(current_time),
            y=0,
            w=PLAYHEAD_WIDTH,
            h=height,
            color=PLAYHEAD_COLOR,
        )

    logger.debug(
        "Mapped timeline: %d overlays, %d tracks, %.2f px/s",
        len(frame.overlays),
        len(frame.tracks),
        scale.pixels_per_second,
    )
    return frame
