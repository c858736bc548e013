"""Shared fixtures for visualization tests."""

import pytest

from compositeviz.graph import DestinationNode, GraphSnapshot, ProcessingNode
from compositeviz.viz.surface import RecordingSurface
from tests.viz.builders import make_crossfade, make_snapshot


@pytest.fixture
def crossfade():
    return make_crossfade()


@pytest.fixture
def two_sources():
    return make_snapshot(2)


@pytest.fixture
def empty_snapshot():
    """No sources at all: both views must refuse it."""
    return GraphSnapshot(
        processing_nodes=[ProcessingNode("orphan")],
        destination=DestinationNode("out"),
        duration=10,
    )


@pytest.fixture
def surface():
    return RecordingSurface(800, 400)
