"""Shared fixtures for navgrid tests."""

from typing import List, Sequence

import pytest

from navgrid.core.path_node import GridCoord, PathNode, Point3D


def make_nodes(coords: Sequence[GridCoord], cell_size: float = 1.0, height: float = 0.0) -> List[PathNode]:
    """Build a node path whose world positions sit on an x/z grid."""
    return [
        PathNode(position=(x * cell_size, height, y * cell_size), coord=(x, y))
        for x, y in coords
    ]


class FakeSearch:
    """Search stand-in that returns a canned node sequence and records queries."""

    def __init__(self, nodes: Sequence[PathNode] = ()):
        self.nodes = list(nodes)
        self.queries: List[tuple] = []

    def get_path(self, origin: Point3D, destination: Point3D) -> List[PathNode]:
        self.queries.append((tuple(origin), tuple(destination)))
        return list(self.nodes)


@pytest.fixture
def straight_nodes() -> List[PathNode]:
    return make_nodes([(0, 0), (1, 0), (2, 0)])


@pytest.fixture
def open_layout() -> List[str]:
    return [
        "......",
        "......",
        "......",
        "......",
    ]


@pytest.fixture
def wall_layout() -> List[str]:
    # wall at x == 2 with a gap on the bottom row
    return [
        "..#...",
        "..#...",
        "..#...",
        "......",
    ]
