"""Tests for the PathNode record."""

from navgrid.core.path_node import NodeType, PathNode


def test_new_node_starts_unvisited():
    node = PathNode(position=(1.0, 0.0, 2.0), coord=(1, 2))

    assert node.node_type is NodeType.WALKABLE
    assert node.parent_coord is None
    assert not node.has_parent
    assert (node.dist_to_start, node.heuristic, node.total_cost) == (0, 0, 0)


def test_coord_and_position_are_normalised():
    node = PathNode(position=[1, 2, 3], coord=(4.0, 5.0))

    assert node.position == (1.0, 2.0, 3.0)
    assert node.coord == (4, 5)
    assert isinstance(node.x_coord, int) and node.x_coord == 4
    assert isinstance(node.y_coord, int) and node.y_coord == 5


def test_reset_clears_search_state():
    node = PathNode(position=(0.0, 0.0, 0.0), coord=(3, 3))
    node.node_type = NodeType.END
    node.parent_coord = (3, 2)
    node.dist_to_start = 40
    node.heuristic = 20
    node.total_cost = 60

    node.reset()

    assert node.node_type is NodeType.WALKABLE
    assert node.parent_coord is None
    assert (node.dist_to_start, node.heuristic, node.total_cost) == (0, 0, 0)
    # identity and position survive a reset
    assert node.coord == (3, 3)
    assert node.position == (0.0, 0.0, 0.0)


def test_reset_is_idempotent():
    node = PathNode(position=(0.0, 0.0, 0.0), coord=(0, 0))
    node.node_type = NodeType.BLOCKED
    node.reset()
    snapshot = (node.node_type, node.parent_coord, node.dist_to_start, node.heuristic, node.total_cost)

    node.reset()

    assert (node.node_type, node.parent_coord, node.dist_to_start, node.heuristic, node.total_cost) == snapshot


def test_is_blocked_follows_node_type():
    node = PathNode(position=(0.0, 0.0, 0.0), coord=(0, 0))
    assert not node.is_blocked
    node.node_type = NodeType.BLOCKED
    assert node.is_blocked
