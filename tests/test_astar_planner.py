"""Tests for the reference A* search over NavGrid."""

from navgrid.core.path_node import NodeType
from navgrid.path_planner.astar_planner import STEP_COST, AStarPlanner
from navgrid.path_planner.nav_grid import NavGrid


def _assert_grid_adjacent(path):
    for a, b in zip(path, path[1:]):
        assert abs(a.x_coord - b.x_coord) + abs(a.y_coord - b.y_coord) == 1


def test_straight_path_on_open_grid(open_layout):
    grid = NavGrid.from_layout(open_layout)
    planner = AStarPlanner(grid)

    path = planner.AStar((0, 0), (4, 0))

    assert [node.coord for node in path] == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
    assert path[0].node_type is NodeType.START
    assert path[-1].node_type is NodeType.END


def test_path_routes_around_wall(wall_layout):
    grid = NavGrid.from_layout(wall_layout)
    planner = AStarPlanner(grid)

    path = planner.AStar((0, 0), (5, 0))

    assert path[0].coord == (0, 0)
    assert path[-1].coord == (5, 0)
    assert all(not grid.is_blocked(node.coord) for node in path)
    assert (2, 3) in [node.coord for node in path]
    _assert_grid_adjacent(path)
    # shortest detour: down to the gap row and back up
    assert len(path) == 12


def test_costs_written_into_arena(open_layout):
    grid = NavGrid.from_layout(open_layout)
    path = AStarPlanner(grid).AStar((0, 0), (3, 2))

    goal = path[-1]
    assert goal is grid.node_at((3, 2))
    assert goal.dist_to_start == (len(path) - 1) * STEP_COST
    assert goal.heuristic == 0
    assert goal.total_cost == goal.dist_to_start + goal.heuristic
    for node in path[1:]:
        assert node.has_parent


def test_get_path_uses_world_coordinates():
    grid = NavGrid(5, 5, cell_size=2.0)
    planner = AStarPlanner(grid)

    path = planner.get_path((0.1, 0.0, 0.2), (4.2, 0.0, 0.0))

    assert [node.coord for node in path] == [(0, 0), (1, 0), (2, 0)]


def test_same_cell_returns_single_node(open_layout):
    grid = NavGrid.from_layout(open_layout)

    path = AStarPlanner(grid).get_path((1.1, 0.0, 1.0), (0.9, 0.0, 1.2))

    assert len(path) == 1
    assert path[0].coord == (1, 1)


def test_blocked_destination_returns_empty(wall_layout):
    grid = NavGrid.from_layout(wall_layout)

    assert AStarPlanner(grid).AStar((0, 0), (2, 1)) == []


def test_unreachable_destination_returns_empty():
    grid = NavGrid.from_layout([
        ".....",
        ".###.",
        ".#.#.",
        ".###.",
        ".....",
    ])

    assert AStarPlanner(grid).AStar((0, 0), (2, 2)) == []


def test_each_search_starts_from_reset_arena(open_layout):
    grid = NavGrid.from_layout(open_layout)
    planner = AStarPlanner(grid)
    planner.AStar((0, 0), (5, 3))

    path = planner.AStar((2, 2), (2, 2))

    assert len(path) == 1
    for node in grid:
        if node.coord == (2, 2):
            continue
        assert node.node_type is NodeType.WALKABLE
        assert node.parent_coord is None
        assert node.total_cost == 0
    assert planner.search_count == 2
