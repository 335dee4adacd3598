#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
navgrid：栅格路径 → Catmull-Rom 平滑轨迹 → 匀速跟随
"""

from navgrid.common.exceptions import (
    NavigationError,
    NoPathFoundError,
    DegenerateSmoothingInputError,
    InvalidConfigurationError,
)
from navgrid.core.path_node import GridCoord, NodeType, PathNode, Point3D
from navgrid.core.path_smoothing import smooth_path, smooth_points
from navgrid.nav_runtime.path_follower import PathFollower
from navgrid.nav_runtime.navigation_agent import NavigationAgent, PathRequestResult
from navgrid.path_planner.nav_grid import NavGrid
from navgrid.path_planner.astar_planner import AStarPlanner, PathSearch

__version__ = "0.1.0"

__all__ = [
    'NavigationError',
    'NoPathFoundError',
    'DegenerateSmoothingInputError',
    'InvalidConfigurationError',
    'GridCoord',
    'NodeType',
    'PathNode',
    'Point3D',
    'smooth_path',
    'smooth_points',
    'PathFollower',
    'NavigationAgent',
    'PathRequestResult',
    'NavGrid',
    'AStarPlanner',
    'PathSearch',
]
