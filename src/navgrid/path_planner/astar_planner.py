#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：在 NavGrid 上实现 A* 算法

搜索结果直接写入 arena 中的 PathNode（代价与父节点），
返回从起点栅格到终点栅格（含）的节点序列。
"""

import heapq
import itertools
from typing import List, Protocol, Set

from loguru import logger

from navgrid.core.path_node import GridCoord, NodeType, PathNode, Point3D
from navgrid.path_planner.nav_grid import NavGrid

# 单步代价（整数，便于与启发式比较）
STEP_COST = 10


class PathSearch(Protocol):
    """路径搜索接口"""

    def get_path(self, origin: Point3D, destination: Point3D) -> List[PathNode]:
        """
        返回起点所在栅格到终点所在栅格（含）的节点序列；
        无路径时返回空列表，起终点位于同一栅格时返回单节点。
        """
        ...


class AStarPlanner:
    """
    A* 算法路径规划器

    示例:
        ```python
        planner = AStarPlanner(grid)
        nodes = planner.get_path((0.0, 0.0, 0.0), (5.0, 0.0, 3.0))
        ```
    """

    def __init__(self, grid: NavGrid):
        if grid is None:
            raise ValueError("grid不能为空")
        self.grid_ = grid
        self._search_count = 0

    def get_path(self, origin: Point3D, destination: Point3D) -> List[PathNode]:
        """
        世界坐标之间的路径规划

        Args:
            origin: 起点世界坐标
            destination: 终点世界坐标

        Returns:
            节点序列（arena 中的节点引用，下次搜索前有效）
        """
        start = self.grid_.world_to_coord(origin)
        goal = self.grid_.world_to_coord(destination)
        return self.AStar(start, goal)

    def AStar(self, start: GridCoord, goal: GridCoord) -> List[PathNode]:
        """
        A* 算法核心实现

        Args:
            start: 起点栅格坐标
            goal: 终点栅格坐标

        Returns:
            节点序列，找不到路径时返回空列表
        """
        grid = self.grid_
        self._search_count += 1

        logger.debug(f"[A*] 开始路径规划: grid_size={grid.size}, start={start}, goal={goal}")

        grid.reset_nodes()

        if grid.is_blocked(goal):
            logger.warning(f"[A*] 终点位于障碍物上: {goal}")
            return []
        if grid.is_blocked(start):
            logger.warning(f"[A*] 起点位于障碍物上: {start}")
            return []

        start_node = grid.node_at(start)
        goal_node = grid.node_at(goal)

        if start == goal:
            logger.debug("[A*] 起点和终点相同，返回单点路径")
            start_node.node_type = NodeType.START
            return [start_node]

        start_node.node_type = NodeType.START
        goal_node.node_type = NodeType.END

        start_node.heuristic = self.Heuristic(start, goal)
        start_node.total_cost = start_node.heuristic

        # 优先队列：(total_cost, heuristic, 序号, index)
        counter = itertools.count()
        start_idx = grid.index_of(start)
        open_set = [(start_node.total_cost, start_node.heuristic, next(counter), start_idx)]
        opened: Set[int] = {start_idx}
        closed: Set[int] = set()
        nodes_explored = 0

        while open_set:
            _, _, _, current_idx = heapq.heappop(open_set)
            if current_idx in closed:
                continue
            closed.add(current_idx)
            nodes_explored += 1

            current = grid.node_by_index(current_idx)

            if current.coord == goal:
                path = grid.trace_path(goal, start)
                logger.info(f"[A*] 路径规划成功: 路径长度={len(path)}, 探索节点数={nodes_explored}")
                return path

            for neighbor_coord in grid.neighbors(current.coord):
                neighbor_idx = grid.index_of(neighbor_coord)
                if neighbor_idx in closed:
                    continue

                neighbor = grid.node_by_index(neighbor_idx)
                new_g = current.dist_to_start + STEP_COST

                if neighbor_idx not in opened or new_g < neighbor.dist_to_start:
                    neighbor.dist_to_start = new_g
                    neighbor.heuristic = self.Heuristic(neighbor_coord, goal)
                    neighbor.total_cost = new_g + neighbor.heuristic
                    neighbor.parent_coord = current.coord
                    opened.add(neighbor_idx)
                    heapq.heappush(
                        open_set,
                        (neighbor.total_cost, neighbor.heuristic, next(counter), neighbor_idx),
                    )

        logger.warning(f"[A*] 无法找到从起点到终点的路径: start={start}, goal={goal}, 探索节点数={nodes_explored}")
        return []

    def Heuristic(self, a: GridCoord, b: GridCoord) -> int:
        """启发式函数（曼哈顿距离 × 单步代价）"""
        return (abs(a[0] - b[0]) + abs(a[1] - b[1])) * STEP_COST

    @property
    def search_count(self) -> int:
        return self._search_count
