#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航栅格：PathNode 的集中存储（arena）

- 每个栅格在构建时分配一个 PathNode，生命周期与网格一致
- 节点按行优先存放在一个列表中：index = y * width + x
- 搜索通过索引原地修改节点，不复制节点
- 每次搜索前由 reset_nodes() 批量重置临时字段
"""

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Set

from loguru import logger

from navgrid.common.exceptions import InvalidConfigurationError
from navgrid.config.models import BLOCKED_CHAR, GridConfig, check_layout
from navgrid.core.path_node import GridCoord, NodeType, PathNode, Point3D


class NavGrid:
    """
    导航栅格

    示例:
        ```python
        grid = NavGrid.from_layout(["....", ".##.", "...."], cell_size=1.0)
        node = grid.node_at((0, 0))
        ```
    """

    # 四方向移动
    DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: float = 1.0,
        origin: Point3D = (0.0, 0.0, 0.0),
        blocked: Iterable[GridCoord] = (),
    ):
        """
        Args:
            width: 栅格列数
            height: 栅格行数
            cell_size: 栅格边长（世界单位）
            origin: 栅格 (0, 0) 中心的世界坐标
            blocked: 静态障碍栅格坐标

        Raises:
            InvalidConfigurationError: 尺寸非法或障碍坐标越界
        """
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(f"栅格尺寸必须大于0: ({width}, {height})")
        if not cell_size > 0:
            raise InvalidConfigurationError(f"栅格边长必须大于0: {cell_size}")

        self.width_ = int(width)
        self.height_ = int(height)
        self.cell_size_ = float(cell_size)
        self.origin_ = tuple(float(v) for v in origin)

        self._blocked: Set[GridCoord] = set()
        for coord in blocked:
            coord = (int(coord[0]), int(coord[1]))
            if not self.in_bounds(coord):
                raise InvalidConfigurationError(f"障碍坐标超出栅格范围: {coord}")
            self._blocked.add(coord)

        self._nodes: List[PathNode] = [
            PathNode(position=self.coord_to_world((x, y)), coord=(x, y))
            for y in range(self.height_)
            for x in range(self.width_)
        ]
        self.reset_nodes()

        logger.debug(
            f"NavGrid 构建完成: size=({self.width_}, {self.height_}), "
            f"cell_size={self.cell_size_}, blocked={len(self._blocked)}"
        )

    @classmethod
    def from_layout(
        cls,
        layout: Sequence[str],
        cell_size: float = 1.0,
        origin: Point3D = (0.0, 0.0, 0.0),
    ) -> "NavGrid":
        """
        由字符布局构建栅格：layout[y][x] == '#' 为障碍，'.' 为可通行

        Raises:
            InvalidConfigurationError: 布局为空、行宽不一致或包含非法字符
        """
        try:
            layout = check_layout(layout)
        except ValueError as e:
            raise InvalidConfigurationError(f"栅格布局非法: {e}") from e

        width = len(layout[0])
        blocked = [
            (x, y)
            for y, row in enumerate(layout)
            for x, ch in enumerate(row)
            if ch == BLOCKED_CHAR
        ]
        return cls(width, len(layout), cell_size=cell_size, origin=origin, blocked=blocked)

    @classmethod
    def from_config(cls, cfg: GridConfig) -> "NavGrid":
        return cls.from_layout(cfg.layout, cell_size=cfg.cell_size, origin=cfg.origin)

    # ------------------------------------------------------------------
    # 基本查询
    # ------------------------------------------------------------------
    @property
    def size(self):
        return (self.width_, self.height_)

    @property
    def nodes(self) -> Sequence[PathNode]:
        """所有节点（只读视图）"""
        return tuple(self._nodes)

    def __iter__(self) -> Iterator[PathNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def in_bounds(self, coord: GridCoord) -> bool:
        x, y = coord
        return 0 <= x < self.width_ and 0 <= y < self.height_

    def index_of(self, coord: GridCoord) -> int:
        """栅格坐标 -> arena 索引"""
        if not self.in_bounds(coord):
            raise IndexError(f"栅格坐标超出范围: {coord}, size={self.size}")
        return coord[1] * self.width_ + coord[0]

    def node_at(self, coord: GridCoord) -> PathNode:
        return self._nodes[self.index_of(coord)]

    def node_by_index(self, index: int) -> PathNode:
        return self._nodes[index]

    def is_blocked(self, coord: GridCoord) -> bool:
        return coord in self._blocked

    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        """四方向上界内且非障碍的相邻栅格"""
        result = []
        for dx, dy in self.DIRECTIONS:
            neighbor = (coord[0] + dx, coord[1] + dy)
            if self.in_bounds(neighbor) and neighbor not in self._blocked:
                result.append(neighbor)
        return result

    # ------------------------------------------------------------------
    # 坐标转换
    # ------------------------------------------------------------------
    def coord_to_world(self, coord: GridCoord) -> Point3D:
        """栅格坐标 -> 栅格中心世界坐标（x / z 平面）"""
        ox, oy, oz = self.origin_
        return (ox + coord[0] * self.cell_size_, oy, oz + coord[1] * self.cell_size_)

    def world_to_coord(self, position: Point3D) -> GridCoord:
        """世界坐标 -> 最近的栅格坐标（超出范围时夹到边界）"""
        if not all(math.isfinite(v) for v in position):
            raise ValueError(f"世界坐标必须为有限值: {tuple(position)}")
        ox, _, oz = self.origin_
        gx = int(math.floor((position[0] - ox) / self.cell_size_ + 0.5))
        gy = int(math.floor((position[2] - oz) / self.cell_size_ + 0.5))
        gx = max(0, min(gx, self.width_ - 1))
        gy = max(0, min(gy, self.height_ - 1))
        return (gx, gy)

    # ------------------------------------------------------------------
    # 搜索支持
    # ------------------------------------------------------------------
    def reset_nodes(self) -> None:
        """每次搜索前批量重置所有节点，并按静态数据重新标记障碍"""
        for node in self._nodes:
            node.reset()
            if node.coord in self._blocked:
                node.node_type = NodeType.BLOCKED

    def trace_path(self, end: GridCoord, start: Optional[GridCoord] = None) -> List[PathNode]:
        """
        从 end 沿 parent_coord 回溯，返回从起点到 end（含）的节点序列

        Args:
            end: 终点栅格坐标
            start: 起点栅格坐标，遇到后停止回溯（为空则回溯到无父节点为止）
        """
        path = [self.node_at(end)]
        visited = {end}
        node = path[0]
        while node.has_parent and node.coord != start:
            parent = node.parent_coord
            if parent in visited:
                raise ValueError(f"父节点链存在环: {parent}")
            visited.add(parent)
            node = self.node_at(parent)
            path.append(node)
        path.reverse()
        return path
