#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径节点模块

NavGrid 中每个栅格对应一个 PathNode：
- 世界坐标（栅格中心）
- 节点类型（起点 / 终点 / 障碍 / 可通行）
- 栅格坐标（节点身份，网格生命周期内不变）
- A* 搜索过程中使用的临时代价字段
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

GridCoord = Tuple[int, int]  # (x, y)
Point3D = Tuple[float, float, float]  # (x, y, z)，y 为高度


class NodeType(Enum):
    """节点类型"""
    START = "start"
    END = "end"
    BLOCKED = "blocked"
    WALKABLE = "walkable"


@dataclass
class PathNode:
    """
    栅格路径节点

    parent_coord 为 None 表示尚无父节点；dist_to_start / heuristic /
    total_cost 仅在一次搜索期间有意义，由搜索方维护
    total_cost = dist_to_start + heuristic。
    """

    position: Point3D
    coord: GridCoord
    node_type: NodeType = NodeType.WALKABLE
    parent_coord: Optional[GridCoord] = None
    dist_to_start: int = 0
    heuristic: int = 0
    total_cost: int = 0

    def __post_init__(self) -> None:
        self.position = tuple(float(v) for v in self.position)
        self.coord = (int(self.coord[0]), int(self.coord[1]))

    def reset(self) -> None:
        """重置搜索相关数据（每次搜索前调用，可重复调用）"""
        # 搜索前一律视为可通行，障碍由网格静态数据重新标记
        self.node_type = NodeType.WALKABLE
        self.parent_coord = None
        self.dist_to_start = 0
        self.heuristic = 0
        self.total_cost = 0

    @property
    def x_coord(self) -> int:
        return self.coord[0]

    @property
    def y_coord(self) -> int:
        return self.coord[1]

    @property
    def has_parent(self) -> bool:
        return self.parent_coord is not None

    @property
    def is_blocked(self) -> bool:
        return self.node_type is NodeType.BLOCKED
