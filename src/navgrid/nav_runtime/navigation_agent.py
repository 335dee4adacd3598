#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航 Agent

串联 搜索 → 平滑 → 跟随：
1. 收到目标点（"请求路径"事件）后，从当前位置向搜索方请求节点序列
2. 以当前高度对节点序列做 Catmull-Rom 平滑
3. 将 waypoint 交给 PathFollower，由调度方每步调用 advance()
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np
from loguru import logger

from navgrid.common.exceptions import NoPathFoundError
from navgrid.config.models import NavigationConfig
from navgrid.core.path_node import PathNode, Point3D
from navgrid.core.path_smoothing import HEIGHT_AXIS, smooth_path, validate_subdivisions
from navgrid.nav_runtime.path_follower import PathFollower
from navgrid.path_planner.astar_planner import PathSearch


@dataclass
class PathRequestResult:
    """一次路径请求的结果"""

    ok: bool
    node_count: int
    waypoint_count: int
    reason: str = ""


class NavigationAgent:
    """
    导航 Agent

    示例:
        ```python
        agent = NavigationAgent(AStarPlanner(grid), PathFollower(speed=10.0))
        agent.request_path((5.0, 0.0, 3.0))
        while not agent.is_arrived:
            agent.advance(0.02)
        ```
    """

    def __init__(
        self,
        search: PathSearch,
        follower: PathFollower,
        subdivisions_per_segment: int = 50,
        include_destination: bool = False,
    ):
        """
        Args:
            search: 路径搜索方，提供 get_path(origin, destination)
            follower: 路径跟随器（持有 agent 位置）
            subdivisions_per_segment: 每段曲线采样点数
            include_destination: 是否在 waypoint 末尾追加终点

        Raises:
            InvalidConfigurationError: 采样点数非法
        """
        validate_subdivisions(subdivisions_per_segment)

        self.search_ = search
        self.follower_ = follower
        self.subdivisions_ = int(subdivisions_per_segment)
        self.include_destination_ = include_destination

        self.last_path_: List[PathNode] = []
        self.request_count_ = 0
        self.tick_count_ = 0

    @classmethod
    def from_config(cls, config: NavigationConfig, search: PathSearch) -> "NavigationAgent":
        follower = PathFollower.from_config(config.follower, config.agent.start_position)
        return cls(
            search,
            follower,
            subdivisions_per_segment=config.smoothing.subdivisions_per_segment,
            include_destination=config.smoothing.include_destination,
        )

    def request_path(self, destination: Point3D) -> PathRequestResult:
        """
        处理一次"请求路径"事件

        新请求总是丢弃正在进行的跟随状态（游标归零），位置保持不变。
        搜索不到路径或已在终点时不视为错误，agent 直接进入已到达状态。

        Args:
            destination: 目标世界坐标

        Returns:
            PathRequestResult

        Raises:
            ValueError: 目标坐标含 NaN 或无穷值（不改变当前跟随状态）
        """
        if len(destination) != 3 or not np.all(np.isfinite(np.asarray(destination, dtype=np.float64))):
            raise ValueError(f"目标坐标必须为 3 个有限值: {tuple(destination)}")

        self.request_count_ += 1
        origin = self.follower_.position
        logger.info(f"路径请求 #{self.request_count_}: origin={origin}, destination={tuple(destination)}")

        # 节点为 arena 引用，临时字段会在下次搜索时被重置
        nodes = list(self.search_.get_path(origin, destination))
        self.last_path_ = nodes

        try:
            waypoints = smooth_path(
                nodes,
                self.subdivisions_,
                reference_height=origin[HEIGHT_AXIS],
                include_destination=self.include_destination_,
            )
        except NoPathFoundError as e:
            self.follower_.clear_path()
            reason = "已在终点" if len(nodes) == 1 else "未找到路径"
            logger.warning(f"路径请求 #{self.request_count_} 无需移动（{reason}）: {e}")
            return PathRequestResult(ok=False, node_count=len(nodes), waypoint_count=0, reason=reason)

        self.follower_.set_path(waypoints)
        logger.info(f"路径请求 #{self.request_count_} 完成: 节点数={len(nodes)}, waypoint数={len(waypoints)}")
        return PathRequestResult(ok=True, node_count=len(nodes), waypoint_count=len(waypoints), reason="ok")

    def advance(self, delta_time: float) -> bool:
        """调度方每步调用；返回本步是否移动"""
        if self.follower_.is_arrived:
            return False
        self.tick_count_ += 1
        return self.follower_.advance(delta_time)

    # ------------------------------------------------------------------
    # 状态查询
    # ------------------------------------------------------------------
    @property
    def follower(self) -> PathFollower:
        return self.follower_

    @property
    def position(self) -> Point3D:
        return self.follower_.position

    @property
    def is_arrived(self) -> bool:
        return self.follower_.is_arrived

    @property
    def waypoints(self) -> np.ndarray:
        return self.follower_.waypoints

    @property
    def last_path(self) -> Sequence[PathNode]:
        return tuple(self.last_path_)

    @property
    def tick_count(self) -> int:
        """移动过程中消耗的步数（已到达时不计）"""
        return self.tick_count_

    def get_debug_info(self) -> Dict[str, Any]:
        """获取调试信息"""
        return {
            "position": self.position,
            "is_arrived": self.is_arrived,
            "cursor": self.follower_.cursor,
            "waypoint_count": len(self.waypoints),
            "remaining_waypoints": self.follower_.remaining_waypoints,
            "current_target": self.follower_.current_target,
            "node_path": [node.coord for node in self.last_path_],
            "request_count": self.request_count_,
            "tick_count": self.tick_count_,
        }
