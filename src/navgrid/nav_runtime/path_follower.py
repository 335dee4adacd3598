#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径跟随模块

按固定速度驱动 agent 沿 waypoint 序列移动，每次 advance() 对应一个仿真步。
"""

from typing import Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from navgrid.common.exceptions import InvalidConfigurationError
from navgrid.config.models import FollowerConfig
from navgrid.core.vector_utils import distance, move_towards

_EMPTY_WAYPOINTS = np.empty((0, 3), dtype=np.float64)
_EMPTY_WAYPOINTS.flags.writeable = False


class PathFollower:
    """
    路径跟随器

    状态：
    - waypoints_: 只读 waypoint 数组，未设置时为 None
    - cursor_: 下一个尚未到达的 waypoint 索引
    - position_: agent 当前位置（由本组件修改）
    """

    def __init__(
        self,
        speed: float,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        arrival_tolerance: float = 0.0,
    ):
        """
        Args:
            speed: 移动速度（世界单位/秒），必须大于0
            position: 初始位置 (x, y, z)
            arrival_tolerance: 到达阈值，距离不超过该值即视为到达当前 waypoint

        Raises:
            InvalidConfigurationError: 速度或到达阈值非法
        """
        if not speed > 0:
            raise InvalidConfigurationError(f"速度必须大于0: {speed}")
        if not arrival_tolerance >= 0:
            raise InvalidConfigurationError(f"到达阈值不能为负数: {arrival_tolerance}")

        self.speed_ = float(speed)
        self.arrival_tolerance_ = float(arrival_tolerance)
        self.position_ = np.array(position, dtype=np.float64)
        if self.position_.shape != (3,):
            raise ValueError(f"position必须是三维坐标: {position}")

        self.waypoints_: Optional[np.ndarray] = None
        self.cursor_ = 0

    @classmethod
    def from_config(cls, cfg: FollowerConfig, position: Sequence[float]) -> "PathFollower":
        return cls(cfg.speed, position=position, arrival_tolerance=cfg.arrival_tolerance)

    # ------------------------------------------------------------------
    # 路径设置
    # ------------------------------------------------------------------
    def set_path(self, waypoints: Optional[np.ndarray]) -> None:
        """
        替换当前 waypoint 序列并将游标归零，位置保持不变。

        传入 None 或空序列时视为已到达。
        """
        if waypoints is None or len(waypoints) == 0:
            self.clear_path()
            return

        waypoints = np.asarray(waypoints, dtype=np.float64)
        if waypoints.ndim != 2 or waypoints.shape[1] != 3:
            raise ValueError(f"waypoints形状必须为 (M, 3): {waypoints.shape}")
        if waypoints.flags.writeable:
            waypoints = waypoints.copy()
            waypoints.flags.writeable = False

        self.waypoints_ = waypoints
        self.cursor_ = 0
        logger.debug(f"设置新路径: waypoint数={len(waypoints)}")

    def clear_path(self) -> None:
        """清空路径（已到达状态）"""
        self.waypoints_ = _EMPTY_WAYPOINTS
        self.cursor_ = 0

    # ------------------------------------------------------------------
    # 每步更新
    # ------------------------------------------------------------------
    def advance(self, delta_time: float) -> bool:
        """
        向当前 waypoint 移动一步

        Args:
            delta_time: 本步时长（秒），不能为负

        Returns:
            本步是否发生了移动
        """
        if delta_time < 0:
            raise ValueError(f"delta_time不能为负数: {delta_time}")

        if self.is_arrived:
            return False

        target = self.waypoints_[self.cursor_]
        previous = self.position_
        self.position_ = move_towards(previous, target, self.speed_ * delta_time)

        if self._reached_(target):
            self.cursor_ += 1
            if self.is_arrived:
                logger.debug(f"到达路径终点: position={self.position}")

        return not np.array_equal(previous, self.position_)

    def _reached_(self, target: np.ndarray) -> bool:
        """精确相等或进入到达阈值"""
        if np.array_equal(self.position_, target):
            return True
        return distance(self.position_, target) <= self.arrival_tolerance_

    # ------------------------------------------------------------------
    # 状态查询
    # ------------------------------------------------------------------
    @property
    def is_arrived(self) -> bool:
        """没有路径或所有 waypoint 均已到达"""
        return self.waypoints_ is None or self.cursor_ >= len(self.waypoints_)

    @property
    def position(self) -> Tuple[float, float, float]:
        return tuple(float(v) for v in self.position_)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        position = np.array(value, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError(f"position必须是三维坐标: {value}")
        self.position_ = position

    @property
    def cursor(self) -> int:
        return self.cursor_

    @property
    def waypoints(self) -> np.ndarray:
        """当前 waypoint 序列（只读，仅供调试显示）"""
        return _EMPTY_WAYPOINTS if self.waypoints_ is None else self.waypoints_

    @property
    def current_target(self) -> Optional[Tuple[float, float, float]]:
        if self.is_arrived:
            return None
        return tuple(float(v) for v in self.waypoints_[self.cursor_])

    @property
    def remaining_waypoints(self) -> int:
        if self.waypoints_ is None:
            return 0
        return max(0, len(self.waypoints_) - self.cursor_)
