#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径平滑模块：Catmull-Rom曲线平滑

功能：
- 将搜索得到的有序 PathNode 序列转换为密集的三维 waypoint 序列
- 每对相邻节点构成一段样条，首尾复制端点作为外侧控制点
- 采样点高度统一替换为参考高度，曲线只在水平面内插值
"""

from typing import List, Sequence

import numpy as np
from loguru import logger

from navgrid.common.exceptions import DegenerateSmoothingInputError, InvalidConfigurationError
from navgrid.core.catmull_rom import catmull_rom_point
from navgrid.core.path_node import PathNode

# 高度轴（x, y, z 中的 y）
HEIGHT_AXIS = 1


def validate_subdivisions(subdivisions: int) -> None:
    """每段采样点数必须是 >= 1 的整数（含 numpy 整数）"""
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, (int, np.integer)):
        raise InvalidConfigurationError(f"subdivisions必须是整数: {subdivisions!r}")
    if subdivisions < 1:
        raise InvalidConfigurationError(f"subdivisions必须 >= 1: {subdivisions}")


def smooth_points(
    points: np.ndarray,
    subdivisions: int,
    reference_height: float,
    include_destination: bool = False,
) -> np.ndarray:
    """
    对控制点数组进行Catmull-Rom插值

    第 i 段使用控制点 (p[i-1], p[i], p[i+1], p[i+2])，越界时复制端点；
    每段采样 t = j / subdivisions, j ∈ [0, subdivisions)。

    Args:
        points: 形状 (N, 3) 的控制点，N >= 2
        subdivisions: 每段采样点数
        reference_height: 所有采样点使用的高度
        include_destination: 是否在末尾追加最后一个控制点

    Returns:
        只读的 (M, 3) 数组，M = (N - 1) * subdivisions（追加终点时再加 1）

    Raises:
        DegenerateSmoothingInputError: 控制点少于2个
        InvalidConfigurationError: subdivisions 非法
    """
    validate_subdivisions(subdivisions)

    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"points形状必须为 (N, 3): {points.shape}")

    n = len(points)
    if n < 2:
        raise DegenerateSmoothingInputError(f"控制点不足，无法平滑: {n}")

    ts = np.arange(subdivisions, dtype=np.float64) / subdivisions

    segments: List[np.ndarray] = []
    for i in range(n - 1):
        p0 = points[i] if i == 0 else points[i - 1]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 1] if i == n - 2 else points[i + 2]
        segments.append(catmull_rom_point(p0, p1, p2, p3, ts))

    if include_destination:
        segments.append(points[-1][np.newaxis, :])

    waypoints = np.concatenate(segments, axis=0)
    # 只在 x / z 平面内移动
    waypoints[:, HEIGHT_AXIS] = reference_height
    waypoints.flags.writeable = False

    logger.debug(
        f"Catmull-Rom插值完成: 节点数={n}, 每段采样={subdivisions}, waypoint数={len(waypoints)}"
    )
    return waypoints


def smooth_path(
    nodes: Sequence[PathNode],
    subdivisions: int,
    reference_height: float,
    include_destination: bool = False,
) -> np.ndarray:
    """
    主入口函数：对A*路径进行Catmull-Rom平滑

    纯函数，不修改节点；相同输入总是得到逐位相同的输出。

    Args:
        nodes: 起点到终点（含）的有序节点序列
        subdivisions: 每段曲线采样点数
        reference_height: 采样点高度（生成时 agent 的当前高度）
        include_destination: 是否追加终点位置作为最后一个 waypoint

    Returns:
        只读 waypoint 数组，形状 (M, 3)

    Raises:
        DegenerateSmoothingInputError: 节点少于2个（按无路径处理）
    """
    if nodes is None or len(nodes) < 2:
        count = 0 if nodes is None else len(nodes)
        raise DegenerateSmoothingInputError(f"路径节点不足，跳过平滑: {count}")

    points = np.array([node.position for node in nodes], dtype=np.float64)
    return smooth_points(points, subdivisions, reference_height, include_destination)


