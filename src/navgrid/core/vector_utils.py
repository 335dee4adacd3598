#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
向量工具：三维点之间的距离与匀速逼近
"""

from typing import Union

import numpy as np

ArrayLike = Union[np.ndarray, tuple, list]


def distance(a: ArrayLike, b: ArrayLike) -> float:
    """两点间欧氏距离"""
    diff = np.asarray(b, dtype=np.float64) - np.asarray(a, dtype=np.float64)
    return float(np.linalg.norm(diff))


def move_towards(current: ArrayLike, target: ArrayLike, max_distance: float) -> np.ndarray:
    """
    沿直线将 current 向 target 移动至多 max_distance

    不会越过 target：剩余距离不超过 max_distance 时直接返回 target 的副本，
    保证到达判断可以使用精确相等。

    Args:
        current: 当前位置
        target: 目标位置
        max_distance: 本次最大移动距离（>= 0）

    Returns:
        新位置（新数组）
    """
    current = np.asarray(current, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)

    diff = target - current
    dist = float(np.linalg.norm(diff))
    if dist == 0.0 or dist <= max_distance:
        return target.copy()

    return current + diff / dist * max_distance
