#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Catmull-Rom Spline实现：生成平滑曲线轨迹

功能：
- 均匀参数化 Catmull-Rom 三次插值
- 曲线经过所有控制点（p1 / p2）
- 支持标量 t 或 t 数组（numpy 广播）
"""

from typing import Union

import numpy as np

ArrayLike = Union[np.ndarray, tuple, list]


def catmull_rom_point(
    p0: ArrayLike, p1: ArrayLike, p2: ArrayLike, p3: ArrayLike,
    t: Union[float, np.ndarray]
) -> np.ndarray:
    """
    Catmull-Rom Spline插值

    Args:
        p0, p1, p2, p3: 四个控制点，形状 (D,)
        t: 插值参数 [0, 1)，在p1和p2之间插值；可以是标量或形状 (K,) 的数组

    Returns:
        标量 t 返回形状 (D,) 的点；数组 t 返回形状 (K, D)
    """
    p0 = np.asarray(p0, dtype=np.float64)
    p1 = np.asarray(p1, dtype=np.float64)
    p2 = np.asarray(p2, dtype=np.float64)
    p3 = np.asarray(p3, dtype=np.float64)

    t = np.asarray(t, dtype=np.float64)
    if t.ndim == 1:
        t = t[:, np.newaxis]
    t2 = t * t
    t3 = t * t2

    return 0.5 * ((2.0 * p1) +
                  (-p0 + p2) * t +
                  (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2 +
                  (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3)
