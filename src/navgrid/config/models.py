#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航配置模型

使用Pydantic定义类型安全的配置模型。
"""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

WALKABLE_CHAR = "."
BLOCKED_CHAR = "#"


def check_layout(layout: Sequence[str]) -> List[str]:
    """
    检查栅格布局：非空、各行等宽、只含 '.' / '#'

    Raises:
        ValueError: 布局非法
    """
    if not layout or not layout[0]:
        raise ValueError("栅格布局不能为空")
    width = len(layout[0])
    for row_idx, row in enumerate(layout):
        if len(row) != width:
            raise ValueError(f"第{row_idx}行宽度为{len(row)}，应为{width}")
        invalid = set(row) - {WALKABLE_CHAR, BLOCKED_CHAR}
        if invalid:
            raise ValueError(f"第{row_idx}行包含非法字符: {sorted(invalid)}")
    return list(layout)


class SmoothingConfig(BaseModel):
    """路径平滑配置"""
    subdivisions_per_segment: int = Field(50, description="每段曲线采样点数")
    include_destination: bool = Field(
        False,
        description="是否在 waypoint 末尾追加终点位置"
    )

    @field_validator('subdivisions_per_segment')
    @classmethod
    def validate_subdivisions(cls, v: int) -> int:
        """验证采样点数"""
        if v < 1:
            raise ValueError(f"每段采样点数必须 >= 1: {v}")
        return v


class FollowerConfig(BaseModel):
    """路径跟随配置"""
    speed: float = Field(10.0, description="移动速度（世界单位/秒）")
    arrival_tolerance: float = Field(1e-3, description="waypoint到达阈值（世界单位）")

    @field_validator('speed')
    @classmethod
    def validate_speed(cls, v: float) -> float:
        """验证速度"""
        if v <= 0:
            raise ValueError(f"速度必须大于0: {v}")
        return v

    @field_validator('arrival_tolerance')
    @classmethod
    def validate_arrival_tolerance(cls, v: float) -> float:
        """验证到达阈值"""
        if v < 0:
            raise ValueError(f"到达阈值不能为负数: {v}")
        return v


class GridConfig(BaseModel):
    """栅格配置"""
    cell_size: float = Field(1.0, description="栅格边长（世界单位）")
    origin: Tuple[float, float, float] = Field((0.0, 0.0, 0.0), description="栅格 (0, 0) 的世界坐标")
    layout: List[str] = Field(..., description="栅格布局，每行一个字符串：'.'=可通行，'#'=障碍")

    @field_validator('cell_size')
    @classmethod
    def validate_cell_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"栅格边长必须大于0: {v}")
        return v

    @field_validator('layout')
    @classmethod
    def validate_layout(cls, v: List[str]) -> List[str]:
        """验证布局：非空、等宽、只含合法字符"""
        return check_layout(v)

    @property
    def size(self) -> Tuple[int, int]:
        """栅格尺寸 (width, height)"""
        return (len(self.layout[0]), len(self.layout))


class AgentConfig(BaseModel):
    """Agent配置"""
    start_position: Tuple[float, float, float] = Field(
        (0.0, 0.0, 0.0),
        description="初始世界坐标 (x, y, z)"
    )


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，为空时只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"未知日志级别: {v}")
        return level


class NavigationConfig(BaseModel):
    """导航配置（根模型）"""
    grid: GridConfig
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    follower: FollowerConfig = Field(default_factory=FollowerConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
