#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    NavigationConfig,
    SmoothingConfig,
    FollowerConfig,
    GridConfig,
    AgentConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'NavigationConfig',
    'SmoothingConfig',
    'FollowerConfig',
    'GridConfig',
    'AgentConfig',
    'LoggingConfig',
    'load_config'
]
