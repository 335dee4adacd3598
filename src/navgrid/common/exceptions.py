#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义导航模块的专用异常
"""


class NavigationError(Exception):
    """导航模块基础异常类"""
    pass


class NoPathFoundError(NavigationError):
    """搜索未返回可用路径（空路径或已在终点）"""
    pass


class DegenerateSmoothingInputError(NoPathFoundError):
    """平滑输入节点数不足2个，调用方按无路径处理"""
    pass


class InvalidConfigurationError(NavigationError):
    """配置错误异常（速度、细分数等非法）"""
    pass
