#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志初始化

控制台始终输出；配置了 log_dir 时额外写两份按天滚动的文件：
    navgrid_debug_*.log  仅 DEBUG（逐 tick 的跟随细节）
    navgrid_info_*.log   INFO 及以上（路径请求与结果）
"""

import sys
from pathlib import Path
from typing import List

from loguru import logger

from navgrid.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def SetupLogger(cfg: LoggingConfig) -> List[int]:
    """
    按配置重建 loguru 的全部输出

    Args:
        cfg: 日志配置

    Returns:
        新增 handler 的 id 列表（控制台在前）
    """
    logger.remove()

    handler_ids = [logger.add(sys.stderr, level=cfg.level, format=CONSOLE_FORMAT, colorize=True)]
    if cfg.log_dir is None:
        return handler_ids

    log_dir = Path(cfg.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # 文件级别不受控制台级别影响
    handler_ids.append(logger.add(
        str(log_dir / "navgrid_debug_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="10 days",
        level="DEBUG",
        filter=lambda record: record["level"].name == "DEBUG",
        encoding="utf-8",
        format=FILE_FORMAT,
    ))
    handler_ids.append(logger.add(
        str(log_dir / "navgrid_info_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="10 days",
        level="INFO",
        encoding="utf-8",
        format=FILE_FORMAT,
    ))

    logger.info(f"日志目录: {log_dir}")
    return handler_ids
