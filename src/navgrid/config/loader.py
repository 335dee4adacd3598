#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

from pathlib import Path
from typing import Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from navgrid.common.exceptions import InvalidConfigurationError
from navgrid.config.models import NavigationConfig


def load_config(config_path: Path, base_dir: Optional[Path] = None) -> NavigationConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析日志目录等相对路径，默认为配置文件所在目录的上一级
            （配置文件放在 config/ 下时）或配置文件所在目录

    Returns:
        验证后的NavigationConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        InvalidConfigurationError: 文件无法读取、YAML格式错误、内容为空或验证失败
    """
    config_path = Path(config_path)
    if base_dir is None:
        default_base = config_path.resolve().parent
        if default_base.name.lower() == "config":
            default_base = default_base.parent
        base_dir = default_base
    else:
        base_dir = Path(base_dir).resolve()

    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise InvalidConfigurationError(error_msg) from e
    except (OSError, UnicodeDecodeError) as e:
        error_msg = f"读取配置文件失败: {e}"
        logger.error(error_msg)
        raise InvalidConfigurationError(error_msg) from e

    if raw_config is None:
        error_msg = f"配置文件为空: {config_path}"
        logger.error(error_msg)
        raise InvalidConfigurationError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {type(raw_config).__name__}"
        logger.error(error_msg)
        raise InvalidConfigurationError(error_msg)

    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        log_dir = Path(logging_cfg['log_dir'])
        if not log_dir.is_absolute():
            logging_cfg['log_dir'] = str((base_dir / log_dir).resolve())

    try:
        config = NavigationConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise InvalidConfigurationError(f"配置验证失败:\n{e}") from e

    logger.info(f"配置加载成功: {config_path}")
    return config
