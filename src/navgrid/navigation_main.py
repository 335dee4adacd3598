#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航主程序

命令行仿真驱动：加载配置 → 构建栅格 / 规划器 / Agent →
请求路径 → 按固定步长推进直到到达或超出最大步数。
"""

import argparse
import math
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from navgrid.common.exceptions import InvalidConfigurationError
from navgrid.config.loader import load_config
from navgrid.nav_runtime.navigation_agent import NavigationAgent
from navgrid.path_planner.astar_planner import AStarPlanner
from navgrid.path_planner.nav_grid import NavGrid
from navgrid.utils.logger import SetupLogger

EXIT_ARRIVED = 0
EXIT_NO_PATH = 1
EXIT_CONFIG_ERROR = 2
EXIT_TIMEOUT = 3


def render_ascii(grid: NavGrid, agent: NavigationAgent) -> str:
    """
    ASCII 可视化：
        '#' = 障碍, '.' = 空地, '*' = 节点路径, 'o' = waypoint 所在栅格,
        'S' = 起点, 'G' = 终点, '@' = agent 当前位置
    """
    w, h = grid.size
    vis = np.full((h, w), '.', dtype=str)

    for node in grid:
        if grid.is_blocked(node.coord):
            vis[node.y_coord, node.x_coord] = '#'

    for waypoint in agent.waypoints:
        x, y = grid.world_to_coord(waypoint)
        if vis[y, x] == '.':
            vis[y, x] = 'o'

    path = agent.last_path
    for node in path:
        vis[node.y_coord, node.x_coord] = '*'
    if path:
        vis[path[0].y_coord, path[0].x_coord] = 'S'
        vis[path[-1].y_coord, path[-1].x_coord] = 'G'

    ax, ay = grid.world_to_coord(agent.position)
    vis[ay, ax] = '@'

    return "\n".join("".join(row) for row in vis)


def run_simulation(
    agent: NavigationAgent,
    destination: Sequence[float],
    delta_time: float,
    max_ticks: int,
) -> int:
    """
    请求路径并推进仿真

    Returns:
        退出码
    """
    result = agent.request_path(tuple(destination))
    if not result.ok:
        logger.warning(f"无需移动: {result.reason}")
        return EXIT_NO_PATH

    for _ in range(max_ticks):
        if agent.is_arrived:
            break
        agent.advance(delta_time)

    info = agent.get_debug_info()
    if not agent.is_arrived:
        logger.warning(
            f"超出最大步数 {max_ticks}: position={info['position']}, "
            f"remaining_waypoints={info['remaining_waypoints']}"
        )
        return EXIT_TIMEOUT

    logger.info(f"到达终点: position={info['position']}, 步数={info['tick_count']}")
    return EXIT_ARRIVED


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="栅格路径平滑与跟随仿真")
    parser.add_argument("--config", type=Path, default=Path("config/config.yaml"), help="配置文件路径")
    parser.add_argument(
        "--destination", type=float, nargs=3, required=True,
        metavar=("X", "Y", "Z"), help="目标世界坐标"
    )
    parser.add_argument("--dt", type=float, default=0.02, help="仿真步长（秒）")
    parser.add_argument("--max-ticks", type=int, default=10000, help="最大仿真步数")
    parser.add_argument("--debug", action="store_true", help="输出 ASCII 路径图")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if not math.isfinite(args.dt) or args.dt <= 0:
        logger.error(f"仿真步长必须为大于0的有限值: {args.dt}")
        return EXIT_CONFIG_ERROR
    if not all(math.isfinite(v) for v in args.destination):
        logger.error(f"目标坐标必须为有限值: {tuple(args.destination)}")
        return EXIT_CONFIG_ERROR

    try:
        config = load_config(args.config)
    except (FileNotFoundError, InvalidConfigurationError) as e:
        logger.error(f"配置加载失败: {e}")
        return EXIT_CONFIG_ERROR

    SetupLogger(config.logging)

    try:
        grid = NavGrid.from_config(config.grid)
        agent = NavigationAgent.from_config(config, AStarPlanner(grid))
    except InvalidConfigurationError as e:
        logger.error(f"Agent 初始化失败: {e}")
        return EXIT_CONFIG_ERROR

    exit_code = run_simulation(agent, args.destination, args.dt, args.max_ticks)

    if args.debug:
        print(render_ascii(grid, agent))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
