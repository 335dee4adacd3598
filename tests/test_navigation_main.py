"""Tests for the command-line simulation driver."""

import pytest
import yaml

from navgrid.navigation_main import (
    EXIT_ARRIVED,
    EXIT_CONFIG_ERROR,
    EXIT_NO_PATH,
    EXIT_TIMEOUT,
    main,
    render_ascii,
)
from navgrid.nav_runtime.navigation_agent import NavigationAgent
from navgrid.nav_runtime.path_follower import PathFollower
from navgrid.path_planner.astar_planner import AStarPlanner
from navgrid.path_planner.nav_grid import NavGrid


def _config_file(tmp_path, layout, **extra):
    data = {
        "grid": {"layout": layout},
        "smoothing": {"subdivisions_per_segment": 4},
        "follower": {"speed": 5.0},
        "logging": {"level": "WARNING"},
    }
    data.update(extra)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_main_runs_to_arrival(tmp_path):
    path = _config_file(tmp_path, ["....", "....", "...."])

    code = main(["--config", str(path), "--destination", "3", "0", "2", "--dt", "0.05"])

    assert code == EXIT_ARRIVED


def test_main_reports_no_path(tmp_path):
    path = _config_file(tmp_path, ["..#", "..."])

    code = main(["--config", str(path), "--destination", "2", "0", "0"])

    assert code == EXIT_NO_PATH


def test_main_reports_timeout(tmp_path):
    path = _config_file(tmp_path, ["........"])

    code = main(["--config", str(path), "--destination", "7", "0", "0", "--max-ticks", "2"])

    assert code == EXIT_TIMEOUT


def test_main_rejects_missing_config(tmp_path):
    code = main(["--config", str(tmp_path / "missing.yaml"), "--destination", "1", "0", "1"])

    assert code == EXIT_CONFIG_ERROR


def test_main_rejects_invalid_config(tmp_path):
    path = _config_file(tmp_path, ["...."], follower={"speed": -1.0})

    code = main(["--config", str(path), "--destination", "1", "0", "0"])

    assert code == EXIT_CONFIG_ERROR


def test_main_rejects_unreadable_config(tmp_path):
    non_utf8 = tmp_path / "latin1.yaml"
    non_utf8.write_bytes(b"grid:\n  layout: ['\xe9..']\n")
    config_dir = tmp_path / "config_dir"
    config_dir.mkdir()

    for path in (non_utf8, config_dir):
        code = main(["--config", str(path), "--destination", "1", "0", "0"])
        assert code == EXIT_CONFIG_ERROR


def test_main_rejects_invalid_layout(tmp_path):
    path = _config_file(tmp_path, ["..x", "..."])

    code = main(["--config", str(path), "--destination", "1", "0", "0"])

    assert code == EXIT_CONFIG_ERROR


@pytest.mark.parametrize("extra", [
    ["--destination", "nan", "0", "0"],
    ["--destination", "1", "0", "inf"],
    ["--destination", "1", "0", "0", "--dt", "nan"],
])
def test_main_rejects_non_finite_arguments(tmp_path, extra):
    path = _config_file(tmp_path, ["...."])

    code = main(["--config", str(path)] + extra)

    assert code == EXIT_CONFIG_ERROR


def test_main_debug_prints_map(tmp_path, capsys):
    path = _config_file(tmp_path, ["....", ".#..", "...."])

    main(["--config", str(path), "--destination", "3", "0", "2", "--debug"])

    out = capsys.readouterr().out
    assert "#" in out
    assert "@" in out


def test_render_ascii_marks_path_and_agent():
    grid = NavGrid.from_layout(["....", ".#..", "...."])
    agent = NavigationAgent(AStarPlanner(grid), PathFollower(1.0), subdivisions_per_segment=2)
    agent.request_path((3.0, 0.0, 2.0))

    lines = render_ascii(grid, agent).splitlines()

    assert len(lines) == 3
    assert lines[0][0] == "@"
    assert lines[2][3] == "G"
    assert lines[1][1] == "#"
    assert sum(line.count("*") for line in lines) == 4
