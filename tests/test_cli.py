"""Tests for the workspace-paths CLI."""

from __future__ import annotations

import json

from workspace_paths import cli


def _setup(workspace) -> None:
    workspace.write_json("package.json", {"name": "charts", "rootDir": "charts"})
    workspace.write({"charts/a/Chart.yaml": "name: a\n", "charts/b/Chart.yaml": "name: b\n"})


def test_prints_one_path_per_line(workspace, capsys) -> None:
    _setup(workspace)

    assert cli.main(["--cwd", workspace.path()]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [workspace.path("charts/a/Chart.yaml"), workspace.path("charts/b/Chart.yaml")]


def test_json_output_with_ignore(workspace, capsys) -> None:
    _setup(workspace)

    assert cli.main(["--cwd", workspace.path(), "--ignore", "a", "--json"]) == 0

    assert json.loads(capsys.readouterr().out) == [workspace.path("charts/b/Chart.yaml")]


def test_errors_exit_with_status_one(workspace, capsys) -> None:
    assert cli.main(["--cwd", workspace.path()]) == 1

    err = capsys.readouterr().err
    assert err.startswith("ERROR: ")
    assert "file not found" in err


def test_config_errors_are_reported(workspace, capsys) -> None:
    _setup(workspace)

    assert cli.main(["--cwd", workspace.path(), "--config", workspace.path("nope.json")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err
