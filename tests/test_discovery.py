"""Tests for workspace_paths.discovery."""

from __future__ import annotations

from workspace_paths.discovery import detect_workspace


def test_plain_package_is_not_a_workspace(workspace) -> None:
    workspace.write_json("package.json", {"name": "solo"})

    assert detect_workspace(workspace.path()) is None


def test_missing_directory_is_not_a_workspace(workspace) -> None:
    assert detect_workspace(workspace.path("nope")) is None


def test_malformed_package_json_is_swallowed(workspace) -> None:
    workspace.write({"package.json": "name: yaml-style\nworkspaces: [packages/*]\n"})

    assert detect_workspace(workspace.path()) is None


def test_npm_workspaces(workspace) -> None:
    workspace.write_json("package.json", {"name": "root", "workspaces": ["packages/*"]})
    workspace.write_json("packages/b/package.json", {"name": "b"})
    workspace.write_json("packages/a/package.json", {"name": "a"})
    workspace.mkdir("packages/empty")

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.tool == "npm"
    assert not description.is_single_package
    assert description.root.dir == workspace.path()
    assert description.root.package_json is None
    assert description.packages == [workspace.path("packages/a"), workspace.path("packages/b")]


def test_yarn_workspaces_mapping_form(workspace) -> None:
    workspace.write_json(
        "package.json", {"name": "root", "workspaces": {"packages": ["libs/*"]}}
    )
    workspace.write({"yarn.lock": "# yarn lockfile v1\n"})
    workspace.write_json("libs/core/package.json", {"name": "core"})

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.tool == "yarn"
    assert description.packages == [workspace.path("libs/core")]


def test_pnpm_workspace_with_negation(workspace) -> None:
    workspace.write_json("package.json", {"name": "root"})
    workspace.write(
        {
            "pnpm-workspace.yaml": """
            packages:
              - "packages/*"
              - "!packages/internal"
            """,
        }
    )
    workspace.write_json("packages/public/package.json", {"name": "public"})
    workspace.write_json("packages/internal/package.json", {"name": "internal"})

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.tool == "pnpm"
    assert description.packages == [workspace.path("packages/public")]


def test_lerna_defaults_to_packages_glob(workspace) -> None:
    workspace.write_json("package.json", {"name": "root"})
    workspace.write_json("lerna.json", {"version": "independent"})
    workspace.write_json("packages/tool/package.json", {"name": "tool"})

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.tool == "lerna"
    assert description.packages == [workspace.path("packages/tool")]


def test_bolt_workspaces(workspace) -> None:
    workspace.write_json("package.json", {"name": "root", "bolt": {"workspaces": ["mods/*"]}})
    workspace.write_json("mods/one/package.json", {"name": "one"})

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.tool == "bolt"
    assert description.packages == [workspace.path("mods/one")]


def test_node_modules_are_never_members(workspace) -> None:
    workspace.write_json("package.json", {"name": "root", "workspaces": ["*", "*/node_modules/*"]})
    workspace.write_json("pkg/package.json", {"name": "pkg"})
    workspace.write_json("pkg/node_modules/dep/package.json", {"name": "dep"})

    description = detect_workspace(workspace.path())

    assert description is not None
    assert description.packages == [workspace.path("pkg")]


def test_os_errors_during_detection_yield_none(workspace, monkeypatch) -> None:
    from workspace_paths import discovery

    workspace.write_json("package.json", {"name": "root", "workspaces": ["packages/*"]})

    def denied(root, patterns):
        raise PermissionError(13, "Permission denied", str(root))

    monkeypatch.setattr(discovery, "find_package_dirs", denied)

    assert detect_workspace(workspace.path()) is None
