"""Tests for workspace detection and loading."""

import json
from pathlib import Path

import pytest

from ngcli.exceptions import WorkspaceError
from ngcli.workspace import (
    Workspace,
    WorkspaceResolver,
    find_config_file,
    get_workspace,
    load_workspace,
    resolve_workspace,
)


class TestFindConfigFile:
    """Tests for workspace file discovery."""

    def test_in_current_dir(self, tmp_path):
        """Find angular.json in the start directory."""
        config = tmp_path / "angular.json"
        config.write_text("{}")
        assert find_config_file(tmp_path) == config

    def test_hidden_name(self, tmp_path):
        """.angular.json is also recognized."""
        config = tmp_path / ".angular.json"
        config.write_text("{}")
        assert find_config_file(tmp_path) == config

    def test_prefers_plain_name(self, tmp_path):
        """angular.json wins over .angular.json."""
        (tmp_path / ".angular.json").write_text("{}")
        plain = tmp_path / "angular.json"
        plain.write_text("{}")
        assert find_config_file(tmp_path) == plain

    def test_walks_up(self, tmp_path):
        """Find the workspace file in a parent directory."""
        config = tmp_path / "angular.json"
        config.write_text("{}")
        subdir = tmp_path / "src" / "app"
        subdir.mkdir(parents=True)
        assert find_config_file(subdir) == config

    def test_stops_at_git(self, tmp_path):
        """Do not look above a .git directory."""
        (tmp_path / "angular.json").write_text("{}")
        project = tmp_path / "project"
        (project / ".git").mkdir(parents=True)
        assert find_config_file(project) is None

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        """Without a start directory the current directory is used."""
        (tmp_path / ".git").mkdir()
        config = tmp_path / "angular.json"
        config.write_text("{}")
        monkeypatch.chdir(tmp_path)
        assert find_config_file() == config.resolve()


class TestResolveWorkspace:
    """Tests for resolve_workspace."""

    def test_inside_project(self, project_dir):
        """The workspace carries the found config file and root."""
        workspace = resolve_workspace(project_dir)
        assert workspace.config_file == project_dir.resolve() / "angular.json"
        assert workspace.root == project_dir

    def test_outside_project(self, isolated_dir):
        """No config file outside a project."""
        assert resolve_workspace(isolated_dir).config_file is None


class TestWorkspace:
    """Tests for loading and querying workspace files."""

    def test_load(self, project_dir):
        """A valid file loads into a Workspace."""
        workspace = load_workspace(project_dir / "angular.json")
        assert workspace.get("version") == 1
        assert workspace.get("defaultProject") == "app"
        assert list(workspace.get("projects")) == ["app"]

    def test_load_invalid_json(self, tmp_path):
        """Invalid JSON raises WorkspaceError with the location."""
        path = tmp_path / "angular.json"
        path.write_text('{"version": 1,}')
        with pytest.raises(WorkspaceError, match="Invalid JSON") as exc_info:
            load_workspace(path)
        assert exc_info.value.context["line"] == 1

    def test_load_non_object(self, tmp_path):
        """A JSON array is not a workspace."""
        path = tmp_path / "angular.json"
        path.write_text("[]")
        with pytest.raises(WorkspaceError, match="JSON object"):
            load_workspace(path)

    def test_load_missing(self, tmp_path):
        """A missing file raises WorkspaceError."""
        with pytest.raises(WorkspaceError, match="Cannot read"):
            load_workspace(tmp_path / "angular.json")

    def test_get_dotted(self):
        """Dotted paths walk dicts and list indexes."""
        workspace = Workspace(
            path=Path("angular.json"),
            data={"projects": {"app": {"root": "src", "assets": ["a", "b"]}}},
        )
        assert workspace.get("projects.app.root") == "src"
        assert workspace.get("projects.app.assets.1") == "b"

    def test_get_missing(self):
        """Unknown keys raise WorkspaceError naming the missing segment."""
        workspace = Workspace(path=Path("angular.json"), data={"projects": {}})
        with pytest.raises(WorkspaceError) as exc_info:
            workspace.get("projects.app.root")
        assert exc_info.value.context["missing"] == "app"

    def test_load_invalid_utf8(self, tmp_path):
        """Bytes that are not UTF-8 raise WorkspaceError."""
        path = tmp_path / "angular.json"
        path.write_bytes(b'{"version": "\xff\xfe"}')
        with pytest.raises(WorkspaceError, match="not valid UTF-8") as exc_info:
            load_workspace(path)
        assert exc_info.value.context["position"] == 13


class TestWorkspaceResolver:
    """Tests for WorkspaceResolver."""

    def test_local(self, project_dir):
        """The local workspace is loaded from the start directory."""
        resolver = WorkspaceResolver(start_dir=project_dir)
        workspace = resolver.get_workspace("local")
        assert workspace is not None
        assert workspace.get("defaultProject") == "app"

    def test_local_missing(self, isolated_dir):
        """No local workspace outside a project."""
        assert WorkspaceResolver(start_dir=isolated_dir).get_workspace() is None

    def test_local_invalid_returns_none(self, isolated_dir, caplog):
        """An unparsable workspace file resolves to None with a warning."""
        (isolated_dir / "angular.json").write_text("not json")
        resolver = WorkspaceResolver(start_dir=isolated_dir)

        assert resolver.get_workspace("local") is None
        assert any("Invalid JSON" in m for m in caplog.messages)

    def test_local_invalid_utf8_returns_none(self, isolated_dir, caplog):
        """A workspace file with undecodable bytes resolves to None."""
        (isolated_dir / "angular.json").write_bytes(b'{"version": "\xff\xfe"}')
        resolver = WorkspaceResolver(start_dir=isolated_dir)

        assert resolver.get_workspace("local") is None
        assert any("not valid UTF-8" in m for m in caplog.messages)

    def test_global(self, tmp_path):
        """The global workspace is read from its own path."""
        global_path = tmp_path / "global.json"
        global_path.write_text(json.dumps({"cli": {"analytics": False}}))
        resolver = WorkspaceResolver(start_dir=tmp_path, global_path=global_path)
        assert resolver.get_workspace("global").get("cli.analytics") is False

    def test_global_missing(self, tmp_path):
        """A missing global file resolves to None."""
        resolver = WorkspaceResolver(start_dir=tmp_path, global_path=tmp_path / "none.json")
        assert resolver.get_workspace("global") is None

    def test_unknown_level(self, tmp_path):
        """Only local and global levels exist."""
        with pytest.raises(ValueError):
            WorkspaceResolver(start_dir=tmp_path).get_workspace("project")

    def test_cached_until_cleared(self, project_dir):
        """Results are cached per level until clear_cache()."""
        resolver = WorkspaceResolver(start_dir=project_dir)
        first = resolver.get_workspace()
        (project_dir / "angular.json").unlink()

        assert resolver.get_workspace() is first
        resolver.clear_cache()
        assert resolver.get_workspace() is None

    def test_module_level_get_workspace(self, project_dir):
        """get_workspace() resolves from the current directory."""
        assert get_workspace("local").get("defaultProject") == "app"
