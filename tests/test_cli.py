"""
Unit tests for CLI commands.
"""

import json
from pathlib import Path

from pkgrename import __version__
from pkgrename.cli.main import app


class TestCLIHelp:
    """Test help messages and basic CLI functionality."""

    def test_main_help(self, cli_runner):
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "run" in result.output
        assert "show" in result.output

    def test_run_help(self, cli_runner):
        result = cli_runner.invoke(app, ["run", "--help"])
        assert result.exit_code == 0
        assert "--new-name" in result.output
        assert "--contents" in result.output
        assert "--renames" in result.output

    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCLIShow:
    """Test 'show' command."""

    def test_show(self, cli_runner, project_dir):
        result = cli_runner.invoke(app, ["show", "--root", str(project_dir)])

        assert result.exit_code == 0
        assert "Package name:  foo" in result.output
        assert "node_modules" in result.output

    def test_show_without_manifest(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["show", "--root", str(tmp_path)])

        assert result.exit_code == 1
        assert "Manifest not found" in result.output


class TestCLIRun:
    """Test 'run' command."""

    def test_run_all(self, cli_runner, project_dir):
        result = cli_runner.invoke(app, [
            "run",
            "--root", str(project_dir),
            "--new-name", "bar",
            "--description", "A renamed app",
            "--contents", "all",
            "--renames", "all",
        ])

        assert result.exit_code == 0, result.output
        assert (project_dir / "bar.txt").read_text() == "hello bar"
        assert not (project_dir / "foo.txt").exists()
        assert (project_dir / "node_modules" / "foo.txt").read_text() == "foo"

        manifest = json.loads((project_dir / "package.json").read_text())
        assert manifest["name"] == "bar"
        assert manifest["description"] == "A renamed app"
        assert "  - Renamed foo.txt to bar.txt" in result.output

    def test_run_interactive(self, cli_runner, project_dir):
        """Name, description and decisions are all prompted for."""
        result = cli_runner.invoke(
            app,
            ["run", "--root", str(project_dir)],
            input="bar\nA renamed app\na\nn\n",
        )

        assert result.exit_code == 0, result.output
        assert "What would you like to rename foo to?" in result.output
        assert "  - Rewriting all file contents" in result.output
        # contents rewritten everywhere, the one rename declined
        assert (project_dir / "foo.txt").read_text() == "hello bar"
        assert json.loads((project_dir / "package.json").read_text())["name"] == "bar"
        assert "  - Skipped renaming foo.txt to bar.txt" in result.output

    def test_run_quiet(self, cli_runner, project_dir):
        result = cli_runner.invoke(app, [
            "run", "-r", str(project_dir), "-n", "bar", "-d", "desc",
            "--contents", "all", "--renames", "none", "--quiet",
        ])

        assert result.exit_code == 0
        assert "  - " not in result.output
        assert (project_dir / "foo.txt").read_text() == "hello bar"

    def test_run_old_name_override(self, cli_runner, project_dir):
        (project_dir / "hello.txt").write_text("hello world")

        result = cli_runner.invoke(app, [
            "run", "-r", str(project_dir), "-n", "planet", "-d", "desc",
            "--old-name", "world", "--contents", "all", "--renames", "all",
        ])

        assert result.exit_code == 0
        assert (project_dir / "hello.txt").read_text() == "hello planet"
        assert (project_dir / "foo.txt").read_text() == "hello foo"

    def test_run_exclude(self, cli_runner, project_dir):
        (project_dir / "vendor").mkdir()
        (project_dir / "vendor" / "foo.js").write_text("foo")

        result = cli_runner.invoke(app, [
            "run", "-r", str(project_dir), "-n", "bar", "-d", "desc",
            "--contents", "all", "--renames", "all", "--exclude", "vendor",
        ])

        assert result.exit_code == 0
        assert (project_dir / "vendor" / "foo.js").read_text() == "foo"

    def test_empty_new_name(self, cli_runner, project_dir):
        """An empty name aborts before anything is touched."""
        before = (project_dir / "package.json").read_text()

        result = cli_runner.invoke(app, ["run", "-r", str(project_dir), "-n", "", "-d", "desc"])

        assert result.exit_code == 1
        assert "No new name provided" in result.output
        assert (project_dir / "package.json").read_text() == before
        assert (project_dir / "foo.txt").read_text() == "hello foo"

    def test_empty_description(self, cli_runner, project_dir):
        result = cli_runner.invoke(app, ["run", "-r", str(project_dir), "-n", "bar"], input="\n")

        assert result.exit_code == 1
        assert "No description provided" in result.output
        assert (project_dir / "foo.txt").exists()

    def test_missing_manifest(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["run", "-r", str(tmp_path), "-n", "bar", "-d", "desc"])

        assert result.exit_code == 1
        assert "Manifest not found" in result.output

    def test_walk_error_reported(self, cli_runner, project_dir, monkeypatch):
        def failing_rename(self, target):
            raise PermissionError(f"cannot rename {self}")

        monkeypatch.setattr(Path, "rename", failing_rename)

        result = cli_runner.invoke(app, [
            "run", "-r", str(project_dir), "-n", "bar", "-d", "desc",
            "--contents", "all", "--renames", "all",
        ])

        assert result.exit_code == 1
        assert "An error occurred during the project walk" in result.output
        assert (project_dir / "foo.txt").read_text() == "hello bar"

    def test_manifest_error_with_old_name(self, cli_runner, tmp_path):
        """A missing package.json is reported as a manifest error, not a walk error."""
        (tmp_path / "foo.txt").write_text("foo")

        result = cli_runner.invoke(app, [
            "run", "-r", str(tmp_path), "-n", "bar", "-d", "desc", "--old-name", "foo",
            "--contents", "all", "--renames", "all",
        ])

        assert result.exit_code == 1
        assert "Error: Manifest not found" in result.output
        assert "project walk" not in result.output
        assert (tmp_path / "foo.txt").read_text() == "foo"
