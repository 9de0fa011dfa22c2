"""Tests for the profile-list CLI.

Tests cover:
- Default invocation with no arguments
- The build command and its options
- Error exit codes
- init-config
"""

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from profile_list import __version__
from profile_list.cli.main import cli


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


def make_default_layout(root: Path, profiles: dict[str, str]) -> Path:
    data_dir = root / "public" / "assets" / "data"
    data_dir.mkdir(parents=True)
    for name, content in profiles.items():
        (data_dir / name).write_text(content)
    return data_dir


# =============================================================================
# Default Invocation Tests
# =============================================================================

class TestDefaultInvocation:
    """Tests for running the tool without arguments."""

    def test_no_arguments_builds_default_list(self, runner):
        with runner.isolated_filesystem():
            make_default_layout(Path("."), {
                "a.json": '{"id":1}',
                "b.json": '{"id":2}',
            })

            result = runner.invoke(cli, [])

            assert result.exit_code == 0
            output = json.loads(Path("public/list.json").read_text())
            assert sorted(output, key=lambda r: r["id"]) == [{"id": 1}, {"id": 2}]

    def test_no_arguments_empty_directory(self, runner):
        with runner.isolated_filesystem():
            make_default_layout(Path("."), {})

            result = runner.invoke(cli, [])

            assert result.exit_code == 0
            assert Path("public/list.json").read_text() == "[]"

    def test_no_arguments_missing_directory(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [])

            assert result.exit_code == 1
            assert "Error" in result.output
            assert not Path("public/list.json").exists()

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Build Command Tests
# =============================================================================

class TestBuildCommand:
    """Tests for the build command."""

    def test_build_with_paths(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "p.json").write_text('{"name": "Ada"}')
        output = tmp_path / "out.json"

        result = runner.invoke(cli, [
            "build",
            "--input-dir", str(tmp_path / "in"),
            "--output", str(output),
        ])

        assert result.exit_code == 0
        assert "Build Complete" in result.output
        assert output.read_text() == '[{"name":"Ada"}]'

    def test_build_sorted_and_pretty(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "b.json").write_text('{"id": 2}')
        (tmp_path / "in" / "a.json").write_text('{"id": 1}')
        output = tmp_path / "out.json"

        result = runner.invoke(cli, [
            "build",
            "-i", str(tmp_path / "in"),
            "-o", str(output),
            "--sort",
            "--pretty",
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text()) == [{"id": 1}, {"id": 2}]
        assert "\n" in output.read_text()

    def test_build_malformed_input(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "bad.json").write_text("{bad json")
        output = tmp_path / "out.json"
        output.write_text("[]")

        result = runner.invoke(cli, [
            "build",
            "-i", str(tmp_path / "in"),
            "-o", str(output),
        ])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
        assert output.read_text() == "[]"

    def test_build_missing_output_parent(self, runner, tmp_path):
        (tmp_path / "in").mkdir()

        result = runner.invoke(cli, [
            "build",
            "-i", str(tmp_path / "in"),
            "-o", str(tmp_path / "nowhere" / "out.json"),
        ])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_build_error_message_is_not_markup(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["build", "-i", "[bold]profiles", "-o", "list.json"])

            assert result.exit_code == 1
            assert "[bold]profiles" in result.output

    def test_build_rejects_nan(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "a.json").write_text('{"x": NaN}')
        output = tmp_path / "out.json"

        result = runner.invoke(cli, ["build", "-i", str(tmp_path / "in"), "-o", str(output)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
        assert not output.exists()

    def test_build_dry_run(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "a.json").write_text('{"id": 1}')
        output = tmp_path / "out.json"

        result = runner.invoke(cli, [
            "build",
            "-i", str(tmp_path / "in"),
            "-o", str(output),
            "--dry-run",
        ])

        assert result.exit_code == 0
        assert "Dry Run" in result.output
        assert not output.exists()

    def test_build_verbose_lists_sources(self, runner, tmp_path):
        (tmp_path / "in").mkdir()
        (tmp_path / "in" / "alice.json").write_text('{"id": 1}')

        result = runner.invoke(cli, [
            "-v",
            "build",
            "-i", str(tmp_path / "in"),
            "-o", str(tmp_path / "out.json"),
        ])

        assert result.exit_code == 0
        assert "alice.json" in result.output

    def test_build_with_config_file(self, runner, tmp_path):
        (tmp_path / "profiles").mkdir()
        (tmp_path / "profiles" / "a.json").write_text('{"id": 1}')
        config_file = tmp_path / "profile-list.yaml"
        config_file.write_text("input_dir: profiles\noutput_path: list.json\n")

        result = runner.invoke(cli, ["build", "--config", str(config_file)])

        assert result.exit_code == 0
        assert (tmp_path / "list.json").read_text() == '[{"id":1}]'


# =============================================================================
# Init Config Tests
# =============================================================================

class TestInitConfig:
    """Tests for the init-config command."""

    def test_init_config_defaults(self, runner, tmp_path):
        output = tmp_path / "profile-list.yaml"

        result = runner.invoke(cli, ["init-config", "-o", str(output)])

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text())
        assert data["input_dir"] == "public/assets/data"
        assert data["output_path"] == "public/list.json"
        assert data["sort"] is False

    def test_init_config_custom_paths(self, runner, tmp_path):
        output = tmp_path / "profile-list.yaml"

        result = runner.invoke(cli, [
            "init-config",
            "-o", str(output),
            "-i", "profiles",
            "-l", "dist/list.json",
        ])

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text())
        assert data["input_dir"] == "profiles"
        assert data["output_path"] == "dist/list.json"
