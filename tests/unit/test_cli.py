"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from iconflavor.cli.commands import cli


@pytest.fixture
def runner(monkeypatch):
    for key in ["ICONFLAVOR_ICONS", "ICONFLAVOR_THEME", "ICONFLAVOR_RUNTIME_DIR", "ICONFLAVOR_TRUE_COLOR"]:
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


def _invoke(runner, config_dir, *args):
    return runner.invoke(cli, ["--config-dir", str(config_dir), *args])


class TestList:
    def test_list_icons(self, runner, config_dir, write_toml):
        write_toml(config_dir / "icons", "mine", 'inherits = "default"')
        result = _invoke(runner, config_dir, "list")
        assert result.exit_code == 0
        names = result.output.split()
        assert "default" in names
        assert "ascii" in names
        assert "mine" in names

    def test_list_themes(self, runner, config_dir):
        result = _invoke(runner, config_dir, "list", "--themes")
        assert result.exit_code == 0
        assert "light" in result.output.split()


class TestShow:
    def test_show_default(self, runner, config_dir):
        result = _invoke(runner, config_dir, "show", "--true-color")
        assert result.exit_code == 0
        assert "Icon flavor: default" in result.output
        assert "explicit #dea584" in result.output
        assert "derived #e06c75" in result.output

    def test_show_without_true_color(self, runner, config_dir):
        result = _invoke(runner, config_dir, "show", "ascii", "--no-true-color")
        assert result.exit_code == 0
        assert "Icon flavor: ascii" in result.output
        assert "explicit" not in result.output
        assert "derived (no color)" in result.output

    def test_show_missing_flavor(self, runner, config_dir):
        result = _invoke(runner, config_dir, "show", "ghost")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_show_with_theme(self, runner, config_dir):
        result = _invoke(runner, config_dir, "show", "--theme", "light", "--true-color")
        assert result.exit_code == 0
        assert "derived #e45649" in result.output

    def test_runtime_dir_is_a_file(self, runner, config_dir, tmp_path, monkeypatch):
        not_a_dir = tmp_path / "runtime"
        not_a_dir.write_text("")
        monkeypatch.setenv("ICONFLAVOR_RUNTIME_DIR", str(not_a_dir))
        result = _invoke(runner, config_dir, "show", "ascii")
        assert result.exit_code == 1
        assert "not found" in result.output
        assert not isinstance(result.exception, NotADirectoryError)


class TestLookup:
    def test_lookup(self, runner, config_dir):
        result = _invoke(runner, config_dir, "lookup", "--flavor", "ascii", "--no-true-color", "main.rs", "notes.xyz")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].endswith("main.rs")
        assert lines[1] == "-  notes.xyz"

