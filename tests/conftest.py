"""Shared test fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest

from iconflavor.core.builtin import BuiltinData
from iconflavor.core.icons import IconsLoader
from iconflavor.core.models import Color, Style
from iconflavor.core.theme import Theme, ThemeLoader


@pytest.fixture
def builtin_data():
    return BuiltinData.from_package()


@pytest.fixture
def config_dir(tmp_path):
    path = tmp_path / "config"
    (path / "icons").mkdir(parents=True)
    (path / "themes").mkdir()
    return path


@pytest.fixture
def runtime_dir(tmp_path):
    path = tmp_path / "runtime"
    (path / "icons").mkdir(parents=True)
    (path / "themes").mkdir()
    return path


@pytest.fixture
def write_toml():
    """Write a dedented TOML document as ``<directory>/<name>.toml``."""

    def _write(directory: Path, name: str, text: str) -> Path:
        path = directory / f"{name}.toml"
        path.write_text(dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def icons_loader(config_dir, runtime_dir, builtin_data):
    return IconsLoader(config_dir, runtime_dir, builtin_data)


@pytest.fixture
def theme_loader(config_dir, runtime_dir, builtin_data):
    return ThemeLoader(config_dir, runtime_dir, builtin_data)


@pytest.fixture
def sample_theme():
    return Theme(
        "sample",
        {
            "error": Style(fg=Color(r=255, g=0, b=0)),
            "warning": Style(fg=Color(r=255, g=255, b=0)),
            "info": Style(fg=Color(r=0, g=0, b=255)),
            "hint": Style(fg=Color(r=0, g=255, b=0)),
        },
    )
