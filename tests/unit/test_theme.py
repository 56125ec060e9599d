"""Tests for themes."""

import logging

import pytest

from iconflavor.core.base import StyleProvider
from iconflavor.core.exceptions import FlavorNotFoundError
from iconflavor.core.models import Color, Style
from iconflavor.core.theme import Theme


class TestThemeDocument:
    def test_palette_and_hex_colors(self):
        theme = Theme.from_document(
            "t",
            {
                "palette": {"red": "#ff0000"},
                "error": "red",
                "warning": "#ffff00",
                "info": {"fg": "red", "bg": "#000000", "modifiers": ["bold"]},
            },
        )
        assert theme.get("error") == Style(fg=Color(r=255, g=0, b=0))
        assert theme.get("warning") == Style(fg=Color(r=255, g=255, b=0))
        assert theme.get("info") == Style(
            fg=Color(r=255, g=0, b=0), bg=Color(r=0, g=0, b=0), modifiers=("bold",)
        )

    def test_invalid_entries_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="iconflavor.core.theme"):
            theme = Theme.from_document(
                "t",
                {
                    "palette": {"bad": "nope"},
                    "error": "bad",
                    "hint": 3,
                    "info": {"fg": "#0000ff", "underline": True},
                    "warning": "#ffff00",
                },
            )
        assert set(theme.styles) == {"warning"}
        assert "palette color 'bad'" in caplog.text
        assert "style 'hint'" in caplog.text

    def test_inherits_key_is_not_a_scope(self):
        theme = Theme.from_document("t", {"inherits": "default"})
        assert theme.styles == {}

    def test_is_a_style_provider(self):
        assert isinstance(Theme("t"), StyleProvider)

    def test_dotted_fallback(self):
        theme = Theme("t", {"diagnostic": Style(modifiers=("underlined",))})
        assert theme.get("diagnostic.error.extra") == Style(modifiers=("underlined",))
        assert theme.get("ui.text") == Style()


class TestThemeLoader:
    def test_default_theme(self, theme_loader):
        theme = theme_loader.default()
        for severity in ("error", "warning", "info", "hint"):
            assert theme.get(severity).fg is not None

    def test_palette_merged_per_color(self, theme_loader, config_dir, write_toml):
        write_toml(
            config_dir / "themes",
            "custom",
            """
            inherits = "default"
            warning = "red"
            [palette]
            red = "#aa0000"
            """,
        )
        theme = theme_loader.load("custom")
        default = theme_loader.default()
        assert theme.get("warning") == Style(fg=Color.from_hex("#aa0000"))
        assert theme.get("error").fg == Color.from_hex("#aa0000")
        assert theme.get("error").modifiers == default.get("error").modifiers
        assert theme.get("info") == default.get("info")

    def test_scopes_replaced_whole(self, theme_loader):
        merged = theme_loader.merge(
            {"error": {"fg": "#ff0000", "modifiers": ["bold"]}},
            {"error": {"fg": "#00ff00"}},
        )
        assert merged == {"error": {"fg": "#00ff00"}}

    def test_missing_theme(self, theme_loader):
        with pytest.raises(FlavorNotFoundError):
            theme_loader.load("nope")

    def test_names(self, theme_loader, config_dir, write_toml):
        write_toml(config_dir / "themes", "mine", "")
        assert theme_loader.names() == ["default", "mine"]
