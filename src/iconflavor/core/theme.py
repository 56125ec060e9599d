"""Color themes, loaded with the same inheritance rules as icon flavors."""

import logging
from pathlib import Path
from typing import Any

from iconflavor.config.loader import merge_toml_values
from iconflavor.core.builtin import DEFAULT_FLAVOR, BuiltinData
from iconflavor.core.models import Color, Style
from iconflavor.core.resolver import INHERITS_KEY, DirectoryLoader, FlavorResolver

logger = logging.getLogger(__name__)

PALETTE_KEY = "palette"


def _resolve_color(value: Any, palette: dict[str, Color]) -> Color:
    if not isinstance(value, str):
        raise ValueError(f"expected a color string, got {value!r}")
    if value in palette:
        return palette[value]
    return Color.from_hex(value)


def _parse_style(value: Any, palette: dict[str, Color]) -> Style:
    if isinstance(value, str):
        return Style(fg=_resolve_color(value, palette))
    if not isinstance(value, dict):
        raise ValueError(f"expected a color or a style table, got {value!r}")

    unknown = set(value) - {"fg", "bg", "modifiers"}
    if unknown:
        raise ValueError(f"unknown style keys: {', '.join(sorted(unknown))}")
    modifiers = value.get("modifiers", [])
    if not isinstance(modifiers, list) or not all(isinstance(m, str) for m in modifiers):
        raise ValueError(f"expected 'modifiers' to be a list of strings, got {modifiers!r}")
    return Style(
        fg=_resolve_color(value["fg"], palette) if "fg" in value else None,
        bg=_resolve_color(value["bg"], palette) if "bg" in value else None,
        modifiers=tuple(modifiers),
    )


class Theme:
    """Styles keyed by dotted scope names such as ``diagnostic.error``."""

    def __init__(self, name: str, styles: dict[str, Style] | None = None) -> None:
        self.name = name
        self.styles = styles or {}

    @classmethod
    def from_document(cls, name: str, document: dict[str, Any]) -> "Theme":
        """Build a theme, skipping (and logging) entries that cannot be parsed."""
        palette: dict[str, Color] = {}
        raw_palette = document.get(PALETTE_KEY, {})
        if not isinstance(raw_palette, dict):
            logger.warning("Theme '%s': 'palette' must be a table, ignoring it", name)
            raw_palette = {}
        for key, value in raw_palette.items():
            try:
                palette[key] = _resolve_color(value, {})
            except ValueError as e:
                logger.warning("Theme '%s': ignoring palette color '%s': %s", name, key, e)

        styles: dict[str, Style] = {}
        for scope, value in document.items():
            if scope in (PALETTE_KEY, INHERITS_KEY):
                continue
            try:
                styles[scope] = _parse_style(value, palette)
            except ValueError as e:
                logger.warning("Theme '%s': ignoring style '%s': %s", name, scope, e)
        return cls(name, styles)

    def get(self, scope: str) -> Style:
        """Style for ``scope``, falling back to its dotted parents, else an empty style."""
        while True:
            style = self.styles.get(scope)
            if style is not None:
                return style
            scope, sep, _ = scope.rpartition(".")
            if not sep:
                return Style()


class ThemeLoader(DirectoryLoader):
    """Loads themes from ``<config_dir>/themes`` and ``<runtime_dir>/themes``."""

    kind = "theme"

    def __init__(self, config_dir: Path, runtime_dir: Path, builtin_data: BuiltinData) -> None:
        super().__init__(Path(config_dir) / "themes", Path(runtime_dir) / "themes")
        self.builtin_data = builtin_data
        self.resolver = FlavorResolver(self)

    def merge(self, parent: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
        """Scopes are overridden whole; palette colors are merged one by one."""
        merged = merge_toml_values(parent, child, 1)
        parent_palette = parent.get(PALETTE_KEY)
        palette = child.get(PALETTE_KEY)
        if isinstance(parent_palette, dict) and isinstance(palette, dict):
            merged[PALETTE_KEY] = merge_toml_values(parent_palette, palette, 1)
        return merged

    def builtin(self, name: str) -> dict[str, Any] | None:
        return self.builtin_data.theme(name)

    def builtin_names(self) -> list[str]:
        return [DEFAULT_FLAVOR]

    def load(self, name: str) -> Theme:
        return Theme.from_document(name, self.resolver.resolve(name))

    def default(self) -> Theme:
        return self.load(DEFAULT_FLAVOR)
