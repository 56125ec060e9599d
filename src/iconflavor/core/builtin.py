"""Compiled-in flavor documents shipped with the package."""

import copy
import logging
from importlib.resources import files
from typing import Any

from iconflavor.config.loader import parse_toml

logger = logging.getLogger(__name__)

DEFAULT_FLAVOR = "default"


class BuiltinData:
    """Immutable built-in documents, built once at startup and shared by loaders.

    Documents are handed out as deep copies so callers may mutate them freely.
    """

    def __init__(self, icons: dict[str, Any], theme: dict[str, Any]) -> None:
        self._icons = icons
        self._theme = theme

    @classmethod
    def from_package(cls) -> "BuiltinData":
        """Read the documents bundled in ``iconflavor/data``."""
        data_dir = files("iconflavor") / "data"
        icons = parse_toml((data_dir / "icons.toml").read_bytes())
        theme = parse_toml((data_dir / "theme.toml").read_bytes())
        logger.debug("Loaded built-in flavor data")
        return cls(icons=icons, theme=theme)

    def default_icons(self) -> dict[str, Any]:
        return copy.deepcopy(self._icons)

    def icons(self, name: str) -> dict[str, Any] | None:
        if name != DEFAULT_FLAVOR:
            return None
        return self.default_icons()

    def theme(self, name: str) -> dict[str, Any] | None:
        if name != DEFAULT_FLAVOR:
            return None
        return copy.deepcopy(self._theme)
