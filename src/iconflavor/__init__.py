"""Inheritable, user-overridable icon flavors with theme-aware styles."""

from iconflavor.config.loader import merge_toml_values
from iconflavor.core.builtin import DEFAULT_FLAVOR, BuiltinData
from iconflavor.core.exceptions import (
    FlavorConversionError,
    FlavorCycleError,
    FlavorError,
    FlavorNotFoundError,
    FlavorParseError,
    FlavorReadError,
    FlavorSchemaError,
)
from iconflavor.core.icons import IconsLoader
from iconflavor.core.models import Color, DerivedStyle, ExplicitStyle, Icon, IconFlavor, Severity, Style
from iconflavor.core.resolver import FlavorResolver
from iconflavor.core.theme import Theme, ThemeLoader

__all__ = [
    "DEFAULT_FLAVOR",
    "BuiltinData",
    "Color",
    "DerivedStyle",
    "ExplicitStyle",
    "FlavorConversionError",
    "FlavorCycleError",
    "FlavorError",
    "FlavorNotFoundError",
    "FlavorParseError",
    "FlavorReadError",
    "FlavorResolver",
    "FlavorSchemaError",
    "Icon",
    "IconFlavor",
    "IconsLoader",
    "Severity",
    "Style",
    "Theme",
    "ThemeLoader",
    "merge_toml_values",
]
