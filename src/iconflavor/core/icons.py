"""Icon flavors: loading, typed conversion and style resolution."""

import logging
from functools import cached_property
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from iconflavor.config.loader import merge_toml_values
from iconflavor.core.base import StyleProvider
from iconflavor.core.builtin import DEFAULT_FLAVOR, BuiltinData
from iconflavor.core.exceptions import FlavorConversionError
from iconflavor.core.models import (
    Color,
    DiagnosticIcons,
    ExplicitStyle,
    Icon,
    IconEntry,
    IconFlavor,
    IconFlavorDocument,
    Severity,
    Style,
)
from iconflavor.core.resolver import DirectoryLoader, FlavorResolver

logger = logging.getLogger(__name__)

# Top-level table -> per-entry table -> entry fields.
ICONS_MERGE_DEPTH = 3


def _to_icon(flavor_name: str, where: str, entry: IconEntry) -> Icon:
    style = None
    if entry.color is not None:
        try:
            style = ExplicitStyle(style=Style(fg=Color.from_hex(entry.color)))
        except ValueError as e:
            logger.warning("Icon flavor '%s': ignoring color of %s: %s", flavor_name, where, e)
    return Icon(glyph=entry.icon, style=style)


def convert_document(name: str, document: dict[str, Any]) -> IconFlavor:
    """Convert a merged icon flavor document into an ``IconFlavor``.

    Raises ``FlavorConversionError`` if the document does not match the
    schema. Malformed colors are only logged.
    """
    try:
        parsed = IconFlavorDocument.model_validate(document)
    except ValidationError as e:
        raise FlavorConversionError("icons", name, f"invalid icon flavor '{name}': {e}") from e

    diagnostic = DiagnosticIcons(
        **{
            severity.value: _to_icon(name, f"diagnostic.{severity.value}", getattr(parsed.diagnostic, severity.value))
            for severity in Severity
        }
    )
    return IconFlavor(
        name=name,
        mime_type={key: _to_icon(name, f"mime-type.{key}", entry) for key, entry in parsed.mime_type.items()},
        diagnostic=diagnostic,
        symbol_kind={key: _to_icon(name, f"symbol-kind.{key}", entry) for key, entry in parsed.symbol_kind.items()},
    )


class IconsLoader(DirectoryLoader):
    """Loads icon flavors from ``<config_dir>/icons`` and ``<runtime_dir>/icons``."""

    kind = "icons"

    def __init__(self, config_dir: Path, runtime_dir: Path, builtin_data: BuiltinData) -> None:
        super().__init__(Path(config_dir) / "icons", Path(runtime_dir) / "icons")
        self.builtin_data = builtin_data
        self.resolver = FlavorResolver(self)

    def merge(self, parent: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
        return merge_toml_values(parent, child, ICONS_MERGE_DEPTH)

    def builtin(self, name: str) -> dict[str, Any] | None:
        return self.builtin_data.icons(name)

    def builtin_names(self) -> list[str]:
        return [DEFAULT_FLAVOR]

    @cached_property
    def _default_template(self) -> IconFlavor:
        return convert_document(DEFAULT_FLAVOR, self.builtin_data.default_icons())

    def default(self) -> IconFlavor:
        """A fresh copy of the built-in flavor, styles not yet resolved."""
        return self._default_template.model_copy(deep=True)

    def load(self, name: str) -> IconFlavor:
        """Resolve and convert ``name`` without applying any theme.

        Raises the resolver's errors and ``FlavorConversionError``.
        """
        if name == DEFAULT_FLAVOR:
            return self.default()
        return convert_document(name, self.resolver.resolve(name))

    def materialize(self, name: str, theme: StyleProvider, supports_true_color: bool) -> IconFlavor:
        """Load ``name`` and resolve its styles against ``theme``.

        A flavor that does not match the schema is replaced by the built-in
        flavor and the error logged. Missing files, TOML syntax errors and
        invalid ``inherits`` values propagate.
        """
        try:
            flavor = self.load(name)
        except FlavorConversionError as e:
            logger.error("Falling back to the built-in icon flavor: %s", e)
            flavor = self.default()

        flavor.name = name
        flavor.apply_theme_defaults(theme)
        if not supports_true_color:
            flavor.strip_styles()
        return flavor
