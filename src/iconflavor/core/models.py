"""Core data models for icon flavors."""

import re
from collections.abc import Iterator
from enum import StrEnum
from pathlib import PurePath
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from iconflavor.core.base import StyleProvider

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a ``#RRGGBB`` literal. Raises ``ValueError`` for anything else."""
        if not _HEX_COLOR.fullmatch(text):
            raise ValueError(f"expected a '#RRGGBB' color, got {text!r}")
        return cls(r=int(text[1:3], 16), g=int(text[3:5], 16), b=int(text[5:7], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class Style(BaseModel):
    model_config = ConfigDict(frozen=True)

    fg: Color | None = None
    bg: Color | None = None
    modifiers: tuple[str, ...] = ()

    @property
    def is_colorless(self) -> bool:
        return self.fg is None and self.bg is None


class ExplicitStyle(BaseModel):
    """A style given directly by the flavor document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["explicit"] = "explicit"
    style: Style


class DerivedStyle(BaseModel):
    """A style taken from the active theme."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["derived"] = "derived"
    style: Style = Field(default_factory=Style)


StyleSource = Annotated[ExplicitStyle | DerivedStyle, Field(discriminator="kind")]


class Icon(BaseModel):
    glyph: str = Field(min_length=1, max_length=1)
    style: StyleSource | None = None

    @property
    def is_explicit(self) -> bool:
        return isinstance(self.style, ExplicitStyle)

    def derive(self, style: Style) -> None:
        """Apply a theme style unless the document gave an explicit one."""
        if not self.is_explicit:
            self.style = DerivedStyle(style=style)


class DiagnosticIcons(BaseModel):
    error: Icon
    warning: Icon
    info: Icon
    hint: Icon

    def items(self) -> Iterator[tuple[Severity, Icon]]:
        for severity in Severity:
            yield severity, getattr(self, severity.value)


class IconFlavor(BaseModel):
    """A fully merged icon flavor with resolved styles."""

    name: str
    mime_type: dict[str, Icon] = Field(default_factory=dict)
    diagnostic: DiagnosticIcons
    symbol_kind: dict[str, Icon] = Field(default_factory=dict)

    def icons(self) -> Iterator[Icon]:
        yield from self.mime_type.values()
        yield from self.symbol_kind.values()
        for _, icon in self.diagnostic.items():
            yield icon

    def apply_theme_defaults(self, theme: "StyleProvider") -> None:
        """Give every diagnostic icon without an explicit color its theme style."""
        for severity, icon in self.diagnostic.items():
            icon.derive(theme.get(severity.value))

    def strip_styles(self) -> None:
        """Drop all colors, for terminals without true color support."""
        for icon in self.icons():
            icon.style = DerivedStyle()

    def diagnostic_icon(self, severity: Severity | str) -> Icon | None:
        try:
            return getattr(self.diagnostic, Severity(severity).value)
        except ValueError:
            return None

    def symbol_icon(self, kind: str) -> Icon | None:
        return self.symbol_kind.get(kind)

    def icon_for_path(self, path: str | PurePath) -> Icon | None:
        """Icon for a file, keyed by its extension or, failing that, its file name."""
        file_path = PurePath(path)
        key = file_path.suffix[1:] or file_path.name
        icon = self.mime_type.get(key)
        if icon is None:
            icon = self.symbol_kind.get("file")
        return icon


class IconEntry(BaseModel):
    """A single ``{ icon, color }`` entry as written in a flavor document."""

    model_config = ConfigDict(extra="forbid")

    icon: str = Field(min_length=1, max_length=1)
    color: str | None = None


class DiagnosticEntries(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: IconEntry
    warning: IconEntry
    info: IconEntry
    hint: IconEntry


class IconFlavorDocument(BaseModel):
    """Strict schema of a merged icon flavor document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    inherits: str | None = None
    mime_type: dict[str, IconEntry] = Field(alias="mime-type")
    diagnostic: DiagnosticEntries
    symbol_kind: dict[str, IconEntry] = Field(alias="symbol-kind")
