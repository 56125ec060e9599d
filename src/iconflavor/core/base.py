"""Protocol definitions for flavor loaders and themes."""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from iconflavor.core.models import Style


@runtime_checkable
class FlavorLoader(Protocol):
    """Interface a flavor family implements to be resolved with inheritance."""

    kind: str

    def locate(self, name: str, builtin_only: bool = False) -> Path: ...

    def parse(self, data: bytes, path: Path) -> dict[str, Any]: ...

    def merge(self, parent: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]: ...

    def builtin(self, name: str) -> dict[str, Any] | None: ...

    def names(self) -> list[str]: ...


@runtime_checkable
class StyleProvider(Protocol):
    """Anything that maps a style scope name to a ``Style``, such as a theme."""

    def get(self, scope: str) -> Style: ...
