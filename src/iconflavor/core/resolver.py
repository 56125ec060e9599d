"""Flavor resolution: locate, parse and merge a flavor with its ancestors."""

import logging
from pathlib import Path
from typing import Any

from iconflavor.config.loader import TOMLDecodeError, parse_toml, toml_names_in_dir
from iconflavor.core.base import FlavorLoader
from iconflavor.core.exceptions import (
    FlavorCycleError,
    FlavorNotFoundError,
    FlavorParseError,
    FlavorReadError,
    FlavorSchemaError,
)

logger = logging.getLogger(__name__)

INHERITS_KEY = "inherits"


class DirectoryLoader:
    """Shared file handling for flavor families stored as ``<name>.toml``.

    Subclasses provide ``kind``, ``merge`` and ``builtin``.
    """

    kind = "flavor"

    def __init__(self, user_dir: Path, default_dir: Path) -> None:
        self.user_dir = Path(user_dir)
        self.default_dir = Path(default_dir)

    def locate(self, name: str, builtin_only: bool = False) -> Path:
        """Path of the flavor file, preferring the user directory unless ``builtin_only``."""
        filename = f"{name}.toml"
        user_path = self.user_dir / filename
        if not builtin_only and user_path.is_file():
            return user_path
        return self.default_dir / filename

    def parse(self, data: bytes, path: Path) -> dict[str, Any]:
        try:
            return parse_toml(data)
        except (TOMLDecodeError, UnicodeDecodeError) as e:
            raise FlavorParseError(self.kind, path.stem, f"failed to parse {path}: {e}") from e

    def merge(self, parent: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    def builtin(self, name: str) -> dict[str, Any] | None:
        return None

    def builtin_names(self) -> list[str]:
        return []

    def names(self) -> list[str]:
        """All flavor names available in the user and default directories."""
        names = set(toml_names_in_dir(self.user_dir))
        names.update(toml_names_in_dir(self.default_dir))
        names.update(self.builtin_names())
        return sorted(names)


class FlavorResolver:
    """Resolves a flavor document and its ``inherits`` chain into one merged document."""

    def __init__(self, loader: FlavorLoader) -> None:
        self.loader = loader

    def resolve(self, name: str, base_name: str | None = None, builtin_only: bool = False) -> dict[str, Any]:
        """Load ``name`` and merge it over its ancestors.

        ``base_name`` is the flavor originally requested. When an ancestor
        inherits from it, that lookup is restricted to the default directory
        so a user file can extend the built-in file of the same name. Any
        other cycle raises ``FlavorCycleError``.
        """
        return self._resolve(name, base_name or name, builtin_only, [])

    def _resolve(
        self,
        name: str,
        base_name: str,
        builtin_only: bool,
        chain: list[tuple[str, Path]],
    ) -> dict[str, Any]:
        kind = self.loader.kind

        builtin = self.loader.builtin(name)
        if builtin is not None:
            logger.debug("Using built-in %s '%s'", kind, name)
            return builtin

        path = self.loader.locate(name, builtin_only)
        if any(seen == path for _, seen in chain):
            raise FlavorCycleError(kind, base_name, [n for n, _ in chain] + [name])

        try:
            data = path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise FlavorNotFoundError(kind, name, path) from None
        except OSError as e:
            raise FlavorReadError(kind, name, f"failed to read {path}: {e}") from e
        document = self.loader.parse(data, path)
        logger.debug("Loaded %s '%s' from %s", kind, name, path)

        if INHERITS_KEY not in document:
            return document

        parent_name = document[INHERITS_KEY]
        if not isinstance(parent_name, str):
            raise FlavorSchemaError(
                kind, name, f"{path}: expected 'inherits' to be a string, got {parent_name!r}"
            )

        parent = self._resolve(
            parent_name,
            base_name,
            parent_name == base_name,
            chain + [(name, path)],
        )
        return self.loader.merge(parent, document)
