"""Custom exceptions for flavor loading."""


class FlavorError(Exception):
    """Base exception for all flavor loading errors."""

    def __init__(self, kind: str, flavor_name: str, message: str) -> None:
        self.kind = kind
        self.flavor_name = flavor_name
        super().__init__(f"[{kind}] {message}")


class FlavorNotFoundError(FlavorError):
    """Raised when no flavor file exists at the computed path."""

    def __init__(self, kind: str, flavor_name: str, path: object) -> None:
        self.path = path
        super().__init__(kind, flavor_name, f"flavor '{flavor_name}' not found at {path}")


class FlavorReadError(FlavorError):
    """Raised when a flavor file exists but cannot be read."""


class FlavorParseError(FlavorError):
    """Raised when a flavor file is not valid TOML."""


class FlavorSchemaError(FlavorError):
    """Raised when the inheritance instructions of a flavor are invalid."""


class FlavorCycleError(FlavorSchemaError):
    """Raised when a flavor inherits, directly or indirectly, from itself."""

    def __init__(self, kind: str, flavor_name: str, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(kind, flavor_name, f"inheritance cycle: {' -> '.join(chain)}")


class FlavorConversionError(FlavorError):
    """Raised when a merged flavor document does not match the typed model."""
