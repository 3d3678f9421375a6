"""Exception hierarchy shared by the scaffold and docs pipelines."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class ExampleGenError(Exception):
    """Base class for failures surfaced by examplegen commands."""


class ConfigError(ExampleGenError, RuntimeError):
    """Raised when a configuration or catalog document cannot be parsed."""


class CatalogError(ConfigError):
    """Raised when the catalog document is structurally invalid."""


class UnknownKeyError(ExampleGenError, LookupError):
    """Raised when a key is absent from the catalog.

    The message lists every valid key so callers can discover them from the
    error alone.
    """

    def __init__(self, key: str, valid_keys: Iterable[str], *, kind: str = "example") -> None:
        self.key = key
        self.kind = kind
        self.valid_keys = tuple(valid_keys)
        available = ", ".join(self.valid_keys) if self.valid_keys else "(none)"
        super().__init__(f"Unknown {kind}: {key!r}. Available {kind}s: {available}")


class DestinationExistsError(ExampleGenError, FileExistsError):
    """Raised when the output directory for a generated project already exists."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Output directory already exists: {self.path}")


class SourceFileMissingError(ExampleGenError, FileNotFoundError):
    """Raised when a source file referenced by the catalog cannot be read."""

    def __init__(self, path: Path, *, role: str | None = None) -> None:
        self.path = Path(path)
        self.role = role
        label = f"{role.capitalize()} not found" if role else "Source file not found"
        super().__init__(f"{label}: {self.path}")


class MetadataNotFoundError(ExampleGenError, FileNotFoundError):
    """Raised when the package metadata file is missing from a copied project."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Package metadata not found: {self.path}")


class NoDeclarationFoundError(ExampleGenError, ValueError):
    """Raised when no contract declaration can be located in a source file."""

    def __init__(self, source: str | Path | None = None) -> None:
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Could not extract contract name{where}")


__all__ = [
    "CatalogError",
    "ConfigError",
    "DestinationExistsError",
    "ExampleGenError",
    "MetadataNotFoundError",
    "NoDeclarationFoundError",
    "SourceFileMissingError",
    "UnknownKeyError",
]
