"""Configuration loading for examplegen (.examplegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".examplegen.yml"

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "node_modules",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
    ".git",
)

DEFAULT_CATEGORY_EXCLUDE_DIRS: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS + ("build", "output")

DEFAULT_HOMEPAGE_BASE = "https://github.com/zama-ai/fhevm-examples"


@dataclass
class DocsConfig:
    """Documentation output settings."""

    output_dir: str = "docs"
    index_file: str = "SUMMARY.md"


@dataclass
class ExampleGenConfig:
    """Represents the settings defined in .examplegen.yml."""

    root: Path
    output_dir: str = "output"
    catalog: Optional[Path] = None
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    category_exclude_dirs: List[str] = field(
        default_factory=lambda: list(DEFAULT_CATEGORY_EXCLUDE_DIRS)
    )
    homepage_base: str = DEFAULT_HOMEPAGE_BASE
    docs: DocsConfig = field(default_factory=DocsConfig)

    @property
    def output_root(self) -> Path:
        return self.root / self.output_dir

    @property
    def docs_root(self) -> Path:
        return self.root / self.docs.output_dir


def load_config(config_path: Path) -> ExampleGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ExampleGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ExampleGenConfig(root=root)

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = output_dir

    catalog = _as_str(data.get("catalog"))
    if catalog:
        config.catalog = root / catalog

    if "exclude_dirs" in data:
        config.exclude_dirs = _as_str_list(data.get("exclude_dirs"))
    if "category_exclude_dirs" in data:
        config.category_exclude_dirs = _as_str_list(data.get("category_exclude_dirs"))

    homepage_base = _as_str(data.get("homepage_base"))
    if homepage_base:
        config.homepage_base = homepage_base.rstrip("/")

    docs_data = _as_dict(data.get("docs"))
    if docs_data:
        docs_dir = _as_str(docs_data.get("output_dir"))
        index_file = _as_str(docs_data.get("index_file"))
        config.docs = DocsConfig(
            output_dir=docs_dir or DocsConfig.output_dir,
            index_file=index_file or DocsConfig.index_file,
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CATEGORY_EXCLUDE_DIRS",
    "DEFAULT_EXCLUDE_DIRS",
    "DocsConfig",
    "ExampleGenConfig",
    "load_config",
]
