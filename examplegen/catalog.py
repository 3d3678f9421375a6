"""Static registry of examples and categories."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from .errors import CatalogError, SourceFileMissingError, UnknownKeyError
from .logging import get_logger
from .models import (
    CONTRACT_ROLE,
    TEST_ROLE,
    CatalogEntry,
    CategoryEntry,
    CategoryMember,
    Concept,
    SourceFile,
)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("data") / "catalog.yml"

_logger = get_logger("catalog")


class Catalog:
    """Immutable lookup table from example/category keys to their descriptors.

    Mappings keep YAML declaration order, which the navigation index relies on.
    """

    def __init__(
        self,
        examples: Iterable[CatalogEntry],
        categories: Iterable[CategoryEntry] = (),
        doc_categories: Iterable[str] = (),
    ) -> None:
        self._examples: Dict[str, CatalogEntry] = {}
        for entry in examples:
            if entry.key in self._examples:
                raise CatalogError(f"Duplicate example key: {entry.key!r}")
            self._examples[entry.key] = entry
        self._categories: Dict[str, CategoryEntry] = {}
        for category in categories:
            if category.key in self._categories:
                raise CatalogError(f"Duplicate category key: {category.key!r}")
            self._categories[category.key] = category
        self._doc_categories: Tuple[str, ...] = tuple(doc_categories)

    @classmethod
    def load(cls, path: Path | None = None) -> "Catalog":
        """Load a catalog document, defaulting to the packaged registry."""
        catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
        try:
            text = catalog_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CatalogError(f"Catalog not found: {catalog_path}") from exc
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise CatalogError(f"Failed to parse {catalog_path.name}: {exc}") from exc
        catalog = cls.from_mapping(data)
        _logger.debug(
            "Loaded %d examples and %d categories from %s",
            len(catalog._examples),
            len(catalog._categories),
            catalog_path,
        )
        return catalog

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Catalog":
        if not isinstance(data, Mapping):
            raise CatalogError("Catalog must contain a mapping at the root")
        examples_data = data.get("examples") or {}
        if not isinstance(examples_data, Mapping):
            raise CatalogError("'examples' must be a mapping of key to example")
        examples = [_parse_example(str(key), value) for key, value in examples_data.items()]
        by_key = {entry.key: entry for entry in examples}

        categories_data = data.get("categories") or {}
        if not isinstance(categories_data, Mapping):
            raise CatalogError("'categories' must be a mapping of key to category")
        categories = [
            _parse_category(str(key), value, by_key) for key, value in categories_data.items()
        ]

        doc_categories = data.get("doc_categories") or []
        if not isinstance(doc_categories, list):
            raise CatalogError("'doc_categories' must be a list of category names")
        return cls(examples, categories, [str(name) for name in doc_categories])

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._examples)

    @property
    def category_keys(self) -> Tuple[str, ...]:
        return tuple(self._categories)

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return tuple(self._examples.values())

    @property
    def categories(self) -> Tuple[CategoryEntry, ...]:
        return tuple(self._categories.values())

    @property
    def doc_category_order(self) -> Tuple[str, ...]:
        """Documentation categories in declaration order, including implicit ones."""
        order: List[str] = list(self._doc_categories)
        for entry in self._examples.values():
            if entry.category not in order:
                order.append(entry.category)
        return tuple(order)

    def resolve(self, key: str) -> CatalogEntry:
        """Return the example registered under ``key``."""
        _require_key(key)
        try:
            return self._examples[key]
        except KeyError:
            raise UnknownKeyError(key, self.keys, kind="example") from None

    def resolve_category(self, key: str) -> CategoryEntry:
        """Return the category registered under ``key``."""
        _require_key(key)
        try:
            return self._categories[key]
        except KeyError:
            raise UnknownKeyError(key, self.category_keys, kind="category") from None

    @staticmethod
    def verify_sources(sources: Iterable[SourceFile], root: Path) -> List[Path]:
        """Return absolute paths for ``sources`` or fail on the first missing file."""
        resolved: List[Path] = []
        for source in sources:
            path = root / source.path
            if not path.is_file():
                raise SourceFileMissingError(Path(source.path), role=source.role)
            resolved.append(path)
        return resolved


def _require_key(key: str) -> None:
    if not isinstance(key, str) or not key.strip():
        raise ValueError("Catalog key must be a non-empty string")


def _parse_example(key: str, data: Any) -> CatalogEntry:
    if not isinstance(data, Mapping):
        raise CatalogError(f"Example {key!r} must be a mapping")
    contract = _required_str(data, "contract", owner=f"example {key!r}")
    test = _required_str(data, "test", owner=f"example {key!r}")
    concepts: List[Concept] = []
    for item in data.get("concepts") or []:
        if isinstance(item, Mapping) and item.get("name"):
            concepts.append(Concept(str(item["name"]), str(item.get("summary") or "")))
        elif isinstance(item, str):
            concepts.append(Concept(item, ""))
        else:
            raise CatalogError(f"Example {key!r} has an invalid concept entry")
    return CatalogEntry(
        key=key,
        title=str(data.get("title") or key),
        description=_required_str(data, "description", owner=f"example {key!r}"),
        category=str(data.get("category") or "Examples"),
        source_files=(SourceFile(CONTRACT_ROLE, contract), SourceFile(TEST_ROLE, test)),
        concepts=tuple(concepts),
    )


def _parse_category(
    key: str, data: Any, examples: Mapping[str, CatalogEntry]
) -> CategoryEntry:
    if not isinstance(data, Mapping):
        raise CatalogError(f"Category {key!r} must be a mapping")
    owner = f"category {key!r}"
    members: List[CategoryMember] = []
    for item in data.get("contracts") or []:
        if not isinstance(item, Mapping):
            raise CatalogError(f"{owner} has an invalid contract entry")
        reference = item.get("example")
        if reference is not None:
            example = examples.get(str(reference))
            if example is None:
                raise CatalogError(f"{owner} references unknown example {reference!r}")
            members.append(
                CategoryMember(
                    contract=example.contract.path,
                    test=example.test.path,
                    description=str(item.get("description") or example.description),
                )
            )
            continue
        members.append(
            CategoryMember(
                contract=_required_str(item, "path", owner=owner),
                test=_required_str(item, "test", owner=owner),
                description=str(item.get("description") or ""),
            )
        )
    if not members:
        raise CatalogError(f"{owner} must list at least one contract")

    deps = data.get("additional_dependencies") or {}
    if not isinstance(deps, Mapping):
        raise CatalogError(f"{owner} additional_dependencies must be a mapping")
    return CategoryEntry(
        key=key,
        name=str(data.get("name") or key),
        description=str(data.get("description") or ""),
        members=tuple(members),
        additional_dependencies=tuple((str(name), str(version)) for name, version in deps.items()),
    )


def _required_str(data: Mapping[str, Any], field_name: str, *, owner: str) -> str:
    value = data.get(field_name)
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f"{owner} is missing required field {field_name!r}")
    return value.strip()


_default_catalog: Optional[Catalog] = None


def default_catalog() -> Catalog:
    """Return the packaged catalog, loading it once per process."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = Catalog.load()
    return _default_catalog


__all__ = ["Catalog", "DEFAULT_CATALOG_PATH", "default_catalog"]
