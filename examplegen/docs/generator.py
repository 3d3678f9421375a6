"""Documentation generation runs for one example or the whole catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ..catalog import Catalog
from ..config import ExampleGenConfig
from ..errors import ConfigError
from ..logging import get_logger
from ..models import CatalogEntry, DocumentationPage
from .index import rebuild_index
from .page import build_documentation_page, is_generated_page, write_page


@dataclass
class DocsRunResult:
    """Outcome of a documentation run."""

    pages: List[DocumentationPage]
    written: List[Path]
    index_path: Path | None = None
    removed: List[Path] = field(default_factory=list)


class DocsGenerator:
    """Writes documentation pages and, for full runs, the navigation index."""

    def __init__(self, catalog: Catalog, config: ExampleGenConfig) -> None:
        self.catalog = catalog
        self.config = config
        self.logger = get_logger("docs")

    @property
    def docs_root(self) -> Path:
        return self.config.docs_root

    def generate(self, key: str) -> DocsRunResult:
        """Regenerate the page for ``key``; the navigation index is left alone."""
        entry = self.catalog.resolve(key)
        self._check_page_paths([entry])
        self.logger.info("Generating documentation for %s", key)
        page = build_documentation_page(entry, self.config.root)
        path = write_page(page, self.docs_root)
        self.logger.info("Wrote %s", path)
        return DocsRunResult(pages=[page], written=[path])

    def generate_all(self) -> DocsRunResult:
        """Regenerate every page, prune stale generated pages and rebuild the index.

        All pages are rendered in memory first so a missing source aborts the run
        before anything is written.
        """
        entries = self.catalog.entries
        self._check_page_paths(entries)
        self.logger.info("Generating documentation for %d examples", len(entries))
        pages = [build_documentation_page(entry, self.config.root) for entry in entries]

        written = [write_page(page, self.docs_root) for page in pages]
        for path in written:
            self.logger.debug("Wrote %s", path)

        removed = self._remove_stale_pages({page.path for page in pages})
        index_path = rebuild_index(
            pages,
            self.docs_root,
            self.catalog.doc_category_order,
            index_file=self.config.docs.index_file,
        )
        self.logger.info("Rebuilt navigation index at %s", index_path)
        return DocsRunResult(pages=pages, written=written, index_path=index_path, removed=removed)

    def _check_page_paths(self, entries: Sequence[CatalogEntry]) -> None:
        index_file = self.config.docs.index_file.lower()
        for entry in entries:
            if entry.doc_path.lower() == index_file:
                raise ConfigError(
                    f"Example key {entry.key!r} would overwrite the navigation index "
                    f"{self.config.docs.index_file}"
                )

    def _remove_stale_pages(self, current: set[str]) -> List[Path]:
        removed: List[Path] = []
        for path in sorted(self.docs_root.rglob("*.md")):
            rel_path = path.relative_to(self.docs_root).as_posix()
            if rel_path in current or not is_generated_page(path):
                continue
            path.unlink()
            self.logger.info("Removed stale page %s", rel_path)
            removed.append(path)
        return removed


__all__ = ["DocsGenerator", "DocsRunResult"]
