"""Navigation index (GitBook SUMMARY.md) generation."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from ..models import DocumentationPage
from ..postproc.lint import MarkdownLinter
from ..rendering import render

DEFAULT_INDEX_FILE = "SUMMARY.md"


def group_pages(
    pages: Sequence[DocumentationPage], category_order: Iterable[str] = ()
) -> List[Tuple[str, List[DocumentationPage]]]:
    """Group ``pages`` by category.

    Categories follow ``category_order``; unlisted categories are appended in
    the order they first appear. Pages keep their input order within a group.
    Empty categories are omitted.
    """
    seen_paths: set[str] = set()
    grouped: Dict[str, List[DocumentationPage]] = {name: [] for name in category_order}
    for page in pages:
        if page.path in seen_paths:
            raise ValueError(f"Duplicate documentation page: {page.path}")
        seen_paths.add(page.path)
        grouped.setdefault(page.category, []).append(page)
    return [(category, items) for category, items in grouped.items() if items]


def build_index(
    pages: Sequence[DocumentationPage], category_order: Iterable[str] = ()
) -> str:
    markdown = render("summary.md.j2", groups=group_pages(pages, category_order))
    return MarkdownLinter().lint(markdown)


def rebuild_index(
    pages: Sequence[DocumentationPage],
    docs_root: Path,
    category_order: Iterable[str] = (),
    *,
    index_file: str = DEFAULT_INDEX_FILE,
) -> Path:
    """Replace the navigation index with one entry per page in ``pages``."""
    target = docs_root / index_file
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(build_index(pages, category_order), encoding="utf-8")
    return target


__all__ = ["DEFAULT_INDEX_FILE", "build_index", "group_pages", "rebuild_index"]
