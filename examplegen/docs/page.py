"""Documentation page rendering for catalog examples."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence

from ..logging import get_logger
from ..models import CONTRACT_ROLE, CatalogEntry, DocumentationPage
from ..postproc.lint import MarkdownLinter
from ..rendering import render
from .extractor import SourceText, extract_contract_name, read_sources

GENERATED_MARKER = "<!-- examplegen:generated -->"

_logger = get_logger("docs.page")
_linter = MarkdownLinter()


_BACKTICK_RUN = re.compile(r"`{3,}")


def code_fence(text: str) -> str:
    """Return a backtick fence longer than any backtick run inside ``text``."""
    longest = max((len(run) for run in _BACKTICK_RUN.findall(text)), default=0)
    return "`" * max(3, longest + 1)


def render_source_tabs(sources: Sequence[SourceText]) -> str:
    """Wrap each source file in a GitBook tab labelled by file name and role."""
    lines: List[str] = ["{% tabs %}", ""]
    for source in sources:
        fence = code_fence(source.text)
        lines.append(f'{{% tab title="{source.name} ({source.role})" %}}')
        lines.append("")
        lines.append(f"{fence}{source.language}")
        lines.append(source.text.rstrip("\n"))
        lines.append(fence)
        lines.append("")
        lines.append("{% endtab %}")
        lines.append("")
    lines.append("{% endtabs %}")
    return "\n".join(lines)


def render_page(entry: CatalogEntry, sources: Sequence[SourceText]) -> DocumentationPage:
    """Render ``entry`` from already-read ``sources``; performs no I/O."""
    contract = next((source for source in sources if source.role == CONTRACT_ROLE), None)
    if contract is None:
        raise LookupError(f"Example {entry.key!r} has no contract source")
    contract_name = extract_contract_name(contract.text, source=contract.source.path)

    markdown = render(
        "doc_page.md.j2",
        marker=GENERATED_MARKER,
        key=entry.key,
        title=entry.title,
        description=entry.description,
        category=entry.category,
        contract_name=contract_name,
        concepts=entry.concepts,
        source_tabs=render_source_tabs(sources),
        test_path=entry.test.path,
    )
    return DocumentationPage(
        key=entry.key,
        title=entry.title,
        category=entry.category,
        path=entry.doc_path,
        content=_linter.lint(markdown),
        contract_name=contract_name,
    )


def build_documentation_page(entry: CatalogEntry, root: Path) -> DocumentationPage:
    """Read every source of ``entry`` and render its page without writing it."""
    sources = read_sources(entry.source_files, root)
    page = render_page(entry, sources)
    _logger.debug("Rendered %s (%d source files)", page.path, len(sources))
    return page


def write_page(page: DocumentationPage, docs_root: Path) -> Path:
    """Write ``page`` under ``docs_root``, replacing any existing file."""
    target = docs_root / page.path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(page.content, encoding="utf-8")
    return target


def is_generated_page(path: Path) -> bool:
    try:
        with path.open("r", encoding="utf-8") as handle:
            first_line = handle.readline()
    except (OSError, UnicodeDecodeError):
        return False
    return first_line.strip() == GENERATED_MARKER


__all__ = [
    "GENERATED_MARKER",
    "build_documentation_page",
    "code_fence",
    "is_generated_page",
    "render_page",
    "render_source_tabs",
    "write_page",
]
