"""Documentation page and navigation index generation."""

from .extractor import SourceText, extract_contract_name, read_sources
from .generator import DocsGenerator, DocsRunResult
from .index import build_index, rebuild_index
from .page import GENERATED_MARKER, build_documentation_page, write_page

__all__ = [
    "DocsGenerator",
    "DocsRunResult",
    "GENERATED_MARKER",
    "SourceText",
    "build_documentation_page",
    "build_index",
    "extract_contract_name",
    "read_sources",
    "rebuild_index",
    "write_page",
]
