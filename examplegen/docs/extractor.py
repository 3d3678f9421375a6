"""Source reading and contract-name extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from ..errors import NoDeclarationFoundError, SourceFileMissingError
from ..models import SourceFile

# Best-effort scan: the first line-leading ``contract <Name>`` followed by an
# inheritance list or an opening brace. Comments and strings are not parsed.
_CONTRACT_PATTERN = re.compile(r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE)

_LANGUAGE_BY_SUFFIX: Dict[str, str] = {
    ".sol": "solidity",
    ".js": "javascript",
    ".cjs": "javascript",
    ".mjs": "javascript",
    ".ts": "typescript",
    ".json": "json",
}


@dataclass(frozen=True)
class SourceText:
    """Verbatim content of one catalog source file."""

    source: SourceFile
    text: str

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def role(self) -> str:
        return self.source.role

    @property
    def language(self) -> str:
        return _LANGUAGE_BY_SUFFIX.get(Path(self.source.path).suffix.lower(), "")


def extract_contract_name(contract_source_text: str, *, source: str | Path | None = None) -> str:
    """Return the name of the first contract declared in ``contract_source_text``."""
    match = _CONTRACT_PATTERN.search(contract_source_text)
    if match is None:
        raise NoDeclarationFoundError(source)
    return match.group(1)


def read_source(source: SourceFile, root: Path) -> SourceText:
    path = root / source.path
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise SourceFileMissingError(Path(source.path), role=source.role) from None
    return SourceText(source=source, text=text)


def read_sources(sources: Iterable[SourceFile], root: Path) -> List[SourceText]:
    """Read every source up front so callers can fail before writing anything."""
    return [read_source(source, root) for source in sources]


__all__ = ["SourceText", "extract_contract_name", "read_source", "read_sources"]
