"""Core data models shared across examplegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, Optional, Tuple

CONTRACT_ROLE = "contract"
TEST_ROLE = "test"
SOURCE_ROLES: Tuple[str, ...] = (CONTRACT_ROLE, TEST_ROLE)


@dataclass(frozen=True)
class SourceFile:
    """A contract or test file referenced relative to the project root."""

    role: str
    path: str

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def stem(self) -> str:
        return PurePosixPath(self.path).stem


@dataclass(frozen=True)
class Concept:
    """A short concept explanation rendered on documentation pages."""

    name: str
    summary: str


@dataclass(frozen=True)
class CatalogEntry:
    """Descriptor for a single example."""

    key: str
    title: str
    description: str
    category: str
    source_files: Tuple[SourceFile, ...]
    concepts: Tuple[Concept, ...] = ()

    @property
    def contract(self) -> SourceFile:
        return self._first(CONTRACT_ROLE)

    @property
    def test(self) -> SourceFile:
        return self._first(TEST_ROLE)

    @property
    def doc_path(self) -> str:
        """Documentation page path relative to the docs root."""
        return f"{self.key}.md"

    def _first(self, role: str) -> SourceFile:
        for source in self.source_files:
            if source.role == role:
                return source
        raise LookupError(f"Example {self.key!r} has no {role} file")


@dataclass(frozen=True)
class CategoryMember:
    """One contract/test pair bundled into a category project."""

    contract: str
    test: str
    description: str

    @property
    def contract_stem(self) -> str:
        return PurePosixPath(self.contract).stem

    @property
    def source_files(self) -> Tuple[SourceFile, ...]:
        return (SourceFile(CONTRACT_ROLE, self.contract), SourceFile(TEST_ROLE, self.test))


@dataclass(frozen=True)
class CategoryEntry:
    """A named group of examples generated into one project."""

    key: str
    name: str
    description: str
    members: Tuple[CategoryMember, ...]
    additional_dependencies: Tuple[Tuple[str, str], ...] = ()

    @property
    def source_files(self) -> Tuple[SourceFile, ...]:
        files: list[SourceFile] = []
        for member in self.members:
            files.extend(member.source_files)
        return tuple(files)


@dataclass
class DocumentationPage:
    """Rendered markdown page for one example."""

    key: str
    title: str
    category: str
    path: str
    content: str
    contract_name: Optional[str] = None


@dataclass
class GeneratedProject:
    """Standalone project produced by the scaffold pipeline."""

    key: str
    root: Path
    package_name: str
    contract_names: Tuple[str, ...]
    files_copied: int = 0
    metadata: Dict[str, object] = field(default_factory=dict)
