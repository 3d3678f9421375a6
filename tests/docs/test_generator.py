"""Tests for DocsGenerator single-page and full runs."""

from __future__ import annotations

import pytest

from examplegen.catalog import Catalog
from examplegen.docs.generator import DocsGenerator
from examplegen.docs.page import GENERATED_MARKER
from examplegen.errors import ConfigError, SourceFileMissingError, UnknownKeyError
from tests._fixtures.project_builder import ProjectBuilder, demo_catalog_data


def _generator(builder: ProjectBuilder, catalog: Catalog | None = None) -> DocsGenerator:
    return DocsGenerator(catalog or builder.catalog(), builder.config())


def test_generate_single_page_leaves_index_alone(project_builder: ProjectBuilder) -> None:
    docs_root = project_builder.root / "docs"
    docs_root.mkdir()
    (docs_root / "SUMMARY.md").write_text("# Hand-made\n", encoding="utf-8")

    result = _generator(project_builder).generate("demo")

    assert result.index_path is None
    assert [path.name for path in result.written] == ["demo.md"]
    assert (docs_root / "demo.md").read_text(encoding="utf-8").startswith(GENERATED_MARKER)
    assert (docs_root / "SUMMARY.md").read_text(encoding="utf-8") == "# Hand-made\n"


def test_generate_unknown_key_writes_nothing(project_builder: ProjectBuilder) -> None:
    with pytest.raises(UnknownKeyError):
        _generator(project_builder).generate("nonexistent-key")

    assert not (project_builder.root / "docs").exists()


def test_generate_all_writes_pages_and_index(project_builder: ProjectBuilder) -> None:
    result = _generator(project_builder).generate_all()

    docs_root = project_builder.root / "docs"
    assert sorted(path.name for path in result.written) == ["demo.md", "gadget.md"]
    summary = (docs_root / "SUMMARY.md").read_text(encoding="utf-8")
    assert result.index_path == docs_root / "SUMMARY.md"
    assert summary.count("(demo.md)") == 1
    assert summary.count("(gadget.md)") == 1
    assert summary.index("## Basics") < summary.index("## Advanced")


def test_generate_all_is_idempotent(project_builder: ProjectBuilder) -> None:
    generator = _generator(project_builder)
    generator.generate_all()
    docs_root = project_builder.root / "docs"
    first = {path.name: path.read_text(encoding="utf-8") for path in docs_root.iterdir()}

    generator.generate_all()

    second = {path.name: path.read_text(encoding="utf-8") for path in docs_root.iterdir()}
    assert first == second


def test_generate_all_drops_stale_pages_from_previous_catalog(project_builder: ProjectBuilder) -> None:
    _generator(project_builder).generate_all()
    docs_root = project_builder.root / "docs"
    (docs_root / "README.md").write_text("# Overview\n", encoding="utf-8")

    data = demo_catalog_data()
    del data["examples"]["gadget"]
    data["categories"] = {}
    result = _generator(project_builder, Catalog.from_mapping(data)).generate_all()

    summary = (docs_root / "SUMMARY.md").read_text(encoding="utf-8")
    assert "gadget.md" not in summary
    assert summary.count("](") == 1
    assert not (docs_root / "gadget.md").exists()
    assert [path.name for path in result.removed] == ["gadget.md"]
    assert (docs_root / "README.md").exists()


def test_generate_all_missing_source_writes_nothing(project_builder: ProjectBuilder) -> None:
    (project_builder.root / "contracts" / "Gadget.sol").unlink()

    with pytest.raises(SourceFileMissingError):
        _generator(project_builder).generate_all()

    assert not (project_builder.root / "docs").exists()


def test_key_colliding_with_index_file_is_rejected(project_builder: ProjectBuilder) -> None:
    data = demo_catalog_data()
    data["examples"]["summary"] = dict(data["examples"]["demo"])
    data["categories"] = {}
    generator = _generator(project_builder, Catalog.from_mapping(data))

    with pytest.raises(ConfigError, match="SUMMARY.md"):
        generator.generate_all()
    with pytest.raises(ConfigError, match="SUMMARY.md"):
        generator.generate("summary")

    assert not (project_builder.root / "docs").exists()
