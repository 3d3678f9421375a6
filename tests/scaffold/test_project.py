"""Tests for ProjectGenerator example and category flows."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from examplegen.catalog import Catalog
from examplegen.errors import (
    DestinationExistsError,
    NoDeclarationFoundError,
    SourceFileMissingError,
    UnknownKeyError,
)
from examplegen.scaffold.project import ProjectGenerator
from tests._fixtures.project_builder import ProjectBuilder, demo_catalog_data


def _generator(builder: ProjectBuilder) -> ProjectGenerator:
    return ProjectGenerator(builder.catalog(), builder.config())


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in root.rglob("*")
        if path.is_file()
    }


def test_create_example_produces_standalone_project(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    dest = tmp_path / "out1"

    project = _generator(project_builder).create_example("demo", dest)

    assert project.root == dest.resolve()
    assert project.contract_names == ("Widget",)
    assert (dest / "contracts" / "X.sol").is_file()
    assert (dest / "test" / "X.test.js").is_file()
    assert not (dest / "node_modules").exists()
    assert not (dest / "artifacts").exists()

    package = json.loads((dest / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "fhevm-example-demo"
    assert package["description"] == "A counter widget."
    assert package["homepage"] == "https://github.com/zama-ai/fhevm-examples/demo"
    assert package["devDependencies"] == {"hardhat": "^2.19.0"}

    readme = (dest / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# FHEVM Example: demo")
    assert "`Widget`" in readme


def test_create_example_twice_fails_without_touching_output(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    generator = _generator(project_builder)
    dest = tmp_path / "out1"
    generator.create_example("demo", dest)
    before = _snapshot(dest)

    with pytest.raises(DestinationExistsError):
        generator.create_example("demo", dest)

    assert _snapshot(dest) == before


def test_create_example_defaults_to_output_directory(project_builder: ProjectBuilder) -> None:
    project = _generator(project_builder).create_example("demo")

    expected = project_builder.root.resolve() / "output" / "fhevm-example-demo"
    assert project.root == expected
    assert (expected / "README.md").is_file()
    assert not (expected / "output").exists()


def test_repeated_default_generation_keeps_projects_standalone(
    project_builder: ProjectBuilder,
) -> None:
    generator = _generator(project_builder)
    output_root = project_builder.root.resolve() / "output"

    first = generator.create_example("demo")
    second = generator.create_example("gadget")
    first_category = generator.create_category("pair")
    data = demo_catalog_data()
    data["categories"]["again"] = dict(data["categories"]["pair"])
    second_category = ProjectGenerator(
        Catalog.from_mapping(data), project_builder.config()
    ).create_category("again")

    assert first.root.parent == second.root.parent == output_root
    for project in (first, second, first_category, second_category):
        assert not (project.root / "output").exists()
        assert (project.root / "contracts" / "X.sol").is_file()
    assert sorted(path.name for path in output_root.iterdir()) == [
        "fhevm-example-demo",
        "fhevm-example-gadget",
        "fhevm-examples-again",
        "fhevm-examples-pair",
    ]


def test_create_example_unknown_key_writes_nothing(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    with pytest.raises(UnknownKeyError) as excinfo:
        _generator(project_builder).create_example("nope", tmp_path / "out")

    assert "demo" in str(excinfo.value)
    assert not (tmp_path / "out").exists()


def test_create_example_missing_source_writes_nothing(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    (project_builder.root / "contracts" / "X.sol").unlink()

    with pytest.raises(SourceFileMissingError):
        _generator(project_builder).create_example("demo", tmp_path / "out")

    assert not (tmp_path / "out").exists()


def test_create_example_without_declaration_fails_before_copy(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    project_builder.write({"contracts/X.sol": "// contract Widget is commented out\n"})

    with pytest.raises(NoDeclarationFoundError):
        _generator(project_builder).create_example("demo", tmp_path / "out")

    assert not (tmp_path / "out").exists()


def test_create_category_lists_members_in_declared_order(
    project_builder: ProjectBuilder, tmp_path: Path
) -> None:
    (project_builder.root / "output" / "stale").mkdir(parents=True)
    (project_builder.root / "build").mkdir()
    dest = tmp_path / "pair"

    project = _generator(project_builder).create_category("pair", dest)

    assert project.contract_names == ("Widget", "Gadget")
    readme = (dest / "README.md").read_text(encoding="utf-8")
    assert "This project contains 2 example contracts:" in readme
    assert "1. **X** - The widget" in readme
    assert "2. **Gadget** - The gadget" in readme
    assert "3. **" not in readme
    assert not (dest / "output").exists()
    assert not (dest / "build").exists()

    package = json.loads((dest / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "fhevm-examples-pair"
    assert package["dependencies"] == {"ethers": "^6.9.0", "fhevm": "^0.5.0"}


def test_create_category_unknown_key(project_builder: ProjectBuilder, tmp_path: Path) -> None:
    with pytest.raises(UnknownKeyError, match="pair"):
        _generator(project_builder).create_category("demo", tmp_path / "out")
