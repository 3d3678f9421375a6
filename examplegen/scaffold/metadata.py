"""Package metadata rewriting and README synthesis for generated projects."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from ..errors import ConfigError, MetadataNotFoundError
from ..models import CategoryEntry, Concept
from ..postproc.lint import MarkdownLinter
from ..rendering import render

PACKAGE_METADATA_FILE = "package.json"

FHEVM_CONCEPTS: tuple[Concept, ...] = (
    Concept("Encrypted Storage", "Storing sensitive data on-chain in encrypted form"),
    Concept("Input Proofs", "Proving plaintext values match encrypted ciphertext"),
    Concept("Access Control", "Controlling who can decrypt specific encrypted data"),
    Concept("Homomorphic Operations", "Performing computations on encrypted data"),
    Concept("Selective Decryption", "Decrypting results only to authorized parties"),
)

_linter = MarkdownLinter()


def rewrite_package_metadata(
    dest_root: Path | str,
    name: str,
    description: str,
    homepage: str,
    extra_dependencies: Optional[Mapping[str, str]] = None,
) -> Dict[str, object]:
    """Patch ``name``, ``description`` and ``homepage`` in the project's package.json.

    Every other field is left as found. ``extra_dependencies`` are merged into
    ``dependencies``, overriding versions already present. Returns the written
    document.
    """
    path = Path(dest_root) / PACKAGE_METADATA_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise MetadataNotFoundError(path) from None
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    document["name"] = name
    document["description"] = description
    document["homepage"] = homepage
    if extra_dependencies:
        dependencies = document.get("dependencies")
        merged = dict(dependencies) if isinstance(dependencies, dict) else {}
        merged.update(extra_dependencies)
        document["dependencies"] = merged

    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return document


def generate_readme(example_name: str, description: str, contract_name: str) -> str:
    """Return the README for a single-example project."""
    if not example_name or not example_name.strip():
        raise ValueError("example_name must be a non-empty string")
    markdown = render(
        "readme.md.j2",
        example_name=example_name,
        description=description,
        contract_name=contract_name,
        concepts=FHEVM_CONCEPTS,
    )
    return _linter.lint(markdown)


def generate_category_readme(category: CategoryEntry, contract_names: Sequence[str] | None = None) -> str:
    """Return the README for a multi-example category project.

    ``contract_names`` overrides the names derived from each member's contract
    file stem, one per member in declared order.
    """
    names = list(contract_names) if contract_names is not None else [
        member.contract_stem for member in category.members
    ]
    if len(names) != len(category.members):
        raise ValueError("contract_names must provide one name per category member")
    members = [
        {"name": name, "description": member.description, "test": member.test}
        for name, member in zip(names, category.members)
    ]
    markdown = render(
        "category_readme.md.j2",
        category=category,
        members=members,
        concepts=FHEVM_CONCEPTS,
    )
    return _linter.lint(markdown)


def package_name_for(key: str, *, category: bool = False) -> str:
    prefix = "fhevm-examples" if category else "fhevm-example"
    return f"{prefix}-{key}"


def homepage_for(base: str, key: str) -> str:
    return f"{base.rstrip('/')}/{key}"


__all__ = [
    "FHEVM_CONCEPTS",
    "PACKAGE_METADATA_FILE",
    "generate_category_readme",
    "generate_readme",
    "homepage_for",
    "package_name_for",
    "rewrite_package_metadata",
]
