"""Standalone project generation for single examples and categories."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..catalog import Catalog
from ..config import ExampleGenConfig
from ..docs.extractor import extract_contract_name, read_source
from ..errors import DestinationExistsError
from ..logging import get_logger
from ..models import CONTRACT_ROLE, GeneratedProject, SourceFile
from .copier import copy_tree
from .metadata import (
    generate_category_readme,
    generate_readme,
    homepage_for,
    package_name_for,
    rewrite_package_metadata,
)

README_FILE = "README.md"


class ProjectGenerator:
    """Copies the project root into standalone example repositories."""

    def __init__(self, catalog: Catalog, config: ExampleGenConfig) -> None:
        self.catalog = catalog
        self.config = config
        self.logger = get_logger("scaffold")

    @property
    def root(self) -> Path:
        return self.config.root

    def default_output_dir(self, key: str, *, category: bool = False) -> Path:
        return self.config.output_root / package_name_for(key, category=category)

    def create_example(self, key: str, output_dir: Path | str | None = None) -> GeneratedProject:
        """Generate a standalone repository for the example registered under ``key``."""
        entry = self.catalog.resolve(key)
        destination = self._destination(output_dir, key, category=False)
        self.logger.info("Creating FHEVM example: %s", key)
        self.logger.info("Output directory: %s", destination)

        self.catalog.verify_sources(entry.source_files, self.root)
        contract_name = self._contract_name(entry.contract)
        self.logger.info("Contract verified: %s", contract_name)

        files_copied = self._copy(destination, self.config.exclude_dirs)

        package_name = package_name_for(key)
        metadata = rewrite_package_metadata(
            destination,
            package_name,
            entry.description,
            homepage_for(self.config.homepage_base, key),
        )
        self.logger.info("Configuration updated (%s)", package_name)

        readme = generate_readme(key, entry.description, contract_name)
        (destination / README_FILE).write_text(readme, encoding="utf-8")
        self.logger.info("README.md generated")

        return GeneratedProject(
            key=key,
            root=destination,
            package_name=package_name,
            contract_names=(contract_name,),
            files_copied=files_copied,
            metadata=metadata,
        )

    def create_category(self, key: str, output_dir: Path | str | None = None) -> GeneratedProject:
        """Generate one repository bundling every member of category ``key``."""
        category = self.catalog.resolve_category(key)
        destination = self._destination(output_dir, key, category=True)
        self.logger.info("Creating FHEVM project: %s", category.name)
        self.logger.info("Output directory: %s", destination)

        self.catalog.verify_sources(category.source_files, self.root)
        contract_names: List[str] = []
        for member in category.members:
            name = self._contract_name(SourceFile(CONTRACT_ROLE, member.contract))
            self.logger.debug("Contract verified: %s", name)
            contract_names.append(name)

        files_copied = self._copy(destination, self.config.category_exclude_dirs)

        package_name = package_name_for(key, category=True)
        metadata = rewrite_package_metadata(
            destination,
            package_name,
            category.description,
            homepage_for(self.config.homepage_base, key),
            extra_dependencies=dict(category.additional_dependencies),
        )
        self.logger.info("package.json updated (%s)", package_name)

        readme = generate_category_readme(category)
        (destination / README_FILE).write_text(readme, encoding="utf-8")
        self.logger.info("README.md generated with %d contracts", len(category.members))

        return GeneratedProject(
            key=key,
            root=destination,
            package_name=package_name,
            contract_names=tuple(contract_names),
            files_copied=files_copied,
            metadata=metadata,
        )

    def _destination(self, output_dir: Path | str | None, key: str, *, category: bool) -> Path:
        if output_dir is None:
            destination = self.default_output_dir(key, category=category)
        else:
            destination = Path(output_dir).expanduser()
            if not destination.is_absolute():
                destination = Path.cwd() / destination
        destination = destination.resolve()
        if destination.exists():
            raise DestinationExistsError(destination)
        return destination

    def _contract_name(self, source: SourceFile) -> str:
        text = read_source(source, self.root).text
        return extract_contract_name(text, source=source.path)

    def _copy(self, destination: Path, excluded: List[str]) -> int:
        self.logger.info("Copying project structure...")
        count = copy_tree(self.root, destination, excluded)
        self.logger.info("Project structure copied (%d files)", count)
        return count


__all__ = ["ProjectGenerator", "README_FILE"]
