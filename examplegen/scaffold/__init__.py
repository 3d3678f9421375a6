"""Standalone repository scaffolding."""

from .copier import copy_tree
from .metadata import generate_category_readme, generate_readme, rewrite_package_metadata
from .project import ProjectGenerator

__all__ = [
    "ProjectGenerator",
    "copy_tree",
    "generate_category_readme",
    "generate_readme",
    "rewrite_package_metadata",
]
