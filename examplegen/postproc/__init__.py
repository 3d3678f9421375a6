"""Post-processing helpers for generated markdown."""

from .lint import MarkdownLinter

__all__ = ["MarkdownLinter"]
