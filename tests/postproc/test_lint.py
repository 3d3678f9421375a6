"""Tests for markdown post-processing."""

from __future__ import annotations

from examplegen.postproc.lint import MarkdownLinter


def test_markdown_linter_normalises_whitespace() -> None:
    markdown = "# Title\r\n\r\nText\r\n\r\n\r\n## Section\r\nContent  \r\n"
    linted = MarkdownLinter().lint(markdown)
    assert linted.endswith("\n")
    assert "\r" not in linted
    assert "  \n" not in linted
    assert "\n\n\n" not in linted
    assert "Text\n\n## Section" in linted


def test_markdown_linter_leaves_fenced_code_untouched() -> None:
    markdown = "Intro\n\n```solidity\ncontract A {  \n\n\n    # not a heading\n}\n```\n\nOutro   \n"
    linted = MarkdownLinter().lint(markdown)
    assert "contract A {  \n\n\n    # not a heading\n}" in linted
    assert linted.endswith("Outro\n")


def test_markdown_linter_handles_indented_fences() -> None:
    markdown = "1. Step\n\n   ```bash\n   # Terminal 1\n   npx hardhat node\n   ```\n"
    linted = MarkdownLinter().lint(markdown)
    assert "   ```bash\n   # Terminal 1\n" in linted


def test_markdown_linter_keeps_shorter_fence_inside_longer_one() -> None:
    markdown = "````javascript\nconst t = `\n```solidity\n\n\ncontract Inner {}  \n```\n`;\n````\n\n\n\nAfter   \n"
    linted = MarkdownLinter().lint(markdown)
    assert "```solidity\n\n\ncontract Inner {}  \n```\n`;\n````\n" in linted
    assert linted.endswith("````\n\nAfter\n")
