"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

import re
from typing import List

_FENCE = re.compile(r"^(`{3,}|~{3,})")


class MarkdownLinter:
    """Normalises line endings, trailing spaces and blank-line runs.

    Lines inside fenced code blocks are emitted verbatim so embedded source
    files survive byte-for-byte (apart from line endings). A fence closes only
    on a line holding a run of the same character at least as long as the
    opening one.
    """

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        lines = normalized.split("\n")
        cleaned: List[str] = []
        fence: str | None = None
        previous_blank = False

        for line in lines:
            stripped = line.rstrip()
            marker = stripped.lstrip()
            if fence is None:
                opening = _FENCE.match(marker)
                if opening:
                    fence = opening.group(1)
                    cleaned.append(stripped)
                    previous_blank = False
                    continue
            else:
                if self._closes(marker, fence):
                    fence = None
                    cleaned.append(stripped)
                else:
                    cleaned.append(line)
                previous_blank = False
                continue

            if stripped.startswith("#") and cleaned and cleaned[-1] != "":
                cleaned.append("")
            if not stripped:
                if previous_blank:
                    continue
                previous_blank = True
                cleaned.append("")
                continue

            cleaned.append(stripped)
            previous_blank = False

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"

    @staticmethod
    def _closes(marker: str, fence: str) -> bool:
        run = len(marker) - len(marker.lstrip(fence[0]))
        return run >= len(fence) and not marker[run:].strip()


__all__ = ["MarkdownLinter"]
