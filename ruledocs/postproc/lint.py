"""Linting utilities for model-written markdown."""

from __future__ import annotations

import re
from typing import List, Optional

from .markers import RuleDocMarkers

_WRAPPING_FENCE_START = re.compile(r"^```(?:markdown|md)?[ \t]*\r?\n", re.IGNORECASE)
_WRAPPING_FENCE_END = re.compile(r"(?:^|\r?\n)```$")
_TITLE = re.compile(r"^#\s+")


class MarkdownLinter:
    """Normalises whitespace and strips content the doc generator owns."""

    def lint(self, markdown: str, end_of_line: str = "\n") -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        lines = normalized.split("\n")
        cleaned: List[str] = []
        in_code = False
        previous_blank = False

        for line in lines:
            stripped = line.rstrip()
            if stripped.lstrip().startswith("```"):
                in_code = not in_code
                cleaned.append(stripped)
                previous_blank = False
                continue

            if not in_code:
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

        return end_of_line.join(cleaned) + end_of_line

    def sanitize_ai_response(self, content: str, end_of_line: str = "\n") -> Optional[str]:
        """Return a clean doc body from model output, or None when nothing usable is left.

        Removes a fence wrapping the whole response, a leading `# title`, and
        any options list markers the model echoed back.
        """
        result = content.strip()
        if not result:
            return None

        if _WRAPPING_FENCE_START.match(result) and result.endswith("```"):
            result = _WRAPPING_FENCE_START.sub("", result, count=1)
            result = _WRAPPING_FENCE_END.sub("", result).strip()

        lines = result.splitlines()
        if lines and _TITLE.match(lines[0]):
            result = "\n".join(lines[1:]).lstrip()

        result = RuleDocMarkers.strip_markers(result).strip()
        if not result:
            return None
        return self.lint(result, end_of_line).rstrip(end_of_line) or None


__all__ = ["MarkdownLinter"]
