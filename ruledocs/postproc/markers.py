"""Managed marker utilities for rule documentation files."""

from __future__ import annotations

import re
from typing import Optional

END_RULE_HEADER_MARKER = "<!-- end auto-generated rule header -->"
BEGIN_RULE_OPTIONS_LIST_MARKER = "<!-- begin auto-generated rule options list -->"
END_RULE_OPTIONS_LIST_MARKER = "<!-- end auto-generated rule options list -->"

_OPTIONS_HEADING = re.compile(r"^##[ \t]+Options[ \t]*(?=\r?$)", re.MULTILINE)


class RuleDocMarkers:
    """Splits rule docs around the generated header and options list blocks."""

    def extract_body(self, doc: str) -> str:
        """Return everything after the header marker, or the whole doc when it has none."""
        index = doc.find(END_RULE_HEADER_MARKER)
        if index == -1:
            return doc
        return doc[index + len(END_RULE_HEADER_MARKER) :]

    def replace_body(self, doc: str, new_body: str, end_of_line: str = "\n") -> str:
        """Keep the generated header and swap in a new body."""
        index = doc.find(END_RULE_HEADER_MARKER)
        if index == -1:
            return f"{new_body}{end_of_line}"
        header = doc[: index + len(END_RULE_HEADER_MARKER)]
        return f"{header}{end_of_line}{end_of_line}{new_body}{end_of_line}"

    def extract_options_list(self, body: str) -> Optional[str]:
        """Return the options list block including its markers, if present."""
        span = self._options_span(body)
        if span is None:
            return None
        begin, end = span
        return body[begin:end]

    def strip_options_list(self, body: str) -> str:
        span = self._options_span(body)
        if span is None:
            return body
        begin, end = span
        return body[:begin] + body[end:]

    def reinsert_options_list(self, body: str, options_list: str, end_of_line: str = "\n") -> str:
        """Place the options block under `## Options`, adding the heading when missing."""
        match = _OPTIONS_HEADING.search(body)
        if match:
            insert_at = match.end()
            return f"{body[:insert_at]}{end_of_line}{end_of_line}{options_list}{body[insert_at:]}"
        return f"{body}{end_of_line}{end_of_line}## Options{end_of_line}{end_of_line}{options_list}"

    @staticmethod
    def strip_markers(markdown: str) -> str:
        return markdown.replace(BEGIN_RULE_OPTIONS_LIST_MARKER, "").replace(
            END_RULE_OPTIONS_LIST_MARKER, ""
        )

    @staticmethod
    def _options_span(body: str) -> Optional[tuple[int, int]]:
        begin = body.find(BEGIN_RULE_OPTIONS_LIST_MARKER)
        end = body.find(END_RULE_OPTIONS_LIST_MARKER)
        if begin == -1 or end == -1 or end < begin:
            return None
        return begin, end + len(END_RULE_OPTIONS_LIST_MARKER)


__all__ = [
    "BEGIN_RULE_OPTIONS_LIST_MARKER",
    "END_RULE_HEADER_MARKER",
    "END_RULE_OPTIONS_LIST_MARKER",
    "RuleDocMarkers",
]
