"""Shared constants for rule documentation prompting."""

from __future__ import annotations

RULE_DOC_SYSTEM_PROMPT_LINES: tuple[str, ...] = (
    "You are an expert ESLint rule documentation writer.",
    "Generate clear, concise Markdown documentation for ESLint rules.",
    "",
    "Guidelines:",
    "- Write in a clear, direct, technical style.",
    "- Include examples of both incorrect and correct code using fenced ```js code blocks.",
    '- Incorrect examples should begin with a /* eslint rule-name: "error" */ comment.',
    "- Do NOT include a top-level heading (# ...). The title is auto-generated.",
    "- Do NOT include notice/badge lines. Those are auto-generated.",
    "- Do NOT output an auto-generated options table between markers.",
    "- Use ## for section headings.",
    "- Standard sections (in order): a brief introductory paragraph, ## Examples, "
    "## Options (only if the rule has options), ## When Not To Use It.",
    "- Inside ## Examples, use ### Incorrect and ### Correct sub-sections.",
    "- If the rule has options, the ## Options section should give a narrative explanation "
    "of each option with examples. An auto-generated table will be inserted separately.",
    "- Output only the Markdown body. No surrounding code fences.",
)

RULE_DOC_SYSTEM_PROMPT = "\n".join(RULE_DOC_SYSTEM_PROMPT_LINES)

# Severity order used when summarising which configs enable a rule.
SEVERITY_ORDER: tuple[str, ...] = ("error", "warn", "off")

MAX_SOURCE_LENGTH = 8000
MIN_SOURCE_LENGTH = 30


__all__ = [
    "MAX_SOURCE_LENGTH",
    "MIN_SOURCE_LENGTH",
    "RULE_DOC_SYSTEM_PROMPT",
    "SEVERITY_ORDER",
]
