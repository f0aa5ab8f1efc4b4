"""Tests for markdown linting and model output sanitizing."""

from __future__ import annotations

from ruledocs.postproc.lint import MarkdownLinter
from ruledocs.postproc.markers import BEGIN_RULE_OPTIONS_LIST_MARKER, END_RULE_OPTIONS_LIST_MARKER


def test_lint_normalises_whitespace_outside_code() -> None:
    markdown = "Intro.   \n\n\n\n## Examples\n```js\nfoo();  \n\n\nbar();\n```\nDone.\n\n\n"

    result = MarkdownLinter().lint(markdown)

    assert result == "Intro.\n\n## Examples\n```js\nfoo();\n\n\nbar();\n```\nDone.\n"


def test_lint_separates_headings_and_honours_end_of_line() -> None:
    result = MarkdownLinter().lint("Intro.\n## Options\r\nText", "\r\n")

    assert result == "Intro.\r\n\r\n## Options\r\nText\r\n"


def test_sanitize_unwraps_fence_and_drops_title() -> None:
    content = "```markdown\n# No foo\n\nIntro.\n\n\n## Examples\n```"

    assert MarkdownLinter().sanitize_ai_response(content) == "Intro.\n\n## Examples"


def test_sanitize_strips_echoed_option_markers() -> None:
    content = f"Intro.\n\n{BEGIN_RULE_OPTIONS_LIST_MARKER}\n{END_RULE_OPTIONS_LIST_MARKER}\n\n## Options"

    result = MarkdownLinter().sanitize_ai_response(content)

    assert result == "Intro.\n\n## Options"


def test_sanitize_keeps_inner_code_blocks() -> None:
    content = "Intro.\n\n```js\n/* eslint demo/no-foo: \"error\" */\nfoo();\n```"

    assert MarkdownLinter().sanitize_ai_response(content) == content


def test_sanitize_returns_none_for_empty_output() -> None:
    linter = MarkdownLinter()

    assert linter.sanitize_ai_response("   \n") is None
    assert linter.sanitize_ai_response("# Only a title") is None
    assert linter.sanitize_ai_response(f"{BEGIN_RULE_OPTIONS_LIST_MARKER}{END_RULE_OPTIONS_LIST_MARKER}") is None
