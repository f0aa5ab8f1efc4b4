"""Renders config emoji assignments for the terminal."""

from __future__ import annotations

from typing import Mapping, Sequence


def _escape_single_quoted(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def format_config_emoji_tuples(
    config_names: Sequence[str], emoji_by_config: Mapping[str, str]
) -> str:
    """Return a `configEmoji` option value ready to paste into the generator config."""
    lines = ["configEmoji: ["]
    for name in config_names:
        emoji = emoji_by_config.get(name)
        if not emoji:
            continue
        lines.append(f"  ['{_escape_single_quoted(name)}', '{_escape_single_quoted(emoji)}'],")
    lines.append("],")
    return "\n".join(lines)


def format_suggestion_table(
    config_names: Sequence[str], emoji_by_config: Mapping[str, str]
) -> str:
    """Return a two-column Markdown table of config names and emojis."""
    rows = [(name.replace("|", "\\|"), emoji_by_config.get(name, "")) for name in config_names]
    name_width = max([len("Config"), *(len(name) for name, _ in rows)])
    lines = [
        f"| {'Config'.ljust(name_width)} | Emoji |",
        f"| {'-' * name_width} | ----- |",
    ]
    for name, emoji in rows:
        lines.append(f"| {name.ljust(name_width)} | {emoji} |")
    return "\n".join(lines)


__all__ = ["format_config_emoji_tuples", "format_suggestion_table"]
