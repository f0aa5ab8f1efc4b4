"""Assigns one emoji per config name while keeping assignments unique."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..config import ConfigError
from ..logging import get_logger
from ..models import ConfigEmoji, EmojiSuggestions
from .local import suggest_emoji_locally

logger = get_logger("emojis.allocator")


def sort_case_insensitive(values: Iterable[str]) -> List[str]:
    return sorted(values, key=lambda value: (value.lower(), value))


def allocate_emojis(
    config_names: Iterable[str],
    config_emoji: Sequence[ConfigEmoji] = (),
) -> EmojiSuggestions:
    """Seed pinned emojis, then generate the rest in case-insensitive name order.

    Names whose `config_emoji` entry carries no emoji are generated like any
    other name. The names generated here are recorded on the result; they are
    the only names a later AI pass may change.
    """
    names = sort_case_insensitive(set(config_names))
    if not names:
        raise ConfigError(
            "Could not find exported `configs` object in ESLint plugin to suggest emojis for."
        )

    pinned = {entry.config: entry.emoji for entry in config_emoji if entry.emoji}
    emoji_by_config: Dict[str, str] = {}
    for name in names:
        if name in pinned:
            emoji_by_config[name] = pinned[name]

    used = set(emoji_by_config.values())
    generated: List[str] = []
    for name in names:
        if name in emoji_by_config:
            continue
        suggestion = suggest_emoji_locally(name, used)
        logger.debug("Suggested %s for %s (%s)", suggestion.emoji, name, suggestion.source)
        emoji_by_config[name] = suggestion.emoji
        used.add(suggestion.emoji)
        generated.append(name)

    return EmojiSuggestions(
        config_names=names,
        emoji_by_config=emoji_by_config,
        generated_config_names=generated,
    )


__all__ = ["allocate_emojis", "sort_case_insensitive"]
