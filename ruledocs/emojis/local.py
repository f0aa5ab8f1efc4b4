"""Deterministic, offline emoji suggestions for config names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional

from ..logging import get_logger
from .catalog import EMOJI_CONFIGS, FALLBACK_EMOJIS, KEYWORD_EMOJIS, RESERVED_EMOJI_SET
from .lookup import normalize_emoji_candidate, search_emojis
from .tokenizer import tokenize_config_name

logger = get_logger("emojis.local")


@dataclass(frozen=True)
class LocalSuggestion:
    """An emoji picked by the local engine and the cascade step that produced it."""

    emoji: str
    source: str  # "keyword", "search" or "fallback"


def can_use_emoji(candidate: str, used: AbstractSet[str]) -> bool:
    return candidate not in RESERVED_EMOJI_SET and candidate not in used


def _try_use(candidate: Optional[str], used: AbstractSet[str]) -> Optional[str]:
    if candidate and can_use_emoji(candidate, used):
        return candidate
    return None


def _search_terms(config_name_lower: str, tokens: List[str]) -> Iterable[str]:
    for term in (config_name_lower, *tokens):
        # Single characters and bare numbers only ever hit keycaps and letters.
        if len(term) < 2 or term.isdigit():
            continue
        yield term


def suggest_emoji_locally(config_name: str, used: AbstractSet[str]) -> LocalSuggestion:
    """Pick an emoji for the config, most specific match first.

    The cascade is: exact config-name default, per-token keyword, fuzzy
    dictionary search (full name, then each token), then the fallback palette.
    Reserved and already-used emojis are skipped at every step. Once the
    palette is exhausted its first entry is reused, so the call always returns.
    """
    config_name_lower = config_name.lower()
    tokens = tokenize_config_name(config_name)

    exact_default = _try_use(EMOJI_CONFIGS.get(config_name_lower), used)
    if exact_default:
        return LocalSuggestion(exact_default, "keyword")

    for token in tokens:
        keyword_emoji = _try_use(KEYWORD_EMOJIS.get(token), used)
        if keyword_emoji:
            return LocalSuggestion(keyword_emoji, "keyword")

    for term in _search_terms(config_name_lower, tokens):
        for match in search_emojis(term):
            found = _try_use(normalize_emoji_candidate(match), used)
            if found:
                return LocalSuggestion(found, "search")

    for fallback in FALLBACK_EMOJIS:
        if can_use_emoji(fallback, used):
            return LocalSuggestion(fallback, "fallback")
    logger.debug("Fallback palette exhausted; reusing %s for %s", FALLBACK_EMOJIS[0], config_name)
    return LocalSuggestion(FALLBACK_EMOJIS[0], "fallback")


__all__ = ["LocalSuggestion", "can_use_emoji", "suggest_emoji_locally"]
