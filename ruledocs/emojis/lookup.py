"""Emoji dictionary access backed by the `emoji` package.

Names and aliases from ``emoji.EMOJI_DATA`` are indexed once (fully-qualified
glyphs only) so that lookups and keyword searches are deterministic for a given
``emoji`` release.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import emoji
import regex

_ALIAS_PATTERN = re.compile(r"^:([a-zA-Z0-9_+-]+):$")
_ALNUM_PATTERN = re.compile(r"[a-zA-Z0-9]")
_QUOTE_CHARS = "\"'`"
_PICTOGRAPH_PATTERN = regex.compile(r"[\p{Extended_Pictographic}\p{Emoji_Presentation}]")


@lru_cache(maxsize=1)
def _name_index() -> Dict[str, str]:
    fully_qualified = emoji.STATUS["fully_qualified"]
    index: Dict[str, str] = {}
    for glyph, data in emoji.EMOJI_DATA.items():
        if data.get("status") != fully_qualified:
            continue
        for name in _names_for(data):
            index.setdefault(name, glyph)
    return index


def _names_for(data: Dict[str, object]) -> Iterable[str]:
    english = data.get("en")
    if isinstance(english, str):
        yield _strip_colons(english).lower()
    aliases = data.get("alias")
    if isinstance(aliases, list):
        for alias in aliases:
            if isinstance(alias, str):
                yield _strip_colons(alias).lower()


def _strip_colons(name: str) -> str:
    return name.strip().strip(":")


def get_emoji(name: str) -> Optional[str]:
    """Resolve an emoji name or alias (`tada`, `:tada:`) or a literal emoji to its glyph."""
    candidate = name.strip()
    if not candidate:
        return None
    if candidate in emoji.EMOJI_DATA:
        return candidate
    return _name_index().get(_strip_colons(candidate).lower())


def _match_rank(name: str, needle: str) -> Optional[int]:
    if name == needle:
        return 0
    if name.startswith(needle):
        return 1
    if needle in name.split("_"):
        return 2
    if needle in name:
        return 3
    return None


@lru_cache(maxsize=512)
def _search(needle: str) -> Tuple[str, ...]:
    ranked: List[Tuple[int, str, str]] = []
    for name, glyph in _name_index().items():
        rank = _match_rank(name, needle)
        if rank is not None:
            ranked.append((rank, name, glyph))
    ranked.sort(key=lambda item: (item[0], item[1]))

    seen: set[str] = set()
    results: List[str] = []
    for _, _, glyph in ranked:
        if glyph in seen:
            continue
        seen.add(glyph)
        results.append(glyph)
    return tuple(results)


def search_emojis(term: str) -> List[str]:
    """Return glyphs whose names match the keyword, best matches first."""
    needle = term.strip().lower()
    if not needle:
        return []
    return list(_search(needle))


def contains_pictograph(text: str) -> bool:
    """Return True when the text holds a pictographic code point.

    Uses the Unicode ``Extended_Pictographic`` and ``Emoji_Presentation``
    properties, so glyphs missing from the emoji dictionary still count.
    """
    return _PICTOGRAPH_PATTERN.search(text) is not None


def normalize_emoji_candidate(candidate: str) -> Optional[str]:
    """Turn free-form model output into a single emoji, or None when nothing usable is found."""
    trimmed = candidate.strip().strip(_QUOTE_CHARS)
    if not trimmed:
        return None

    alias_match = _ALIAS_PATTERN.match(trimmed)
    if alias_match:
        from_alias = get_emoji(alias_match.group(1))
        if from_alias:
            return from_alias

    from_name = get_emoji(trimmed)
    if from_name:
        return from_name

    for part in trimmed.split():
        if contains_pictograph(part):
            return part

    # Raw symbols outside the dictionary (for example a bare "⚠") are taken as-is.
    if not _ALNUM_PATTERN.search(trimmed):
        return trimmed

    return None


__all__ = [
    "contains_pictograph",
    "get_emoji",
    "normalize_emoji_candidate",
    "search_emojis",
]
