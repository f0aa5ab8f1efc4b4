"""Static emoji tables used for config badges."""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# Badges the generated docs already use for rule attributes.
EMOJI_CONFIG_ERROR = "💼"
EMOJI_CONFIG_WARN = "⚠️"
EMOJI_CONFIG_OFF = "🚫"
EMOJI_FIXABLE = "🔧"
EMOJI_HAS_SUGGESTIONS = "💡"
EMOJI_REQUIRES_TYPE_CHECKING = "💭"
EMOJI_DEPRECATED = "❌"
EMOJI_OPTIONS = "⚙️"
EMOJI_TYPE_SUGGESTION = "📖"
EMOJI_TYPE_LAYOUT = "📏"

RESERVED_EMOJIS: Tuple[str, ...] = (
    EMOJI_CONFIG_ERROR,
    EMOJI_CONFIG_WARN,
    EMOJI_CONFIG_OFF,
    EMOJI_FIXABLE,
    EMOJI_HAS_SUGGESTIONS,
    EMOJI_REQUIRES_TYPE_CHECKING,
    EMOJI_DEPRECATED,
    EMOJI_OPTIONS,
    EMOJI_TYPE_SUGGESTION,
    EMOJI_TYPE_LAYOUT,
)
RESERVED_EMOJI_SET: FrozenSet[str] = frozenset(RESERVED_EMOJIS)

EMOJI_A11Y = "♿"
EMOJI_ERROR = "❗"
EMOJI_STYLE = "🎨"
EMOJI_TYPESCRIPT = "⌨️"
EMOJI_WARNING = "🚸"

# Well-known config names with a conventional badge.
EMOJI_CONFIGS: Dict[str, str] = {
    "a11y": EMOJI_A11Y,
    "accessibility": EMOJI_A11Y,
    "all": "🌐",
    "error": EMOJI_ERROR,
    "errors": EMOJI_ERROR,
    "recommended": "✅",
    "strict": "🔒",
    "style": EMOJI_STYLE,
    "stylistic": EMOJI_STYLE,
    "typescript": EMOJI_TYPESCRIPT,
    "warning": EMOJI_WARNING,
    "warnings": EMOJI_WARNING,
}

KEYWORD_EMOJIS: Dict[str, str] = {
    "base": "🧱",
    "browser": "🌐",
    "documentation": "📚",
    "docs": "📚",
    "electron": "⚛️",
    "error": EMOJI_ERROR,
    "errors": EMOJI_ERROR,
    "node": "🟢",
    "performance": "⚡",
    "react": "⚛️",
    "strict": "🔒",
    "style": EMOJI_STYLE,
    "test": "🧪",
    "testing": "🧪",
    "typescript": EMOJI_TYPESCRIPT,
    "warning": EMOJI_WARNING,
    "warnings": EMOJI_WARNING,
}

FALLBACK_EMOJIS: Tuple[str, ...] = (
    "🔴",
    "🟠",
    "🟡",
    "🟢",
    "🔵",
    "🟣",
    "🟤",
    "⚫",
    "⚪",
    "🟥",
    "🟧",
    "🟨",
    "🟩",
    "🟦",
    "🟪",
    "🟫",
    "⬛",
    "⬜",
)

__all__ = [
    "EMOJI_CONFIGS",
    "FALLBACK_EMOJIS",
    "KEYWORD_EMOJIS",
    "RESERVED_EMOJIS",
    "RESERVED_EMOJI_SET",
]
