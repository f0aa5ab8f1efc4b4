"""Config emoji suggestion engine."""

from .allocator import allocate_emojis, sort_case_insensitive
from .catalog import EMOJI_CONFIGS, FALLBACK_EMOJIS, KEYWORD_EMOJIS, RESERVED_EMOJI_SET, RESERVED_EMOJIS
from .local import LocalSuggestion, suggest_emoji_locally
from .lookup import normalize_emoji_candidate
from .merger import apply_ai_suggestions, build_emoji_prompts
from .tokenizer import tokenize_config_name

__all__ = [
    "EMOJI_CONFIGS",
    "FALLBACK_EMOJIS",
    "KEYWORD_EMOJIS",
    "LocalSuggestion",
    "RESERVED_EMOJIS",
    "RESERVED_EMOJI_SET",
    "allocate_emojis",
    "apply_ai_suggestions",
    "build_emoji_prompts",
    "normalize_emoji_candidate",
    "sort_case_insensitive",
    "suggest_emoji_locally",
    "tokenize_config_name",
]
