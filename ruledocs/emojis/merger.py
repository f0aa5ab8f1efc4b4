"""Folds model-proposed emojis into locally generated assignments."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..logging import get_logger
from .catalog import RESERVED_EMOJI_SET, RESERVED_EMOJIS
from .lookup import normalize_emoji_candidate

logger = get_logger("emojis.merger")

EMOJI_SYSTEM_PROMPT = (
    "Return a JSON object mapping each config name to exactly one emoji character. No markdown."
)


def build_emoji_prompts(config_names: Iterable[str]) -> Tuple[str, str]:
    """Return the (system, user) prompts asking a model for one emoji per config."""
    user_prompt = json.dumps(
        {"configs": list(config_names), "forbiddenEmojis": list(RESERVED_EMOJIS)},
        ensure_ascii=False,
    )
    return EMOJI_SYSTEM_PROMPT, user_prompt


def apply_ai_suggestions(
    config_names: Iterable[str],
    suggestions: Mapping[str, Any],
    emoji_by_config: Dict[str, str],
) -> int:
    """Apply accepted suggestions to `emoji_by_config` in place and return how many were taken.

    Only names in `config_names` that already have an assignment can change.
    Suggestions are applied in the mapping's order; when two names ask for the
    same emoji the first one keeps it. Invalid entries are skipped, never raised.
    """
    name_lookup = {name.lower(): name for name in config_names}
    used = set(emoji_by_config.values())
    accepted = 0

    for name_from_model, suggestion in suggestions.items():
        config_name = name_lookup.get(str(name_from_model).lower())
        if config_name is None:
            logger.debug("Ignoring suggestion for unknown config %r", name_from_model)
            continue
        if not isinstance(suggestion, str):
            logger.debug("Ignoring non-string suggestion for %s", config_name)
            continue

        candidate = normalize_emoji_candidate(suggestion)
        if candidate is None:
            logger.debug("Ignoring unrecognised suggestion %r for %s", suggestion, config_name)
            continue
        if candidate in RESERVED_EMOJI_SET:
            logger.debug("Ignoring reserved emoji %s for %s", candidate, config_name)
            continue

        current = emoji_by_config.get(config_name)
        if current is None or current == candidate:
            continue
        if candidate in used:
            logger.debug("Ignoring %s for %s: already assigned", candidate, config_name)
            continue

        used.discard(current)
        used.add(candidate)
        emoji_by_config[config_name] = candidate
        accepted += 1

    return accepted


__all__ = ["EMOJI_SYSTEM_PROMPT", "apply_ai_suggestions", "build_emoji_prompts"]
