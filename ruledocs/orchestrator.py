"""Pipeline orchestration for emoji suggestion and rule-doc enhancement flows."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Optional, Sequence

from .emojis.allocator import allocate_emojis
from .emojis.merger import apply_ai_suggestions, build_emoji_prompts
from .llm.providers import ProviderConfig, resolve_provider_config
from .llm.transport import (
    DEFAULT_TIMEOUT,
    LLMRequestError,
    MalformedResponseError,
    request_ai_json_object,
)
from .logging import get_logger
from .models import ConfigEmoji, EmojiSuggestions, RuleInfo
from .postproc.emoji_output import format_config_emoji_tuples, format_suggestion_table
from .rule_docs import RuleDocEnhancer

logger = get_logger("orchestrator")

ProviderResolver = Callable[[Optional[str], Optional[str]], ProviderConfig]
JsonRequester = Callable[..., Dict[str, Any]]


class Orchestrator:
    """Coordinates seed, generate, AI request, merge and emit for each command."""

    def __init__(
        self,
        *,
        provider_resolver: ProviderResolver | None = None,
        json_requester: JsonRequester | None = None,
        rule_doc_enhancer: RuleDocEnhancer | None = None,
        request_timeout: float | None = None,
    ) -> None:
        self._resolve_provider = provider_resolver or resolve_provider_config
        self._request_json = json_requester or request_ai_json_object
        self.rule_doc_enhancer = rule_doc_enhancer or RuleDocEnhancer()
        self.request_timeout = request_timeout or DEFAULT_TIMEOUT

    def suggest_config_emojis(
        self,
        config_names: Iterable[str],
        config_emoji: Sequence[ConfigEmoji] = (),
        *,
        ai: bool = False,
        ai_provider: str | None = None,
        ai_model: str | None = None,
        strict: bool = True,
    ) -> EmojiSuggestions:
        """Assign an emoji to every config, optionally refined by a hosted model.

        Only generated names are offered to the model; pinned emojis never
        change. Configuration errors always propagate. Request errors propagate
        when `strict` is set and otherwise become warnings. A reply that is not
        a JSON object always becomes a warning, leaving local suggestions in place.
        """
        suggestions = allocate_emojis(config_names, config_emoji)
        if not ai or not suggestions.generated_config_names:
            return suggestions

        provider_config = self._resolve_provider(ai_provider, ai_model)
        system_prompt, user_prompt = build_emoji_prompts(suggestions.generated_config_names)
        try:
            model_output = self._request_json(
                provider_config,
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                timeout=self.request_timeout,
            )
        except MalformedResponseError as exc:
            self._warn(suggestions, f"AI enhancement failed ({exc}). Using local suggestions only.")
            return suggestions
        except LLMRequestError as exc:
            if strict:
                raise
            self._warn(suggestions, f"AI enhancement failed ({exc}). Using local suggestions only.")
            return suggestions

        accepted = apply_ai_suggestions(
            suggestions.generated_config_names,
            model_output,
            suggestions.emoji_by_config,
        )
        logger.info(
            "Applied %d of %d AI emoji suggestions from %s",
            accepted,
            len(suggestions.generated_config_names),
            provider_config.label,
        )
        return suggestions

    def run_suggest_emojis(self, config_names: Iterable[str], **kwargs: Any) -> str:
        """Return the suggestion table for every config."""
        suggestions = self.suggest_config_emojis(config_names, **kwargs)
        return format_suggestion_table(suggestions.config_names, suggestions.emoji_by_config)

    def run_init_emojis(self, config_names: Iterable[str], **kwargs: Any) -> str:
        """Return copy-pasteable `configEmoji` tuples for every config."""
        suggestions = self.suggest_config_emojis(config_names, **kwargs)
        return format_config_emoji_tuples(suggestions.config_names, suggestions.emoji_by_config)

    def enhance_rule_doc(
        self,
        rule: RuleInfo,
        doc_contents: str,
        *,
        ai_provider: str | None = None,
        ai_model: str | None = None,
        end_of_line: str = "\n",
    ) -> str:
        provider_config = self._resolve_provider(ai_provider, ai_model)
        return self.rule_doc_enhancer.enhance(
            rule,
            doc_contents,
            provider_config,
            end_of_line=end_of_line,
            timeout=self.request_timeout,
        )

    @staticmethod
    def _warn(suggestions: EmojiSuggestions, message: str) -> None:
        logger.warning(message)
        suggestions.warnings.append(message)


__all__ = ["Orchestrator"]
