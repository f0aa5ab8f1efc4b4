"""AI rewriting of rule documentation bodies."""

from __future__ import annotations

from typing import Callable, Optional

from .llm.providers import ProviderConfig
from .llm.transport import DEFAULT_TIMEOUT, request_ai_text
from .logging import get_logger
from .models import RuleInfo
from .postproc.lint import MarkdownLinter
from .postproc.markers import RuleDocMarkers
from .prompting.builder import RuleDocPromptBuilder

logger = get_logger("rule_docs")

TextRequester = Callable[..., str]


class RuleDocEnhancer:
    """Rewrites the body of a rule doc with a model while keeping generated blocks intact."""

    def __init__(
        self,
        prompt_builder: RuleDocPromptBuilder | None = None,
        markers: RuleDocMarkers | None = None,
        linter: MarkdownLinter | None = None,
        text_requester: TextRequester | None = None,
    ) -> None:
        self.prompt_builder = prompt_builder or RuleDocPromptBuilder()
        self.markers = markers or RuleDocMarkers()
        self.linter = linter or MarkdownLinter()
        self._request_text = text_requester or request_ai_text

    def enhance(
        self,
        rule: RuleInfo,
        doc_contents: str,
        provider_config: ProviderConfig,
        *,
        end_of_line: str = "\n",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> str:
        """Return the doc with a model-written body.

        The generated header and the options list block are carried over
        untouched. When the model returns nothing usable the original doc is
        returned unchanged. Transport errors propagate.
        """
        existing_body = self.markers.extract_body(doc_contents)
        options_list = self.markers.extract_options_list(existing_body)
        body_for_prompt = self.markers.strip_options_list(existing_body)

        user_prompt = self.prompt_builder.build_user_prompt(rule, body_for_prompt)
        response = self._request_text(
            provider_config,
            system_prompt=self.prompt_builder.SYSTEM_PROMPT,
            user_prompt=user_prompt,
            timeout=timeout,
        )

        sanitized: Optional[str] = self.linter.sanitize_ai_response(response, end_of_line)
        if not sanitized:
            logger.warning('AI returned empty content for rule "%s". Keeping existing doc.', rule.name)
            return doc_contents

        if options_list:
            sanitized = self.markers.reinsert_options_list(sanitized, options_list, end_of_line)

        return self.markers.replace_body(doc_contents, sanitized, end_of_line)


__all__ = ["RuleDocEnhancer"]
