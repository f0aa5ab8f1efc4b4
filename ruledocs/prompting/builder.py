"""Builds rule documentation prompts for the hosted LLM."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader

from ..models import RuleInfo
from .constants import MAX_SOURCE_LENGTH, MIN_SOURCE_LENGTH, RULE_DOC_SYSTEM_PROMPT, SEVERITY_ORDER


class RuleDocPromptBuilder:
    """Renders the user prompt for a rule from its metadata and current doc body."""

    SYSTEM_PROMPT = RULE_DOC_SYSTEM_PROMPT
    TEMPLATE_NAME = "rule_doc.j2"

    def __init__(self, templates_dir: Path | None = None) -> None:
        default_dir = Path(__file__).with_name("templates")
        directories = [str(default_dir)]
        if templates_dir and templates_dir != default_dir:
            directories.insert(0, str(templates_dir))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def build_user_prompt(self, rule: RuleInfo, existing_body: Optional[str]) -> str:
        template = self._env.get_template(self.TEMPLATE_NAME)
        body = existing_body.strip() if existing_body else ""
        rendered = template.render(
            rule_id=f"{rule.plugin_prefix}/{rule.name}",
            description=rule.description,
            rule_type=rule.type,
            fixable=rule.fixable,
            has_suggestions=rule.has_suggestions,
            config_summary=self.summarize_configs(rule.configs_by_severity),
            options_json=json.dumps(rule.options, indent=2) if rule.options else None,
            has_options=bool(rule.options),
            source=self.truncate_source(rule.source),
            existing_body=body,
        )
        return rendered.strip()

    @staticmethod
    def summarize_configs(configs_by_severity: Dict[str, List[str]]) -> Optional[str]:
        """Return e.g. `error: recommended, strict; warn: all`."""
        parts = []
        for severity in SEVERITY_ORDER:
            configs = configs_by_severity.get(severity) or []
            if configs:
                parts.append(f"{severity}: {', '.join(configs)}")
        return "; ".join(parts) if parts else None

    @staticmethod
    def truncate_source(source: Optional[str]) -> Optional[str]:
        # Minified stubs and native code tell the model nothing.
        if not source or len(source) < MIN_SOURCE_LENGTH or "[native code]" in source:
            return None
        if len(source) > MAX_SOURCE_LENGTH:
            return f"{source[:MAX_SOURCE_LENGTH]}\n// ... (truncated)"
        return source


__all__ = ["RuleDocPromptBuilder"]
