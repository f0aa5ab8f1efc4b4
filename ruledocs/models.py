"""Core data models shared across ruledocs components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ConfigEmoji:
    """A caller-supplied emoji for a plugin config.

    An entry without an emoji asks for the config to be generated rather than pinned.
    """

    config: str
    emoji: Optional[str] = None


@dataclass
class EmojiSuggestions:
    """Outcome of an emoji suggestion run."""

    config_names: List[str]
    emoji_by_config: Dict[str, str]
    generated_config_names: List[str]
    warnings: List[str] = field(default_factory=list)


@dataclass
class RuleInfo:
    """Rule metadata handed to the rule-doc enhancer."""

    name: str
    plugin_prefix: str
    description: Optional[str] = None
    type: Optional[str] = None
    fixable: Optional[str] = None
    has_suggestions: bool = False
    configs_by_severity: Dict[str, List[str]] = field(default_factory=dict)
    options: List[Dict[str, Any]] = field(default_factory=list)
    source: Optional[str] = None
