"""Configuration loading for ruledocs (.ruledocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import ConfigEmoji

CONFIG_FILENAME = ".ruledocs.yml"


class ConfigError(RuntimeError):
    """Raised when configuration or credentials are missing, ambiguous or invalid."""


@dataclass
class AIConfig:
    """AI enhancement settings from .ruledocs.yml."""

    enabled: bool = False
    provider: Optional[str] = None
    model: Optional[str] = None
    request_timeout: Optional[float] = None
    strict: bool = True


@dataclass
class RuleDocsConfig:
    """Represents the settings defined in .ruledocs.yml."""

    root: Path
    configs: List[str] = field(default_factory=list)
    config_emoji: List[ConfigEmoji] = field(default_factory=list)
    ai: AIConfig = field(default_factory=AIConfig)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> RuleDocsConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RuleDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    ai = AIConfig()
    ai_data = _as_dict(data.get("ai"))
    if ai_data:
        ai.enabled = bool(_as_bool(ai_data.get("enabled")))
        ai.provider = _as_str(ai_data.get("provider"))
        ai.model = _as_str(ai_data.get("model"))
        ai.request_timeout = _as_float(ai_data.get("request_timeout"))
        strict = _as_bool(ai_data.get("strict"))
        ai.strict = True if strict is None else strict

    templates_dir = _as_str(_as_dict(data.get("rule_docs")).get("templates_dir"))

    return RuleDocsConfig(
        root=root,
        configs=_as_str_list(data.get("configs")),
        config_emoji=_as_config_emoji_list(data.get("config_emoji")),
        ai=ai,
        templates_dir=(root / Path(templates_dir).expanduser()).resolve() if templates_dir else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_config_emoji_list(value: Any) -> List[ConfigEmoji]:
    """Accept `[name, emoji]` pairs, `[name]` singletons, bare names, or `{config, emoji}` maps."""
    if not isinstance(value, list):
        return []
    entries: List[ConfigEmoji] = []
    for item in value:
        if isinstance(item, str):
            entries.append(ConfigEmoji(config=item))
        elif isinstance(item, dict):
            name = _as_str(item.get("config"))
            if name:
                entries.append(ConfigEmoji(config=name, emoji=_as_str(item.get("emoji"))))
        elif isinstance(item, Sequence) and item:
            name = _as_str(item[0])
            emoji = _as_str(item[1]) if len(item) > 1 else None
            if name:
                entries.append(ConfigEmoji(config=name, emoji=emoji or None))
        else:
            raise ConfigError(f"Unsupported config_emoji entry: {item!r}")
    return entries


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
