"""Selection of the hosted LLM provider, model and credentials."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import ConfigError

PROTOCOL_OPENAI_COMPATIBLE = "openaiCompatible"
PROTOCOL_ANTHROPIC = "anthropic"


@dataclass(frozen=True)
class ProviderMetadata:
    """Static description of a supported provider."""

    label: str
    api_key_env_var: str
    default_model: str
    endpoint: str
    protocol: str
    json_response_type: Optional[str] = "json_object"


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved provider choice for a single AI-enhanced run."""

    provider: str
    api_key: str = field(repr=False)
    model: str
    endpoint: str
    protocol: str
    label: str
    json_response_type: Optional[str] = None


PROVIDERS: Dict[str, ProviderMetadata] = {
    "anthropic": ProviderMetadata(
        label="Anthropic",
        api_key_env_var="ANTHROPIC_API_KEY",
        default_model="claude-sonnet-4-6",
        endpoint="https://api.anthropic.com/v1/messages",
        protocol=PROTOCOL_ANTHROPIC,
        json_response_type=None,
    ),
    "groq": ProviderMetadata(
        label="Groq",
        api_key_env_var="GROQ_API_KEY",
        default_model="llama-3.3-70b-versatile",
        endpoint="https://api.groq.com/openai/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
    ),
    "openai": ProviderMetadata(
        label="OpenAI",
        api_key_env_var="OPENAI_API_KEY",
        default_model="gpt-5.2",
        endpoint="https://api.openai.com/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
    ),
    "openrouter": ProviderMetadata(
        label="OpenRouter",
        api_key_env_var="OPENROUTER_API_KEY",
        default_model="openai/gpt-5.2",
        endpoint="https://openrouter.ai/api/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
    ),
    "together": ProviderMetadata(
        label="Together",
        api_key_env_var="TOGETHER_API_KEY",
        default_model="openai/gpt-oss-20b",
        endpoint="https://api.together.xyz/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
    ),
    "vercelaigateway": ProviderMetadata(
        label="Vercel AI Gateway",
        api_key_env_var="VERCEL_AI_GATEWAY_API_KEY",
        default_model="openai/gpt-5.2",
        endpoint="https://ai-gateway.vercel.sh/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
        json_response_type="json",
    ),
    "xai": ProviderMetadata(
        label="xAI",
        api_key_env_var="XAI_API_KEY",
        default_model="grok-4-1-fast-reasoning",
        endpoint="https://api.x.ai/v1/chat/completions",
        protocol=PROTOCOL_OPENAI_COMPATIBLE,
    ),
}

SUPPORTED_API_KEY_ENV_VARS: Tuple[str, ...] = tuple(
    dict.fromkeys(metadata.api_key_env_var for metadata in PROVIDERS.values())
)


def get_optional_env_var(name: str) -> Optional[str]:
    """Read an env var, treating empty values and the literal "undefined" as unset."""
    value = os.environ.get(name)
    if not value or value == "undefined":
        return None
    return value


def _build_config(provider: str, api_key: str, model: Optional[str]) -> ProviderConfig:
    metadata = PROVIDERS[provider]
    return ProviderConfig(
        provider=provider,
        api_key=api_key,
        model=model or metadata.default_model,
        endpoint=metadata.endpoint,
        protocol=metadata.protocol,
        label=metadata.label,
        json_response_type=metadata.json_response_type,
    )


def resolve_provider_config(
    provider: Optional[str] = None, model: Optional[str] = None
) -> ProviderConfig:
    """Pick the provider explicitly named, or the only one with an API key in the environment.

    Raises ConfigError when the named provider has no key, when no key is set,
    or when several keys are set and no provider was named.
    """
    if provider:
        metadata = PROVIDERS.get(provider)
        if metadata is None:
            raise ConfigError(
                f'Unknown AI provider "{provider}". Choose one of: {", ".join(PROVIDERS)}.'
            )
        api_key = get_optional_env_var(metadata.api_key_env_var)
        if not api_key:
            raise ConfigError(f'Provider "{provider}" requires {metadata.api_key_env_var} to be set.')
        return _build_config(provider, api_key, model)

    available: List[Tuple[str, str]] = []
    for name, metadata in PROVIDERS.items():
        api_key = get_optional_env_var(metadata.api_key_env_var)
        if api_key:
            available.append((name, api_key))

    if not available:
        raise ConfigError(
            f"No AI provider API key found. Set one of: {', '.join(SUPPORTED_API_KEY_ENV_VARS)}."
        )
    if len(available) > 1:
        env_vars = ", ".join(PROVIDERS[name].api_key_env_var for name, _ in available)
        raise ConfigError(
            f"Multiple AI provider API keys found ({env_vars}). Use --ai-provider to specify one."
        )

    name, api_key = available[0]
    return _build_config(name, api_key, model)


__all__ = [
    "PROTOCOL_ANTHROPIC",
    "PROTOCOL_OPENAI_COMPATIBLE",
    "PROVIDERS",
    "ProviderConfig",
    "ProviderMetadata",
    "SUPPORTED_API_KEY_ENV_VARS",
    "get_optional_env_var",
    "resolve_provider_config",
]
