"""Hosted LLM provider resolution and request transport."""

from .providers import PROVIDERS, ProviderConfig, SUPPORTED_API_KEY_ENV_VARS, resolve_provider_config
from .transport import (
    LLMContentError,
    LLMRequestError,
    LLMTimeoutError,
    MalformedResponseError,
    request_ai_json_object,
    request_ai_text,
)

__all__ = [
    "LLMContentError",
    "LLMRequestError",
    "LLMTimeoutError",
    "MalformedResponseError",
    "PROVIDERS",
    "ProviderConfig",
    "SUPPORTED_API_KEY_ENV_VARS",
    "request_ai_json_object",
    "request_ai_text",
    "resolve_provider_config",
]
