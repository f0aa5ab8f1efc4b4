"""Tests for AI provider resolution."""

from __future__ import annotations

import pytest

from ruledocs.config import ConfigError
from ruledocs.llm.providers import (
    PROTOCOL_ANTHROPIC,
    PROTOCOL_OPENAI_COMPATIBLE,
    PROVIDERS,
    SUPPORTED_API_KEY_ENV_VARS,
    get_optional_env_var,
    resolve_provider_config,
)


def test_provider_table_covers_both_protocols() -> None:
    assert set(PROVIDERS) == {
        "anthropic",
        "groq",
        "openai",
        "openrouter",
        "together",
        "vercelaigateway",
        "xai",
    }
    assert PROVIDERS["anthropic"].protocol == PROTOCOL_ANTHROPIC
    assert all(
        metadata.protocol == PROTOCOL_OPENAI_COMPATIBLE
        for name, metadata in PROVIDERS.items()
        if name != "anthropic"
    )
    assert PROVIDERS["vercelaigateway"].json_response_type == "json"
    assert PROVIDERS["openai"].json_response_type == "json_object"
    assert "OPENAI_API_KEY" in SUPPORTED_API_KEY_ENV_VARS


def test_explicit_provider_uses_default_model(monkeypatch) -> None:
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")

    config = resolve_provider_config("anthropic")

    assert config.provider == "anthropic"
    assert config.api_key == "sk-ant"
    assert config.model == "claude-sonnet-4-6"
    assert config.endpoint == "https://api.anthropic.com/v1/messages"
    assert config.label == "Anthropic"
    assert "sk-ant" not in repr(config)


def test_explicit_model_overrides_default(monkeypatch) -> None:
    monkeypatch.setenv("GROQ_API_KEY", "gsk")

    config = resolve_provider_config("groq", "llama-3.1-8b-instant")

    assert config.model == "llama-3.1-8b-instant"


def test_explicit_provider_requires_its_key(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")

    with pytest.raises(ConfigError, match='Provider "xai" requires XAI_API_KEY to be set.'):
        resolve_provider_config("xai")


def test_unknown_provider_is_rejected() -> None:
    with pytest.raises(ConfigError, match='Unknown AI provider "mystery"'):
        resolve_provider_config("mystery")


def test_single_key_is_selected_automatically(monkeypatch) -> None:
    monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")

    config = resolve_provider_config()

    assert config.provider == "openrouter"
    assert config.model == "openai/gpt-5.2"


def test_missing_keys_list_every_supported_variable() -> None:
    with pytest.raises(ConfigError) as excinfo:
        resolve_provider_config()

    message = str(excinfo.value)
    assert message.startswith("No AI provider API key found.")
    for env_var in SUPPORTED_API_KEY_ENV_VARS:
        assert env_var in message


def test_multiple_keys_require_explicit_provider(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")

    with pytest.raises(ConfigError) as excinfo:
        resolve_provider_config()

    message = str(excinfo.value)
    assert "ANTHROPIC_API_KEY" in message
    assert "OPENAI_API_KEY" in message
    assert "--ai-provider" in message


@pytest.mark.parametrize("value", ["", "undefined"])
def test_blank_and_undefined_values_count_as_unset(monkeypatch, value: str) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", value)
    monkeypatch.setenv("XAI_API_KEY", "xai-key")

    assert get_optional_env_var("OPENAI_API_KEY") is None
    assert resolve_provider_config().provider == "xai"
