"""HTTP transport for hosted chat models (OpenAI-compatible and Anthropic wire formats)."""

from __future__ import annotations

import http.client
import json
import re
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..logging import get_logger
from .providers import PROTOCOL_ANTHROPIC, PROTOCOL_OPENAI_COMPATIBLE, ProviderConfig

logger = get_logger("llm.transport")

DEFAULT_TIMEOUT = 30.0
ANTHROPIC_VERSION = "2023-06-01"
JSON_MAX_TOKENS = 512
TEXT_MAX_TOKENS = 4096
JSON_TEMPERATURE = 0.0
TEXT_TEMPERATURE = 0.2
_READ_CHUNK_SIZE = 8192

_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```$")


class LLMRequestError(RuntimeError):
    """Raised when a provider request fails (network, HTTP status, timeout or missing content)."""

    def __init__(
        self,
        message: str,
        *,
        provider_label: str,
        status: Optional[int] = None,
        details: Optional["ErrorDetails"] = None,
    ) -> None:
        super().__init__(message)
        self.provider_label = provider_label
        self.status = status
        self.details = details


class LLMTimeoutError(LLMRequestError):
    """Raised when a provider does not answer within the request timeout."""


class LLMContentError(LLMRequestError):
    """Raised when a successful response carries no assistant text."""


class MalformedResponseError(ValueError):
    """Raised when assistant text is not a JSON object."""


@dataclass(frozen=True)
class ErrorDetails:
    """Fields parsed from a provider error envelope."""

    message: Optional[str] = None
    code: Optional[str] = None
    type: Optional[str] = None

    def describe(self) -> str:
        labels = [f"{name}: {value}" for name, value in (("code", self.code), ("type", self.type)) if value]
        parts = [self.message] if self.message else []
        if labels:
            parts.append(f"({', '.join(labels)})")
        return " ".join(parts)


@dataclass
class ChatRequest:
    """A single prompt exchange sent to a provider."""

    system_prompt: Optional[str]
    user_prompt: str
    json_mode: bool


def _is_record(value: Any) -> bool:
    return isinstance(value, dict)


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _join_text_parts(parts: List[Any], *, require_type: bool) -> Optional[str]:
    texts: List[str] = []
    for part in parts:
        if not _is_record(part):
            continue
        if require_type and part.get("type") != "text":
            continue
        text = part.get("text")
        if isinstance(text, str):
            texts.append(text)
    return "".join(texts) if texts else None


class ChatProtocol(ABC):
    """Wire-format adapter for one family of chat APIs."""

    @abstractmethod
    def build_headers(self, config: ProviderConfig) -> Dict[str, str]:
        raise NotImplementedError

    @abstractmethod
    def build_payload(self, config: ProviderConfig, request: ChatRequest) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def extract_content(self, payload: Any) -> Optional[str]:
        raise NotImplementedError

    def parse_error_details(self, payload: Any) -> Optional[ErrorDetails]:
        """Read `{"error": {...}}` envelopes, or the same fields at the top level."""
        if not _is_record(payload):
            return None
        source = payload.get("error")
        if isinstance(source, str):
            return ErrorDetails(message=source)
        if not _is_record(source):
            source = payload
        details = ErrorDetails(
            message=_as_text(source.get("message")),
            code=_as_text(source.get("code")),
            type=_as_text(source.get("type")),
        )
        if not (details.message or details.code or details.type):
            return None
        return details


class OpenAICompatibleProtocol(ChatProtocol):
    """Chat-completions format shared by OpenAI, Groq, OpenRouter, Together, xAI and the Vercel gateway."""

    def build_headers(self, config: ProviderConfig) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, config: ProviderConfig, request: ChatRequest) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.user_prompt})
        payload: Dict[str, Any] = {
            "model": config.model,
            "temperature": JSON_TEMPERATURE if request.json_mode else TEXT_TEMPERATURE,
            "messages": messages,
        }
        if request.json_mode and config.json_response_type:
            payload["response_format"] = {"type": config.json_response_type}
        return payload

    def extract_content(self, payload: Any) -> Optional[str]:
        if not _is_record(payload):
            return None
        choices = payload.get("choices")
        if not isinstance(choices, list) or not choices:
            return None
        first = choices[0]
        if not _is_record(first):
            return None
        message = first.get("message")
        if not _is_record(message):
            return None
        content = message.get("content")
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            return _join_text_parts(content, require_type=False)
        return None


class AnthropicProtocol(ChatProtocol):
    """Anthropic messages format."""

    def build_headers(self, config: ProviderConfig) -> Dict[str, str]:
        return {
            "x-api-key": config.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def build_payload(self, config: ProviderConfig, request: ChatRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": config.model,
            "max_tokens": JSON_MAX_TOKENS if request.json_mode else TEXT_MAX_TOKENS,
            "temperature": JSON_TEMPERATURE if request.json_mode else TEXT_TEMPERATURE,
            "messages": [{"role": "user", "content": request.user_prompt}],
        }
        if request.system_prompt:
            payload["system"] = request.system_prompt
        return payload

    def extract_content(self, payload: Any) -> Optional[str]:
        if not _is_record(payload):
            return None
        content = payload.get("content")
        if not isinstance(content, list):
            return None
        return _join_text_parts(content, require_type=True)


PROTOCOLS: Dict[str, ChatProtocol] = {
    PROTOCOL_OPENAI_COMPATIBLE: OpenAICompatibleProtocol(),
    PROTOCOL_ANTHROPIC: AnthropicProtocol(),
}


def _status_error(config: ProviderConfig, protocol: ChatProtocol, exc: HTTPError) -> LLMRequestError:
    message = f"{config.label} request failed ({exc.code} {exc.reason})."
    details: Optional[ErrorDetails] = None
    try:
        body = exc.read()
        details = protocol.parse_error_details(json.loads(body.decode("utf-8")))
    except (OSError, ValueError, AttributeError):
        details = None
    if details is not None:
        message = f"{message} {details.describe()}"
    return LLMRequestError(message, provider_label=config.label, status=exc.code, details=details)


def _send(config: ProviderConfig, request: ChatRequest, timeout: float) -> str:
    protocol = PROTOCOLS[config.protocol]
    data = json.dumps(protocol.build_payload(config, request)).encode("utf-8")
    http_request = Request(
        config.endpoint,
        data=data,
        headers=protocol.build_headers(config),
        method="POST",
    )
    logger.debug("Requesting %s (%s) at %s", config.label, config.model, config.endpoint)

    # `timeout` is a deadline for the whole exchange, not only for each socket operation.
    deadline = time.monotonic() + timeout
    outcome: Dict[str, Any] = {}

    def exchange() -> None:
        try:
            outcome["raw"] = _exchange(config, protocol, http_request, timeout, deadline)
        except Exception as exc:  # re-raised on the calling thread
            outcome["error"] = exc

    worker = threading.Thread(target=exchange, name=f"ruledocs-{config.provider}", daemon=True)
    worker.start()
    worker.join(max(0.0, deadline - time.monotonic()))
    if worker.is_alive():
        logger.debug("Abandoning %s request after %.1fs", config.label, timeout)
        raise _timeout_error(config, timeout)
    if "error" in outcome:
        raise outcome["error"]
    raw = outcome["raw"]

    missing = LLMContentError(
        f"{config.label} response did not include assistant text content.",
        provider_label=config.label,
    )
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise missing from exc
    content = protocol.extract_content(payload)
    if content is None:
        raise missing
    return content


def _exchange(
    config: ProviderConfig,
    protocol: ChatProtocol,
    http_request: Request,
    timeout: float,
    deadline: float,
) -> bytes:
    try:
        with urlopen(http_request, timeout=timeout) as response:
            return _read_body(response, config, timeout, deadline)
    except HTTPError as exc:
        raise _status_error(config, protocol, exc) from exc
    except TimeoutError as exc:
        raise _timeout_error(config, timeout) from exc
    except URLError as exc:
        if isinstance(exc.reason, TimeoutError):
            raise _timeout_error(config, timeout) from exc
        raise LLMRequestError(
            f"{config.label} request failed: {exc.reason}", provider_label=config.label
        ) from exc
    except http.client.HTTPException as exc:
        # Protocol-level failures such as BadStatusLine or IncompleteRead.
        raise LLMRequestError(
            f"{config.label} request failed: {exc!r}", provider_label=config.label
        ) from exc
    except OSError as exc:
        raise LLMRequestError(
            f"{config.label} request failed: {exc}", provider_label=config.label
        ) from exc


def _read_body(response: Any, config: ProviderConfig, timeout: float, deadline: float) -> bytes:
    chunks: List[bytes] = []
    while True:
        if time.monotonic() >= deadline:
            raise _timeout_error(config, timeout)
        chunk = response.read1(_READ_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def _timeout_error(config: ProviderConfig, timeout: float) -> LLMTimeoutError:
    return LLMTimeoutError(
        f"{config.label} request failed: timed out after {int(timeout * 1000)}ms.",
        provider_label=config.label,
    )


def parse_llm_response_object(content: str) -> Dict[str, Any]:
    """Parse a JSON object out of assistant text, tolerating code fences and surrounding prose."""
    trimmed = content.strip()
    if not trimmed:
        raise MalformedResponseError("AI response was empty.")

    without_fences = _FENCE_END.sub("", _FENCE_START.sub("", trimmed))
    first_brace = without_fences.find("{")
    last_brace = without_fences.rfind("}")
    if first_brace != -1 and last_brace > first_brace:
        json_like = without_fences[first_brace : last_brace + 1]
    else:
        json_like = without_fences

    try:
        parsed = json.loads(json_like)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"AI response was not valid JSON: {exc.msg}.") from exc
    if not isinstance(parsed, dict):
        raise MalformedResponseError("AI response was not a JSON object.")
    return parsed


def request_ai_json_object(
    config: ProviderConfig,
    *,
    system_prompt: Optional[str],
    user_prompt: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """Ask the provider for a JSON object and return it parsed."""
    request = ChatRequest(system_prompt=system_prompt, user_prompt=user_prompt, json_mode=True)
    return parse_llm_response_object(_send(config, request, timeout))


def request_ai_text(
    config: ProviderConfig,
    *,
    system_prompt: Optional[str],
    user_prompt: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Ask the provider for free-form text (used for rule documentation)."""
    request = ChatRequest(system_prompt=system_prompt, user_prompt=user_prompt, json_mode=False)
    return _send(config, request, timeout)


__all__ = [
    "AnthropicProtocol",
    "ChatProtocol",
    "ChatRequest",
    "DEFAULT_TIMEOUT",
    "ErrorDetails",
    "LLMContentError",
    "LLMRequestError",
    "LLMTimeoutError",
    "MalformedResponseError",
    "OpenAICompatibleProtocol",
    "PROTOCOLS",
    "parse_llm_response_object",
    "request_ai_json_object",
    "request_ai_text",
]
