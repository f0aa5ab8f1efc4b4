"""Fake `urlopen` plumbing for provider transport tests."""

from __future__ import annotations

import io
import json
import time
from typing import Any, Callable, Dict, List, Optional
from urllib.error import HTTPError


class FakeResponse:
    """Context-manager response serving a fixed body."""

    def __init__(self, payload: Any = None, *, raw: Optional[bytes] = None) -> None:
        self._raw = raw if raw is not None else json.dumps(payload).encode("utf-8")
        self._offset = 0

    def read(self) -> bytes:
        return self._raw

    def read1(self, size: int = -1) -> bytes:
        end = len(self._raw) if size < 0 else self._offset + size
        chunk = self._raw[self._offset : end]
        self._offset += len(chunk)
        return chunk

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class DrippingResponse(FakeResponse):
    """Response that yields one byte per `delay` seconds and never finishes on its own."""

    def __init__(self, delay: float) -> None:
        super().__init__(raw=b"{")
        self.delay = delay

    def read1(self, size: int = -1) -> bytes:
        time.sleep(self.delay)
        return b" "


class BrokenResponse(FakeResponse):
    """Response whose body read fails with the given exception."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(raw=b"")
        self.error = error

    def read1(self, size: int = -1) -> bytes:
        raise self.error


def http_error(url: str, status: int, reason: str, body: Any = None) -> HTTPError:
    raw = b"" if body is None else (body if isinstance(body, bytes) else json.dumps(body).encode("utf-8"))
    return HTTPError(url, status, reason, {}, io.BytesIO(raw))


class RecordingOpener:
    """Stands in for `urlopen`, recording each request before answering it."""

    def __init__(self, respond: Callable[[Any], Any]) -> None:
        self._respond = respond
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, request, timeout=None):  # type: ignore[no-untyped-def]
        self.calls.append(
            {
                "url": request.full_url,
                "method": request.get_method(),
                "headers": {key.lower(): value for key, value in request.header_items()},
                "payload": json.loads(request.data.decode("utf-8")),
                "timeout": timeout,
            }
        )
        outcome = self._respond(request)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


def openai_reply(content: Any) -> FakeResponse:
    return FakeResponse({"choices": [{"message": {"role": "assistant", "content": content}}]})


def anthropic_reply(*texts: str) -> FakeResponse:
    return FakeResponse({"content": [{"type": "text", "text": text} for text in texts]})
