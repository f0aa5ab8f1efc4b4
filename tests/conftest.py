from __future__ import annotations

import logging
from typing import Callable, Iterator

import pytest

from ruledocs.llm.providers import SUPPORTED_API_KEY_ENV_VARS
from tests._fixtures.http_fakes import RecordingOpener


@pytest.fixture(autouse=True)
def clear_provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer API keys out of provider resolution."""
    for env_var in SUPPORTED_API_KEY_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_ruledocs_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog keeps seeing ruledocs records."""
    yield
    logger = logging.getLogger("ruledocs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_urlopen(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable], RecordingOpener]:
    """Install a recording `urlopen` in the transport module and return it."""

    def install(respond: Callable) -> RecordingOpener:
        opener = RecordingOpener(respond)
        monkeypatch.setattr("ruledocs.llm.transport.urlopen", opener)
        return opener

    return install
