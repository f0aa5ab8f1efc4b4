"""Tests for ruledocs logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from ruledocs.logging import configure_logging, get_logger


def test_get_logger_nests_under_ruledocs() -> None:
    assert get_logger().name == "ruledocs"
    assert get_logger("llm.transport").name == "ruledocs.llm.transport"


def test_reconfiguring_replaces_only_own_handlers(tmp_path: Path) -> None:
    logger = logging.getLogger("ruledocs")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    configure_logging(log_file=tmp_path / "first.log")
    configure_logging(verbose=True)

    names = [handler.get_name() for handler in logger.handlers]
    assert names.count("ruledocs.console") == 1
    assert "ruledocs.file" not in names
    assert foreign in logger.handlers
    assert logger.level == logging.DEBUG


def test_file_sink_keeps_debug_without_verbose(tmp_path: Path, capsys) -> None:
    log_file = tmp_path / "nested" / "trace.log"
    configure_logging(log_file=log_file)

    get_logger("cli").debug("resolved provider")
    get_logger("cli").info("done")

    logged = log_file.read_text(encoding="utf-8")
    assert "DEBUG   ruledocs.cli: resolved provider" in logged
    assert "INFO    ruledocs.cli: done" in logged
    assert capsys.readouterr().err == "[ruledocs] INFO done\n"
