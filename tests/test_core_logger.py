# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io
import logging

from rich.console import Console

from prodsub_lib.core.logger import CFG, get_logger


def test_logger_debug_mode(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger = get_logger("test_debug")

    assert logger.level == logging.DEBUG


def test_logger_non_debug_mode(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logger = get_logger("test_info")

    assert logger.level == logging.INFO


def test_logger_does_not_stack_handlers(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logging.getLogger("test_handlers").handlers.clear()

    get_logger("test_handlers")
    logger = get_logger("test_handlers")

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_logger_writes_messages(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    buf = io.StringIO()
    monkeypatch.setitem(
        get_logger.__globals__,
        "Console",
        lambda **kwargs: Console(file=buf, force_terminal=False, **kwargs),
    )

    logging.getLogger("test_output").handlers.clear()
    logger = get_logger("test_output")
    logger.info("hello")
    logger.debug("hidden")

    output = buf.getvalue()
    assert "hello" in output
    assert "hidden" not in output
