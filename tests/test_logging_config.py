"""Tests for logging setup."""

from __future__ import annotations

import io
import logging
import sys
from unittest import mock

import pytest

from bookoutline.utils.logging_config import configure_logging, get_logger


def test_configure_logging_is_idempotent() -> None:
    configure_logging("WARNING")
    configure_logging("DEBUG")

    logger = logging.getLogger("bookoutline")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_extra_fields_are_rendered(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")

    get_logger("bookoutline.tests").warning("Outline issue", extra={"location": "mainmatter[2]"})

    err = capsys.readouterr().err
    assert "Outline issue" in err
    assert "location='mainmatter[2]'" in err


def test_handler_writes_to_stderr_at_configure_time(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")

    (handler,) = logging.getLogger("bookoutline").handlers
    assert handler.stream is sys.stderr


def test_set_stream_redirects_output() -> None:
    configure_logging("INFO")
    (handler,) = logging.getLogger("bookoutline").handlers
    buffer = io.StringIO()

    handler.setStream(buffer)
    get_logger("bookoutline.tests").info("Outline built")

    assert handler.stream is buffer
    assert "Outline built" in buffer.getvalue()


def test_reconfigure_follows_new_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")
    replacement = io.StringIO()

    with mock.patch.object(sys, "stderr", replacement):
        configure_logging("INFO")
        get_logger("bookoutline.tests").info("Outline built")

    assert len(logging.getLogger("bookoutline").handlers) == 1
    assert "Outline built" in replacement.getvalue()
    assert "Outline built" not in capsys.readouterr().err
