"""Unit tests for the package logger."""

import logging
from types import SimpleNamespace

import pytest
from rich.logging import RichHandler

from simplerrd.commands.graph import Area
from simplerrd.utils.logger import logger


def test_logger_uses_rich_handler() -> None:
    """The package logger prints through rich."""
    assert logger.name == "simplerrd"
    assert any(isinstance(h, RichHandler) for h in logger.handlers)


def test_directive_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Each built directive is logged at DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="simplerrd"):
        Area(data=SimpleNamespace(vname="mem"), color="00ff00").definition()
    assert "Built directive AREA:mem#00ff00" in caplog.text
