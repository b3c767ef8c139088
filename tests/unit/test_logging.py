from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from wordbayes.config import ConfigError, LoggingConfig
from wordbayes.logging import ConsoleFormatter, configure_logging, level_from_string


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_without_file() -> None:
    configure_logging(LoggingConfig(level="warning"))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ConsoleFormatter)


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "wordbayes.log"
    configure_logging(LoggingConfig(level="debug", file=log_file))

    root = logging.getLogger()
    assert any(isinstance(handler, RotatingFileHandler) for handler in root.handlers)

    logging.getLogger("wordbayes.test").debug("trained %s", "yes")
    for handler in root.handlers:
        handler.flush()

    contents = log_file.read_text(encoding="utf-8")
    assert "DEBUG wordbayes.test: trained yes" in contents


def test_unknown_level_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="Unknown log level"):
        configure_logging(LoggingConfig(level="chatty"))


def test_level_aliases() -> None:
    assert level_from_string(" warn ") == logging.WARNING
    assert level_from_string("Critical") == logging.CRITICAL


def test_console_formatter_symbols() -> None:
    record = logging.LogRecord("wordbayes", logging.ERROR, __file__, 1, "boom", None, None)

    assert ConsoleFormatter(use_color=False).format(record) == "X boom"
    coloured = ConsoleFormatter(use_color=True).format(record)
    assert coloured.startswith("\x1b[31mX")
    assert coloured.endswith("boom")
