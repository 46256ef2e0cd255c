from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, log file rotation and the explicit shutdown flush.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path
from typing import Iterator

import pytest

from jucer2cmake.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from jucer2cmake.infra.logging import core as logging_core
from jucer2cmake.infra.logging.core import _QUEUE_LISTENER_ATTR
from jucer2cmake.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            shutdown_logging(root)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, "_jucer2cmake_configured"):
            delattr(root, "_jucer2cmake_configured")

    _reset()
    yield
    _reset()


def test_logging_idempotency() -> None:
    """Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_without_leaking() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(ours) == 1
    assert root.level == logging.DEBUG


def test_log_rotation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """File rotation when the size limit is exceeded."""
    monkeypatch.setattr(logging_core, "_MAX_LOG_BYTES", 100)
    log_file = tmp_path / "rotate.log"
    cfg = LoggingConfig(level="DEBUG", console=False, log_file=str(log_file))

    configure_logging(cfg)
    logger = get_logger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    shutdown_logging()
    time.sleep(0.1)

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_shutdown_flushes_pending_records(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    get_logger("jucer2cmake.test").info("Wrote CMakeLists.txt")
    shutdown_logging()

    assert "Wrote CMakeLists.txt" in log_file.read_text(encoding="utf-8")
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None


def test_queue_listener_architecture() -> None:
    """The root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    queue_handlers = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(queue_handlers) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_unusable_log_file_does_not_abort(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")

    configure_logging(LoggingConfig(console=False, log_file=str(blocker / "run.log")))

    assert "cannot open log file" in capsys.readouterr().err


def test_console_format_and_level_names(capsys) -> None:
    configure_logging(LoggingConfig(level="info", console=True))

    get_logger("jucer2cmake.test").info("Translating App.jucer")
    get_logger("jucer2cmake.test").debug("hidden")
    shutdown_logging()

    err = capsys.readouterr().err
    assert "INFO: Translating App.jucer" in err
    assert "hidden" not in err


def test_package_exports_only_public_names() -> None:
    import jucer2cmake.infra.logging as package

    assert package.__all__ == ["LoggingConfig", "configure_logging", "get_logger", "shutdown_logging"]
    assert not any(name.startswith("_") for name in package.__all__)
