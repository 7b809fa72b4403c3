from __future__ import annotations

import logging

import pytest

from fetch_api._utils import _logs
from fetch_api._utils._logs import setup_logging


@pytest.fixture(autouse=True)
def fresh_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = logging.getLogger("fetch_api")
    monkeypatch.setattr(logger, "level", logging.NOTSET)
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "propagate", True)
    monkeypatch.setattr(_logs, "_handler", None)


def test_single_handler_without_propagation() -> None:
    setup_logging(True)
    setup_logging(True)

    logger = logging.getLogger("fetch_api")
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_level_never_gets_quieter() -> None:
    setup_logging(True)
    setup_logging(False)

    assert logging.getLogger("fetch_api").level == logging.DEBUG


def test_debug_raises_an_info_level() -> None:
    setup_logging(False)
    assert logging.getLogger("fetch_api").level == logging.INFO

    setup_logging(True)
    assert logging.getLogger("fetch_api").level == logging.DEBUG
