"""Tests logging setup."""
from __future__ import annotations

import logging
from typing import Iterator

import pytest
from flowstore.log import LOG_LEVEL_ENV, setup_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    logger = logging.getLogger("flowstore")
    level = logger.level
    handlers = list(logger.handlers)

    yield

    logger.setLevel(level)
    logger.handlers = handlers


def test_explicit_level() -> None:
    logger = setup_logging("debug")

    assert logger.name == "flowstore"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")

    assert setup_logging().level == logging.WARNING


def test_unknown_level_falls_back_to_info() -> None:
    assert setup_logging("chatty").level == logging.INFO


def test_non_level_logging_attribute_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "basic_format")

    assert setup_logging().level == logging.INFO


def test_repeated_setup_does_not_stack_handlers() -> None:
    setup_logging()
    logger = setup_logging()

    assert len(logger.handlers) == 1
