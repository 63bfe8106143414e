from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

import pytest
from loguru import logger as _logger

from regflow.shared.codes import AppCode
from regflow.shared.config import load_config
from regflow.shared.logging import clear_correlation_id


@dataclass(slots=True, frozen=True)
class RecordedEvent:
    level: str
    caller: str
    code: AppCode
    details: Mapping[str, Any] | None


class RecordingEventLogger:
    def __init__(self) -> None:
        self.events: list[RecordedEvent] = []

    def info(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None:
        self.events.append(RecordedEvent("INFO", caller, code, details))

    def error(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None:
        self.events.append(RecordedEvent("ERROR", caller, code, details))

    @property
    def infos(self) -> list[RecordedEvent]:
        return [event for event in self.events if event.level == "INFO"]

    @property
    def errors(self) -> list[RecordedEvent]:
        return [event for event in self.events if event.level == "ERROR"]


@pytest.fixture()
def recorder() -> RecordingEventLogger:
    return RecordingEventLogger()


@pytest.fixture()
def log_lines() -> Iterator[list[str]]:
    lines: list[str] = []
    handler_id = _logger.add(
        lambda message: lines.append(str(message).rstrip("\n")),
        format="{level}|{extra[correlation_id]}|{message}",
        level="INFO",
    )
    yield lines
    _logger.remove(handler_id)


@pytest.fixture()
def restore_loguru() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    _logger.remove()
    _logger.add(sys.stderr)
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _isolated_state() -> Iterator[None]:
    load_config.cache_clear()
    clear_correlation_id()
    yield
    clear_correlation_id()
    load_config.cache_clear()
