# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Coded log events rendered as ``[LEVEL] [caller] CODE`` plus a JSON details block."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Protocol

from regflow.shared.codes import AppCode

from .logger import logger


class StructuredLogger(Protocol):
    def info(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None: ...

    def error(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None: ...


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseException):
        rendered = f"{type(value).__name__}: {value}"
        context = getattr(value, "context", None)
        if isinstance(context, Mapping) and context:
            return {"error": rendered, "context": dict(context)}
        return rendered
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


def render_details(details: Mapping[str, Any]) -> str:
    try:
        return json.dumps(dict(details), indent=2, ensure_ascii=False, default=_to_jsonable)
    except (TypeError, ValueError):
        return repr(dict(details))


def render_event(
    level: str, caller: str, code: AppCode | str, details: Mapping[str, Any] | None = None
) -> str:
    label = code.value if isinstance(code, AppCode) else str(code)
    head = f"[{level}] [{caller}] {label}"
    if details is None:
        return head
    return f"{head}\n{render_details(details)}"


class EventLogger:
    """Stateless sink for coded events. Emission never raises."""

    def info(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None:
        self._emit("INFO", caller, code, details)

    def error(
        self, caller: str, code: AppCode, details: Mapping[str, Any] | None = None
    ) -> None:
        self._emit("ERROR", caller, code, details)

    def _emit(
        self, level: str, caller: str, code: AppCode, details: Mapping[str, Any] | None
    ) -> None:
        line = None
        try:
            line = render_event(level, caller, code, details)
            logger.opt(depth=2).log(level, line)
        except Exception:  # noqa: BLE001
            try:
                sys.stderr.write(f"{line or f'[{level}] [{caller}] {code}'}\n")
            except Exception:  # noqa: BLE001
                pass


event_logger = EventLogger()

__all__ = [
    "EventLogger",
    "StructuredLogger",
    "event_logger",
    "render_details",
    "render_event",
]
