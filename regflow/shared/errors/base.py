# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

from regflow.shared.codes import AppCode, StatusClassification
from regflow.shared.logging import StructuredLogger, event_logger


@dataclass(slots=True)
class AppError(Exception):
    status: StatusClassification
    code: AppCode
    message: str
    details: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        # unknown values fail here rather than reaching a log line
        self.status = StatusClassification(self.status)
        self.code = AppCode(self.code)
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def cause(self) -> Any:
        if not self.details:
            return None
        return self.details.get("cause")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code.value,
            "message": self.message,
            "status": int(self.status),
        }


_CALLER = "AppError.raise_app_error"


def raise_app_error(
    status: StatusClassification,
    code: AppCode,
    message: str,
    details: Mapping[str, Any] | None = None,
    *,
    events: StructuredLogger | None = None,
) -> NoReturn:
    """Build an :class:`AppError`, log it once at error level and raise it.

    When ``details["cause"]`` is an exception the raise is chained to it.
    """
    error = AppError(status=status, code=code, message=message, details=details)

    payload: dict[str, Any] = {"message": error.message, "status": int(error.status)}
    if details:
        payload.update(
            (key, value) for key, value in details.items() if key not in ("message", "status")
        )
    payload["stack"] = "".join(traceback.format_stack()[:-1])

    (events or event_logger).error(_CALLER, error.code, payload)

    cause = error.cause
    if isinstance(cause, BaseException):
        raise error from cause
    raise error


__all__ = ["AppError", "raise_app_error"]
