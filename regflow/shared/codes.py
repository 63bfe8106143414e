# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Closed code sets shared by errors and log events."""

from __future__ import annotations

from enum import IntEnum, StrEnum
from http import HTTPStatus


class StatusClassification(IntEnum):
    BAD_REQUEST = HTTPStatus.BAD_REQUEST.value
    UNAUTHORIZED = HTTPStatus.UNAUTHORIZED.value
    FORBIDDEN = HTTPStatus.FORBIDDEN.value
    NOT_FOUND = HTTPStatus.NOT_FOUND.value
    CONFLICT = HTTPStatus.CONFLICT.value
    UNPROCESSABLE_ENTITY = HTTPStatus.UNPROCESSABLE_ENTITY.value
    INTERNAL_SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR.value
    BAD_GATEWAY = HTTPStatus.BAD_GATEWAY.value
    SERVICE_UNAVAILABLE = HTTPStatus.SERVICE_UNAVAILABLE.value

    @property
    def http_status(self) -> HTTPStatus:
        return HTTPStatus(self.value)


class AppCode(StrEnum):
    REGISTER_USER_SUCCESS = "REGISTER_USER_SUCCESS"
    REGISTER_USER_FAILED = "REGISTER_USER_FAILED"
    CREATE_USER_SUCCESS = "CREATE_USER_SUCCESS"
    SUBSCRIBE_USER_SUCCESS = "SUBSCRIBE_USER_SUCCESS"

    @property
    def is_failure(self) -> bool:
        return self in _FAILURE_CODES


_FAILURE_CODES = frozenset({AppCode.REGISTER_USER_FAILED})


__all__ = ["AppCode", "StatusClassification"]
