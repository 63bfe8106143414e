# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from typing import Any


class UpstreamServiceError(Exception):
    def __init__(
        self,
        message: str,
        *,
        service: str,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.status_code = status_code
        self.context = context or {}
