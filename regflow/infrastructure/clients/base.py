# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared JSON-over-HTTP plumbing for the downstream service adapters."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from regflow.shared.logging import StructuredLogger, event_logger, logger

from .exceptions import UpstreamServiceError


def _upstream_reason(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        reason = data.get("msg") or data.get("message")
        if reason:
            return str(reason)
    return None


class JsonServiceClient:
    service = "service"
    failure_prefix = "Failed to call service"

    def __init__(
        self,
        *,
        url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
        events: StructuredLogger | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client
        self._events = events or event_logger

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as http:
            yield http

    async def _post_json(self, payload: dict[str, Any]) -> Any:
        async with self._session() as http:
            try:
                response = await http.post(self._url, json=payload)
            except httpx.HTTPError as exc:
                raise UpstreamServiceError(
                    f"{self.failure_prefix}: {exc}", service=self.service
                ) from exc

        if not response.is_success:
            body = response.text[:200]
            logger.warning(f"{self.service}: status={response.status_code} body={body}")
            reason = _upstream_reason(response)
            raise UpstreamServiceError(
                f"{self.failure_prefix}: {reason or response.reason_phrase}",
                service=self.service,
                status_code=response.status_code,
                context={"status_code": response.status_code, "body": body},
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamServiceError(
                f"{self.failure_prefix}: response is not JSON",
                service=self.service,
                status_code=response.status_code,
            ) from exc
