# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from regflow.domain.users.entities import RegistrationRequest, RegistrationResult
from regflow.domain.users.ports import AccountCreator, NewsletterSubscriber
from regflow.shared.errors import AppCode, StatusClassification, raise_app_error
from regflow.shared.logging import (
    StructuredLogger,
    clear_correlation_id,
    event_logger,
    get_correlation_id,
    set_correlation_id,
)

FAILURE_MESSAGE = "failed to register user"


class RegisterUserUseCase:
    """Create an account, then subscribe it to the newsletter.

    Any collaborator failure is reported as a single
    ``INTERNAL_SERVER_ERROR`` / ``REGISTER_USER_FAILED`` :class:`AppError`
    carrying the original exception under ``details["cause"]``.
    """

    caller = "RegisterUserUseCase.execute"

    def __init__(
        self,
        *,
        accounts: AccountCreator,
        newsletter: NewsletterSubscriber,
        events: StructuredLogger | None = None,
    ) -> None:
        self._accounts = accounts
        self._newsletter = newsletter
        self._events = events or event_logger

    async def execute(self, request: RegistrationRequest) -> RegistrationResult:
        owns_correlation = get_correlation_id() == "-"
        if owns_correlation:
            set_correlation_id(uuid.uuid4().hex)
        try:
            return await self._register(request)
        finally:
            if owns_correlation:
                clear_correlation_id()

    async def _register(self, request: RegistrationRequest) -> RegistrationResult:
        try:
            account = await self._accounts.create_user(request.name, request.email)
            await self._newsletter.subscribe_user(account)
        except Exception as exc:
            raise_app_error(
                StatusClassification.INTERNAL_SERVER_ERROR,
                AppCode.REGISTER_USER_FAILED,
                FAILURE_MESSAGE,
                {"cause": exc},
                events=self._events,
            )

        self._events.info(self.caller, AppCode.REGISTER_USER_SUCCESS, {"user": account})
        return RegistrationResult()
