# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from regflow.domain.users.entities import Account
from regflow.domain.users.ports import AccountCreator
from regflow.shared.codes import AppCode

from .base import JsonServiceClient
from .exceptions import UpstreamServiceError


class HttpAccountCreator(JsonServiceClient, AccountCreator):
    service = "users_api"
    failure_prefix = "Failed to create user"

    async def create_user(self, name: str, email: str) -> Account:
        data = await self._post_json({"name": name, "email": email})
        if not isinstance(data, Mapping):
            raise UpstreamServiceError(
                f"{self.failure_prefix}: unexpected payload", service=self.service
            )
        try:
            account = Account.from_payload(data)
        except (TypeError, ValueError) as exc:
            raise UpstreamServiceError(
                f"{self.failure_prefix}: {exc}", service=self.service
            ) from exc
        self._events.info(
            "HttpAccountCreator.create_user", AppCode.CREATE_USER_SUCCESS, {"response": data}
        )
        return account
