# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from regflow.domain.users.entities import Account, SubscriptionReceipt
from regflow.domain.users.ports import NewsletterSubscriber
from regflow.shared.codes import AppCode

from .base import JsonServiceClient


class HttpNewsletterSubscriber(JsonServiceClient, NewsletterSubscriber):
    service = "newsletter_api"
    failure_prefix = "Failed to subscribe user"

    async def subscribe_user(self, account: Account) -> SubscriptionReceipt:
        data = await self._post_json(account.to_payload())
        message = data.get("msg", "") if isinstance(data, Mapping) else ""
        self._events.info(
            "HttpNewsletterSubscriber.subscribe_user",
            AppCode.SUBSCRIBE_USER_SUCCESS,
            {"response": data},
        )
        return SubscriptionReceipt(message=str(message))
