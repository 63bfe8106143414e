# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, SubscriptionReceipt


class AccountCreator(Protocol):
    async def create_user(self, name: str, email: str) -> Account: ...


class NewsletterSubscriber(Protocol):
    async def subscribe_user(self, account: Account) -> SubscriptionReceipt: ...
