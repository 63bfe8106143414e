# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import (
    SUCCESS_MESSAGE,
    Account,
    RegistrationRequest,
    RegistrationResult,
    SubscriptionReceipt,
)
from .users.ports import AccountCreator, NewsletterSubscriber

__all__ = [
    "SUCCESS_MESSAGE",
    "Account",
    "AccountCreator",
    "NewsletterSubscriber",
    "RegistrationRequest",
    "RegistrationResult",
    "SubscriptionReceipt",
]
