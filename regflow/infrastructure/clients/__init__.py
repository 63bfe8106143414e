# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import JsonServiceClient
from .exceptions import UpstreamServiceError
from .newsletter_api import HttpNewsletterSubscriber
from .users_api import HttpAccountCreator

__all__ = [
    "HttpAccountCreator",
    "HttpNewsletterSubscriber",
    "JsonServiceClient",
    "UpstreamServiceError",
]
