# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from regflow.application.use_cases.users.register_user import RegisterUserUseCase
from regflow.infrastructure.clients import HttpAccountCreator, HttpNewsletterSubscriber
from regflow.shared.config import AppConfig, load_config
from regflow.shared.logging import EventLogger, event_logger, setup_logging


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = load_config()
        return self._config

    @cached_property
    def events(self) -> EventLogger:
        setup_logging(config=self.config)
        return event_logger

    @cached_property
    def account_creator(self) -> HttpAccountCreator:
        services = self.config.services
        return HttpAccountCreator(
            url=services.users_url, timeout=services.timeout, events=self.events
        )

    @cached_property
    def newsletter_subscriber(self) -> HttpNewsletterSubscriber:
        services = self.config.services
        return HttpNewsletterSubscriber(
            url=services.newsletter_url, timeout=services.timeout, events=self.events
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            accounts=self.account_creator,
            newsletter=self.newsletter_subscriber,
            events=self.events,
        )


container = Container()
