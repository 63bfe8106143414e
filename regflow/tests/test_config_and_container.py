from __future__ import annotations

import logging
from pathlib import Path

import pytest
from loguru import logger as _logger

from regflow.application.use_cases.users.register_user import RegisterUserUseCase
from regflow.infrastructure.clients import HttpAccountCreator, HttpNewsletterSubscriber
from regflow.infrastructure.container import Container
from regflow.shared.codes import AppCode
from regflow.shared.config import AppConfig, load_config
from regflow.shared.logging import event_logger, setup_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_FILE",
        "DEBUG_LOGGING",
        "USERS_API_URL",
        "NEWSLETTER_API_URL",
        "SERVICES_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults(clean_env) -> None:
    config = AppConfig()

    assert config.log_level == "INFO"
    assert config.debug_logging is False
    assert config.services.users_url == "https://www.course-api.com/jest-course/users"
    assert config.services.newsletter_url == "https://www.course-api.com/jest-course/newsletter"
    assert config.services.timeout == 30.0
    assert not config.is_production()


def test_config_reads_environment(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("USERS_API_URL", "http://users.local/users")
    monkeypatch.setenv("SERVICES_HTTP_TIMEOUT", "5")

    config = load_config()

    assert config is load_config()
    assert config.is_production()
    assert config.log_level == "DEBUG"
    assert config.debug_logging is True
    assert config.services.users_url == "http://users.local/users"
    assert config.services.timeout == 5.0


def test_container_wires_use_case_from_config(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("NEWSLETTER_API_URL", "http://news.local/subscribe")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "container.log"))
    container = Container(AppConfig())

    use_case = container.register_user_use_case

    assert isinstance(use_case, RegisterUserUseCase)
    assert use_case is container.register_user_use_case
    assert isinstance(container.account_creator, HttpAccountCreator)
    assert isinstance(container.newsletter_subscriber, HttpNewsletterSubscriber)
    assert container.newsletter_subscriber._url == "http://news.local/subscribe"
    assert container.events is event_logger


def test_setup_logging_writes_events_to_log_file(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "logs" / "regflow.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))

    setup_logging()
    event_logger.info("Caller.op", AppCode.REGISTER_USER_SUCCESS, {"user": "john"})
    event_logger.error("Caller.op", AppCode.REGISTER_USER_FAILED)
    _logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "[INFO] [Caller.op] REGISTER_USER_SUCCESS" in content
    assert '"user": "john"' in content
    assert "[ERROR] [Caller.op] REGISTER_USER_FAILED" in content


def test_setup_logging_respects_level(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "regflow.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))

    setup_logging("error")
    event_logger.info("Caller.op", AppCode.REGISTER_USER_SUCCESS)
    event_logger.error("Caller.op", AppCode.REGISTER_USER_FAILED)
    _logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "REGISTER_USER_SUCCESS" not in content
    assert "REGISTER_USER_FAILED" in content


def test_container_sets_up_logging_once(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "container.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    container = Container(AppConfig())

    container.events.info("Caller.op", AppCode.REGISTER_USER_SUCCESS)
    assert container.events is container.events
    _logger.remove()

    assert log_file.read_text(encoding="utf-8").count("[INFO] [Caller.op]") == 1


def test_setup_logging_routes_stdlib_records_into_loguru(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "stdlib.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))

    setup_logging("debug")
    logging.getLogger("regflow.tests").debug("stdlib record")
    _logger.remove()

    assert "stdlib record" in log_file.read_text(encoding="utf-8")


def test_process_logger_only_captures_event_lines_after_setup_logging(
    clean_env, restore_loguru, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_lines: list[str] = []
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "order.log"))
    setup_logging("debug")
    handler_id = _logger.add(
        lambda message: log_lines.append(str(message).rstrip("\n")),
        format="{level}|{extra[correlation_id]}|{message}",
        level="INFO",
    )

    logging.getLogger("asyncio").debug("Using selector: EpollSelector")
    event_logger.info("Caller.op", AppCode.REGISTER_USER_SUCCESS)
    _logger.remove(handler_id)

    assert log_lines == ["INFO|-|[INFO] [Caller.op] REGISTER_USER_SUCCESS"]
