import logging

import pytest

from gatewayapi_sms.core.config import Settings, get_settings
from gatewayapi_sms.core.logging import configure_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GATEWAYAPI_TOKEN", "  'abc'  ")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings(_env_file=None)

    assert settings.GATEWAYAPI_TOKEN == "abc"
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FILE_PATH is None


def test_blank_token_is_treated_as_unset(monkeypatch):
    monkeypatch.setenv("GATEWAYAPI_TOKEN", "   ")

    assert Settings(_env_file=None).GATEWAYAPI_TOKEN is None


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()


def test_configure_logging_writes_to_file(tmp_path, monkeypatch, restore_root_logger):
    log_file = tmp_path / "logs" / "gatewayapi.log"
    monkeypatch.setenv("LOG_FILE_PATH", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    configure_logging(Settings(_env_file=None))
    logging.getLogger("gatewayapi.client").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG [gatewayapi.client] hello from test" in content
