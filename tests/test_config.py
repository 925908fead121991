"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from catdistribution import config
from catdistribution.catalog.pagination import Paginator
from catdistribution.main import build_controller
from catdistribution.oplog import OperationLogClient


@pytest.fixture(autouse=True)
def fresh_settings():
    config.reset_settings()
    yield
    config.reset_settings()


def test_defaults(monkeypatch):
    for name in ("CATDIST_PAGE_SIZE", "CATDIST_USER_ID", "CATDIST_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.page_size == 9
    assert settings.generation_interval_ms == 1000
    assert settings.user_id is None
    assert settings.page_size in config.PAGE_SIZE_OPTIONS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CATDIST_PAGE_SIZE", "6")
    monkeypatch.setenv("CATDIST_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("CATDIST_LOG_API_URL", "http://logs.test/")
    settings = config.get_settings()
    assert settings.page_size == 6
    assert settings.http_timeout == 2.5
    assert config.get_settings() is settings
    assert Paginator().page_size == 6
    client = OperationLogClient(None)
    assert client.logs_url == "http://logs.test/operationLogs"
    assert client.timeout == 2.5


def test_user_enables_operation_logging(monkeypatch):
    monkeypatch.setenv("CATDIST_USER_ID", "u-42")
    monkeypatch.setenv("CATDIST_USERNAME", "maria")
    controller = build_controller()
    try:
        assert controller.log_client.user.id == "u-42"
        assert controller.log_client.user.username == "maria"
    finally:
        controller.shutdown()


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("CATDIST_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        config.get_settings()
