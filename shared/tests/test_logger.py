"""
Tests for logging setup
"""

import logging

import pytest
import structlog
import yaml

from shared.utils.logger import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers = handlers
    root.setLevel(level)


def test_default_config_applies_level():
    setup_logging("order-service", "debug")

    assert logging.getLogger().level == logging.DEBUG
    assert structlog.contextvars.get_contextvars() == {"service": "order-service"}


def test_yaml_config_file(tmp_path):
    config_file = tmp_path / "logging.yaml"
    config_file.write_text(yaml.safe_dump({
        "version": 1,
        "disable_existing_loggers": False,
        "handlers": {"null": {"class": "logging.NullHandler"}},
        "root": {"handlers": ["null"]},
    }))

    setup_logging("api-gateway", "warning", str(config_file))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert [type(handler) for handler in root.handlers] == [logging.NullHandler]


def test_missing_config_file_falls_back(tmp_path):
    setup_logging("customer-service", "INFO", str(tmp_path / "absent.yaml"))

    assert logging.getLogger().level == logging.INFO
