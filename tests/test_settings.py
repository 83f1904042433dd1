# -*- coding: utf-8 -*-

import logging
import sys
import types

import pytest
from loguru import logger

from delegate_proxy.settings import DEFAULTS, import_settings
from delegate_proxy.utils import log_propagate


@pytest.fixture
def local_settings(monkeypatch):
    module = types.ModuleType("test_local_settings")
    module.LOGLEVEL = "DEBUG"
    module.EXTRA_OPTION = 3
    module.lowercase = "ignored"
    monkeypatch.setitem(sys.modules, "test_local_settings", module)
    return module


def test_defaults_without_local_settings():
    settings, found = import_settings("no_such_settings_module", environ={})

    assert not found
    assert settings == DEFAULTS
    assert settings is not DEFAULTS


def test_local_settings_override_defaults(local_settings):
    settings, found = import_settings("test_local_settings", environ={})

    assert found
    assert settings["LOGLEVEL"] == "DEBUG"
    assert settings["EXTRA_OPTION"] == 3
    assert "lowercase" not in settings
    assert settings["PROPAGATE_LOGS"] is True


def test_environment_overrides_local_settings(local_settings):
    environ = {
        "DELEGATE_PROXY_LOGLEVEL": "WARNING",
        "DELEGATE_PROXY_PROPAGATE_LOGS": "off",
        "DELEGATE_PROXY_EXTRA_OPTION": "7",
        "UNRELATED": "1",
    }

    settings, _ = import_settings("test_local_settings", environ=environ)

    assert settings["LOGLEVEL"] == "WARNING"
    assert settings["PROPAGATE_LOGS"] is False
    assert settings["EXTRA_OPTION"] == 7
    assert "UNRELATED" not in settings


def test_invalid_boolean_in_environment():
    with pytest.raises(ValueError):
        import_settings(
            "no_such_settings_module", environ={"DELEGATE_PROXY_PROPAGATE_LOGS": "maybe"}
        )


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    sink_id = log_propagate.configure_logging({"LOGLEVEL": "DEBUG", "PROPAGATE_LOGS": True})
    try:
        assert calls[0]["level"] == "DEBUG"
        assert calls[0]["format"] == log_propagate.LOG_FORMAT
        assert sink_id is not None
    finally:
        log_propagate.uninstall(sink_id)
        logger.disable("delegate_proxy")

    assert log_propagate.configure_logging({"PROPAGATE_LOGS": False}) is None
    assert calls[1]["level"] == logging.ERROR
    logger.disable("delegate_proxy")
