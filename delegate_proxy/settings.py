# -*- coding: utf-8 -*-

import importlib
import logging
import os

logger = logging.getLogger(__name__)

ENV_PREFIX = "DELEGATE_PROXY_"

DEFAULTS = {
    "LOGLEVEL": "ERROR",
    "PROPAGATE_LOGS": True,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _coerce(default, raw):
    if isinstance(default, bool):
        value = raw.strip().lower()
        if value in _TRUTHY:
            return True
        if value in _FALSY:
            return False
        raise ValueError("Expected a boolean, got {!r}".format(raw))
    if isinstance(default, int):
        return int(raw)
    return raw


def import_settings(settings_module="local_settings", environ=None):
    """Build the settings dict.

    Defaults are overridden by the UPPERCASE names of ``settings_module``
    when it can be imported, then by ``DELEGATE_PROXY_*`` environment
    variables. Returns ``(settings, found_local_settings)``.
    """
    settings = dict(DEFAULTS)
    found_local_settings = True
    try:
        local_settings = importlib.import_module(settings_module)
    except ImportError:
        found_local_settings = False
        logger.debug("No settings module %r found, using defaults", settings_module)
    else:
        for key in dir(local_settings):
            if key.isupper():
                settings[key] = getattr(local_settings, key)

    environ = os.environ if environ is None else environ
    for key, raw in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):]
        settings[name] = _coerce(settings.get(name), raw)

    return settings, found_local_settings
