# -*- coding: utf-8 -*-

import pytest
from loguru import logger

from delegate_proxy.utils import log_propagate
from tests.fakes import AppDelegate, InternalHandler


@pytest.fixture
def internal():
    return InternalHandler("internal")


@pytest.fixture
def external():
    return AppDelegate("external")


@pytest.fixture
def propagated_logs(caplog):
    sink_id = log_propagate.install()
    caplog.set_level(5)
    yield caplog
    log_propagate.uninstall(sink_id)
    logger.disable("delegate_proxy")
