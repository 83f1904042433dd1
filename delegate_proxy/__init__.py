# -*- coding: utf-8 -*-

from loguru import logger

from delegate_proxy.capabilities import messages_of, responds_to
from delegate_proxy.exceptions import DelegateProxyError, UnreferenceableTargetError
from delegate_proxy.host import DelegateHost
from delegate_proxy.proxy import PRIORITY, ForwardingProxy, Slot

# Silent until the application opts in through utils.log_propagate.
logger.disable("delegate_proxy")

__all__ = [
    "DelegateHost",
    "DelegateProxyError",
    "ForwardingProxy",
    "PRIORITY",
    "Slot",
    "UnreferenceableTargetError",
    "messages_of",
    "responds_to",
]
