# -*- coding: utf-8 -*-

import copy
import enum
import weakref
from functools import partial

from loguru import logger

from delegate_proxy.capabilities import messages_of, responds_to
from delegate_proxy.exceptions import UnreferenceableTargetError


class Slot(enum.Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


# Routing order, first capable target wins.
PRIORITY = (Slot.INTERNAL, Slot.EXTERNAL)


def _dead_ref():
    return None


def _make_ref(target):
    if target is None:
        return _dead_ref
    try:
        return weakref.ref(target)
    except TypeError:
        raise UnreferenceableTargetError(target) from None


class ForwardingProxy:
    """Stands in for a single delegate while holding two of them.

    Each message goes to exactly one target: the internal delegate when it is
    alive and implements the message, otherwise the external delegate. When
    neither can handle it the call is a no-op that returns the message's
    default result, a fresh copy each time. Both targets are held through weak references, so the
    proxy never keeps a delegate alive.
    """

    __slots__ = ("_refs", "_protocol", "_defaults", "__weakref__")

    def __init__(self, internal=None, external=None, protocol=None, defaults=None):
        self._refs = {Slot.INTERNAL: _dead_ref, Slot.EXTERNAL: _dead_ref}
        self._protocol = protocol
        self._defaults = dict(defaults or {})
        self.bind(Slot.INTERNAL, internal)
        self.bind(Slot.EXTERNAL, external)

    def bind(self, slot, target):
        slot = Slot(slot)
        self._refs[slot] = _make_ref(target)
        logger.debug("Bound {} delegate: {!r}", slot.value, target)

    def target(self, slot):
        return self._refs[Slot(slot)]()

    @property
    def internal_target(self):
        return self.target(Slot.INTERNAL)

    @internal_target.setter
    def internal_target(self, target):
        self.bind(Slot.INTERNAL, target)

    @property
    def external_target(self):
        return self.target(Slot.EXTERNAL)

    @external_target.setter
    def external_target(self, target):
        self.bind(Slot.EXTERNAL, target)

    @property
    def protocol(self):
        return self._protocol

    def in_protocol(self, message):
        if self._protocol is None:
            return not message.startswith("_")
        return message in messages_of(self._protocol)

    def resolve(self, message):
        """Return the target ``dispatch`` would route ``message`` to, or None."""
        if not self.in_protocol(message):
            return None
        for slot in PRIORITY:
            target = self._refs[slot]()
            if target is not None and responds_to(target, message):
                return target
        return None

    def can_handle(self, message):
        return self.resolve(message) is not None

    def dispatch(self, message, /, *args, **kwargs):
        target = self.resolve(message)
        if target is None:
            logger.trace("No delegate handles {}, returning default", message)
            return copy.deepcopy(self._defaults.get(message))
        logger.trace("Routing {} to {!r}", message, target)
        return getattr(target, message)(*args, **kwargs)

    def __getattr__(self, item):
        # only reached for names the proxy itself does not define
        if item.startswith("_") or self.resolve(item) is None:
            raise AttributeError(
                "No bound delegate of {} handles {!r}".format(
                    type(self).__name__, item
                )
            )
        return partial(self.dispatch, item)

    def __dir__(self):
        names = set(super().__dir__())
        candidates = set()
        if self._protocol is not None:
            candidates = messages_of(self._protocol)
        else:
            for slot in PRIORITY:
                target = self._refs[slot]()
                if target is not None:
                    candidates.update(dir(target))
        names.update(name for name in candidates if self.can_handle(name))
        return sorted(names)

    def __repr__(self):
        return "<{} internal={!r} external={!r}>".format(
            type(self).__name__, self.internal_target, self.external_target
        )
