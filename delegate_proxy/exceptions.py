# -*- coding: utf-8 -*-


class DelegateProxyError(Exception):
    pass


class UnreferenceableTargetError(DelegateProxyError, TypeError):
    """Raised when a delegate cannot be held through a weak reference."""

    def __init__(self, target):
        self.target = target
        super().__init__(
            "Cannot hold a weak reference to {!r} (type {}); give the class a "
            "__weakref__ slot or bind a different object".format(
                target, type(target).__name__
            )
        )
