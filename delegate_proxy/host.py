# -*- coding: utf-8 -*-

from delegate_proxy.proxy import ForwardingProxy, Slot


class DelegateHost:
    """Owning-component side of a :class:`ForwardingProxy`.

    Components that accept an application delegate but also need to see the
    same callbacks themselves inherit from this, assign their own handler to
    ``internal_delegate`` and hand ``delegate_proxy`` to whatever calls the
    delegate. Applications keep assigning ``delegate`` as usual.
    """

    delegate_protocol = None
    delegate_defaults = None

    def __init__(self, *args, **kwargs):
        # bases may assign self.delegate from their own __init__
        self._delegate_proxy = ForwardingProxy(
            protocol=self.delegate_protocol, defaults=self.delegate_defaults
        )
        super().__init__(*args, **kwargs)

    @property
    def delegate_proxy(self):
        return self._delegate_proxy

    @property
    def delegate(self):
        return self._delegate_proxy.target(Slot.EXTERNAL)

    @delegate.setter
    def delegate(self, value):
        self._delegate_proxy.bind(Slot.EXTERNAL, value)

    @property
    def internal_delegate(self):
        return self._delegate_proxy.target(Slot.INTERNAL)

    @internal_delegate.setter
    def internal_delegate(self, value):
        self._delegate_proxy.bind(Slot.INTERNAL, value)

    def notify(self, message, /, *args, **kwargs):
        return self._delegate_proxy.dispatch(message, *args, **kwargs)
