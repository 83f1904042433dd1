# -*- coding: utf-8 -*-

import inspect
import weakref

# protocol class -> frozenset of message names, dropped with the class
_messages_cache = weakref.WeakKeyDictionary()


def responds_to(target, message):
    """Does ``target`` implement ``message``?

    The message counts as implemented when the target has a callable
    attribute by that name. A target may additionally narrow what it answers
    to through a ``responds_to(message)`` method of its own.
    """
    if target is None or not message or message.startswith("_"):
        return False
    if not callable(getattr(target, message, None)):
        return False
    hook = getattr(target, "responds_to", None)
    if callable(hook) and not inspect.isclass(target):
        return bool(hook(message))
    return True


def messages_of(protocol):
    """Public method names declared by ``protocol`` and its bases."""
    try:
        return _messages_cache[protocol]
    except KeyError:
        pass
    names = set()
    for klass in inspect.getmro(protocol):
        if klass is object or klass.__module__ == "typing":
            continue
        for name, value in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(value, (staticmethod, classmethod)) or inspect.isfunction(value):
                names.add(name)
    messages = frozenset(names)
    _messages_cache[protocol] = messages
    return messages
