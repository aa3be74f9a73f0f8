"""Synchronous observer registry used by the board to publish changes."""

from collections import defaultdict


class EventEmitter:
    def __init__(self):
        self._handlers = defaultdict(list)

    def on(self, name, callback):
        """Subscribe `callback` to `name`. Callbacks run in registration order."""
        if not callable(callback):
            raise TypeError(f"callback for '{name}' must be callable")
        self._handlers[name].append(callback)
        return callback

    def off(self, name, callback=None):
        """Drop one callback, or every callback for `name` when none is given."""
        if callback is None:
            self._handlers.pop(name, None)
            return
        handlers = self._handlers.get(name)
        if not handlers:
            return
        try:
            handlers.remove(callback)
        except ValueError:
            return
        if not handlers:
            del self._handlers[name]

    def fire(self, name, *args):
        # Snapshot so a handler that (un)subscribes does not affect this delivery.
        for callback in list(self._handlers.get(name, ())):
            callback(*args)

    def listeners(self, name):
        return list(self._handlers.get(name, ()))
