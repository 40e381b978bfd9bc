from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

Listener = Callable[[], None]
T = TypeVar("T")


class ChangeNotifier:
    """
    Minimal listener list.

    - add_listener(cb) registers a zero-arg callback (duplicates allowed)
    - remove_listener(cb) drops one registration; unknown callbacks are ignored
    - notify_listeners() calls a snapshot of the list, so callbacks may unsubscribe mid-notify
    - dispose() drops everything; a disposed notifier must not be used again
    """
    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._disposed = False

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        assert not self._disposed, f"{type(self).__name__} used after dispose()"
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        for i, cb in enumerate(self._listeners):
            if cb == listener:
                del self._listeners[i]
                return

    def notify_listeners(self) -> None:
        assert not self._disposed, f"{type(self).__name__} used after dispose()"
        for cb in list(self._listeners):
            cb()

    def dispose(self) -> None:
        self._listeners.clear()
        self._disposed = True


class ValueNotifier(ChangeNotifier, Generic[T]):
    """ Holds one value and notifies when it changes. """
    def __init__(self, value: T) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        if new == self._value:
            return
        self._value = new
        self.notify_listeners()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
