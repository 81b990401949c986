from __future__ import annotations
from typing import Any, Callable, Dict, List, Self

Listener = Callable[..., Any]


class EventEmitter:
    """
    Per-instance listener registry: event name -> ordered list of callbacks.

    Listeners run synchronously in registration order. An exception raised
    by a listener propagates to the caller of :meth:`trigger` right away, so
    the listeners after it do not run for that event.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, name: str, callback: Listener) -> Self:
        """Register ``callback`` for ``name``. Duplicates are allowed."""
        self._listeners.setdefault(name, []).append(callback)
        return self

    def off(self, name: str, callback: Listener | None = None) -> Self:
        """
        Unregister listeners.

        Without ``callback`` every listener of ``name`` is dropped. With it,
        only the first registered entry equal to ``callback`` is removed.
        """
        if callback is None:
            self._listeners.pop(name, None)
            return self

        callbacks = self._listeners.get(name, [])
        if callback in callbacks:
            callbacks.remove(callback)
        return self

    def trigger(self, name: str, *args: Any) -> Self:
        """Call every listener of ``name`` with ``args``."""
        # snapshot: listeners added or removed while firing apply next time
        for callback in list(self._listeners.get(name, ())):
            callback(*args)
        return self

    def listeners(self, name: str) -> List[Listener]:
        """Copy of the callbacks registered for ``name``."""
        return list(self._listeners.get(name, ()))
