"""Minimal synchronous event emitter shared by pipelines and streams."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List

Listener = Callable[..., Any]


class EventEmitter:
    """Register listeners by event name and call them in order on ``emit``.

    Listeners run synchronously on the emitting call, in registration order.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> "EventEmitter":
        self._listeners[event].append(listener)
        return self

    def once(self, event: str, listener: Listener) -> "EventEmitter":
        def _wrapper(*args: Any) -> Any:
            self.off(event, _wrapper)
            return listener(*args)

        return self.on(event, _wrapper)

    def off(self, event: str, listener: Listener) -> "EventEmitter":
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)
        return self

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of ``event``. Return False when there were none."""
        listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))


__all__ = ["EventEmitter", "Listener"]
