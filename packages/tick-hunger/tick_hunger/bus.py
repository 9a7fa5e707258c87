"""In-process pub/sub bus with synchronous, re-entrant-safe delivery."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class _Subscription:
    __slots__ = ("handler", "active")

    def __init__(self, handler: _Handler) -> None:
        self.handler = handler
        self.active = True


class SignalBus:
    """Delivers each publish to current subscribers before publish returns.

    Handlers may subscribe or unsubscribe from inside a callback. A handler
    removed mid-dispatch is not called again, and a handler added mid-dispatch
    first hears the next publish.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Subscription]] = {}

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        subs = self._subscribers.get(signal_name, [])
        self._subscribers[signal_name] = [*subs, _Subscription(handler)]

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        subs = self._subscribers.get(signal_name)
        if subs is None:
            return
        for i, sub in enumerate(subs):
            if sub.handler == handler:
                sub.active = False
                # Lists are rebound, never mutated: in-flight publishes keep
                # iterating their own snapshot.
                self._subscribers[signal_name] = subs[:i] + subs[i + 1:]
                return

    def unsubscribe_all(self, handler: _Handler) -> None:
        """Remove every subscription of handler, across all signals."""
        for signal_name, subs in list(self._subscribers.items()):
            for sub in subs:
                if sub.handler == handler:
                    sub.active = False
            self._subscribers[signal_name] = [s for s in subs if s.active]

    def publish(self, signal_name: str, **data: Any) -> None:
        for sub in self._subscribers.get(signal_name, ()):
            if sub.active:
                sub.handler(signal_name, data)

    def subscriber_count(self, signal_name: str) -> int:
        return len(self._subscribers.get(signal_name, ()))

    def clear(self) -> None:
        """Drop every subscription."""
        for subs in self._subscribers.values():
            for sub in subs:
                sub.active = False
        self._subscribers.clear()
