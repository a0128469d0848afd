from __future__ import annotations

from typing import Any, Callable

from .errors import NotFoundError

Subscription = Callable[[Any], object]


class SubscriptionRegistry:
    """
    Per-key callback lists.

    Callbacks fire in registration order and are matched by identity on
    removal. Exceptions raised by a callback are not caught here.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[Subscription]] = {}

    def add(self, key: str, callback: Subscription) -> None:
        self._subscriptions.setdefault(key, []).append(callback)

    def remove(self, key: str, callback: Subscription) -> None:
        callbacks = self._subscriptions.get(key)
        if callbacks is None:
            raise NotFoundError(key, f"No subscriptions for key {key!r}")
        for index, cb in enumerate(callbacks):
            if cb is callback:
                del callbacks[index]
                return
        raise NotFoundError(callback, f"Callback not subscribed to key {key!r}")

    def has_subscribers(self, key: str) -> bool:
        return bool(self._subscriptions.get(key))

    def subscribers(self, key: str) -> list[Subscription]:
        return list(self._subscriptions.get(key, ()))

    def notify(self, key: str, value: Any) -> None:
        # Snapshot so callbacks may subscribe/unsubscribe while being notified.
        for cb in self.subscribers(key):
            cb(value)
