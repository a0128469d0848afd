"""hashstore: a tiny JSON-file key-value store with hash-gated persistence and per-key subscriptions."""

from __future__ import annotations

from .errors import DecodeError, NotFoundError, StoreError
from .records import StoreRecord
from .settings import Settings, get_settings
from .store import Store
from .subscriptions import Subscription, SubscriptionRegistry

__all__ = [
    "DecodeError",
    "NotFoundError",
    "Settings",
    "Store",
    "StoreError",
    "StoreRecord",
    "Subscription",
    "SubscriptionRegistry",
    "get_settings",
]
