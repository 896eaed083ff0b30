"""Key-value storage capabilities used by the meet store and the admin flag."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol

from django.core.cache import caches


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class CacheKeyValueStore:
    """Store text blobs in a Django cache that never expires them."""

    def __init__(self, alias: str = "default"):
        self.alias = alias

    @property
    def cache(self):
        # Resolved per call so ``override_settings(CACHES=...)`` is honoured.
        return caches[self.alias]

    def get_item(self, key: str) -> str | None:
        return self.cache.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.cache.set(key, value, timeout=None)

    def remove_item(self, key: str) -> None:
        self.cache.delete(key)


class SessionKeyValueStore:
    """Adapt a Django session (or any mutable mapping) to the store protocol."""

    def __init__(self, session: MutableMapping[str, str]):
        self.session = session

    def get_item(self, key: str) -> str | None:
        return self.session.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.session[key] = value

    def remove_item(self, key: str) -> None:
        self.session.pop(key, None)


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
