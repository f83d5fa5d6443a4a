"""
Client cache (pooling).

Avoids creating redundant service clients, each with its own HTTP pool and
thread pool, when the same service + config combination is requested
multiple times via the universal factory.
"""

from __future__ import annotations

import hashlib
import json
import threading
from typing import Any


class ClientCache:
    """Thread-safe, in-process cache for clients keyed by service + config hash."""

    _instance: ClientCache | None = None
    _cache: dict[str, Any]
    _lock: threading.Lock

    def __new__(cls) -> ClientCache:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._cache = {}
            cls._instance._lock = threading.Lock()
        return cls._instance

    @staticmethod
    def _make_key(service_name: str, config: dict) -> str:
        """Produce a deterministic cache key from service and config."""
        # Sort keys so dict ordering doesn't affect the hash.
        serialised = json.dumps(
            {"service": service_name, "config": config},
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(serialised.encode()).hexdigest()

    def get_or_create(self, service_name: str, config: dict, factory: Any) -> Any:
        """Return a cached client or create one via *factory*.

        Args:
            service_name: Service name (e.g. 'dynamodb').
            config: Configuration dict.
            factory: Callable(config) that creates a new client.

        Returns:
            The cached (or newly-created) client. A cached client that was
            closed since is replaced by a new one.
        """
        key = self._make_key(service_name, config)
        with self._lock:
            cached = self._cache.get(key)
            if cached is None or getattr(cached, "closed", False) is True:
                self._cache[key] = factory(config)
            return self._cache[key]

    def clear(self) -> None:
        """Close and flush all cached clients."""
        with self._lock:
            for client in self._cache.values():
                close = getattr(client, "close", None)
                if callable(close):
                    close()
            self._cache.clear()
