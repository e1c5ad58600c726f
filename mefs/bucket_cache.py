"""Thread-safe in-memory cache of bucket locations."""

from __future__ import annotations

import threading


class BucketLocationCache:
    """Maps bucket names to their region, safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, str] = {}

    def get(self, bucket_name: str) -> str | None:
        """Return the cached location of a bucket, or None if unknown."""
        with self._lock:
            return self._items.get(bucket_name)

    def set(self, bucket_name: str, location: str) -> None:
        """Store the location of a bucket."""
        with self._lock:
            self._items[bucket_name] = location

    def delete(self, bucket_name: str) -> None:
        """Forget a bucket; unknown names are ignored."""
        with self._lock:
            self._items.pop(bucket_name, None)

    def __contains__(self, bucket_name: object) -> bool:
        with self._lock:
            return bucket_name in self._items