"""Per-key asyncio locking."""

import asyncio
import weakref


class KeyedLock:
    """One asyncio.Lock per key, created on first use.

    Locks are held weakly: once no caller holds or waits on a key's lock,
    the entry is dropped, so idle user ids do not accumulate.
    """

    def __init__(self):
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def __call__(self, key: str) -> asyncio.Lock:
        return self.get(key)

    def __len__(self) -> int:
        return len(self._locks)
