"""Thread-safe facade over TaskStore.

TaskStore assumes serialized access. When several threads share one
store, wrap it here: each call holds a single re-entrant lock for its
whole duration, so every operation appears atomic to other threads.
"""

import threading

from tasklist.tasks.store import TaskStore


class SynchronizedTaskStore:
    """TaskStore wrapper that serializes every operation.

    Example:
        >>> store = SynchronizedTaskStore()
        >>> store.add("Write report")
        True
        >>> with store.locked() as inner:
        ...     inner.update(1, "Write final report")
        True
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self._store = store if store is not None else TaskStore()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __bool__(self) -> bool:
        with self._lock:
            return bool(self._store)

    def is_empty(self) -> bool:
        with self._lock:
            return self._store.is_empty()

    def add(self, description: str | None) -> bool:
        with self._lock:
            return self._store.add(description)

    def list(self) -> list[str]:
        with self._lock:
            return self._store.list()

    def update(self, task_id: int, new_description: str | None) -> bool:
        with self._lock:
            return self._store.update(task_id, new_description)

    def remove(self, task_id: int) -> bool:
        with self._lock:
            return self._store.remove(task_id)

    def snapshot(self) -> tuple[str, ...]:
        with self._lock:
            return self._store.snapshot()

    def locked(self) -> "_LockedStore":
        """Hold the lock across several calls.

        Positional ids are only stable while nothing else mutates the
        store, so read-then-write sequences should run inside this block.
        """
        return _LockedStore(self._lock, self._store)


class _LockedStore:
    def __init__(self, lock: threading.RLock, store: TaskStore) -> None:
        self._lock = lock
        self._store = store

    def __enter__(self) -> TaskStore:
        self._lock.acquire()
        return self._store

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._lock.release()
