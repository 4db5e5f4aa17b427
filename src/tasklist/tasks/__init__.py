"""Task management core.

Provides an in-memory store of unique, trimmed task descriptions
addressed by their 1-based display position.

Example:
    >>> store = TaskStore()
    >>> store.add("Complete project")
    True
    >>> store.list()
    ['Task 1: Complete project']
    >>> store.remove(1)
    True
"""

from tasklist.tasks.store import TaskStore
from tasklist.tasks.synchronized import SynchronizedTaskStore

__all__ = ["TaskStore", "SynchronizedTaskStore"]
