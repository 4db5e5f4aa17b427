"""tasklist - an in-memory manager for short text tasks.

This package provides:

- TaskStore: ordered, duplicate-free task descriptions addressed by
  1-based position, with add / list / update / remove / snapshot
- SynchronizedTaskStore: the same API behind a single lock
- Layered settings (environment, JSON files, .env) and structured logging
- A small console driver (``python -m tasklist``)
"""

from tasklist.config import (
    Settings,
    SettingsContext,
    get_context_settings,
    get_settings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from tasklist.tasks import SynchronizedTaskStore, TaskStore

__all__ = [
    # Tasks
    "TaskStore",
    "SynchronizedTaskStore",
    # Settings
    "Settings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "reload_settings",
]

__version__ = "0.1.0"
