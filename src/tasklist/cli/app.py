"""Console driver for the task store.

Runs the fixed add / list / update / remove sequence against a fresh
store and reports each outcome on a rich Console.
"""

from rich.console import Console

from tasklist.config import Settings, get_settings
from tasklist.logging import Loggers, bind_context, clear_context, configure_logging
from tasklist.tasks import SynchronizedTaskStore, TaskStore

logger = Loggers.cli()

DEMO_TASK = "Complete project"
DEMO_TASK_UPDATED = "Complete project (updated)"


def print_operation_result(
    console: Console,
    success: bool,
    success_msg: str,
    fail_msg: str,
) -> None:
    """Print success_msg or fail_msg depending on the outcome."""
    console.print(success_msg if success else fail_msg, markup=False, highlight=False)


def build_store(settings: Settings) -> TaskStore | SynchronizedTaskStore:
    """Create the store the settings ask for."""
    store = TaskStore()
    if settings.thread_safe:
        return SynchronizedTaskStore(store)
    return store


def run_demo(store: TaskStore | SynchronizedTaskStore, console: Console) -> None:
    """Exercise every store operation once.

    Args:
        store: Store to run against (normally empty).
        console: Where results are printed.
    """
    added = store.add(DEMO_TASK)
    print_operation_result(console, added, "Task added.", "Task NOT added.")

    for line in store.list():
        console.print(line, markup=False, highlight=False)

    updated = store.update(1, DEMO_TASK_UPDATED)
    print_operation_result(console, updated, "Task updated.", "Task NOT updated.")

    removed = store.remove(1)
    print_operation_result(console, removed, "Task removed.", "Task NOT removed.")


def main(console: Console | None = None) -> int:
    """Entry point for ``python -m tasklist`` and the ``tasklist`` script.

    Args:
        console: Output target; a terminal Console when omitted.

    Returns:
        Process exit code.
    """
    settings = get_settings()
    configure_logging(settings)
    Loggers.config().debug("settings_loaded", **settings.model_dump())

    bind_context(app_name=settings.app_name)
    try:
        store = build_store(settings)
        logger.debug("demo_starting", store=type(store).__name__)
        run_demo(store, console or Console())
    finally:
        clear_context()
    return 0
