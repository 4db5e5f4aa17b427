"""In-memory task store.

Tasks are short, trimmed, non-blank strings kept in insertion order.
A task has no identity of its own: its id is its 1-based position in
the current list, so ids shift after every removal.

Every operation reports failure through its return value and never
raises for bad input.

The store stays silent until tasklist.logging.configure_logging() has
run, so library callers never get log lines on stdout.
"""

from tasklist.logging import Loggers, logging_enabled

logger = Loggers.store()

TASK_LINE_FORMAT = "Task {number}: {description}"


def normalize(description: str) -> str:
    """Trim leading and trailing whitespace."""
    return description.strip()


def is_valid_description(description: str | None) -> bool:
    """Check that a description is a string and not blank."""
    return isinstance(description, str) and normalize(description) != ""


def _log(level: str, event: str, **fields: object) -> None:
    if logging_enabled():
        getattr(logger, level)(event, **fields)


def format_task_line(index: int, description: str) -> str:
    """Format a task for display using its 0-based index."""
    return TASK_LINE_FORMAT.format(number=index + 1, description=description)


class TaskStore:
    """Ordered collection of unique task descriptions.

    Invariants:
        - every stored description is trimmed and non-blank
        - no two stored descriptions are equal (case-sensitive)
        - order is insertion order with no gaps

    Example:
        >>> store = TaskStore()
        >>> store.add("Complete project")
        True
        >>> store.list()
        ['Task 1: Complete project']
        >>> store.update(1, "Complete project (updated)")
        True
        >>> store.remove(1)
        True
    """

    def __init__(self) -> None:
        self._tasks: list[str] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def is_empty(self) -> bool:
        """Check if the store holds no tasks."""
        return not self._tasks

    def add(self, description: str | None) -> bool:
        """Append a task.

        Args:
            description: Task text. Surrounding whitespace is trimmed.

        Returns:
            True if added; False if the text is missing, blank, or
            already present after trimming.
        """
        if not is_valid_description(description):
            self._reject("add", "invalid_input")
            return False

        normalized = normalize(description)
        if normalized in self._tasks:
            self._reject("add", "duplicate", description=normalized)
            return False

        self._tasks.append(normalized)
        _log("info", "task_added", task_id=len(self._tasks), description=normalized)
        return True

    def list(self) -> list[str]:
        """List tasks as display lines.

        Returns:
            Lines like "Task 1: ..." in store order. The list is a fresh
            copy; changing it does not touch the store.
        """
        return [format_task_line(i, task) for i, task in enumerate(self._tasks)]

    def update(self, task_id: int, new_description: str | None) -> bool:
        """Replace the task at a 1-based position.

        Setting a task to its own current text counts as success. Setting
        it to the text of any other task is rejected as a duplicate.

        Args:
            task_id: 1-based position, as shown by list().
            new_description: Replacement text, trimmed before storage.

        Returns:
            True if updated; False if the id is out of range, the text is
            missing or blank, or the text matches another task.
        """
        if not self._is_valid_id(task_id):
            self._reject("update", "invalid_position", task_id=task_id)
            return False
        if not is_valid_description(new_description):
            self._reject("update", "invalid_input", task_id=task_id)
            return False

        normalized = normalize(new_description)
        index = task_id - 1
        if self._would_become_duplicate(index, normalized):
            self._reject("update", "duplicate", task_id=task_id, description=normalized)
            return False

        self._tasks[index] = normalized
        _log("info", "task_updated", task_id=task_id, description=normalized)
        return True

    def remove(self, task_id: int) -> bool:
        """Remove the task at a 1-based position.

        Later tasks move up one position.

        Returns:
            True if removed; False if the id is out of range.
        """
        if not self._is_valid_id(task_id):
            self._reject("remove", "invalid_position", task_id=task_id)
            return False

        removed = self._tasks.pop(task_id - 1)
        _log("info", "task_removed", task_id=task_id, description=removed)
        return True

    def snapshot(self) -> tuple[str, ...]:
        """Return an immutable copy of the current tasks."""
        return tuple(self._tasks)

    def _is_valid_id(self, task_id: int) -> bool:
        # bool is an int subclass; True must not address task 1
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            return False
        return 1 <= task_id <= len(self._tasks)

    def _would_become_duplicate(self, target_index: int, normalized: str) -> bool:
        return any(
            existing == normalized
            for i, existing in enumerate(self._tasks)
            if i != target_index
        )

    @staticmethod
    def _reject(operation: str, reason: str, **fields: object) -> None:
        _log("debug", "task_rejected", operation=operation, reason=reason, **fields)
