#!/usr/bin/env python
"""Standalone demo for the task store.

This demo walks through:
1. Adding tasks, including rejected blanks and duplicates
2. Positional ids shifting after a removal
3. Update rules (own value allowed, another task's value rejected)
4. Snapshots staying frozen while the store changes
5. Sharing one store between threads

Usage:
    python examples/task_store_demo.py
"""

import threading

from tasklist.logging import configure_logging
from tasklist.tasks import SynchronizedTaskStore, TaskStore


def show(store: TaskStore | SynchronizedTaskStore) -> None:
    lines = store.list()
    if not lines:
        print("    (empty)")
    for line in lines:
        print(f"    {line}")


def demo_adding():
    """Demo validation and duplicate prevention on add."""
    print("\n" + "=" * 60)
    print("Adding Tasks Demo")
    print("=" * 60)

    store = TaskStore()
    for text in ["Write outline", "  Draft content  ", "", "   ", None, "Write outline"]:
        print(f"  add({text!r}) -> {store.add(text)}")

    print()
    show(store)


def demo_positions():
    """Demo ids moving after a removal."""
    print("\n" + "=" * 60)
    print("Positional Ids Demo")
    print("=" * 60)

    store = TaskStore()
    for text in ["A", "B", "C"]:
        store.add(text)
    show(store)

    print(f"\n  remove(2) -> {store.remove(2)}")
    show(store)
    print(f"\n  remove(3) -> {store.remove(3)}  (C is now task 2)")


def demo_updates():
    """Demo the update duplicate rule."""
    print("\n" + "=" * 60)
    print("Update Rules Demo")
    print("=" * 60)

    store = TaskStore()
    store.add("Task1")
    store.add("Task2")
    print(f"  update(1, 'Task1') -> {store.update(1, 'Task1')}  (own value)")
    print(f"  update(1, 'Task2') -> {store.update(1, 'Task2')}  (another task)")
    print(f"  update(2, 'Task3') -> {store.update(2, 'Task3')}")
    show(store)


def demo_snapshot():
    """Demo snapshots as frozen copies."""
    print("\n" + "=" * 60)
    print("Snapshot Demo")
    print("=" * 60)

    store = TaskStore()
    store.add("Task A")
    snapshot = store.snapshot()
    store.add("Task B")
    print(f"  snapshot: {snapshot}")
    print(f"  current:  {store.snapshot()}")
    try:
        snapshot[0] = "changed"
    except TypeError as e:
        print(f"  write to snapshot failed: {e}")


def demo_threads():
    """Demo a store shared by several threads."""
    print("\n" + "=" * 60)
    print("Shared Store Demo")
    print("=" * 60)

    store = SynchronizedTaskStore()

    def worker(name: str):
        for i in range(5):
            store.add(f"item {i}")
        store.add(f"done by {name}")

    threads = [threading.Thread(target=worker, args=(f"w{n}",)) for n in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print(f"  {len(store)} unique tasks after 3 workers")
    show(store)


def main():
    """Run all demos."""
    # warning level by default; store events are filtered out
    configure_logging()

    print("\n" + "#" * 60)
    print("#  Task Store Demo")
    print("#" * 60)

    demo_adding()
    demo_positions()
    demo_updates()
    demo_snapshot()
    demo_threads()

    print("\n" + "#" * 60)
    print("#  Demo Complete!")
    print("#" * 60 + "\n")


if __name__ == "__main__":
    main()
