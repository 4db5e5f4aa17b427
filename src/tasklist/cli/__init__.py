"""Console driver for tasklist."""

from tasklist.cli.app import build_store, main, print_operation_result, run_demo

__all__ = ["build_store", "main", "print_operation_result", "run_demo"]
