"""Exceptions raised by the fifoqueues containers.

Every error derives from `QueueError` and from the closest built-in
exception, so callers can catch either the package-specific type or the
familiar `ValueError` / `IndexError` / `OverflowError`.
"""

from typing import Any


class QueueError(Exception):
    """Base class for all container errors."""


class InvalidCapacityError(QueueError, ValueError):
    """Raised when a bounded container is built with a non-positive capacity."""

    def __init__(self, capacity: Any) -> None:
        self.capacity = capacity
        super().__init__(f"Capacity must be a positive integer, got {capacity!r}.")


class EmptyContainerError(QueueError, IndexError):
    """Raised by `remove` or `peek` on a container holding no elements."""

    def __init__(self, container_name: str) -> None:
        self.container_name = container_name
        super().__init__(f"The {container_name} is empty.")


class ContainerFullError(QueueError, OverflowError):
    """Raised by `Buffer.add` when the buffer is at capacity."""

    def __init__(self, container_name: str, capacity: int) -> None:
        self.container_name = container_name
        self.capacity = capacity
        super().__init__(f"The {container_name} is full (capacity={capacity}).")
