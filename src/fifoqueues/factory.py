"""Constructor functions for the three container kinds.

These mirror the class constructors but let the capacity be omitted, in which
case `containers.default_capacity` from the user's settings is used.
"""

from typing import TypeVar

from fifoqueues.config import Settings
from fifoqueues.containers import Buffer, CircularBuffer, Queue

T = TypeVar("T")


def _resolve_capacity(capacity: int | None) -> int:
    if capacity is None:
        return Settings.get_instance().containers.default_capacity
    return capacity


def new_queue() -> Queue[T]:
    """Returns a new, empty unbounded Queue."""
    return Queue()


def new_buffer(capacity: int | None = None) -> Buffer[T]:
    """Returns a new, empty Buffer.

    Raises:
        InvalidCapacityError: If the resolved capacity is not a positive integer.
    """
    return Buffer(_resolve_capacity(capacity))


def new_buffer_with_default(capacity: int | None, default: T) -> Buffer[T]:
    """Returns a Buffer with every slot pre-filled with a copy of `default`.

    Raises:
        InvalidCapacityError: If the resolved capacity is not a positive integer.
    """
    return Buffer.with_default(_resolve_capacity(capacity), default)


def new_circular_buffer(capacity: int | None = None) -> CircularBuffer[T]:
    """Returns a new, empty CircularBuffer.

    Raises:
        InvalidCapacityError: If the resolved capacity is not a positive integer.
    """
    return CircularBuffer(_resolve_capacity(capacity))


def new_circular_buffer_with_default(
    capacity: int | None, default: T
) -> CircularBuffer[T]:
    """Returns an always-full CircularBuffer backed by copies of `default`.

    Raises:
        InvalidCapacityError: If the resolved capacity is not a positive integer.
    """
    return CircularBuffer.with_default(_resolve_capacity(capacity), default)
