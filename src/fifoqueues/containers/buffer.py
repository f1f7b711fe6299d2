import copy
from collections import deque
from typing import Self, TypeVar

from loguru import logger

from fifoqueues.containers.base import IsQueue, validate_capacity
from fifoqueues.errors import ContainerFullError, EmptyContainerError

T = TypeVar("T")


class Buffer(IsQueue[T]):
    """A bounded FIFO buffer that rejects writes once it is full.

    A buffer either starts empty and grows up to its capacity, or is created
    through `with_default`, in which case every slot starts out holding an
    independent copy of a default value. Those defaults are ordinary queued
    elements: `remove` returns them like anything else.

    Usage:
        buf = Buffer[int](3)
        buf.add(1)
        buf.add(2)
        buf.remove()  # 1
    """

    def __init__(self, capacity: int) -> None:
        """Initializes an empty Buffer.

        Args:
            capacity: The maximum number of elements the buffer can hold.

        Raises:
            InvalidCapacityError: If the capacity is not a positive integer.
        """
        self._capacity = validate_capacity(capacity)
        self._data: deque[T] = deque()
        logger.debug(f"Buffer created with capacity {self._capacity}.")

    @classmethod
    def with_default(cls, capacity: int, default: T) -> Self:
        """Creates a Buffer pre-filled with copies of `default`.

        Each slot receives its own `copy.deepcopy` of `default`, so mutable
        defaults are never shared between slots.

        Args:
            capacity: The maximum number of elements the buffer can hold.
            default: The value every slot starts out with.

        Raises:
            InvalidCapacityError: If the capacity is not a positive integer.
        """
        buf = cls(capacity)
        buf._data.extend(copy.deepcopy(default) for _ in range(buf._capacity))
        return buf

    @property
    def capacity(self) -> int:
        """The maximum number of elements the buffer can hold."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """Returns True if the buffer has reached its maximum capacity."""
        return len(self._data) == self._capacity

    def add(self, value: T) -> None:
        """Appends `value` as the newest element.

        Raises:
            ContainerFullError: If the buffer is full. The buffer is left
                unchanged.
        """
        if self.is_full:
            raise ContainerFullError("buffer", self._capacity)
        self._data.append(value)
        return None

    def remove(self) -> T:
        """Removes and returns the oldest element.

        Raises:
            EmptyContainerError: If the buffer is empty.
        """
        if not self._data:
            raise EmptyContainerError("buffer")
        return self._data.popleft()

    def peek(self) -> T:
        """Returns the oldest element without removing it.

        Raises:
            EmptyContainerError: If the buffer is empty.
        """
        if not self._data:
            raise EmptyContainerError("buffer")
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        """Removes all elements, including any pre-filled defaults."""
        self._data.clear()

    def __repr__(self) -> str:
        return (
            f"Buffer(capacity={self.capacity}, size={self.size()}, "
            f"data={list(self._data)})"
        )
