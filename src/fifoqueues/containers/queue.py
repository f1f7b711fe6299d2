from collections import deque
from typing import TypeVar

from loguru import logger

from fifoqueues.containers.base import IsQueue
from fifoqueues.errors import EmptyContainerError

T = TypeVar("T")


class Queue(IsQueue[T]):
    """An unbounded FIFO queue.

    Elements are kept in a `collections.deque`, so both `add` and `remove`
    are O(1). Adding never fails.
    """

    def __init__(self) -> None:
        self._data: deque[T] = deque()
        logger.debug("Queue created.")

    def add(self, value: T) -> None:
        """Appends `value` as the newest element. Always returns None."""
        self._data.append(value)
        return None

    def remove(self) -> T:
        """Removes and returns the oldest element.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if not self._data:
            raise EmptyContainerError("queue")
        return self._data.popleft()

    def peek(self) -> T:
        """Returns the oldest element without removing it.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if not self._data:
            raise EmptyContainerError("queue")
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __repr__(self) -> str:
        return f"Queue(size={self.size()}, data={list(self._data)})"
