import abc
from typing import Any, Generic, TypeVar

from fifoqueues.errors import InvalidCapacityError

T = TypeVar("T")


def validate_capacity(capacity: Any) -> int:
    """Checks that a capacity is a positive integer and returns it.

    Raises:
        InvalidCapacityError: If `capacity` is not an int greater than zero.
            Booleans are rejected even though they subclass int.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacityError(capacity)
    return capacity


class IsQueue(abc.ABC, Generic[T]):
    """The capability set shared by every FIFO container.

    Concrete containers implement this interface independently; none of them
    derives from another. The only behavior provided here is `__len__` and
    `is_empty`, both expressed through `size()`.
    """

    @abc.abstractmethod
    def add(self, value: T) -> T | None:
        """Adds `value` as the newest element.

        Returns:
            The element evicted to make room, or None when nothing was evicted.

        Raises:
            ContainerFullError: If the container rejects writes when full.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def remove(self) -> T:
        """Removes and returns the oldest element.

        Raises:
            EmptyContainerError: If the container is empty.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def peek(self) -> T:
        """Returns the oldest element without removing it.

        Raises:
            EmptyContainerError: If the container is empty.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def size(self) -> int:
        """Returns the number of elements currently held."""
        raise NotImplementedError

    @abc.abstractmethod
    def clear(self) -> None:
        """Drops every stored element."""
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        """Returns True if the container holds no elements."""
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()
