import copy
from typing import Any, Final, Self, TypeVar

from loguru import logger

from fifoqueues.containers.base import IsQueue, validate_capacity
from fifoqueues.errors import EmptyContainerError

T = TypeVar("T")


# Marks a circular buffer created without a default value.
_NO_DEFAULT: Final = object()


class CircularBuffer(IsQueue[T]):
    """A fixed-capacity FIFO buffer that overwrites its oldest element.

    Storage is a list of `capacity` slots addressed by two indices: `_oldest`,
    the slot of the next element due for removal, and `_length`, the number
    of occupied slots. The logical element at position `i` (0 being the
    oldest) lives in slot `(_oldest + i) % capacity`. Adding to a full buffer
    overwrites slot `_oldest` and advances it, so `add`, `remove` and `peek`
    are all O(1) and never move data.

    A buffer created with `with_default` is always full: removing an element
    refills the freed position with a fresh copy of the default value.

    Usage:
        cbuf = CircularBuffer[int](3)
        for i in (1, 2, 3):
            cbuf.add(i)
        cbuf.add(4)     # returns 1, the evicted element
        cbuf.remove()   # 2
    """

    def __init__(self, capacity: int) -> None:
        """Initializes an empty CircularBuffer.

        Args:
            capacity: The maximum number of elements the buffer can hold.

        Raises:
            InvalidCapacityError: If the capacity is not a positive integer.
        """
        self._capacity = validate_capacity(capacity)
        self._slots: list[Any] = [None] * self._capacity
        self._oldest = 0
        self._length = 0
        self._default: Any = _NO_DEFAULT
        logger.debug(f"CircularBuffer created with capacity {self._capacity}.")

    @classmethod
    def with_default(cls, capacity: int, default: T) -> Self:
        """Creates a CircularBuffer whose every slot holds a copy of `default`.

        The buffer starts full and stays full: `remove` hands back the oldest
        element and appends a fresh copy of `default` as the newest one.

        Args:
            capacity: The maximum number of elements the buffer can hold.
            default: The value empty positions are filled with.

        Raises:
            InvalidCapacityError: If the capacity is not a positive integer.
        """
        cbuf = cls(capacity)
        cbuf._default = copy.deepcopy(default)
        cbuf._fill_with_default()
        return cbuf

    @property
    def capacity(self) -> int:
        """The maximum number of elements the buffer can hold."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """Returns True if the buffer has reached its maximum capacity."""
        return self._length == self._capacity

    @property
    def has_default(self) -> bool:
        """Returns True if freed positions are refilled with a default value."""
        return self._default is not _NO_DEFAULT

    def add(self, value: T) -> T | None:
        """Adds `value` as the newest element, evicting the oldest if full.

        Args:
            value: The element to add.

        Returns:
            The evicted element when the buffer was full, otherwise None.
        """
        if self._length < self._capacity:
            self._slots[self._slot(self._length)] = value
            self._length += 1
            return None

        evicted = self._slots[self._oldest]
        self._slots[self._oldest] = value
        self._oldest = self._slot(1)
        logger.trace(
            "CircularBuffer evicted {!r} (capacity={})", evicted, self._capacity
        )
        return evicted

    def remove(self) -> T:
        """Removes and returns the oldest element.

        Raises:
            EmptyContainerError: If the buffer is empty.
        """
        if self._length == 0:
            raise EmptyContainerError("circular buffer")

        value = self._slots[self._oldest]
        if self.has_default:
            # The freed slot becomes the newest position; length is unchanged.
            self._slots[self._oldest] = copy.deepcopy(self._default)
        else:
            self._slots[self._oldest] = None
            self._length -= 1
        self._oldest = self._slot(1)
        return value

    def peek(self) -> T:
        """Returns the oldest element without removing it.

        Raises:
            EmptyContainerError: If the buffer is empty.
        """
        if self._length == 0:
            raise EmptyContainerError("circular buffer")
        return self._slots[self._oldest]

    def size(self) -> int:
        return self._length

    def clear(self) -> None:
        """Removes all elements, or resets every slot to the default value."""
        self._slots = [None] * self._capacity
        self._oldest = 0
        self._length = 0
        if self.has_default:
            self._fill_with_default()

    def _slot(self, offset: int) -> int:
        """Maps a logical offset from the oldest element to a physical slot."""
        return (self._oldest + offset) % self._capacity

    def _fill_with_default(self) -> None:
        self._slots = [copy.deepcopy(self._default) for _ in range(self._capacity)]
        self._oldest = 0
        self._length = self._capacity

    def _ordered(self) -> list[T]:
        return [self._slots[self._slot(i)] for i in range(self._length)]

    def __repr__(self) -> str:
        return (
            f"CircularBuffer(capacity={self.capacity}, size={self.size()}, "
            f"data={self._ordered()})"
        )
