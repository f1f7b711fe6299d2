import pytest

from fifoqueues.containers import Buffer, IsQueue
from fifoqueues.errors import (
    ContainerFullError,
    EmptyContainerError,
    InvalidCapacityError,
)


def test_initialization() -> None:
    """Tests the constructor and initial state of the Buffer."""
    buf = Buffer[int](5)
    assert isinstance(buf, IsQueue)
    assert buf.capacity == 5
    assert buf.size() == 0
    assert buf.is_empty
    assert not buf.is_full


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", None, True])
def test_invalid_capacity(capacity: object) -> None:
    """Tests that non-positive or non-integer capacities are rejected."""
    with pytest.raises(
        InvalidCapacityError, match="Capacity must be a positive integer"
    ):
        Buffer(capacity)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Buffer.with_default(capacity, 0)  # type: ignore[arg-type]


def test_invalid_capacity_keeps_offending_value() -> None:
    """Tests that the error records the rejected capacity."""
    with pytest.raises(InvalidCapacityError) as exc_info:
        Buffer(-3)
    assert exc_info.value.capacity == -3


def test_add_until_full() -> None:
    """Tests that the (C+1)-th add fails and leaves the buffer unchanged."""
    buf = Buffer[int](3)
    assert buf.add(1) is None
    assert buf.add(-2) is None
    assert buf.add(3) is None
    assert buf.is_full
    assert buf.size() == 3

    with pytest.raises(ContainerFullError, match="capacity=3") as exc_info:
        buf.add(-4)
    assert exc_info.value.capacity == 3
    assert buf.size() == 3
    assert buf.peek() == 1

    # ContainerFullError is also an OverflowError.
    with pytest.raises(OverflowError):
        buf.add(-4)


def test_fifo_order_and_room_after_remove() -> None:
    """Tests FIFO removal and that removing frees a slot for a new add."""
    buf = Buffer[int](3)
    for value in (1, -2, 3):
        buf.add(value)

    assert buf.remove() == 1
    assert buf.size() == 2
    assert buf.peek() == -2
    assert buf.size() == 2

    buf.add(4)
    assert [buf.remove() for _ in range(3)] == [-2, 3, 4]

    with pytest.raises(EmptyContainerError, match="The buffer is empty."):
        buf.peek()
    with pytest.raises(EmptyContainerError):
        buf.remove()


def test_capacity_is_fixed() -> None:
    """Tests that the capacity is read-only."""
    buf = Buffer[int](2)
    with pytest.raises(AttributeError):
        buf.capacity = 10  # type: ignore[misc]
    assert buf.capacity == 2


def test_with_default_starts_full() -> None:
    """Tests that a pre-filled buffer starts at capacity with real elements."""
    buf = Buffer.with_default(3, -1)
    assert buf.capacity == 3
    assert buf.size() == 3
    assert buf.is_full
    assert buf.peek() == -1

    with pytest.raises(ContainerFullError):
        buf.add(5)

    assert buf.remove() == -1
    assert buf.size() == 2
    assert buf.add(5) is None
    assert [buf.remove() for _ in range(3)] == [-1, -1, 5]
    assert buf.is_empty


def test_with_default_copies_are_independent() -> None:
    """Tests that every pre-filled slot holds its own copy of the default."""
    default: list[int] = []
    buf = Buffer.with_default(2, default)

    first = buf.remove()
    first.append(1)

    assert buf.peek() == []
    assert default == []
    assert first is not default


def test_clear() -> None:
    """Tests clearing the buffer, including pre-filled defaults."""
    buf = Buffer.with_default(2, "x")
    buf.clear()
    assert buf.size() == 0
    assert buf.capacity == 2
    buf.add("y")
    assert buf.peek() == "y"


def test_repr() -> None:
    """Tests the string representation of the buffer."""
    buf = Buffer[int](4)
    buf.add(1)
    buf.add(2)
    assert repr(buf) == "Buffer(capacity=4, size=2, data=[1, 2])"
