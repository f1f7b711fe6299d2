# src/fifoqueues/__init__.py
"""fifoqueues: FIFO container types for use as building blocks.

Three containers share one interface (`IsQueue`: add, remove, peek, size):

- `Queue`: unbounded, growable.
- `Buffer`: bounded, rejects writes when full. May start pre-filled with
  copies of a default value.
- `CircularBuffer`: bounded, evicts its oldest element when full.

The containers are not thread-safe; callers that share one across threads
must provide their own locking.

Logging goes through Loguru and is disabled for this package until the
embedding application calls `logging_config.setup_logging` or
`logger.enable("fifoqueues")`.
"""

import importlib.metadata

from loguru import logger

from fifoqueues.containers import Buffer, CircularBuffer, IsQueue, Queue
from fifoqueues.errors import (
    ContainerFullError,
    EmptyContainerError,
    InvalidCapacityError,
    QueueError,
)
from fifoqueues.factory import (
    new_buffer,
    new_buffer_with_default,
    new_circular_buffer,
    new_circular_buffer_with_default,
    new_queue,
)

try:
    __version__: str = importlib.metadata.version("fifoqueues")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0-dev"

logger.disable("fifoqueues")

__all__ = [
    "Buffer",
    "CircularBuffer",
    "ContainerFullError",
    "EmptyContainerError",
    "InvalidCapacityError",
    "IsQueue",
    "Queue",
    "QueueError",
    "new_buffer",
    "new_buffer_with_default",
    "new_circular_buffer",
    "new_circular_buffer_with_default",
    "new_queue",
]
