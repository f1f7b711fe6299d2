from .base import IsQueue
from .buffer import Buffer
from .circular_buffer import CircularBuffer
from .queue import Queue

__all__ = ["Buffer", "CircularBuffer", "IsQueue", "Queue"]
