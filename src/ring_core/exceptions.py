class RingBufferError(Exception):
    """Base exception for ring buffer errors."""


class InvalidCapacity(RingBufferError, ValueError):
    """Buffer capacity is not a positive integer."""


class CapacityExceeded(RingBufferError):
    """Item cannot be enqueued: buffer is full."""


class EmptyBuffer(RingBufferError, IndexError):
    """Item cannot be dequeued: buffer is empty."""
