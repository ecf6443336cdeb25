from enum import Enum


class BufferState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"

    @classmethod
    def from_counts(cls, length: int, capacity: int) -> "BufferState":
        if length == 0:
            return cls.EMPTY
        if length >= capacity:
            return cls.FULL
        return cls.PARTIAL

    @property
    def can_enqueue(self) -> bool:
        return self is not BufferState.FULL

    @property
    def can_dequeue(self) -> bool:
        return self is not BufferState.EMPTY
