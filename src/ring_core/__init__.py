from .exceptions import RingBufferError, InvalidCapacity, CapacityExceeded, EmptyBuffer
from .storage import StorageType, BaseStorage, ListStorage, NumpyStorage
from .settings import RingBufferConfig
from .storage.storage_factory import StorageFactory
from .buffer import BufferState, IterDirection, RingBufferView, RingBuffer

__version__ = "0.1.0"

__all__ = [
    "RingBufferError",
    "InvalidCapacity",
    "CapacityExceeded",
    "EmptyBuffer",
    "StorageType",
    "BaseStorage",
    "ListStorage",
    "NumpyStorage",
    "StorageFactory",
    "RingBufferConfig",
    "BufferState",
    "IterDirection",
    "RingBufferView",
    "RingBuffer",
]
