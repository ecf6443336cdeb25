from .buffer_state import BufferState
from .ring_view import IterDirection, RingBufferView
from .ring_buffer import RingBuffer

__all__ = ["BufferState", "IterDirection", "RingBufferView", "RingBuffer"]
