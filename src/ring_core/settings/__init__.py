from .config import RingBufferConfig

__all__ = ["RingBufferConfig"]
