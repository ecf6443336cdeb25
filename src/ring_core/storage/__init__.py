from .storage_type import StorageType
from .base_storage import BaseStorage
from .list_storage import ListStorage
from .numpy_storage import NumpyStorage

__all__ = [
    "StorageType",
    "BaseStorage",
    "ListStorage",
    "NumpyStorage",
]
