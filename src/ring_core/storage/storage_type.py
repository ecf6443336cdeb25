from enum import Enum


class StorageType(Enum):
    AUTO = "auto"
    LIST = "list"
    NUMPY = "numpy"
