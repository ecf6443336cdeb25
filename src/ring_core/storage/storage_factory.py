import warnings
from typing import Any

from ..settings import RingBufferConfig
from .base_storage import BaseStorage
from .list_storage import ListStorage
from .numpy_storage import NumpyStorage
from .storage_type import StorageType


class StorageFactory:
    """
        Создаёт хранилище слотов по типу STORAGE, указанному в конфиге.
    """

    def __init__(self, config: RingBufferConfig):
        self._config: RingBufferConfig = config

    def create(self) -> BaseStorage:
        """ Создать экземпляр хранилища на config.capacity слотов. """

        # Нормализуем тип хранилища из конфига
        storage_type = self._normalize_storage_type(self._config.storage)

        # AUTO → определить по dtype
        if storage_type == StorageType.AUTO:
            storage_type = self._auto_select_storage_type(self._config)

        if storage_type == StorageType.NUMPY:
            dtype = self._config.dtype if self._config.dtype is not None else object
            return NumpyStorage(self._config.capacity, dtype=dtype, item_shape=self._config.item_shape)

        if self._config.dtype is not None or self._config.item_shape:
            warnings.warn("StorageFactory: dtype/item_shape are ignored by list storage")
        return ListStorage(self._config.capacity)

    @staticmethod
    def _normalize_storage_type(storage_type: Any) -> StorageType:
        if isinstance(storage_type, StorageType):
            return storage_type
        if isinstance(storage_type, str):
            storage_type = storage_type.lower()
            return StorageType(storage_type)
        raise TypeError("storage must be StorageType or str")

    @staticmethod
    def _auto_select_storage_type(config: RingBufferConfig) -> StorageType:
        """ Типизированные данные → numpy, всё остальное → список. """
        if config.dtype is not None or config.item_shape:
            return StorageType.NUMPY
        return StorageType.LIST
