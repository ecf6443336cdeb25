from dataclasses import dataclass
from typing import Any, Tuple

from ..storage.storage_type import StorageType


@dataclass(slots=True)
class RingBufferConfig:
    """
        Configuration for RingBuffer.
        Все параметры легковесные, без привязки к файлам.
        Любой слой приложения может формировать этот объект как ему удобно.
    """

    # Ёмкость буфера (> 0), после создания не меняется
    capacity: int = 16

    # Где хранить слоты: AUTO / LIST / NUMPY
    storage: StorageType = StorageType.AUTO

    # Только для numpy-хранилища:
    # dtype      → тип элементов (None → object)
    # item_shape → форма одного элемента, например (480, 640, 3) для кадра
    dtype: Any = None
    item_shape: Tuple[int, ...] = ()

    # Отпускать ссылки из освободившихся слотов при dequeue/clear
    release_slots: bool = True
