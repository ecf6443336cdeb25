from typing import Any, Tuple

import numpy as np

from .base_storage import BaseStorage


class NumpyStorage(BaseStorage):
    """
        Слоты в одном непрерывном numpy-массиве формы (capacity, *item_shape).

        Удобно для кадров и сэмплов фиксированной формы:
        * память выделяется один раз при создании;
        * запись — копирование в уже существующий слот;
        * чтение слота с формой возвращает копию, иначе следующая
          запись в тот же слот изменила бы уже выданное значение.

        dtype=object хранит произвольные python-объекты (ссылки отпускаются
        через release). Для числовых dtype release ничего не делает —
        устаревшие данные в слоте никогда не читаются.
    """

    def __init__(self, capacity: int, dtype: Any = object, item_shape: Tuple[int, ...] = ()):
        super().__init__(capacity)
        self._dtype = np.dtype(dtype)
        self._item_shape = tuple(item_shape)
        self._data = self._allocate()

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def item_shape(self) -> Tuple[int, ...]:
        return self._item_shape

    def read(self, index: int) -> Any:
        value = self._data[index]
        return value.copy() if self._item_shape else value

    def write(self, index: int, item: Any) -> None:
        if not self._is_object:
            self._check_cast(item)
        self._data[index] = item

    def release(self, index: int) -> None:
        if self._is_object:
            self._data[index] = None

    def clear(self) -> None:
        self._data = self._allocate()

    @property
    def _is_object(self) -> bool:
        return self._dtype == np.dtype(object)

    def _check_cast(self, item: Any) -> None:
        """
            Запрещает молчаливое приведение типа при записи:
            float → int и выход значений за диапазон целого dtype.
        """
        value = np.asarray(item)

        # целое → целое: допустимо, если значения помещаются в диапазон
        if self._dtype.kind in "iu" and value.dtype.kind in "biu":
            if value.size and not np.can_cast(value.dtype, self._dtype, casting="safe"):
                info = np.iinfo(self._dtype)
                if value.min() < info.min or value.max() > info.max:
                    raise ValueError(f"NumpyStorage: item values out of range for {self._dtype}")
            return

        if not np.can_cast(value.dtype, self._dtype, casting="same_kind"):
            raise TypeError(f"NumpyStorage: cannot store {value.dtype} item in {self._dtype} slot")

    def _allocate(self) -> np.ndarray:
        shape = (self._capacity, *self._item_shape)
        if self._is_object:
            return np.full(shape, None, dtype=object)
        return np.zeros(shape, dtype=self._dtype)
