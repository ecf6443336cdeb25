from typing import Any, List, Optional

from .base_storage import BaseStorage


class ListStorage(BaseStorage):
    """ Слоты в обычном python-списке. Подходит для объектов любого типа. """

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._data: List[Optional[Any]] = [None] * capacity

    def read(self, index: int) -> Any:
        return self._data[index]

    def write(self, index: int, item: Any) -> None:
        self._data[index] = item

    def release(self, index: int) -> None:
        self._data[index] = None

    def clear(self) -> None:
        self._data = [None] * self._capacity
