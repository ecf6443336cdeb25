from abc import ABC, abstractmethod
from typing import Any


class BaseStorage(ABC):
    """
        Базовый интерфейс хранилища слотов кольцевого буфера.
        Хранилище ничего не знает о front/rear — только читает
        и пишет по физическому индексу 0 .. capacity-1.
    """

    def __init__(self, capacity: int):
        self._capacity = capacity

    def __len__(self) -> int:
        return self._capacity

    @abstractmethod
    def read(self, index: int) -> Any:
        """Возвращает значение слота."""
        pass

    @abstractmethod
    def write(self, index: int, item: Any) -> None:
        """Записывает значение в слот."""
        pass

    @abstractmethod
    def release(self, index: int) -> None:
        """Отпускает ссылку, которую держит освободившийся слот."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Сбрасывает все слоты в начальное состояние."""
        pass
