from enum import Enum
from typing import Generic, Iterator, TypeVar

from ..storage.base_storage import BaseStorage

T = TypeVar("T")


class IterDirection(Enum):
    FORWARD = "forward"
    REVERSE = "reverse"

    @property
    def step(self) -> int:
        return 1 if self is IterDirection.FORWARD else -1


class RingBufferView(Generic[T]):
    """
        Ленивый обход логического окна кольцевого буфера.

        Границы обхода (стартовый индекс и количество элементов)
        фиксируются при создании view. Каждый вызов iter() начинает
        обход заново с тех же границ.

        Контракт: буфер нельзя изменять, пока view обходится.
        Это не проверяется — результат такого обхода не определён.
    """

    __slots__ = ("_storage", "_capacity", "_start", "_count", "_direction")

    def __init__(
        self,
        storage: BaseStorage,
        capacity: int,
        start: int,
        count: int,
        direction: IterDirection = IterDirection.FORWARD,
    ):
        self._storage = storage
        self._capacity = capacity
        self._start = start
        self._count = count
        self._direction = direction

    @property
    def direction(self) -> IterDirection:
        return self._direction

    def __iter__(self) -> Iterator[T]:
        index = self._start
        step = self._direction.step
        for _ in range(self._count):
            yield self._storage.read(index)
            index = (index + step) % self._capacity

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"RingBufferView(direction={self._direction.value}, start={self._start}, count={self._count})"
