from __future__ import annotations

from numbers import Integral
from typing import Any, Generic, Iterator, Optional, TypeVar

from ..exceptions import CapacityExceeded, EmptyBuffer, InvalidCapacity
from ..settings import RingBufferConfig
from ..storage.base_storage import BaseStorage
from ..storage.list_storage import ListStorage
from ..storage.storage_factory import StorageFactory
from .buffer_state import BufferState
from .ring_view import IterDirection, RingBufferView

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """
        Кольцевой буфер (FIFO-очередь) фиксированной ёмкости.

        * enqueue добавляет в хвост, dequeue забирает из головы — оба за O(1);
        * заполненный буфер отклоняет запись (CapacityExceeded),
          самый старый элемент НЕ перезаписывается;
        * пустое состояние — явный тег (front = rear = None),
          а не «магический» индекс -1.

        Индексы:
            front → слот самого старого элемента
            rear  → слот самого нового элемента

        Буфер однопоточный и не содержит блокировок. При использовании
        из нескольких потоков доступ сериализует вызывающая сторона.
    """

    def __init__(self, capacity: int, storage: Optional[BaseStorage] = None, release_slots: bool = True):
        """
            :param capacity: максимальное количество элементов в буфере
            :param storage: хранилище слотов (по умолчанию — python-список)
            :param release_slots: отпускать ссылки из освободившихся слотов
        """
        if isinstance(capacity, bool) or not isinstance(capacity, Integral):
            raise TypeError(f"RingBuffer capacity must be int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacity(f"RingBuffer capacity must be > 0, got {capacity}")

        self._capacity = int(capacity)
        self._storage = storage if storage is not None else ListStorage(self._capacity)
        if len(self._storage) != self._capacity:
            raise ValueError(
                f"RingBuffer storage has {len(self._storage)} slots, expected {self._capacity}"
            )

        self._release_slots = release_slots
        self._front: Optional[int] = None
        self._rear: Optional[int] = None

    @classmethod
    def from_config(cls, config: RingBufferConfig) -> RingBuffer:
        """ Создаёт буфер и его хранилище по конфигу. """
        if config.capacity <= 0:
            raise InvalidCapacity(f"RingBuffer capacity must be > 0, got {config.capacity}")

        storage = StorageFactory(config).create()
        return cls(config.capacity, storage=storage, release_slots=config.release_slots)

    # ---------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------

    def enqueue(self, item: T) -> None:
        """ Добавляет элемент в хвост. Полный буфер → CapacityExceeded. """
        if self._front is None:
            self._storage.write(0, item)
            self._front = self._rear = 0
            return

        # проверка по счётчику ДО сдвига индексов:
        # front == rear верно и для буфера из одного элемента
        if self.length() == self._capacity:
            raise CapacityExceeded(f"RingBuffer is full (capacity={self._capacity})")

        rear = (self._rear + 1) % self._capacity
        # сначала запись, потом индексы: ошибка записи не меняет состояние
        self._storage.write(rear, item)
        self._rear = rear

    def dequeue(self) -> T:
        """ Забирает самый старый элемент. Пустой буфер → EmptyBuffer. """
        if self._front is None:
            raise EmptyBuffer("RingBuffer is empty")

        front = self._front
        item = self._storage.read(front)
        if self._release_slots:
            self._storage.release(front)

        if front == self._rear:
            self._front = self._rear = None
        else:
            self._front = (front + 1) % self._capacity

        return item

    def drain(self) -> Iterator[T]:
        """ Забирает элементы по одному, пока буфер не опустеет. """
        while self._front is not None:
            yield self.dequeue()

    def clear(self) -> None:
        """ Очищает буфер. """
        if self._release_slots:
            self._storage.clear()
        self._front = self._rear = None

    # ---------------------------------------------------------
    # Read-only access
    # ---------------------------------------------------------

    def peek(self, default: Any = None) -> Optional[T]:
        """ Возвращает самый старый элемент без удаления или default. """
        if self._front is None:
            return default
        return self._storage.read(self._front)

    def last(self, default: Any = None) -> Optional[T]:
        """ Возвращает самый новый элемент без удаления или default. """
        if self._rear is None:
            return default
        return self._storage.read(self._rear)

    def get(self, index: int, default: Any = None) -> Optional[T]:
        """
            Возвращает элемент по логическому индексу.
            0 → самый старый
            length-1 → самый новый
        """
        if isinstance(index, bool) or not isinstance(index, Integral):
            return default
        if index < 0 or index >= self.length():
            return default

        return self._storage.read((self._front + index) % self._capacity)

    def to_list(self) -> list:
        """ Снимок содержимого от старых к новым. """
        return list(self.forward_iterator())

    # ---------------------------------------------------------
    # Size / state
    # ---------------------------------------------------------

    def length(self) -> int:
        """ Количество элементов в буфере. """
        if self._front is None:
            return 0
        return (self._rear - self._front + self._capacity) % self._capacity + 1

    def capacity(self) -> int:
        """ Максимальная вместимость буфера. """
        return self._capacity

    def is_empty(self) -> bool:
        return self._front is None

    def is_full(self) -> bool:
        return self.length() == self._capacity

    def state(self) -> BufferState:
        return BufferState.from_counts(self.length(), self._capacity)

    # ---------------------------------------------------------
    # Iteration
    # ---------------------------------------------------------

    def forward_iterator(self) -> RingBufferView[T]:
        """ Обход от самого старого к самому новому. """
        start = self._front if self._front is not None else 0
        return RingBufferView(self._storage, self._capacity, start, self.length(), IterDirection.FORWARD)

    def reverse_iterator(self) -> RingBufferView[T]:
        """ Обход от самого нового к самому старому. """
        start = self._rear if self._rear is not None else 0
        return RingBufferView(self._storage, self._capacity, start, self.length(), IterDirection.REVERSE)

    def __iter__(self) -> Iterator[T]:
        return iter(self.forward_iterator())

    def __reversed__(self) -> Iterator[T]:
        return iter(self.reverse_iterator())

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        return f"RingBuffer(length={self.length()}/{self._capacity}, state={self.state().value})"
