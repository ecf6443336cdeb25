import numpy as np

from src.ring_core import (
    CapacityExceeded,
    EmptyBuffer,
    RingBuffer,
    RingBufferConfig,
    StorageType,
)

from tools.timer import TimerManager

# Глобальный таймер для всех прогонов
TM = TimerManager()


# ============================================================
#                    ВСПОМОГАТЕЛЬНЫЕ МЕТОДЫ
# ============================================================

def _print_header(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def _print_buffer(buffer: RingBuffer):
    print(f"{buffer!r}")
    print(f"  forward: {list(buffer.forward_iterator())}")
    print(f"  reverse: {list(buffer.reverse_iterator())}")


# ============================================================
#                          СЦЕНАРИИ
# ============================================================

def check_fifo(buffer: RingBuffer, label: str):
    _print_header(f"{label} — FIFO")

    items = list(range(buffer.capacity()))
    for item in items:
        buffer.enqueue(item)
    _print_buffer(buffer)

    try:
        buffer.enqueue(-1)
    except CapacityExceeded as e:
        print(f"Full buffer rejected item: {e}")

    drained = list(buffer.drain())
    print(f"Drained in order: {drained == items}")

    try:
        buffer.dequeue()
    except EmptyBuffer as e:
        print(f"Empty buffer rejected dequeue: {e}")


def check_wrap_around(label: str):
    _print_header(f"{label} — Wrap-around")

    buffer = RingBuffer(3)
    for item in ("A", "B", "C"):
        buffer.enqueue(item)
    print(f"dequeue → {buffer.dequeue()}")
    buffer.enqueue("D")
    _print_buffer(buffer)


def check_single_slot(label: str):
    _print_header(f"{label} — Capacity 1")

    buffer = RingBuffer(1)
    buffer.enqueue("X")
    print(f"After enqueue: {buffer.state().value}")
    try:
        buffer.enqueue("Y")
    except CapacityExceeded:
        print("Second enqueue rejected")
    print(f"dequeue → {buffer.dequeue()} | {buffer.state().value}")


def check_frames(label: str, frames: int, shape: tuple[int, ...]):
    _print_header(f"{label} — numpy frame storage {shape}")

    config = RingBufferConfig(capacity=8, storage=StorageType.NUMPY, dtype=np.uint8, item_shape=shape)
    buffer = RingBuffer.from_config(config)

    with TM.timer(f"{label}_frames", ops=frames):
        for i in range(frames):
            if buffer.is_full():
                buffer.dequeue()
            buffer.enqueue(np.full(shape, i % 256, dtype=np.uint8))

    newest = buffer.last()
    print(f"Buffered: {len(buffer)} | newest frame value: {int(newest.flat[0])}")


def bench_throughput(config: RingBufferConfig, ops: int, label: str):
    _print_header(f"{label} — Throughput ({ops} ops)")

    buffer = RingBuffer.from_config(config)
    half = config.capacity // 2 or 1

    with TM.timer(f"{label}_enqueue_dequeue", ops=ops):
        for i in range(ops):
            if buffer.length() >= half:
                buffer.dequeue()
            buffer.enqueue(i)

    with TM.timer(f"{label}_iterate", ops=len(buffer)):
        for _ in buffer.forward_iterator():
            pass

    print(f"Final: {buffer!r}")


# ============================================================
#                        ТОЧКА ВХОДА
# ============================================================

if __name__ == "__main__":

    check_fifo(RingBuffer(5), label="List")
    check_fifo(RingBuffer.from_config(RingBufferConfig(capacity=5, dtype=np.int64)), label="Numpy")
    check_wrap_around(label="List")
    check_single_slot(label="List")
    check_frames(label="Frames", frames=500, shape=(120, 160, 3))

    # ---------------------------------------------------------
    # СПИСОК КОНФИГУРАЦИЙ ДЛЯ ЗАМЕРОВ
    # ---------------------------------------------------------

    CONFIGS = [
        {"config": RingBufferConfig(capacity=64, storage=StorageType.LIST), "label": "List_64"},
        {"config": RingBufferConfig(capacity=4096, storage=StorageType.LIST), "label": "List_4096"},
        {"config": RingBufferConfig(capacity=64, storage=StorageType.NUMPY), "label": "NumpyObject_64"},
        {"config": RingBufferConfig(capacity=64, dtype=np.float64), "label": "NumpyFloat_64"},
    ]

    for cfg in CONFIGS:
        bench_throughput(cfg["config"], ops=100_000, label=cfg["label"])

    # ---------------------------------------------------------
    # Финальная таблица сравнения
    # ---------------------------------------------------------

    TM.print_summary(sort_by="ops")
