from __future__ import annotations

import warnings

import numpy as np
import pytest

from ring_core import (
    BufferState,
    CapacityExceeded,
    IterDirection,
    ListStorage,
    NumpyStorage,
    RingBuffer,
    RingBufferConfig,
    StorageFactory,
    StorageType,
)


def test_list_storage_release_and_clear() -> None:
    storage = ListStorage(3)
    storage.write(1, "x")
    assert storage.read(1) == "x"
    assert len(storage) == 3

    storage.release(1)
    assert storage.read(1) is None

    storage.write(2, "y")
    storage.clear()
    assert storage.read(2) is None


def test_numpy_object_storage_releases_references() -> None:
    storage = NumpyStorage(2)
    storage.write(0, {"k": 1})
    assert storage.read(0) == {"k": 1}

    storage.release(0)
    assert storage.read(0) is None


def test_numpy_numeric_storage_keeps_dtype() -> None:
    storage = NumpyStorage(4, dtype=np.float32)
    storage.write(3, 1.5)
    storage.release(3)

    assert storage.dtype == np.float32
    assert storage.read(3) == pytest.approx(1.5)


def test_numpy_shaped_reads_are_copies() -> None:
    storage = NumpyStorage(2, dtype=np.uint8, item_shape=(2, 2))
    storage.write(0, np.ones((2, 2), dtype=np.uint8))
    frame = storage.read(0)

    storage.write(0, np.zeros((2, 2), dtype=np.uint8))
    assert frame.sum() == 4
    assert storage.item_shape == (2, 2)


@pytest.mark.parametrize(
    "config, expected",
    [
        (RingBufferConfig(capacity=2), ListStorage),
        (RingBufferConfig(capacity=2, dtype=np.int64), NumpyStorage),
        (RingBufferConfig(capacity=2, item_shape=(3,)), NumpyStorage),
        (RingBufferConfig(capacity=2, storage=StorageType.NUMPY), NumpyStorage),
        (RingBufferConfig(capacity=2, storage="list"), ListStorage),
        (RingBufferConfig(capacity=2, storage="NUMPY"), NumpyStorage),
    ],
)
def test_factory_selects_storage(config: RingBufferConfig, expected: type) -> None:
    storage = StorageFactory(config).create()
    assert isinstance(storage, expected)
    assert len(storage) == 2


def test_factory_rejects_unknown_storage() -> None:
    with pytest.raises(ValueError):
        StorageFactory(RingBufferConfig(storage="mmap")).create()
    with pytest.raises(TypeError):
        StorageFactory(RingBufferConfig(storage=3)).create()


def test_factory_warns_when_list_ignores_dtype() -> None:
    config = RingBufferConfig(capacity=2, storage=StorageType.LIST, dtype=np.int64)
    with pytest.warns(UserWarning):
        storage = StorageFactory(config).create()
    assert isinstance(storage, ListStorage)


def test_factory_auto_does_not_warn() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        StorageFactory(RingBufferConfig(capacity=2)).create()


def test_buffer_from_config_uses_numpy_storage() -> None:
    buffer = RingBuffer.from_config(RingBufferConfig(capacity=3, dtype=np.int64))
    for value in (10, 20, 30):
        buffer.enqueue(value)

    with pytest.raises(CapacityExceeded):
        buffer.enqueue(40)

    assert buffer.dequeue() == 10
    buffer.enqueue(40)
    assert [int(v) for v in buffer.forward_iterator()] == [20, 30, 40]


def test_buffer_from_config_rejects_zero_capacity() -> None:
    with pytest.raises(ValueError):
        RingBuffer.from_config(RingBufferConfig(capacity=0))


def test_failed_storage_write_leaves_buffer_unchanged() -> None:
    config = RingBufferConfig(capacity=3, dtype=np.float64, item_shape=(2,))
    buffer = RingBuffer.from_config(config)
    buffer.enqueue(np.array([1.0, 2.0]))

    with pytest.raises(ValueError):
        buffer.enqueue(np.array([1.0, 2.0, 3.0]))

    assert buffer.length() == 1
    assert buffer.last().tolist() == [1.0, 2.0]


def test_float_item_is_not_truncated_into_int_slot() -> None:
    buffer = RingBuffer.from_config(RingBufferConfig(capacity=2, dtype=np.int64))
    buffer.enqueue(1)

    with pytest.raises(TypeError):
        buffer.enqueue(2.7)

    assert buffer.length() == 1
    assert buffer.dequeue() == 1


@pytest.mark.parametrize(
    "frame",
    [
        np.array([300.5, -1.0]),
        np.array([300, 1], dtype=np.int64),
        np.array([-1, 1], dtype=np.int16),
    ],
)
def test_frame_values_are_not_wrapped_into_uint8_slot(frame: np.ndarray) -> None:
    config = RingBufferConfig(capacity=2, dtype=np.uint8, item_shape=(2,))
    buffer = RingBuffer.from_config(config)

    with pytest.raises((TypeError, ValueError)):
        buffer.enqueue(frame)

    assert buffer.is_empty()


def test_in_range_items_are_stored_exactly() -> None:
    storage = NumpyStorage(2, dtype=np.uint8, item_shape=(2,))
    storage.write(0, np.array([0, 255], dtype=np.int64))
    assert storage.read(0).tolist() == [0, 255]

    floats = NumpyStorage(2, dtype=np.float64)
    floats.write(1, 3)
    assert floats.read(1) == 3.0


def test_frame_buffer_hands_out_stable_frames() -> None:
    config = RingBufferConfig(capacity=2, dtype=np.uint8, item_shape=(4, 4, 3))
    buffer = RingBuffer.from_config(config)

    buffer.enqueue(np.full((4, 4, 3), 1, dtype=np.uint8))
    first = buffer.dequeue()
    buffer.enqueue(np.full((4, 4, 3), 2, dtype=np.uint8))
    buffer.enqueue(np.full((4, 4, 3), 3, dtype=np.uint8))

    assert int(first[0, 0, 0]) == 1
    assert buffer.state() is BufferState.FULL


def test_mismatched_storage_length_is_rejected() -> None:
    with pytest.raises(ValueError):
        RingBuffer(3, storage=ListStorage(2))


def test_buffer_state_helpers() -> None:
    assert BufferState.from_counts(0, 3) is BufferState.EMPTY
    assert BufferState.from_counts(2, 3) is BufferState.PARTIAL
    assert BufferState.from_counts(3, 3) is BufferState.FULL
    assert BufferState.from_counts(1, 1) is BufferState.FULL
    assert not BufferState.FULL.can_enqueue
    assert not BufferState.EMPTY.can_dequeue
    assert BufferState.PARTIAL.can_enqueue and BufferState.PARTIAL.can_dequeue


def test_view_direction_step() -> None:
    assert IterDirection.FORWARD.step == 1
    assert IterDirection.REVERSE.step == -1
