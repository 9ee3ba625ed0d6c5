"""Tests for the EEGWindow buffer and the window generator."""

from __future__ import annotations

import numpy as np
import pytest

from eeg_spectral.core.errors import ChannelCountError, ConfigurationError, ReentrantWindowError, ShapeError
from eeg_spectral.processing import EEGWindow, iter_windows


def test_callback_fires_once_per_full_window() -> None:
    received: list[np.ndarray] = []
    window = EEGWindow(3, 2, received.append)

    assert window.add_data([1.0, 10.0]) is False
    assert window.add_data([2.0, 20.0]) is False
    assert window.add_data([3.0, 30.0]) is True

    assert len(received) == 1
    assert received[0].shape == (2, 3)
    assert np.array_equal(received[0], [[1.0, 2.0, 3.0], [10.0, 20.0, 30.0]])
    assert window.length == 0
    assert window.channels == [[], []]


def test_window_is_reused_across_batches() -> None:
    received: list[np.ndarray] = []
    window = EEGWindow(3, 1, received.append)

    for value in range(7):
        window.add_data([float(value)])

    assert len(received) == 2
    assert np.array_equal(received[1], [[3.0, 4.0, 5.0]])
    assert len(window) == 1


def test_callback_sees_full_window_before_reset() -> None:
    lengths: list[int] = []
    window = EEGWindow(2, 1, lambda _: lengths.append(window.length))

    window.add_data([1.0])
    window.add_data([2.0])

    assert lengths == [2]
    assert window.length == 0


def test_delivered_window_is_a_snapshot() -> None:
    received: list[np.ndarray] = []
    window = EEGWindow(2, 1, received.append)
    for value in (1.0, 2.0, 3.0, 4.0):
        window.add_data([value])

    assert np.array_equal(received[0], [[1.0, 2.0]])
    assert np.array_equal(received[1], [[3.0, 4.0]])


def test_wrong_channel_count_leaves_window_unchanged() -> None:
    window = EEGWindow(4, 3, lambda _: None)
    window.add_data([1.0, 2.0, 3.0])

    with pytest.raises(ChannelCountError, match="expects 3"):
        window.add_data([1.0, 2.0])

    assert window.length == 1
    assert [len(ch) for ch in window.channels] == [1, 1, 1]


def test_nested_sample_is_rejected() -> None:
    window = EEGWindow(4, 2, lambda _: None)
    with pytest.raises(ShapeError):
        window.add_data([[1.0, 2.0]])


def test_clear_resets_partial_window() -> None:
    received: list[np.ndarray] = []
    window = EEGWindow(3, 2, received.append)
    window.add_data([1.0, 1.0])
    window.add_data([2.0, 2.0])
    window.clear()

    assert window.length == 0
    for value in (3.0, 4.0, 5.0):
        window.add_data([value, value])
    assert np.array_equal(received[0][0], [3.0, 4.0, 5.0])


def test_reentrant_add_data_is_rejected() -> None:
    window: EEGWindow

    def callback(_: np.ndarray) -> None:
        window.add_data([0.0])

    window = EEGWindow(2, 1, callback)
    window.add_data([1.0])
    with pytest.raises(ReentrantWindowError):
        window.add_data([2.0])

    assert window.length == 0
    assert window.add_data([3.0]) is False


def test_failing_callback_still_resets_window() -> None:
    def callback(_: np.ndarray) -> None:
        raise RuntimeError("consumer failed")

    window = EEGWindow(1, 1, callback)
    with pytest.raises(RuntimeError, match="consumer failed"):
        window.add_data([1.0])
    assert window.length == 0


def test_add_chunk_counts_completed_windows() -> None:
    received: list[np.ndarray] = []
    window = EEGWindow(4, 2, received.append)
    chunk = np.arange(20, dtype=np.float64).reshape(10, 2)

    assert window.add_chunk(chunk) == 2
    assert window.length == 2
    assert np.array_equal(received[0], chunk[:4].T)

    with pytest.raises(ChannelCountError):
        window.add_chunk(np.zeros((3, 3)))


@pytest.mark.parametrize(("size", "channels"), [(0, 1), (4, 0)])
def test_invalid_window_configuration(size: int, channels: int) -> None:
    with pytest.raises(ConfigurationError):
        EEGWindow(size, channels, lambda _: None)


def test_callback_must_be_callable() -> None:
    with pytest.raises(ConfigurationError):
        EEGWindow(4, 1, None)  # type: ignore[arg-type]


def test_iter_windows_yields_complete_windows_lazily() -> None:
    consumed: list[int] = []

    def stream():
        for i in range(7):
            consumed.append(i)
            yield [float(i), float(-i)]

    windows = iter_windows(stream(), size=3, num_channels=2)
    first = next(windows)

    assert consumed == [0, 1, 2]
    assert np.array_equal(first, [[0.0, 1.0, 2.0], [0.0, -1.0, -2.0]])
    assert len(list(windows)) == 1


@pytest.mark.parametrize(("size", "channels"), [(0, 1), (4, 0)])
def test_iter_windows_validates_on_call(size: int, channels: int) -> None:
    with pytest.raises(ConfigurationError):
        iter_windows(iter([]), size=size, num_channels=channels)
