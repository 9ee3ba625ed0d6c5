"""
Fixed-length windowing of streaming multi-channel samples

EEGWindow collects one multi-channel sample at a time and hands a
channels x samples array to its callback as soon as `size` samples are in,
then starts over empty. iter_windows is the same thing as a generator.
"""

import logging
from typing import Callable, Iterable, Iterator, List
import numpy as np

from ..core.errors import ChannelCountError, ConfigurationError, ReentrantWindowError, ShapeError

WindowCallback = Callable[[np.ndarray], None]


def _as_sample(data, num_channels: int) -> np.ndarray:
    sample = np.asarray(data, dtype=np.float64)
    if sample.ndim != 1:
        raise ShapeError(f"Sample must be 1D (one value per channel), got shape {sample.shape}")
    if sample.size != num_channels:
        raise ChannelCountError(f"Sample has {sample.size} channels, window expects {num_channels}")
    return sample


class EEGWindow:
    """
    Buffer that batches samples into fixed-length windows

    Every channel holds the same number of samples at all times, and that
    number never reaches `size` outside of the callback: the window clears
    itself right after notifying, before add_data returns.
    """

    def __init__(self, size: int, num_channels: int, callback: WindowCallback):
        if size < 1:
            raise ConfigurationError(f"Window size must be >= 1, got {size}")
        if num_channels < 1:
            raise ConfigurationError(f"Channel count must be >= 1, got {num_channels}")
        if not callable(callback):
            raise ConfigurationError("Window callback must be callable")

        self.size = int(size)
        self.num_channels = int(num_channels)
        self.callback = callback
        self.length = 0
        self.channels: List[List[float]] = [[] for _ in range(self.num_channels)]
        self._notifying = False

    def add_data(self, data) -> bool:
        """
        Add one multi-channel sample

        Args:
            data: One value per channel

        Returns:
            bool: True if this sample completed a window
        """
        if self._notifying:
            raise ReentrantWindowError("add_data called from inside the window callback")
        sample = _as_sample(data, self.num_channels)

        for channel, value in zip(self.channels, sample):
            channel.append(float(value))
        self.length += 1

        if self.length < self.size:
            return False

        window = np.array(self.channels, dtype=np.float64)
        self._notifying = True
        try:
            self.callback(window)
        finally:
            self._notifying = False
            self.clear()
        return True

    def add_chunk(self, samples) -> int:
        """
        Add a block of samples (samples x channels)

        Returns:
            int: Number of windows completed
        """
        block = np.asarray(samples, dtype=np.float64)
        if block.ndim != 2 or block.shape[1] != self.num_channels:
            raise ChannelCountError(
                f"Chunk must have shape (n_samples, {self.num_channels}), got {block.shape}"
            )
        completed = 0
        for sample in block:
            if self.add_data(sample):
                completed += 1
        return completed

    def clear(self):
        """Reset the window and drop all buffered data"""
        self.length = 0
        for i in range(self.num_channels):
            self.channels[i] = []

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"EEGWindow(size={self.size}, num_channels={self.num_channels}, length={self.length})"


def iter_windows(samples: Iterable, size: int, num_channels: int) -> Iterator[np.ndarray]:
    """
    Lazily group a stream of multi-channel samples into windows

    Yields a channels x size array every `size` samples. A trailing partial
    window is dropped. Bad `size` or `num_channels` raise here, not on the
    first next().
    """
    completed: List[np.ndarray] = []
    window = EEGWindow(size, num_channels, completed.append)
    return _drain_windows(samples, window, completed)


def _drain_windows(samples: Iterable, window: EEGWindow, completed: List[np.ndarray]) -> Iterator[np.ndarray]:
    for data in samples:
        window.add_data(data)
        if completed:
            yield completed.pop()
    if window.length:
        logging.debug(f"Dropped partial window of {window.length}/{window.size} samples")
