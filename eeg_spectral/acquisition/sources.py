"""
Synthetic EEG sources

This module generates sums of sinusoids for testing the processing chain
without EEG hardware, either as a single signal or as a multi-channel
stream that can be fed sample by sample into an EEGWindow.
"""

import logging
import math
from typing import Iterator, Optional, Sequence
import numpy as np

from ..core.config import FS_EXPECTED, N_CHANNELS
from ..core.errors import ConfigurationError

# Absorbs float error in duration * sample_rate (e.g. 0.3 * 10 = 2.9999999999999996)
_COUNT_TOLERANCE = 1e-9


def sample_count(sample_rate: float, duration: float) -> int:
    """Number of samples in `duration` seconds: floor(duration * sample_rate)"""
    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise ConfigurationError(f"Sample rate must be finite and > 0, got {sample_rate}")
    if not math.isfinite(duration) or duration < 0:
        raise ConfigurationError(f"Duration must be finite and >= 0, got {duration}")
    return int(math.floor(duration * sample_rate + _COUNT_TOLERANCE))


def generate(amplitudes: Sequence[float], frequencies: Sequence[float],
             sample_rate: float, duration: float) -> np.ndarray:
    """
    Generate a sum of sinusoids

    Args:
        amplitudes: Amplitude of each component
        frequencies: Frequency (Hz) of each component
        sample_rate: Sampling rate (Hz)
        duration: Signal length (seconds)

    Returns:
        np.ndarray: sum of amplitudes[i] * sin(2 * pi * frequencies[i] * t)
        at t = 0, 1/sample_rate, ... for floor(duration * sample_rate) samples
    """
    if len(amplitudes) != len(frequencies):
        raise ConfigurationError(
            f"Got {len(amplitudes)} amplitudes but {len(frequencies)} frequencies"
        )
    n_samples = sample_count(sample_rate, duration)
    t = np.arange(n_samples, dtype=np.float64) / sample_rate

    signal = np.zeros(n_samples, dtype=np.float64)
    for amplitude, frequency in zip(amplitudes, frequencies):
        signal += amplitude * np.sin(2 * np.pi * frequency * t)
    return signal


class FakeEEGSource:
    """
    Generate synthetic multi-channel EEG for testing

    Every channel carries the same sinusoid mix plus independent Gaussian
    noise. Time advances across calls, so consecutive windows join up
    without phase jumps.
    """

    def __init__(self, fs: float = FS_EXPECTED, n_channels: int = N_CHANNELS,
                 amplitudes: Sequence[float] = (15.0, 8.0),
                 frequencies: Sequence[float] = (10.0, 20.0),
                 noise_std: float = 0.0, seed: Optional[int] = None):
        if n_channels < 1:
            raise ConfigurationError(f"Channel count must be >= 1, got {n_channels}")
        if len(amplitudes) != len(frequencies):
            raise ConfigurationError(
                f"Got {len(amplitudes)} amplitudes but {len(frequencies)} frequencies"
            )
        if noise_std < 0:
            raise ConfigurationError(f"Noise std must be >= 0, got {noise_std}")

        self.fs = fs
        self.n_channels = n_channels
        self.amplitudes = list(amplitudes)
        self.frequencies = list(frequencies)
        self.noise_std = noise_std
        self.rng = np.random.default_rng(seed)
        self.n_generated = 0

    def generate_window(self, duration_sec: float) -> np.ndarray:
        """
        Generate synthetic EEG window

        Args:
            duration_sec: Duration of data to generate

        Returns:
            np.ndarray: Synthetic EEG data (channels x samples)
        """
        n_samples = sample_count(self.fs, duration_sec)
        t = (self.n_generated + np.arange(n_samples, dtype=np.float64)) / self.fs

        tones = np.zeros(n_samples, dtype=np.float64)
        for amplitude, frequency in zip(self.amplitudes, self.frequencies):
            tones += amplitude * np.sin(2 * np.pi * frequency * t)

        data = np.tile(tones, (self.n_channels, 1))
        if self.noise_std > 0:
            data += self.rng.normal(0.0, self.noise_std, size=data.shape)

        self.n_generated += n_samples
        logging.debug(f"Generated synthetic window: {self.n_channels} channels x {n_samples} samples")
        return data

    def samples(self, duration_sec: float) -> Iterator[np.ndarray]:
        """Yield one multi-channel sample at a time, ready for EEGWindow.add_data"""
        data = self.generate_window(duration_sec)
        for i in range(data.shape[1]):
            yield data[:, i]
