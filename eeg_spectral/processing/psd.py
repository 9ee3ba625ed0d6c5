"""
Power spectral density from a windowed time-domain signal

The PSD here is the magnitude of each complex FFT bin, taken over the
non-negative-frequency half by default. Signal length must match the
transform size unless a LengthPolicy says how to fit it.
"""

import logging
import math
from enum import Enum
from typing import List, Optional
import numpy as np

from ..core.config import MAX_FFT_SIZE
from ..core.errors import ConfigurationError, ShapeError, SignalLengthError, UnsupportedTransformSizeError
from .transform import TransformCache, default_cache, validate_transform_size


class LengthPolicy(Enum):
    """How to fit a signal whose length differs from the transform size"""
    STRICT = "strict"        # Lengths must match
    TRUNCATE = "truncate"    # Keep the first `size` samples, zero-pad if shorter
    PAD = "pad"              # Zero-pad shorter signals, reject longer ones


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (and >= 2)"""
    if n < 1:
        raise ShapeError(f"Cannot size a transform for {n} samples")
    return max(2, 1 << (int(n) - 1).bit_length())


def fit_signal(signal, size: int, policy: LengthPolicy = LengthPolicy.STRICT) -> np.ndarray:
    """
    Validate a signal and fit it to `size` samples

    Args:
        signal: Real samples (1D)
        size: Transform size
        policy: Length policy to apply on mismatch

    Returns:
        np.ndarray: float64 array of exactly `size` samples
    """
    policy = LengthPolicy(policy)
    x = np.asarray(signal, dtype=np.float64)
    if x.ndim != 1:
        raise ShapeError(f"Signal must be 1D, got shape {x.shape}")
    if x.size == 0:
        raise ShapeError("Signal is empty")
    if not np.all(np.isfinite(x)):
        raise ShapeError("Signal must contain only finite values")

    if x.size == size:
        return x
    if x.size > size:
        if policy is LengthPolicy.TRUNCATE:
            return x[:size]
        raise SignalLengthError(
            f"Signal has {x.size} samples, more than transform size {size} (policy={policy.value})"
        )
    if policy is LengthPolicy.STRICT:
        raise SignalLengthError(
            f"Signal has {x.size} samples, fewer than transform size {size} (policy={policy.value})"
        )
    padded = np.zeros(size, dtype=np.float64)
    padded[:x.size] = x
    return padded


def magnitudes(complex_array: np.ndarray, count: int) -> np.ndarray:
    """Magnitudes of the first `count` bins of an interleaved complex array"""
    re = complex_array[0:2 * count:2]
    im = complex_array[1:2 * count:2]
    return np.sqrt(re * re + im * im)


def frequencies(size: int, sample_rate: float, one_sided: bool = True) -> np.ndarray:
    """Frequency (Hz) of each PSD bin for a transform of `size`"""
    size = validate_transform_size(size)
    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise ConfigurationError(f"Sample rate must be finite and > 0, got {sample_rate}")
    n_bins = size // 2 if one_sided else size
    return np.arange(n_bins, dtype=np.float64) * (sample_rate / size)


def format_complex(complex_array, precision: int = 5) -> List[str]:
    """Render an interleaved complex array as 're+imi' strings for debugging"""
    values = np.asarray(complex_array, dtype=np.float64)
    if values.size % 2:
        raise ShapeError(f"Interleaved complex array needs an even length, got {values.size}")
    return [
        f"{round(float(re), precision)}+{round(float(im), precision)}i"
        for re, im in zip(values[0::2], values[1::2])
    ]


class PSDEngine:
    """
    Compute PSDs through a cache of FFT providers

    The engine owns the cache it was given (or the process-wide default),
    so repeated calls at one transform size reuse a single provider.
    """

    def __init__(self, cache: Optional[TransformCache] = None):
        self.cache = cache if cache is not None else default_cache()

    def compute(self, size: Optional[int], signal, policy: LengthPolicy = LengthPolicy.STRICT,
                one_sided: bool = True) -> np.ndarray:
        """
        Compute the magnitude spectrum of a real signal

        Args:
            size: Transform size (power of two). None picks the next power of
                two above the signal length and zero-pads.
            signal: Real samples (1D)
            policy: How to fit a signal whose length differs from `size`
            one_sided: If True return size/2 bins, else all `size` bins

        Returns:
            np.ndarray: Non-negative magnitudes in increasing-frequency order
        """
        if size is None:
            n = np.asarray(signal).shape[0] if np.ndim(signal) else 0
            size = next_power_of_two(n)
            if size > MAX_FFT_SIZE:
                raise UnsupportedTransformSizeError(f"Signal of {n} samples needs transform size {size}")
            policy = LengthPolicy.PAD

        provider = self.cache.get(size)
        x = fit_signal(signal, provider.size, policy)

        spectrum = provider.real_transform(provider.create_complex_array(), x)
        n_bins = provider.size // 2 if one_sided else provider.size
        psd = magnitudes(spectrum, n_bins)

        logging.debug(f"PSD computed: size={provider.size}, bins={n_bins}, policy={LengthPolicy(policy).value}")
        return psd


_DEFAULT_ENGINE = PSDEngine()


def default_engine() -> PSDEngine:
    return _DEFAULT_ENGINE


def get_psd(size: Optional[int], signal, policy: LengthPolicy = LengthPolicy.STRICT,
            one_sided: bool = True) -> np.ndarray:
    """Compute a PSD with the process-wide engine (see PSDEngine.compute)"""
    return _DEFAULT_ENGINE.compute(size, signal, policy=policy, one_sided=one_sided)
