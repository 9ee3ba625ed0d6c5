"""
Transform provider and per-size cache

FFTProvider wraps the scipy.fft real transform behind a fixed transform size
and writes spectra into interleaved [re0, im0, re1, im1, ...] arrays.
TransformCache keeps exactly one provider per size for the life of the cache.
"""

import logging
import threading
from typing import Dict, List
import numpy as np
from scipy import fft as sp_fft

from ..core.config import MAX_FFT_SIZE
from ..core.errors import UnsupportedTransformSizeError, SignalLengthError, ShapeError


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def validate_transform_size(size) -> int:
    """
    Check that a transform size is usable

    Returns:
        int: the size as a plain int

    Raises:
        UnsupportedTransformSizeError: non-integer, not a power of two, < 2 or too large
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise UnsupportedTransformSizeError(f"Transform size must be an integer, got {size!r}")
    size = int(size)
    if size < 2 or not is_power_of_two(size):
        raise UnsupportedTransformSizeError(f"Transform size must be a power of two >= 2, got {size}")
    if size > MAX_FFT_SIZE:
        raise UnsupportedTransformSizeError(f"Transform size {size} exceeds maximum {MAX_FFT_SIZE}")
    return size


class FFTProvider:
    """
    Real-input forward FFT of a fixed size

    The output buffer holds all `size` complex bins; the negative-frequency
    half is filled from Hermitian symmetry of the real transform.
    """

    def __init__(self, size: int):
        self.size = validate_transform_size(size)

    def create_complex_array(self) -> np.ndarray:
        """Allocate a zeroed interleaved complex buffer of length 2 * size"""
        return np.zeros(2 * self.size, dtype=np.float64)

    def real_transform(self, out: np.ndarray, signal: np.ndarray) -> np.ndarray:
        """
        Forward transform of a real signal into an interleaved buffer

        Args:
            out: Buffer from create_complex_array()
            signal: Real samples, exactly `size` long

        Returns:
            np.ndarray: `out`, filled in place
        """
        x = np.asarray(signal, dtype=np.float64)
        if x.ndim != 1:
            raise ShapeError(f"Signal must be 1D, got shape {x.shape}")
        if x.size != self.size:
            raise SignalLengthError(f"Signal has {x.size} samples, transform size is {self.size}")
        if out.shape != (2 * self.size,):
            raise ShapeError(f"Output buffer must have length {2 * self.size}, got {out.shape}")

        half = sp_fft.rfft(x)
        spectrum = np.empty(self.size, dtype=np.complex128)
        spectrum[:half.size] = half
        # Bins above Nyquist mirror the positive half
        spectrum[half.size:] = np.conj(half[1:self.size - half.size + 1][::-1])

        out[0::2] = spectrum.real
        out[1::2] = spectrum.imag
        return out

    def transform(self, signal: np.ndarray) -> np.ndarray:
        """Allocate a buffer and run real_transform into it"""
        return self.real_transform(self.create_complex_array(), signal)

    def __repr__(self) -> str:
        return f"FFTProvider(size={self.size})"


class TransformCache:
    """
    One FFTProvider per transform size

    Entries are created on first use and never evicted. Lookups are
    serialized so a shared cache can be used from several threads.
    """

    def __init__(self):
        self._providers: Dict[int, FFTProvider] = {}
        self._lock = threading.Lock()

    def get(self, size: int) -> FFTProvider:
        """Return the provider for `size`, creating it if needed"""
        size = validate_transform_size(size)
        with self._lock:
            provider = self._providers.get(size)
            if provider is None:
                provider = FFTProvider(size)
                self._providers[size] = provider
                logging.debug(f"Created FFT provider for size {size}")
            return provider

    def sizes(self) -> List[int]:
        with self._lock:
            return sorted(self._providers)

    def clear(self):
        """Drop all cached providers"""
        with self._lock:
            self._providers.clear()

    def __contains__(self, size) -> bool:
        with self._lock:
            return size in self._providers

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)


_DEFAULT_CACHE = TransformCache()


def default_cache() -> TransformCache:
    """Process-wide cache shared by the module-level API"""
    return _DEFAULT_CACHE
