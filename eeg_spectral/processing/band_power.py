"""
Average power within frequency bands

A band [low_hz, high_hz) maps to PSD bins with
    start = ceil(low_hz / sample_rate * size)
    end   = floor(high_hz / sample_rate * size)
and its power is the mean of psd[start..end], both ends included. The
rounding is part of the numeric contract; changing it changes outputs.
"""

import math
from typing import Dict, Iterable, Tuple
import numpy as np

from ..core.bands import BandSpec, band_label, resolve_band
from ..core.config import DEFAULT_BANDS
from ..core.errors import BandIndexError, ConfigurationError, ShapeError


def validate_sample_rate(sample_rate: float) -> float:
    """Sample rate must be a finite number > 0"""
    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise ConfigurationError(f"Sample rate must be finite and > 0, got {sample_rate}")
    return sample_rate


def band_indices(size: int, sample_rate: float, band: BandSpec) -> Tuple[int, int]:
    """
    Map a band to inclusive PSD bin indices

    Args:
        size: Transform size used to compute the PSD
        sample_rate: Sampling rate of the signal (Hz)
        band: FrequencyBand, band name or (low_hz, high_hz)

    Returns:
        Tuple[start_index, end_index]
    """
    validate_sample_rate(sample_rate)
    if size <= 0:
        raise ConfigurationError(f"Transform size must be > 0, got {size}")
    low, high = resolve_band(band)
    start = math.ceil(low / sample_rate * size)
    end = math.floor(high / sample_rate * size)
    return start, end


def band_bins(size: int, sample_rate: float, band: BandSpec, n_bins: int) -> Tuple[int, int]:
    """
    Map a band to bin indices and check they fit a PSD of `n_bins` bins

    Raises:
        BandIndexError: band covers no bin, or reaches past the PSD
    """
    start, end = band_indices(size, sample_rate, band)
    if end < start:
        raise BandIndexError(
            f"Band {band_label(band)} covers no PSD bin at size={size}, "
            f"sample_rate={sample_rate} (start={start}, end={end})"
        )
    if start < 0 or end >= n_bins:
        raise BandIndexError(
            f"Band {band_label(band)} maps to bins {start}..{end}, "
            f"outside PSD of {n_bins} bins"
        )
    return start, end


def get_band_power(size: int, psd, sample_rate: float, band: BandSpec) -> float:
    """
    Average PSD power across a frequency band

    Args:
        size: Transform size used to compute the PSD
        psd: Power spectral density (1D)
        sample_rate: Sampling rate of the signal (Hz)
        band: FrequencyBand, band name or (low_hz, high_hz)

    Returns:
        float: Mean power over the band's bins

    Raises:
        BandIndexError: band covers no bin, or reaches past the PSD
    """
    values = np.asarray(psd, dtype=np.float64)
    if values.ndim != 1:
        raise ShapeError(f"PSD must be 1D, got shape {values.shape}")

    start, end = band_bins(size, sample_rate, band, values.size)
    return float(np.mean(values[start:end + 1]))


def get_band_powers(size: int, psd, sample_rate: float,
                    bands: Iterable[BandSpec] = DEFAULT_BANDS) -> Dict[str, float]:
    """
    Average power for several bands at once

    Returns:
        Dict[str, float]: band name (or "low-high" for explicit ranges) -> power
    """
    return {band_label(band): get_band_power(size, psd, sample_rate, band) for band in bands}
