"""
EEG signal processing components

This module contains the FFT cache, PSD computation, band power
aggregation, windowing and feature extraction.
"""

from .transform import FFTProvider, TransformCache, default_cache
from .psd import LengthPolicy, PSDEngine, get_psd, frequencies, next_power_of_two, format_complex
from .band_power import band_indices, band_bins, get_band_power, get_band_powers
from .windowing import EEGWindow, iter_windows
from .features import FeatureExtractor

__all__ = [
    'FFTProvider', 'TransformCache', 'default_cache',
    'LengthPolicy', 'PSDEngine', 'get_psd', 'frequencies', 'next_power_of_two', 'format_complex',
    'band_indices', 'band_bins', 'get_band_power', 'get_band_powers',
    'EEGWindow', 'iter_windows',
    'FeatureExtractor',
]
