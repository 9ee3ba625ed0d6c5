"""
Core data types and structures for eeg-spectral

This module contains the band vocabulary, data classes, configuration and
exceptions used throughout the package.
"""

from .bands import BAND_TABLE, FrequencyBand, resolve_band
from .data_types import BandPowers, ChannelFeatures, WindowFeatures
from .errors import (
    SpectralError, ConfigurationError, UnsupportedTransformSizeError,
    UnknownBandError, InvalidBandError, ChannelCountError,
    ShapeError, SignalLengthError, BandIndexError, ReentrantWindowError,
)

__all__ = [
    'BAND_TABLE', 'FrequencyBand', 'resolve_band',
    'BandPowers', 'ChannelFeatures', 'WindowFeatures',
    'SpectralError', 'ConfigurationError', 'UnsupportedTransformSizeError',
    'UnknownBandError', 'InvalidBandError', 'ChannelCountError',
    'ShapeError', 'SignalLengthError', 'BandIndexError', 'ReentrantWindowError',
]
