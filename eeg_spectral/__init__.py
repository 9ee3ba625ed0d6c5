"""
eeg-spectral - Real-time spectral features for multi-channel EEG

Power spectral density, band power, fixed-length windowing of streaming
samples and a synthetic signal generator.

Python: 3.10+
"""

__version__ = "1.0.0"

# Main package imports for easy access
from .core.bands import BAND_TABLE, FrequencyBand, resolve_band
from .core.data_types import BandPowers, ChannelFeatures, WindowFeatures
from .core.errors import SpectralError, ConfigurationError, ShapeError
from .processing.transform import FFTProvider, TransformCache
from .processing.psd import LengthPolicy, PSDEngine, get_psd
from .processing.band_power import get_band_power, get_band_powers
from .processing.windowing import EEGWindow, iter_windows
from .processing.features import FeatureExtractor
from .acquisition.sources import generate, FakeEEGSource

__all__ = [
    'BAND_TABLE', 'FrequencyBand', 'resolve_band',
    'BandPowers', 'ChannelFeatures', 'WindowFeatures',
    'SpectralError', 'ConfigurationError', 'ShapeError',
    'FFTProvider', 'TransformCache',
    'LengthPolicy', 'PSDEngine', 'get_psd',
    'get_band_power', 'get_band_powers',
    'EEGWindow', 'iter_windows',
    'FeatureExtractor',
    'generate', 'FakeEEGSource',
]
