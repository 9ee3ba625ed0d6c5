"""
EEG feature extraction

This module turns multi-channel windows into per-channel PSDs and band
powers, and plugs that into EEGWindow as a window callback.
"""

import logging
import time
from typing import Callable, Dict, Iterable, Optional, Tuple
import numpy as np

from ..core.bands import BandSpec, band_label
from ..core.config import DEFAULT_BANDS, FFT_SIZE
from ..core.data_types import BandPowers, ChannelFeatures, WindowFeatures
from ..core.errors import BandIndexError, ConfigurationError, ShapeError
from .band_power import band_bins, get_band_powers, validate_sample_rate
from .psd import LengthPolicy, PSDEngine, default_engine
from .transform import validate_transform_size


def _fits(fft_size: int, fs: float, band: BandSpec) -> bool:
    try:
        band_bins(fft_size, fs, band, fft_size // 2)
    except BandIndexError:
        return False
    return True


class FeatureExtractor:
    """
    Extract frequency domain features from EEG windows

    Each channel is transformed at a fixed FFT size; windows longer than the
    transform are truncated, shorter ones zero-padded (see LengthPolicy).
    Bands are checked against the PSD at construction. Without explicit
    bands, the default bands that fit below Nyquist are used.
    """

    def __init__(self, fs: float, fft_size: int = FFT_SIZE,
                 bands: Optional[Iterable[BandSpec]] = None,
                 policy: LengthPolicy = LengthPolicy.TRUNCATE,
                 engine: Optional[PSDEngine] = None):
        self.fs = validate_sample_rate(fs)
        self.fft_size = validate_transform_size(fft_size)
        self.policy = LengthPolicy(policy)
        self.engine = engine if engine is not None else default_engine()

        if bands is None:
            self.bands = tuple(b for b in DEFAULT_BANDS if _fits(self.fft_size, self.fs, b))
            dropped = [b for b in DEFAULT_BANDS if b not in self.bands]
            if dropped:
                logging.info(f"Bands {dropped} do not fit fs={self.fs}, fft_size={self.fft_size}; skipped")
        else:
            self.bands = tuple(bands)
            for band in self.bands:
                band_bins(self.fft_size, self.fs, band, self.fft_size // 2)

        if not self.bands:
            raise ConfigurationError(f"No band fits fs={self.fs}, fft_size={self.fft_size}")
        labels = [band_label(b) for b in self.bands]
        if len(set(labels)) != len(labels):
            raise ConfigurationError(f"Duplicate bands: {labels}")

    def extract_channel(self, data: np.ndarray) -> Tuple[np.ndarray, Dict[str, float]]:
        """
        Compute PSD and band powers for a single channel

        Args:
            data: EEG data for single channel (samples,)

        Returns:
            Tuple[psd, powers]: powers maps band label -> mean power
        """
        psd = self.engine.compute(self.fft_size, data, policy=self.policy)
        return psd, get_band_powers(self.fft_size, psd, self.fs, self.bands)

    def extract_features(self, data: np.ndarray, timestamp: Optional[float] = None) -> WindowFeatures:
        """
        Extract PSD and band powers from every channel of a window

        Args:
            data: EEG window (channels x samples)
            timestamp: Window timestamp, if known

        Returns:
            WindowFeatures: Per-channel features
        """
        window = np.asarray(data, dtype=np.float64)
        if window.ndim != 2:
            raise ShapeError(f"Window must have shape (channels, samples), got {window.shape}")

        features = WindowFeatures(timestamp=timestamp, fs=self.fs, fft_size=self.fft_size)
        for ch_idx in range(window.shape[0]):
            psd, powers = self.extract_channel(window[ch_idx, :])
            features.channels.append(ChannelFeatures(
                channel=ch_idx, psd=psd, powers=powers,
                band_powers=BandPowers.from_mapping(powers),
            ))

        logging.debug(f"Extracted features: {window.shape[0]} channels, {window.shape[1]} samples")
        return features

    def as_callback(self, sink: Callable[[WindowFeatures], None]) -> Callable[[np.ndarray], None]:
        """
        Wrap this extractor as an EEGWindow callback

        Args:
            sink: Receives the WindowFeatures of every completed window

        Returns:
            Callable taking a channels x samples window
        """
        def on_window(window: np.ndarray) -> None:
            sink(self.extract_features(window, timestamp=time.time()))

        return on_window
