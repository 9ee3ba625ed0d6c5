"""
Core data types for eeg-spectral

This module defines the containers used for band powers and per-window
spectral features.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Mapping, Optional
import numpy as np


@dataclass
class BandPowers:
    """Container for named frequency band powers (None = not measured)"""
    delta: Optional[float] = None
    theta: Optional[float] = None
    alpha: Optional[float] = None
    mu: Optional[float] = None
    smr: Optional[float] = None
    lowbeta: Optional[float] = None
    beta: Optional[float] = None
    highbeta: Optional[float] = None
    gamma: Optional[float] = None

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def measured(self) -> Dict[str, float]:
        """Only the bands that carry a value"""
        return {name: value for name, value in self.as_dict().items() if value is not None}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "BandPowers":
        """Build from a name -> power mapping; keys outside the band table are not stored here"""
        names = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in mapping.items() if k in names})


@dataclass
class ChannelFeatures:
    """Spectral features of one channel in one window"""
    channel: int
    psd: np.ndarray           # Shape: (n_bins,)
    powers: Dict[str, float]  # Every requested band, explicit ranges keyed "low-high"
    band_powers: BandPowers   # Named bands only


@dataclass
class WindowFeatures:
    """Spectral features of a whole multi-channel window"""
    timestamp: Optional[float]  # Unix timestamp, if known
    fs: float                   # Sampling frequency
    fft_size: int               # Transform size used for every channel
    channels: List[ChannelFeatures] = field(default_factory=list)

    def mean_powers(self) -> Dict[str, float]:
        """Average each requested band across channels"""
        if not self.channels:
            return {}
        return {
            name: float(np.mean([ch.powers[name] for ch in self.channels]))
            for name in self.channels[0].powers
        }

    def mean_band_powers(self) -> BandPowers:
        """Average each named band across channels"""
        return BandPowers.from_mapping(self.mean_powers())
