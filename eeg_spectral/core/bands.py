"""
Frequency band vocabulary

The named bands are a closed enumeration. Each member resolves to a
[low_hz, high_hz) range through the static band table below. Explicit
ranges can be used anywhere a band is accepted.
"""

import math
from enum import Enum
from typing import Dict, Sequence, Tuple, Union

from .errors import InvalidBandError, UnknownBandError

# Frequency Bands (Hz)
BAND_TABLE: Dict[str, Tuple[float, float]] = {
    "delta": (0.5, 4.0),        # Deep sleep
    "theta": (4.0, 7.0),        # Drowsiness, memory
    "alpha": (7.5, 12.5),       # Relaxation, eyes closed
    "mu": (7.5, 12.5),          # Same range as alpha, over motor cortex
    "smr": (13.0, 15.0),        # Sensorimotor rhythm
    "lowbeta": (12.5, 16.0),
    "beta": (16.5, 20.0),       # Focus, attention
    "highbeta": (20.5, 28.0),
    "gamma": (25.0, 100.0),
}


class FrequencyBand(Enum):
    """Named EEG frequency bands"""

    # Values are names, not ranges: alpha and mu share a range and must stay
    # distinct members.
    DELTA = "delta"
    THETA = "theta"
    ALPHA = "alpha"
    MU = "mu"
    SMR = "smr"
    LOWBETA = "lowbeta"
    BETA = "beta"
    HIGHBETA = "highbeta"
    GAMMA = "gamma"

    @property
    def range(self) -> Tuple[float, float]:
        return BAND_TABLE[self.value]

    @property
    def low_hz(self) -> float:
        return self.range[0]

    @property
    def high_hz(self) -> float:
        return self.range[1]

    @classmethod
    def from_name(cls, name: str) -> "FrequencyBand":
        """
        Look up a band by name (case-insensitive)

        Raises:
            UnknownBandError: if the name is not in the band table
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(BAND_TABLE)
            raise UnknownBandError(f"Unknown band '{name}' (expected one of: {known})") from None


BandSpec = Union[FrequencyBand, str, Sequence[float]]


def resolve_band(band: BandSpec) -> Tuple[float, float]:
    """
    Resolve a band given by member, name or explicit range

    Args:
        band: FrequencyBand, band name, or (low_hz, high_hz) pair

    Returns:
        Tuple[low_hz, high_hz]
    """
    if isinstance(band, FrequencyBand):
        return band.range
    if isinstance(band, str):
        return FrequencyBand.from_name(band).range

    try:
        values = [float(v) for v in band]
    except (TypeError, ValueError):
        raise InvalidBandError(f"Band must be a name or a (low, high) pair, got {band!r}") from None

    if len(values) != 2:
        raise InvalidBandError(f"Band range needs exactly 2 values, got {len(values)}")
    low, high = values
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidBandError(f"Band limits must be finite, got ({low}, {high})")
    if low < 0:
        raise InvalidBandError(f"Band low edge must be >= 0, got {low}")
    if low >= high:
        raise InvalidBandError(f"Band low edge must be below high edge, got ({low}, {high})")
    return low, high


def band_label(band: BandSpec) -> str:
    """Key used for a band in result mappings"""
    if isinstance(band, FrequencyBand):
        return band.value
    if isinstance(band, str):
        return FrequencyBand.from_name(band).value
    low, high = resolve_band(band)
    return f"{low:g}-{high:g}"
