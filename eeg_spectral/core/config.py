"""
Configuration constants for eeg-spectral

This module contains the parameters users may need to customize for their
specific hardware setup and processing requirements.
"""

from typing import Tuple

# ============================================================================
# SIGNAL CONFIGURATION - Edit these values for your setup
# ============================================================================

FS_EXPECTED = 256                 # Sampling rate (Hz)
N_CHANNELS = 8                    # Channels per multi-channel sample

# Processing Configuration
WINDOW_SIZE = 256                 # Samples per analysis window
FFT_SIZE = 256                    # Transform size (power of two)
MAX_FFT_SIZE = 65536              # Largest transform size accepted

# Bands reported by default, in table order
DEFAULT_BANDS: Tuple[str, ...] = (
    "delta", "theta", "alpha", "mu", "smr",
    "lowbeta", "beta", "highbeta", "gamma",
)

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
