"""
Exceptions raised by eeg-spectral

Configuration errors come from bad parameters (transform size, band name,
channel count). Shape errors come from data that does not fit the requested
operation (signal length, band indices outside the PSD).
"""


class SpectralError(ValueError):
    """Base class for all eeg-spectral errors"""


class ConfigurationError(SpectralError):
    """Invalid parameter supplied by the caller"""


class UnsupportedTransformSizeError(ConfigurationError):
    """Transform size is not a supported power of two"""


class UnknownBandError(ConfigurationError):
    """Band name is not part of the band table"""


class InvalidBandError(ConfigurationError):
    """Explicit band range is malformed"""


class ChannelCountError(ConfigurationError):
    """Sample width does not match the window's channel count"""


class ShapeError(SpectralError):
    """Data shape is incompatible with the operation"""


class SignalLengthError(ShapeError):
    """Signal length does not fit the transform size under the length policy"""


class BandIndexError(ShapeError):
    """Band maps to an empty or out-of-bounds PSD index range"""


class ReentrantWindowError(SpectralError, RuntimeError):
    """add_data was called on a window from inside its own callback"""
