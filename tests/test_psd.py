"""Tests for PSD computation and signal length policies."""

from __future__ import annotations

import math

import numpy as np
import pytest

from eeg_spectral.core.errors import ConfigurationError, ShapeError, SignalLengthError, UnsupportedTransformSizeError
from eeg_spectral.processing import (
    LengthPolicy,
    PSDEngine,
    TransformCache,
    default_cache,
    format_complex,
    frequencies,
    get_psd,
    next_power_of_two,
)


def test_psd_of_known_signal() -> None:
    psd = get_psd(8, [1, 2, 1, 2, 5, 2, 1, 2])
    assert np.allclose(psd, [16.0, 4.0, 4.0, 4.0])


def test_truncated_signal_full_and_half_spectrum(engine: PSDEngine) -> None:
    full = engine.compute(2, [1, 2, 3, 4], policy=LengthPolicy.TRUNCATE, one_sided=False)
    half = engine.compute(2, [1, 2, 3, 4], policy=LengthPolicy.TRUNCATE)

    assert np.allclose(full, [3.0, 1.0])
    assert np.allclose(half, [3.0])


def test_pad_policy_zero_pads_short_signal(engine: PSDEngine) -> None:
    psd = engine.compute(4, [1.0, 1.0], policy=LengthPolicy.PAD)
    assert np.allclose(psd, [2.0, math.sqrt(2.0)])


def test_policy_accepts_string_value(engine: PSDEngine) -> None:
    psd = engine.compute(4, [1.0, 1.0, 1.0, 1.0, 9.0], policy="truncate")
    assert np.allclose(psd, [4.0, 0.0])


@pytest.mark.parametrize(
    ("policy", "signal"),
    [
        (LengthPolicy.STRICT, [1.0, 2.0, 3.0]),
        (LengthPolicy.STRICT, [1.0] * 5),
        (LengthPolicy.PAD, [1.0] * 5),
    ],
)
def test_length_mismatch_is_rejected(engine: PSDEngine, policy: LengthPolicy, signal: list[float]) -> None:
    with pytest.raises(SignalLengthError):
        engine.compute(4, signal, policy=policy)


@pytest.mark.parametrize("size", [2, 4, 8, 64, 256, 1024])
def test_psd_length_is_half_size_and_non_negative(engine: PSDEngine, size: int) -> None:
    signal = np.random.default_rng(size).normal(size=size)
    psd = engine.compute(size, signal)

    assert psd.shape == (size // 2,)
    assert np.all(psd >= 0)


def test_repeated_calls_reuse_provider_and_agree(cache: TransformCache, engine: PSDEngine) -> None:
    signal = np.random.default_rng(7).normal(size=32)

    first = engine.compute(32, signal)
    provider = cache.get(32)
    second = engine.compute(32, signal)

    assert np.array_equal(first, second)
    assert cache.get(32) is provider
    assert len(cache) == 1


def test_module_api_uses_process_wide_cache() -> None:
    get_psd(16, np.zeros(16))
    assert 16 in default_cache()


def test_size_none_picks_next_power_of_two(engine: PSDEngine) -> None:
    psd = engine.compute(None, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert psd.shape == (4,)
    assert psd[0] == pytest.approx(15.0)


@pytest.mark.parametrize("size", [0, 3, 12, -8])
def test_unsupported_size_is_rejected(engine: PSDEngine, size: int) -> None:
    with pytest.raises(UnsupportedTransformSizeError):
        engine.compute(size, np.zeros(4))


@pytest.mark.parametrize("signal", [[], [[1.0, 2.0], [3.0, 4.0]], [1.0, float("nan"), 0.0, 0.0]])
def test_malformed_signal_is_rejected(engine: PSDEngine, signal: list) -> None:
    with pytest.raises(ShapeError):
        engine.compute(4, signal)


def test_next_power_of_two() -> None:
    assert next_power_of_two(1) == 2
    assert next_power_of_two(2) == 2
    assert next_power_of_two(5) == 8
    assert next_power_of_two(256) == 256
    assert next_power_of_two(257) == 512


def test_frequencies_match_bins() -> None:
    assert np.allclose(frequencies(8, 8.0), [0.0, 1.0, 2.0, 3.0])
    assert frequencies(8, 8.0, one_sided=False).shape == (8,)
    with pytest.raises(ConfigurationError):
        frequencies(8, 0.0)


def test_format_complex() -> None:
    assert format_complex([1.0, 0.0, 0.123456, -2.0]) == ["1.0+0.0i", "0.12346+-2.0i"]
    with pytest.raises(ShapeError):
        format_complex([1.0, 2.0, 3.0])


@pytest.mark.parametrize("rate", [float("nan"), float("inf")])
def test_frequencies_reject_non_finite_rate(rate: float) -> None:
    with pytest.raises(ConfigurationError, match="finite"):
        frequencies(8, rate)
