"""Shared fixtures for eeg-spectral tests."""

from __future__ import annotations

import numpy as np
import pytest

from eeg_spectral.processing import PSDEngine, TransformCache


@pytest.fixture
def cache() -> TransformCache:
    return TransformCache()


@pytest.fixture
def engine(cache: TransformCache) -> PSDEngine:
    return PSDEngine(cache)


@pytest.fixture
def flat_psd() -> np.ndarray:
    """PSD of all ones for a 256-point transform."""
    return np.ones(128, dtype=np.float64)
