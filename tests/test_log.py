"""Tests for application logging setup."""

from __future__ import annotations

import logging

import pytest

from eeg_spectral.core.config import LOG_FORMAT
from eeg_spectral.utils import setup_logging


@pytest.mark.parametrize(("debug", "level"), [(False, logging.INFO), (True, logging.DEBUG)])
def test_setup_logging_configures_root(monkeypatch: pytest.MonkeyPatch, debug: bool, level: int) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging(debug=debug)

    assert calls[0]["level"] == level
    assert calls[0]["format"] == LOG_FORMAT
    assert logging.getLogger("scipy").level == logging.WARNING
