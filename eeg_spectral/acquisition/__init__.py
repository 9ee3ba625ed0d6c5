"""
Synthetic EEG data sources

This module handles synthetic signal generation for testing the processing
chain without hardware.
"""

from .sources import generate, sample_count, FakeEEGSource

__all__ = ['generate', 'sample_count', 'FakeEEGSource']
