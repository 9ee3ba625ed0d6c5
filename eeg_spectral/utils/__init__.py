"""
Utility functions and helpers

This module contains utility functions for applications built on eeg-spectral.
"""

from .log import setup_logging

__all__ = ['setup_logging']
