"""
Logging setup helpers

Library modules only emit log records; applications call setup_logging once
to decide where they go.
"""

import logging

from ..core.config import LOG_FORMAT, LOG_DATEFMT


def setup_logging(debug: bool = False) -> None:
    """
    Configure root logging for an application using eeg-spectral

    Args:
        debug: If True, enable DEBUG level logging (per-window and cache events)
    """
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )

    # Reduce verbosity of third-party libraries
    logging.getLogger('numpy').setLevel(logging.WARNING)
    logging.getLogger('scipy').setLevel(logging.WARNING)

    if debug:
        logging.info("Debug logging enabled")
