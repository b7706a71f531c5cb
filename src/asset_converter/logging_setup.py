"""Logging configuration for the command-line entry point."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "asset_converter"
LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a fresh stderr handler to the package logger.

    Handlers installed by earlier calls are closed and replaced so repeated
    invocations in one process write to the current ``sys.stderr``.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        handler.close()
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return package_logger
