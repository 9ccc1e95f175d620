"""Shared configuration for stroke rasterization.

This module centralizes the numeric thresholds used by the strategies and
drawing primitives, plus the logging setup used by applications that embed
the package. Having these values in one place keeps the strategies, the
primitives and the tests in agreement.
"""

from __future__ import annotations

import logging

# Shapes whose rotation angle is below this (radians) are axis aligned
ANGLE_EPSILON = 0.001

# Cubic spline sampling: npts = sqrt(sum of control chords) * density,
# clamped to [SPLINE_MIN_POINTS, SPLINE_MAX_POINTS]
SPLINE_MIN_POINTS = 4
SPLINE_MAX_POINTS = 64
SPLINE_DENSITY = 1.2

# Rotated ellipse sampling limits (number of polygon segments)
ELLIPSE_MIN_SEGMENTS = 16
ELLIPSE_MAX_SEGMENTS = 720

# Reference canvas defaults
DEFAULT_CANVAS_SIZE = (64, 64)
DEFAULT_BRUSH_SIZE = 1

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    The package itself only emits DEBUG records; call this from an
    application entry point to see them.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from pixelstroke.config import configure_logging
            configure_logging(level='DEBUG')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
