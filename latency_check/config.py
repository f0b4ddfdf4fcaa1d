"""
Runtime settings, read from environment variables.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOG_LEVEL = os.getenv('LATENCY_CHECK_LOG_LEVEL', 'WARNING').upper()
OUTPUT_DIR = os.getenv('LATENCY_CHECK_OUTPUT_DIR', '.')


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log records to stderr so stdout only carries the report."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
