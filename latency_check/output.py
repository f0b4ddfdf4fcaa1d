"""
Output Sink
Prints the report and, on request, appends it to a per-day log file.
"""

import datetime
import logging
import os
from typing import Optional

from . import config
from .errors import OutputError

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "\n\n"


def output_filename(today: Optional[datetime.date] = None) -> str:
    """Return the report file name for `today` (local date by default)."""
    today = today or datetime.date.today()
    return f"latency-check-{today.year}_{today.month:02d}_{today.day:02d}.txt"


def append_report(text: str, directory: Optional[str] = None,
                  today: Optional[datetime.date] = None) -> str:
    """
    Append `text` to the day's report file and return its path.
    Entries after the first are separated by two blank lines. No locking.
    """
    directory = directory if directory is not None else config.OUTPUT_DIR
    filename = output_filename(today)
    path = filename if directory == "." else os.path.join(directory, filename)

    try:
        prefix = ENTRY_SEPARATOR if os.path.exists(path) and os.path.getsize(path) > 0 else ""
        with open(path, "a", encoding="utf-8") as f:
            f.write(prefix + text + "\n")
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        raise OutputError(f"Could not write {path}: {e}") from e

    logger.debug(f"Appended report to {path}")
    return path


def emit(text: str, append: bool = False, directory: Optional[str] = None) -> Optional[str]:
    """Print the report; when `append` is set also write it to the day's file."""
    print(text)
    if not append:
        return None
    path = append_report(text, directory)
    print(f"Output appended to {path}")
    return path
