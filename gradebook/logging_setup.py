"""
Audit log configuration.

Every module logs through ``logging.getLogger(__name__)``. This module
attaches a file handler to the package logger so those records are
appended to the audit log, one timestamped line per event:

    [2025-01-31 14:02:11] Student added: ID 001
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_FILE, FILE_ENCODING, LOG_TIMESTAMP_FORMAT

PACKAGE_LOGGER = "gradebook"


def configure_audit_log(log_path: Optional[Path] = None,
                        level: int = logging.INFO) -> Optional[logging.Handler]:
    """
    Append package log records to the audit log file.

    If the log file cannot be opened the error is printed to stderr and the
    program carries on without a file log. Errors while writing individual
    records are handled by ``logging.Handler.handleError``, which reports
    them on stderr and keeps going.

    Returns:
        The attached handler, or None if it could not be created.
    """
    log_path = Path(log_path) if log_path else LOG_FILE
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    try:
        handler = logging.FileHandler(log_path, mode="a", encoding=FILE_ENCODING)
    except OSError as e:
        print(f">> Logger Error: {e}", file=sys.stderr)
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", datefmt=LOG_TIMESTAMP_FORMAT))
    logger.addHandler(handler)
    return handler


def detach_audit_log(handler: Optional[logging.Handler]) -> None:
    """Remove and close a handler attached by configure_audit_log."""
    if handler is None:
        return
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    handler.close()
