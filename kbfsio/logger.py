"""Module containing the kbfsio logger and helpers for logging file contents."""

import logging

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _get_logger(name: str = "kbfsio") -> logging.Logger:
    logger = logging.getLogger(name)

    # Reloading this module must not make every message show up twice
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)

    return logger


def summarize(contents: bytes, max_length: int = 64) -> str:
    """
    Describe file contents for a log message without dumping all of them.

    The size is always included, followed by as much of the contents as fits.
    """
    preview = repr(contents[:max_length])

    if len(contents) > max_length:
        preview += "..."

    return f"{len(contents)} bytes {preview}"


# Default logger
log = _get_logger()
