"""
Logging configuration
"""

from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(log_file: Optional[Path] = None):
    """Route logs to `log_file`, or drop them.

    The chart owns the whole screen, so nothing is ever written to stderr.
    """
    logger.remove()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | {message}",
            level="DEBUG",
            rotation="5 MB",
            retention=3,
        )

    return logger
