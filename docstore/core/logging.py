"""
Loguru sink configuration.
"""
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def setup_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Replace loguru's default sink with one at the requested level.

    Args:
        level: Minimum level written to stderr and the log file
        log_file: Optional file sink, rotated at 10 MB
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        logger.add(str(log_file), level=level, rotation="10 MB")
    logger.debug(f"Logging configured at {level}")
