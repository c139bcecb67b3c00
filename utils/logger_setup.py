"""
Logging setup with loguru
"""
import sys
from typing import Optional
from loguru import logger

from config import config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace the default loguru sink with console and rotating file sinks"""
    level = (level or config.LOG_LEVEL).upper()
    log_file = log_file if log_file is not None else config.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        logger.add(
            log_file,
            level=level,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )

    logger.debug(f"Logger configured (level={level}, file={log_file or 'none'})")
