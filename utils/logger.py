"""
Logging setup module
"""
import logging
from typing import Optional

from core.config import config


def setup_logger(name: str = __name__, log_file: Optional[str] = None) -> logging.Logger:
    """Configure and return a logger (handlers are attached once)"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (disabled with an empty LOG_FILE)
    log_file = config.LOG_FILE if log_file is None else log_file
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8', delay=True)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger (alias of setup_logger)"""
    if name is None:
        return logger
    return setup_logger(name)


def mask_id_number(id_number: str) -> str:
    """Keep the birth-date digits, hide the rest"""
    if len(id_number) <= 6:
        return "*" * len(id_number)
    return id_number[:6] + "*" * (len(id_number) - 6)


# Default logger
logger = setup_logger('IdCodec')
