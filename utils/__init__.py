"""
Utils package
"""
from .logger import logger, setup_logger, get_logger, mask_id_number

__all__ = ['logger', 'setup_logger', 'get_logger', 'mask_id_number']
