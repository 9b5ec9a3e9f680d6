"""
External service clients
"""
from .home_affairs_client import (
    VERIFICATION_TYPES,
    HomeAffairsApiError,
    HomeAffairsClient,
    raise_for_result,
)

__all__ = [
    'VERIFICATION_TYPES',
    'HomeAffairsApiError',
    'HomeAffairsClient',
    'raise_for_result',
]
